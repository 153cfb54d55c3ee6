"""
Live Google Cloud providers.

Thin adapters from the Google Cloud client libraries to the capability
interfaces. Each adapter receives an already-constructed client; client
construction (and credential discovery) happens in
cloudtech.providers.factory.

Library retries are disabled (retry=None): a failed call is reported once.
"""

import logging

from google.cloud import language_v1, texttospeech, vision

from cloudtech.providers.base import (
    LabelDetector,
    ObjectLocalizer,
    SentimentAnalyzer,
    SpeechSynthesizer,
    Translator,
)
from cloudtech.schemas.language import SentimentResult
from cloudtech.schemas.vision import BoundingPoly, DetectedLabel, DetectedObject, Vertex


logger = logging.getLogger(__name__)


def _raise_for_annotation_error(response) -> None:
    """Vision reports per-image failures inside an otherwise successful response."""
    if response.error.message:
        raise RuntimeError(response.error.message)


class GoogleLabelDetector(LabelDetector):
    def __init__(self, client: 'vision.ImageAnnotatorClient', timeout: float):
        self.client = client
        self.timeout = timeout

    def detect_labels(self, content: bytes) -> list[DetectedLabel]:
        response = self.client.label_detection(
            image=vision.Image(content=content), retry=None, timeout=self.timeout
        )
        _raise_for_annotation_error(response)
        return [
            DetectedLabel(description=label.description, score=label.score)
            for label in response.label_annotations
        ]


class GoogleObjectLocalizer(ObjectLocalizer):
    def __init__(self, client: 'vision.ImageAnnotatorClient', timeout: float):
        self.client = client
        self.timeout = timeout

    def localize_objects(self, content: bytes) -> list[DetectedObject]:
        response = self.client.object_localization(
            image=vision.Image(content=content), retry=None, timeout=self.timeout
        )
        _raise_for_annotation_error(response)
        return [
            DetectedObject(
                name=obj.name,
                score=obj.score,
                bounding_poly=BoundingPoly(
                    normalized_vertices=[
                        Vertex(x=v.x, y=v.y) for v in obj.bounding_poly.normalized_vertices
                    ]
                ),
            )
            for obj in response.localized_object_annotations
        ]


class GoogleTranslator(Translator):
    """
    Translation API v2 (basic) adapter.

    The v2 REST client takes no per-call timeout; the bound comes from
    call_upstream.
    """

    def __init__(self, client):
        self.client = client

    def translate(self, texts: list[str], target_language: str) -> list[str]:
        if not texts:
            return []
        results = self.client.translate(
            list(texts), target_language=target_language, format_='text'
        )
        translated = [result['translatedText'] for result in results]
        if len(translated) != len(texts):
            raise RuntimeError(
                f'Expected {len(texts)} translations, received {len(translated)}'
            )
        return translated


class GoogleSpeechSynthesizer(SpeechSynthesizer):
    def __init__(
        self,
        client: 'texttospeech.TextToSpeechClient',
        timeout: float,
        voice_gender: str = 'FEMALE',
    ):
        self.client = client
        self.timeout = timeout
        self.voice_gender = texttospeech.SsmlVoiceGender[voice_gender.upper()]

    def synthesize(self, text: str, language_code: str) -> bytes:
        logger.debug(f'Synthesizing {len(text)} chars in {language_code}')
        response = self.client.synthesize_speech(
            input=texttospeech.SynthesisInput(text=text),
            voice=texttospeech.VoiceSelectionParams(
                language_code=language_code, ssml_gender=self.voice_gender
            ),
            audio_config=texttospeech.AudioConfig(
                audio_encoding=texttospeech.AudioEncoding.MP3
            ),
            retry=None,
            timeout=self.timeout,
        )
        return response.audio_content


class GoogleSentimentAnalyzer(SentimentAnalyzer):
    def __init__(self, client: 'language_v1.LanguageServiceClient', timeout: float):
        self.client = client
        self.timeout = timeout

    def analyze(self, text: str) -> SentimentResult:
        document = language_v1.Document(
            content=text, type_=language_v1.Document.Type.PLAIN_TEXT
        )
        response = self.client.analyze_sentiment(
            document=document, retry=None, timeout=self.timeout
        )
        sentiment = response.document_sentiment
        return SentimentResult(score=sentiment.score, magnitude=sentiment.magnitude)
