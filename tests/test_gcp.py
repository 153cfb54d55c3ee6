"""
Google Cloud adapter tests with mocked clients.

Coverage:
- Response mapping to domain models
- retry=None and the configured timeout on every call
- Per-capability fallback when credentials are missing
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest


vision = pytest.importorskip('google.cloud.vision')
texttospeech = pytest.importorskip('google.cloud.texttospeech')

from google.auth.exceptions import DefaultCredentialsError  # noqa: E402

from cloudtech.config.settings import Settings  # noqa: E402
from cloudtech.providers.gcp import (  # noqa: E402
    GoogleLabelDetector,
    GoogleObjectLocalizer,
    GoogleSentimentAnalyzer,
    GoogleSpeechSynthesizer,
    GoogleTranslator,
)


NO_ERROR = SimpleNamespace(message='')


# =============================================================================
# Vision
# =============================================================================
def test_label_detection_mapping():
    client = MagicMock()
    client.label_detection.return_value = SimpleNamespace(
        error=NO_ERROR,
        label_annotations=[
            SimpleNamespace(description='Cat', score=0.97),
            SimpleNamespace(description='Whiskers', score=0.81),
        ],
    )

    labels = GoogleLabelDetector(client, timeout=12.0).detect_labels(b'img')

    assert [(label.description, label.score) for label in labels] == [
        ('Cat', 0.97),
        ('Whiskers', 0.81),
    ]
    kwargs = client.label_detection.call_args.kwargs
    assert kwargs['image'].content == b'img'
    assert kwargs['retry'] is None
    assert kwargs['timeout'] == 12.0


def test_label_detection_annotation_error_raises():
    client = MagicMock()
    client.label_detection.return_value = SimpleNamespace(
        error=SimpleNamespace(message='Bad image data'), label_annotations=[]
    )

    with pytest.raises(RuntimeError, match='Bad image data'):
        GoogleLabelDetector(client, timeout=1.0).detect_labels(b'img')


def test_detect_top_labels_keeps_provider_order():
    client = MagicMock()
    client.label_detection.return_value = SimpleNamespace(
        error=NO_ERROR,
        label_annotations=[
            SimpleNamespace(description=name, score=0.9) for name in 'zyxwvu'
        ],
    )

    labels = GoogleLabelDetector(client, timeout=1.0).detect_top_labels(b'img', 5)
    assert [label.description for label in labels] == ['z', 'y', 'x', 'w', 'v']


def test_object_localization_mapping():
    client = MagicMock()
    vertices = [SimpleNamespace(x=0.1, y=0.2), SimpleNamespace(x=0.9, y=0.8)]
    client.object_localization.return_value = SimpleNamespace(
        error=NO_ERROR,
        localized_object_annotations=[
            SimpleNamespace(
                name='Laptop',
                score=0.93,
                bounding_poly=SimpleNamespace(normalized_vertices=vertices),
            )
        ],
    )

    objects = GoogleObjectLocalizer(client, timeout=1.0).localize_objects(b'img')

    assert objects[0].name == 'Laptop'
    assert [(v.x, v.y) for v in objects[0].bounding_poly.normalized_vertices] == [
        (0.1, 0.2),
        (0.9, 0.8),
    ]


# =============================================================================
# Translation
# =============================================================================
def test_translation_batches_and_preserves_order():
    client = MagicMock()
    client.translate.return_value = [
        {'translatedText': 'Pisică', 'input': 'Cat'},
        {'translatedText': 'Câine', 'input': 'Dog'},
    ]

    result = GoogleTranslator(client).translate(['Cat', 'Dog'], 'ro')

    assert result == ['Pisică', 'Câine']
    client.translate.assert_called_once_with(['Cat', 'Dog'], target_language='ro', format_='text')


def test_translation_length_mismatch_raises():
    client = MagicMock()
    client.translate.return_value = [{'translatedText': 'Pisică'}]

    with pytest.raises(RuntimeError, match='Expected 2 translations'):
        GoogleTranslator(client).translate(['Cat', 'Dog'], 'ro')


def test_translation_empty_input_skips_call():
    client = MagicMock()
    assert GoogleTranslator(client).translate([], 'ro') == []
    client.translate.assert_not_called()


# =============================================================================
# Speech & sentiment
# =============================================================================
def test_speech_requests_mp3():
    client = MagicMock()
    client.synthesize_speech.return_value = SimpleNamespace(audio_content=b'mp3')

    audio = GoogleSpeechSynthesizer(client, timeout=5.0).synthesize('Salut', 'ro-RO')

    assert audio == b'mp3'
    kwargs = client.synthesize_speech.call_args.kwargs
    assert kwargs['input'].text == 'Salut'
    assert kwargs['voice'].language_code == 'ro-RO'
    assert kwargs['voice'].ssml_gender == texttospeech.SsmlVoiceGender.FEMALE
    assert kwargs['audio_config'].audio_encoding == texttospeech.AudioEncoding.MP3
    assert kwargs['retry'] is None


def test_sentiment_mapping():
    pytest.importorskip('google.cloud.language_v1')
    client = MagicMock()
    client.analyze_sentiment.return_value = SimpleNamespace(
        document_sentiment=SimpleNamespace(score=-0.4, magnitude=1.6)
    )

    result = GoogleSentimentAnalyzer(client, timeout=5.0).analyze('not great')

    assert (result.score, result.magnitude) == (-0.4, 1.6)
    assert client.analyze_sentiment.call_args.kwargs['document'].content == 'not great'


# =============================================================================
# Capability set construction
# =============================================================================
def test_missing_credentials_fall_back_per_capability():
    from cloudtech.providers.factory import build_capabilities

    settings = Settings(enable_live_providers=True)
    no_credentials = DefaultCredentialsError('Could not automatically determine credentials')

    with (
        patch('google.cloud.vision.ImageAnnotatorClient', side_effect=no_credentials),
        patch('google.cloud.translate_v2.Client', return_value=MagicMock()),
        patch('google.cloud.texttospeech.TextToSpeechClient', side_effect=no_credentials),
        patch('google.cloud.language_v1.LanguageServiceClient', return_value=MagicMock()),
    ):
        capabilities = build_capabilities(settings)

    assert capabilities.availability() == {
        'label_detection': False,
        'object_localization': False,
        'translation': True,
        'speech_synthesis': False,
        'sentiment': True,
    }
    assert capabilities.mode == 'partial'


def test_live_providers_disabled_skips_google_clients():
    from cloudtech.providers.factory import build_capabilities

    with patch('google.cloud.vision.ImageAnnotatorClient') as client_cls:
        capabilities = build_capabilities(Settings(enable_live_providers=False))

    client_cls.assert_not_called()
    assert capabilities.mode == 'demo'
