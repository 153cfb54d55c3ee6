"""
Capability set construction.

Each Google Cloud client is created independently at startup. A client that
cannot find credentials is replaced by its demo fallback, so any subset of
capabilities may be live.
"""

import logging
from collections.abc import Callable

from cloudtech.config.settings import Settings
from cloudtech.providers.base import CapabilitySet, Provider
from cloudtech.providers.fallback import (
    DemoLabelDetector,
    DemoObjectLocalizer,
    DemoTranslator,
    KeywordSentimentAnalyzer,
    UnconfiguredSpeechSynthesizer,
)


logger = logging.getLogger(__name__)


def demo_capabilities() -> CapabilitySet:
    """Capability set with every provider on its offline fallback."""
    return CapabilitySet(
        label_detector=DemoLabelDetector(),
        object_localizer=DemoObjectLocalizer(),
        translator=DemoTranslator(),
        speech_synthesizer=UnconfiguredSpeechSynthesizer(),
        sentiment_analyzer=KeywordSentimentAnalyzer(),
    )


def _live_or_fallback(
    capability: str, build: Callable[[], Provider], fallback: Provider
) -> Provider:
    from google.auth.exceptions import DefaultCredentialsError

    try:
        provider = build()
    except DefaultCredentialsError as e:
        logger.warning(f'{capability}: no Google credentials, using demo data ({e})')
        return fallback
    logger.info(f'{capability}: Google Cloud client initialized')
    return provider


def build_capabilities(settings: Settings) -> CapabilitySet:
    """
    Build the process-lifetime capability set.

    With ENABLE_LIVE_PROVIDERS=false the Google libraries are never imported.
    """
    fallbacks = demo_capabilities()
    if not settings.enable_live_providers:
        logger.info('Live providers disabled (ENABLE_LIVE_PROVIDERS=false)')
        return fallbacks

    from google.cloud import language_v1, texttospeech, vision
    from google.cloud import translate_v2 as translate

    from cloudtech.providers.gcp import (
        GoogleLabelDetector,
        GoogleObjectLocalizer,
        GoogleSentimentAnalyzer,
        GoogleSpeechSynthesizer,
        GoogleTranslator,
    )

    timeout = settings.upstream_timeout
    vision_holder: dict[str, vision.ImageAnnotatorClient] = {}

    def vision_client() -> vision.ImageAnnotatorClient:
        # Labels and objects share one annotator client
        if 'client' not in vision_holder:
            vision_holder['client'] = vision.ImageAnnotatorClient()
        return vision_holder['client']

    return CapabilitySet(
        label_detector=_live_or_fallback(
            'Vision (labels)',
            lambda: GoogleLabelDetector(vision_client(), timeout),
            fallbacks.label_detector,
        ),
        object_localizer=_live_or_fallback(
            'Vision (objects)',
            lambda: GoogleObjectLocalizer(vision_client(), timeout),
            fallbacks.object_localizer,
        ),
        translator=_live_or_fallback(
            'Translation',
            lambda: GoogleTranslator(translate.Client()),
            fallbacks.translator,
        ),
        speech_synthesizer=_live_or_fallback(
            'Text-to-Speech',
            lambda: GoogleSpeechSynthesizer(
                texttospeech.TextToSpeechClient(), timeout, settings.speech_voice_gender
            ),
            fallbacks.speech_synthesizer,
        ),
        sentiment_analyzer=_live_or_fallback(
            'Natural Language',
            lambda: GoogleSentimentAnalyzer(language_v1.LanguageServiceClient(), timeout),
            fallbacks.sentiment_analyzer,
        ),
    )
