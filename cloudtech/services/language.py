"""
Standalone language service.

Translation, speech synthesis and sentiment analysis, one provider call each.
"""

import logging

from cloudtech.config.settings import Settings
from cloudtech.core.exceptions import MissingInputError, ServiceNotConfiguredError
from cloudtech.providers.base import CapabilitySet
from cloudtech.schemas.language import SentimentResult
from cloudtech.utils.upstream import call_upstream


logger = logging.getLogger(__name__)


def _require_text(text) -> None:
    if text is None or text == '':
        raise MissingInputError('No text provided')


class LanguageService:
    """Single-call language operations."""

    def __init__(self, capabilities: CapabilitySet, settings: Settings):
        self.capabilities = capabilities
        self.settings = settings

    async def translate(
        self, text: str | list[str] | None, target_language: str | None = None
    ) -> tuple[str | list[str], bool]:
        """
        Translate a string or a list of strings.

        The result has the same shape as `text`: a scalar for a scalar, a list
        for a list. Translations are requested in one batched call.
        """
        _require_text(text)
        target = target_language or self.settings.target_language
        translator = self.capabilities.translator

        texts = text if isinstance(text, list) else [text]
        translated = await call_upstream(
            translator.name,
            translator.translate,
            texts,
            target,
            timeout=self.settings.upstream_timeout,
        )
        logger.info(f'Translated {len(texts)} text(s) to {target} (demo={translator.demo})')

        if isinstance(text, list):
            return translated, translator.demo
        return translated[0], translator.demo

    async def synthesize(self, text: str | None, language_code: str | None = None) -> bytes:
        """
        Synthesize MP3 speech.

        Raises:
            ServiceNotConfiguredError: No live synthesis provider is bound
        """
        _require_text(text)
        synthesizer = self.capabilities.speech_synthesizer
        if synthesizer.demo:
            raise ServiceNotConfiguredError(
                synthesizer.name, 'Set GOOGLE_APPLICATION_CREDENTIALS to enable TTS'
            )

        language_code = language_code or self.settings.speech_language_code
        audio = await call_upstream(
            synthesizer.name,
            synthesizer.synthesize,
            text,
            language_code,
            timeout=self.settings.upstream_timeout,
        )
        logger.info(f'Synthesized {len(audio)} bytes of audio ({language_code})')
        return audio

    async def analyze_sentiment(self, text: str | None) -> tuple[SentimentResult, bool]:
        _require_text(text)
        analyzer = self.capabilities.sentiment_analyzer
        sentiment = await call_upstream(
            analyzer.name,
            analyzer.analyze,
            text,
            timeout=self.settings.upstream_timeout,
        )
        return sentiment, analyzer.demo
