"""
Capability provider interfaces.

Each external capability (label detection, object localization, translation,
speech synthesis, sentiment analysis) is an abstract base class with two
implementations: a live Google Cloud delegate and a demo fallback. The
`demo` class attribute tells callers which one they hold.

Providers are plain blocking objects; callers run them through
cloudtech.utils.upstream.call_upstream for timeouts and error wrapping.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cloudtech.schemas.language import SentimentResult
from cloudtech.schemas.vision import DetectedLabel, DetectedObject


class Provider(ABC):
    """Common base: a provider is either live or a demo fallback."""

    demo: bool = False
    name: str = 'provider'


class LabelDetector(Provider):
    name = 'Vision API'

    @abstractmethod
    def detect_labels(self, content: bytes) -> list[DetectedLabel]:
        """Return label annotations in provider order (confidence-descending)."""

    def detect_top_labels(self, content: bytes, limit: int) -> list[DetectedLabel]:
        """Return the first `limit` labels, without re-sorting."""
        return self.detect_labels(content)[:limit]


class ObjectLocalizer(Provider):
    name = 'Vision API'

    @abstractmethod
    def localize_objects(self, content: bytes) -> list[DetectedObject]:
        """Return localized objects with bounding polygons when available."""


class Translator(Provider):
    name = 'Translation API'

    @abstractmethod
    def translate(self, texts: list[str], target_language: str) -> list[str]:
        """Translate a batch of strings; output is positionally aligned with input."""


class SpeechSynthesizer(Provider):
    name = 'TTS API'

    @abstractmethod
    def synthesize(self, text: str, language_code: str) -> bytes:
        """Return MP3 audio for `text` spoken in `language_code`."""


class SentimentAnalyzer(Provider):
    name = 'Language API'

    @abstractmethod
    def analyze(self, text: str) -> SentimentResult:
        """Return document sentiment for `text`."""


@dataclass(frozen=True)
class CapabilitySet:
    """
    Process-lifetime binding of one provider per capability.

    Built once at startup and read concurrently by every request.
    """

    label_detector: LabelDetector
    object_localizer: ObjectLocalizer
    translator: Translator
    speech_synthesizer: SpeechSynthesizer
    sentiment_analyzer: SentimentAnalyzer

    def availability(self) -> dict[str, bool]:
        """Map capability name to True when a live provider is bound."""
        return {
            'label_detection': not self.label_detector.demo,
            'object_localization': not self.object_localizer.demo,
            'translation': not self.translator.demo,
            'speech_synthesis': not self.speech_synthesizer.demo,
            'sentiment': not self.sentiment_analyzer.demo,
        }

    @property
    def mode(self) -> str:
        live = self.availability().values()
        if all(live):
            return 'live'
        if any(live):
            return 'partial'
        return 'demo'
