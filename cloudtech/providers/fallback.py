"""
Demo fallback providers.

Used when Google Cloud credentials are not configured. Everything here is
deterministic and offline.
"""

from cloudtech.core.exceptions import ServiceNotConfiguredError
from cloudtech.providers.base import (
    LabelDetector,
    ObjectLocalizer,
    SentimentAnalyzer,
    SpeechSynthesizer,
    Translator,
)
from cloudtech.schemas.language import SentimentResult
from cloudtech.schemas.vision import DetectedLabel, DetectedObject


DEMO_LABELS: tuple[tuple[str, float], ...] = (
    ('Computer', 0.95),
    ('Technology', 0.89),
    ('Electronics', 0.85),
    ('Screen', 0.82),
)

# The vision pipeline reports a shorter canned set
PIPELINE_DEMO_LABEL_COUNT = 3

DEMO_OBJECTS: tuple[tuple[str, float], ...] = (
    ('Laptop', 0.92),
    ('Person', 0.88),
)

DEMO_TRANSLATIONS: dict[str, str] = {
    'Computer': 'Calculator',
    'Technology': 'Tehnologie',
    'Electronics': 'Electronică',
    'Screen': 'Ecran',
    'Person': 'Persoană',
    'Laptop': 'Laptop',
}

POSITIVE_KEYWORDS = (
    'amazing',
    'love',
    'excellent',
    'great',
    'wonderful',
    'fantastic',
    'best',
    'happy',
    'good',
)
NEGATIVE_KEYWORDS = (
    'terrible',
    'awful',
    'hate',
    'worst',
    'bad',
    'horrible',
    'disappointing',
    'waste',
)
KEYWORD_WEIGHT = 0.3


class DemoLabelDetector(LabelDetector):
    demo = True

    def detect_labels(self, content: bytes) -> list[DetectedLabel]:
        return [DetectedLabel(description=d, score=s) for d, s in DEMO_LABELS]

    def detect_top_labels(self, content: bytes, limit: int) -> list[DetectedLabel]:
        return self.detect_labels(content)[: min(limit, PIPELINE_DEMO_LABEL_COUNT)]


class DemoObjectLocalizer(ObjectLocalizer):
    demo = True

    def localize_objects(self, content: bytes) -> list[DetectedObject]:
        return [DetectedObject(name=n, score=s) for n, s in DEMO_OBJECTS]


class DemoTranslator(Translator):
    """Static table lookup; unknown strings pass through unchanged."""

    demo = True

    def __init__(self, table: dict[str, str] | None = None):
        self.table = DEMO_TRANSLATIONS if table is None else table

    def translate(self, texts: list[str], target_language: str) -> list[str]:
        return [self.table.get(text, text) for text in texts]


class UnconfiguredSpeechSynthesizer(SpeechSynthesizer):
    """There is no meaningful placeholder for audio, so synthesis always refuses."""

    demo = True

    def synthesize(self, text: str, language_code: str) -> bytes:
        raise ServiceNotConfiguredError(
            self.name, 'Set GOOGLE_APPLICATION_CREDENTIALS to enable TTS'
        )


def keyword_sentiment(text: str) -> SentimentResult:
    """
    Score text by keyword substring matches.

    Each whitespace-separated token adds KEYWORD_WEIGHT when it contains a
    positive keyword and subtracts it when it contains a negative one. The sum
    is clamped to [-1, 1] and magnitude is twice its absolute value.
    """
    score = 0.0
    for word in text.lower().split():
        if any(keyword in word for keyword in POSITIVE_KEYWORDS):
            score += KEYWORD_WEIGHT
        if any(keyword in word for keyword in NEGATIVE_KEYWORDS):
            score -= KEYWORD_WEIGHT
    score = max(-1.0, min(1.0, score))
    return SentimentResult(score=score, magnitude=abs(score) * 2)


class KeywordSentimentAnalyzer(SentimentAnalyzer):
    demo = True

    def analyze(self, text: str) -> SentimentResult:
        return keyword_sentiment(text)
