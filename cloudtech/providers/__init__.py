"""
Capability providers for external services.

Provides one interface per capability, with live Google Cloud adapters
(cloudtech.providers.gcp, imported lazily) and offline demo fallbacks.
"""

from cloudtech.providers.base import (
    CapabilitySet,
    LabelDetector,
    ObjectLocalizer,
    Provider,
    SentimentAnalyzer,
    SpeechSynthesizer,
    Translator,
)
from cloudtech.providers.factory import build_capabilities, demo_capabilities
from cloudtech.providers.fallback import (
    DemoLabelDetector,
    DemoObjectLocalizer,
    DemoTranslator,
    KeywordSentimentAnalyzer,
    UnconfiguredSpeechSynthesizer,
    keyword_sentiment,
)


__all__ = [
    'CapabilitySet',
    # Demo fallbacks
    'DemoLabelDetector',
    'DemoObjectLocalizer',
    'DemoTranslator',
    'KeywordSentimentAnalyzer',
    # Interfaces
    'LabelDetector',
    'ObjectLocalizer',
    'Provider',
    'SentimentAnalyzer',
    'SpeechSynthesizer',
    'Translator',
    'UnconfiguredSpeechSynthesizer',
    # Construction
    'build_capabilities',
    'demo_capabilities',
    'keyword_sentiment',
]
