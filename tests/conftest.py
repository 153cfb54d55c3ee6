"""
Test configuration.

Provides capability sets built from demo fallbacks and from in-process
"live" stand-ins (tests.fakes), and a TestClient factory that installs them
through FastAPI dependency overrides.
"""

import os

# Never reach for Google credentials while importing the app
os.environ.setdefault('ENABLE_LIVE_PROVIDERS', 'false')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from cloudtech.config.settings import Settings, get_settings  # noqa: E402
from cloudtech.core.dependencies import get_capabilities  # noqa: E402
from cloudtech.main import app  # noqa: E402
from cloudtech.providers import (  # noqa: E402
    CapabilitySet,
    ObjectLocalizer,
    SentimentAnalyzer,
    demo_capabilities,
)
from cloudtech.schemas import DetectedObject, SentimentResult  # noqa: E402
from tests.fakes import (  # noqa: E402
    FakeLabelDetector,
    FakeSpeechSynthesizer,
    FakeTranslator,
    mock_provider,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(enable_live_providers=False)


@pytest.fixture
def demo_caps() -> CapabilitySet:
    return demo_capabilities()


@pytest.fixture
def live_caps() -> CapabilitySet:
    """Every capability backed by a live stand-in."""
    return CapabilitySet(
        label_detector=FakeLabelDetector(
            ['Laptop', 'Computer', 'Keyboard', 'Screen', 'Desk', 'Office', 'Cable']
        ),
        object_localizer=mock_provider(
            ObjectLocalizer,
            localize_objects=[DetectedObject(name='Laptop', score=0.91)],
        ),
        translator=FakeTranslator(),
        speech_synthesizer=FakeSpeechSynthesizer(),
        sentiment_analyzer=mock_provider(
            SentimentAnalyzer,
            analyze=SentimentResult(score=0.4, magnitude=0.9),
        ),
    )


@pytest.fixture
def make_client():
    """
    Build a TestClient bound to a capability set (and optional settings).

    Lifespan is not run; the overrides replace it.
    """

    def _make(capabilities: CapabilitySet, settings: Settings | None = None) -> TestClient:
        app.dependency_overrides[get_capabilities] = lambda: capabilities
        if settings is not None:
            app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def demo_client(make_client, demo_caps) -> TestClient:
    return make_client(demo_caps)


@pytest.fixture
def image_file() -> dict:
    """Multipart payload with a small opaque image."""
    return {'image': ('photo.jpg', b'\xff\xd8\xff\xe0fake-jpeg', 'image/jpeg')}
