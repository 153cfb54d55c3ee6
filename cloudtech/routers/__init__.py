"""
FastAPI routers.

- health: service info, health check and capability probe
- vision: label detection, object localization, vision pipeline
- language: translation, text-to-speech, sentiment analysis
"""

from cloudtech.routers.health import router as health_router
from cloudtech.routers.language import router as language_router
from cloudtech.routers.vision import router as vision_router


__all__ = [
    'health_router',
    'language_router',
    'vision_router',
]
