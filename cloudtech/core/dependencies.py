"""
FastAPI dependency injection for shared resources.

Uses FastAPI's Depends() pattern for proper lifecycle management.
The capability set is created once in the lifespan and reused across requests.
"""

import logging
from typing import Annotated

from fastapi import Depends

from cloudtech.config.settings import Settings, get_settings
from cloudtech.providers.base import CapabilitySet
from cloudtech.providers.factory import build_capabilities
from cloudtech.services.image import ImageService
from cloudtech.services.language import LanguageService
from cloudtech.services.pipeline import VisionPipelineService
from cloudtech.services.vision import VisionService


logger = logging.getLogger(__name__)


# =============================================================================
# Application State (managed by lifespan context)
# =============================================================================
class AppState:
    """
    Application state container for shared resources.

    The capability set is bound in lifespan and never mutated afterwards, so
    concurrent requests read it without locking.
    """

    def __init__(self):
        self.capabilities: CapabilitySet | None = None

    def startup(self, settings: Settings) -> CapabilitySet:
        self.capabilities = build_capabilities(settings)
        return self.capabilities

    def shutdown(self) -> None:
        self.capabilities = None


# Global app state - initialized in lifespan
app_state = AppState()


# =============================================================================
# FastAPI Dependencies (use with Depends())
# =============================================================================
def get_capabilities() -> CapabilitySet:
    """Dependency for the process-lifetime capability set (lazy if lifespan did not run)."""
    if app_state.capabilities is None:
        logger.info('Capability set not initialized by lifespan, building now')
        app_state.startup(get_settings())
    return app_state.capabilities


SettingsDep = Annotated[Settings, Depends(get_settings)]
CapabilitiesDep = Annotated[CapabilitySet, Depends(get_capabilities)]


def get_image_service(settings: SettingsDep) -> ImageService:
    return ImageService(settings)


def get_vision_service(capabilities: CapabilitiesDep, settings: SettingsDep) -> VisionService:
    return VisionService(capabilities, settings)


def get_language_service(
    capabilities: CapabilitiesDep, settings: SettingsDep
) -> LanguageService:
    return LanguageService(capabilities, settings)


def get_pipeline_service(
    capabilities: CapabilitiesDep, settings: SettingsDep
) -> VisionPipelineService:
    return VisionPipelineService(capabilities, settings)


# Type aliases for cleaner endpoint signatures
ImageServiceDep = Annotated[ImageService, Depends(get_image_service)]
VisionServiceDep = Annotated[VisionService, Depends(get_vision_service)]
LanguageServiceDep = Annotated[LanguageService, Depends(get_language_service)]
PipelineServiceDep = Annotated[VisionPipelineService, Depends(get_pipeline_service)]
