"""
Service layer containing business logic.

Separates business logic from API routes for cleaner architecture.
"""

from cloudtech.services.image import ImageService
from cloudtech.services.language import LanguageService
from cloudtech.services.pipeline import PipelineResult, VisionPipelineService
from cloudtech.services.vision import VisionService


__all__ = [
    'ImageService',
    'LanguageService',
    'PipelineResult',
    'VisionPipelineService',
    'VisionService',
]
