"""
Standalone vision service.

Label detection and object localization on a single image, each returning
the provider result together with its demo flag.
"""

import logging

from cloudtech.config.settings import Settings
from cloudtech.providers.base import CapabilitySet
from cloudtech.schemas.vision import DetectedLabel, DetectedObject
from cloudtech.utils.upstream import call_upstream


logger = logging.getLogger(__name__)


class VisionService:
    """Single-call vision operations (no pipeline)."""

    def __init__(self, capabilities: CapabilitySet, settings: Settings):
        self.capabilities = capabilities
        self.settings = settings

    async def detect_labels(self, content: bytes) -> tuple[list[DetectedLabel], bool]:
        detector = self.capabilities.label_detector
        labels = await call_upstream(
            detector.name,
            detector.detect_labels,
            content,
            timeout=self.settings.upstream_timeout,
        )
        logger.info(f'Detected {len(labels)} labels (demo={detector.demo})')
        return labels, detector.demo

    async def localize_objects(self, content: bytes) -> tuple[list[DetectedObject], bool]:
        localizer = self.capabilities.object_localizer
        objects = await call_upstream(
            localizer.name,
            localizer.localize_objects,
            content,
            timeout=self.settings.upstream_timeout,
        )
        logger.info(f'Localized {len(objects)} objects (demo={localizer.demo})')
        return objects, localizer.demo
