"""
Vision Router

Label detection, object localization and the full vision pipeline
(labels -> translation -> speech).
"""

import base64
import logging

from fastapi import APIRouter, File, UploadFile

from cloudtech.core.dependencies import ImageServiceDep, PipelineServiceDep, VisionServiceDep
from cloudtech.schemas.common import ErrorResponse
from cloudtech.schemas.vision import (
    LabelsResponse,
    ObjectsResponse,
    PipelineResponse,
    StageDemoStatus,
)


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix='/api',
    tags=['Vision'],
    responses={
        400: {'model': ErrorResponse, 'description': 'No image provided'},
        413: {'model': ErrorResponse, 'description': 'Image too large'},
        500: {'model': ErrorResponse, 'description': 'Upstream provider error'},
    },
)


@router.post('/vision/labels', response_model=LabelsResponse, response_model_exclude_none=True)
async def detect_labels(
    images: ImageServiceDep,
    vision: VisionServiceDep,
    image: UploadFile | None = File(None, description='Image file (JPEG/PNG)'),
):
    """
    Label detection for a whole image.

    Demo mode returns four canned labels with `demo: true`.
    """
    content = await images.read_payload(image)
    labels, demo = await vision.detect_labels(content)
    return LabelsResponse(labels=labels, demo=demo or None)


@router.post('/vision/objects', response_model=ObjectsResponse, response_model_exclude_none=True)
async def localize_objects(
    images: ImageServiceDep,
    vision: VisionServiceDep,
    image: UploadFile | None = File(None, description='Image file (JPEG/PNG)'),
):
    """
    Object localization with normalized bounding polygons.

    Demo mode returns two canned objects without polygons.
    """
    content = await images.read_payload(image)
    objects, demo = await vision.localize_objects(content)
    return ObjectsResponse(objects=objects, demo=demo or None)


@router.post(
    '/vision-pipeline', response_model=PipelineResponse, response_model_exclude_none=True
)
async def vision_pipeline(
    images: ImageServiceDep,
    pipeline: PipelineServiceDep,
    image: UploadFile | None = File(None, description='Image file (JPEG/PNG)'),
):
    """
    Full vision pipeline.

    1. Detect up to 5 labels
    2. Translate them to the configured language (Romanian by default)
    3. Speak "Am detectat: ..." and return the MP3 as `audioBase64`

    `demo` reflects label detection only; `demoStages` has every stage.
    `audioBase64` is omitted when speech synthesis is unavailable or fails.
    """
    content = await images.read_payload(image)
    result = await pipeline.run(content)

    audio_base64 = None
    if result.audio is not None:
        audio_base64 = base64.b64encode(result.audio).decode('ascii')

    return PipelineResponse(
        labels=result.labels,
        translations=result.translations,
        audio_base64=audio_base64,
        demo=result.demo,
        demo_stages=StageDemoStatus(**result.stage_demo),
    )
