"""
Pydantic schemas for API request/response models.

Consolidated models used across all API endpoints for consistent typing.
"""

from cloudtech.schemas.common import (
    CapabilityStatus,
    ErrorResponse,
    HealthResponse,
    PerformanceMetrics,
    ServiceInfoResponse,
)
from cloudtech.schemas.language import (
    SentimentRequest,
    SentimentResponse,
    SentimentResult,
    SpeechRequest,
    TranslateRequest,
    TranslateResponse,
)
from cloudtech.schemas.vision import (
    BoundingPoly,
    DetectedLabel,
    DetectedObject,
    LabelsResponse,
    ObjectsResponse,
    PipelineResponse,
    StageDemoStatus,
    TranslationPair,
    Vertex,
)


__all__ = [
    # Vision schemas
    'BoundingPoly',
    # Common schemas
    'CapabilityStatus',
    'DetectedLabel',
    'DetectedObject',
    'ErrorResponse',
    'HealthResponse',
    'LabelsResponse',
    'ObjectsResponse',
    'PerformanceMetrics',
    'PipelineResponse',
    # Language schemas
    'SentimentRequest',
    'SentimentResponse',
    'SentimentResult',
    'ServiceInfoResponse',
    'SpeechRequest',
    'StageDemoStatus',
    'TranslateRequest',
    'TranslateResponse',
    'TranslationPair',
    'Vertex',
]
