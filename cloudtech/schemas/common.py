"""
Common Pydantic models used across multiple endpoints.

Health checks, service info, and error responses.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CapabilityStatus(BaseModel):
    """Which capabilities are backed by a live provider."""

    model_config = ConfigDict(populate_by_name=True)

    label_detection: bool = Field(..., alias='labelDetection')
    object_localization: bool = Field(..., alias='objectLocalization')
    translation: bool
    speech_synthesis: bool = Field(..., alias='speechSynthesis')
    sentiment: bool


class PerformanceMetrics(BaseModel):
    """Process metrics for health check."""

    memory_mb: float
    cpu_percent: float
    max_file_size_mb: int
    slow_request_threshold_ms: int
    upstream_timeout_s: float


class HealthResponse(BaseModel):
    """Health check response with capability probe."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(default='ok', description='Service health status')
    gcp_configured: bool = Field(
        ..., alias='gcpConfigured', description='True when label detection is live'
    )
    timestamp: datetime
    capabilities: CapabilityStatus
    performance: PerformanceMetrics


class ServiceInfoResponse(BaseModel):
    """Root endpoint response with service information."""

    service: str
    version: str
    status: str = Field(default='running')
    mode: str = Field(..., description="'live', 'partial' or 'demo'")
    endpoints: dict[str, str]


class ErrorResponse(BaseModel):
    """Body of every non-2xx JSON response."""

    error: str = Field(..., description='Short error title')
    code: str = Field(..., description='Machine-readable error code')
    message: str | None = Field(None, description='Upstream or diagnostic message')
    demo: bool | None = None
