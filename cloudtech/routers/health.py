"""
Health and Monitoring Router

Provides health checks, service info, and the capability probe.
"""

import logging
import os
from datetime import datetime, timezone

import psutil
from fastapi import APIRouter

from cloudtech.core.dependencies import CapabilitiesDep, SettingsDep
from cloudtech.schemas.common import (
    CapabilityStatus,
    HealthResponse,
    PerformanceMetrics,
    ServiceInfoResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=['Health & Monitoring'],
)


@router.get('/', response_model=ServiceInfoResponse)
def root(settings: SettingsDep, capabilities: CapabilitiesDep):
    """
    Service information endpoint.

    Returns available endpoints and whether providers are live.
    """
    return ServiceInfoResponse(
        service=settings.api_title,
        version=settings.api_version,
        mode=capabilities.mode,
        endpoints={
            'health': 'GET /api/health',
            'labels': 'POST /api/vision/labels',
            'objects': 'POST /api/vision/objects',
            'pipeline': 'POST /api/vision-pipeline',
            'translate': 'POST /api/translate',
            'tts': 'POST /api/tts',
            'sentiment': 'POST /api/sentiment',
        },
    )


@router.get('/api/health', response_model=HealthResponse)
def health(settings: SettingsDep, capabilities: CapabilitiesDep):
    """
    Health check with capability probe.

    Returns:
    - Service status and timestamp
    - gcpConfigured: label detection is backed by Google Cloud
    - Per-capability availability
    - Process memory and CPU usage
    """
    available = capabilities.availability()

    process = psutil.Process(os.getpid())
    memory_info = process.memory_info()

    return HealthResponse(
        status='ok',
        gcp_configured=available['label_detection'],
        timestamp=datetime.now(timezone.utc),
        capabilities=CapabilityStatus(**available),
        performance=PerformanceMetrics(
            memory_mb=round(memory_info.rss / 1024 / 1024, 2),
            cpu_percent=process.cpu_percent(),
            max_file_size_mb=settings.max_file_size_mb,
            slow_request_threshold_ms=settings.slow_request_threshold_ms,
            upstream_timeout_s=settings.upstream_timeout,
        ),
    )
