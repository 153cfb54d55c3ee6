"""
Cloud Technologies API

Demonstration façade over Google Cloud Vision, Translation, Text-to-Speech
and Natural Language. Every capability falls back to simulated data when
its credentials are missing (except text-to-speech, which reports 503).

Endpoints:
- GET  /api/health          : health check and capability probe
- POST /api/vision/labels   : label detection
- POST /api/vision/objects  : object localization
- POST /api/vision-pipeline : labels -> translation -> speech
- POST /api/translate       : translation
- POST /api/tts             : text-to-speech (MP3)
- POST /api/sentiment       : sentiment analysis

Run: python -m cloudtech.main
"""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from cloudtech.config import get_settings
from cloudtech.core.dependencies import app_state
from cloudtech.core.exceptions import (
    CloudServiceError,
    MissingInputError,
    PayloadTooLargeError,
    ServiceNotConfiguredError,
    UpstreamServiceError,
)
from cloudtech.routers import health_router, language_router, vision_router


settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Allowance for multipart boundaries and part headers on top of the file limit
MULTIPART_OVERHEAD_BYTES = 64 * 1024


# =============================================================================
# Lifespan Manager
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle manager.

    Startup:
    - Build the capability set (live Google clients or demo fallbacks)
    - Log which capabilities are live

    Shutdown:
    - Release the capability set
    """
    logger.info('=== STARTUP: Initializing providers ===')
    capabilities = app_state.startup(settings)

    for capability, live in capabilities.availability().items():
        logger.info(f'  {capability:<20} {"LIVE" if live else "DEMO"}')

    if capabilities.mode == 'demo':
        logger.warning('Demo mode: set GOOGLE_APPLICATION_CREDENTIALS to use Google Cloud APIs')
    elif settings.google_application_credentials:
        logger.info(f'Credentials: {settings.google_application_credentials}')

    logger.info(f'=== SERVICE READY: http://{settings.host}:{settings.port} ===')

    yield

    logger.info('=== SHUTDOWN ===')
    app_state.shutdown()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)


# =============================================================================
# Performance Monitoring Middleware
# =============================================================================
@app.middleware('http')
async def performance_middleware(request: Request, call_next):
    """
    Reject oversized uploads early, add X-Process-Time, log slow requests.
    """
    start_time = time.time()

    if request.method == 'POST':
        content_length = request.headers.get('content-length')
        if content_length and content_length.isdigit():
            size = int(content_length)
            body_limit = settings.max_file_size_bytes + MULTIPART_OVERHEAD_BYTES
            if size > body_limit:
                message = (
                    f'Request body {size / 1024 / 1024:.2f}MB exceeds limit of '
                    f'{body_limit / 1024 / 1024:.2f}MB'
                )
                logger.warning(f'Request rejected: {message}')
                return ORJSONResponse(
                    status_code=413,
                    content={
                        'error': 'Request too large',
                        'code': PayloadTooLargeError.code,
                        'message': message,
                    },
                )

    response = await call_next(request)

    duration_ms = (time.time() - start_time) * 1000
    response.headers['X-Process-Time'] = f'{duration_ms:.2f}ms'

    if duration_ms > settings.slow_request_threshold_ms:
        logger.warning(
            f'Slow request: {request.method} {request.url.path} - '
            f'{duration_ms:.2f}ms (threshold: {settings.slow_request_threshold_ms}ms)'
        )

    return response


# =============================================================================
# Exception Handlers
# =============================================================================
@app.exception_handler(MissingInputError)
async def missing_input_handler(request: Request, exc: MissingInputError):
    return ORJSONResponse(status_code=400, content={'error': exc.reason, 'code': exc.code})


@app.exception_handler(PayloadTooLargeError)
async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
    return ORJSONResponse(
        status_code=413,
        content={'error': 'File too large', 'code': exc.code, 'message': exc.message},
    )


@app.exception_handler(ServiceNotConfiguredError)
async def not_configured_handler(request: Request, exc: ServiceNotConfiguredError):
    service = exc.service.removesuffix(' API')
    return ORJSONResponse(
        status_code=503,
        content={
            'error': f'{service} not configured',
            'code': exc.code,
            'message': exc.hint,
            'demo': True,
        },
    )


@app.exception_handler(UpstreamServiceError)
async def upstream_handler(request: Request, exc: UpstreamServiceError):
    # The pipeline reports one error title regardless of the failing stage
    title = 'Vision Pipeline' if request.url.path == '/api/vision-pipeline' else exc.service
    return ORJSONResponse(
        status_code=500,
        content={'error': f'{title} error', 'code': exc.code, 'message': exc.reason},
    )


@app.exception_handler(CloudServiceError)
async def cloud_service_handler(request: Request, exc: CloudServiceError):
    logger.error(f'Unhandled service error on {request.url.path}: {exc.message}')
    return ORJSONResponse(
        status_code=500,
        content={'error': 'Internal error', 'code': exc.code, 'message': exc.message},
    )


# =============================================================================
# Routers
# =============================================================================
app.include_router(health_router)
app.include_router(vision_router)
app.include_router(language_router)


def run() -> None:
    """Console entrypoint: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == '__main__':
    run()
