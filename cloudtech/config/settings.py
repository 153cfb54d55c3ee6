"""
Centralized configuration using Pydantic Settings.

All configuration is loaded from environment variables with sensible defaults.
Use get_settings() to access the singleton settings instance.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    Example: ENABLE_LIVE_PROVIDERS=false PORT=8080 python -m cloudtech.main
    """

    # ==========================================================================
    # Server
    # ==========================================================================
    host: str = Field(default='0.0.0.0', description='Interface to bind the HTTP server to')

    port: int = Field(default=3000, description='HTTP listen port')

    log_level: str = Field(default='INFO', description='Root logging level')

    # ==========================================================================
    # Google Cloud Providers
    # ==========================================================================
    enable_live_providers: bool = Field(
        default=True,
        description='Try to construct Google Cloud clients at startup (false = demo mode only)',
    )

    google_application_credentials: str | None = Field(
        default=None, description='Service account key path (read by google-auth)'
    )

    upstream_timeout: float = Field(
        default=30.0, gt=0, description='Timeout in seconds for a single upstream call'
    )

    # ==========================================================================
    # Pipeline / Locale
    # ==========================================================================
    target_language: str = Field(default='ro', description='Default translation target')

    speech_language_code: str = Field(default='ro-RO', description='Default synthesis locale')

    speech_voice_gender: str = Field(
        default='FEMALE', description='SSML voice gender (MALE, FEMALE, NEUTRAL)'
    )

    speech_prefix: str = Field(
        default='Am detectat: ', description='Phrase spoken before the detected labels'
    )

    pipeline_max_labels: int = Field(
        default=5, ge=1, description='Labels kept from live detection in the pipeline'
    )

    # ==========================================================================
    # Performance Configuration
    # ==========================================================================
    max_file_size_mb: int = Field(default=10, description='Maximum upload file size in MB')

    slow_request_threshold_ms: int = Field(
        default=1000, description='Log requests slower than this threshold'
    )

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_title: str = Field(
        default='Cloud Technologies API', description='API title for OpenAPI docs'
    )

    api_description: str = Field(
        default='Vision, translation, speech and sentiment demos backed by Google Cloud',
        description='API description for OpenAPI docs',
    )

    api_version: str = Field(default='1.0.0', description='API version')

    # ==========================================================================
    # Computed Properties
    # ==========================================================================
    @property
    def max_file_size_bytes(self) -> int:
        """Maximum file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    class Config:
        env_prefix = ''  # No prefix for env vars
        case_sensitive = False
        extra = 'ignore'


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance (singleton pattern).

    Returns:
        Settings: Application settings
    """
    return Settings()
