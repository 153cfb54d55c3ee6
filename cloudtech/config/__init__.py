"""
Configuration module for the Cloud Technologies API.

Provides centralized configuration using Pydantic Settings with environment variable support.
"""

from cloudtech.config.settings import Settings, get_settings


__all__ = ['Settings', 'get_settings']
