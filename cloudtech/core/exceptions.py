"""
Custom exceptions for the Cloud Technologies API.

Provides domain-specific exceptions; each one is rendered to a JSON error
response by the handlers registered in cloudtech.main.
"""


class CloudServiceError(Exception):
    """Base exception for all API errors."""

    code = 'internal_error'

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MissingInputError(CloudServiceError):
    """Raised when a required image or text field is absent."""

    code = 'missing_input'

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class PayloadTooLargeError(CloudServiceError):
    """Raised when an upload exceeds the configured size limit."""

    code = 'payload_too_large'

    def __init__(self, size_mb: float, limit_mb: int):
        self.size_mb = size_mb
        self.limit_mb = limit_mb
        message = f'File size {size_mb:.2f}MB exceeds maximum {limit_mb}MB'
        super().__init__(message)


class UpstreamServiceError(CloudServiceError):
    """Raised when a live provider call fails or times out."""

    code = 'upstream_error'

    def __init__(self, service: str, reason: str):
        self.service = service
        self.reason = reason
        super().__init__(reason)


class ServiceNotConfiguredError(CloudServiceError):
    """Raised when a capability with no offline substitute has no live provider."""

    code = 'service_not_configured'

    def __init__(self, service: str, hint: str):
        self.service = service
        self.hint = hint
        super().__init__(hint)
