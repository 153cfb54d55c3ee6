"""
Core module with shared dependencies and exception handling.

Exceptions are re-exported here. FastAPI dependencies live in
cloudtech.core.dependencies and are imported from there directly, since they
pull in the service layer (which itself depends on these exceptions).
"""

from cloudtech.core.exceptions import (
    CloudServiceError,
    MissingInputError,
    PayloadTooLargeError,
    ServiceNotConfiguredError,
    UpstreamServiceError,
)


__all__ = [
    'CloudServiceError',
    'MissingInputError',
    'PayloadTooLargeError',
    'ServiceNotConfiguredError',
    'UpstreamServiceError',
]
