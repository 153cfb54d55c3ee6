"""
Shared utilities for the Cloud Technologies API.

Key modules:
- upstream: bounded-timeout provider calls with error normalization
"""

from cloudtech.utils.upstream import call_upstream


__all__ = ['call_upstream']
