"""
Upstream call utilities.

Runs blocking provider calls in a worker thread with a bounded timeout and
normalizes every failure into UpstreamServiceError. There are no retries: an
upstream failure is reported once, immediately.
"""

import asyncio
import logging
from typing import Callable, TypeVar

from cloudtech.core.exceptions import CloudServiceError, UpstreamServiceError


logger = logging.getLogger(__name__)

T = TypeVar('T')


async def call_upstream(
    service: str,
    func: Callable[..., T],
    *args,
    timeout: float,
    **kwargs,
) -> T:
    """
    Call a blocking provider method off the event loop.

    Args:
        service: Service name used in logs and error responses (e.g. 'Vision API')
        func: Provider method to call
        *args: Positional arguments for func
        timeout: Maximum seconds to wait for the call
        **kwargs: Keyword arguments for func

    Returns:
        Result from func

    Raises:
        UpstreamServiceError: If func raises or does not finish within timeout
        CloudServiceError: Domain errors raised by func are passed through unchanged
    """
    task = asyncio.ensure_future(asyncio.to_thread(func, *args, **kwargs))
    done, _ = await asyncio.wait({task}, timeout=timeout)

    if not done:
        # Elapsed bound only; a TimeoutError raised by the provider is wrapped below
        task.cancel()
        logger.error(f'{service} call timed out after {timeout:.1f}s')
        raise UpstreamServiceError(service, f'{service} timed out after {timeout:.1f}s')

    try:
        return task.result()
    except CloudServiceError:
        raise
    except Exception as e:
        logger.error(f'{service} error: {e}')
        raise UpstreamServiceError(service, str(e)) from e
