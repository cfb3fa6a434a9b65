"""Property Name Retrieval - bounded wait on a cancellable background lookup.

Invariants:
    - The resolver runs as its own asyncio task; the caller waits at most
      timeout_seconds (default 10)
    - Deadline missed -> PropertyNameRetrievalTimeoutError, never a silent success
    - Resolver task cancelled -> HelloWorldError(PROPERTY_NAME_RETRIEVAL_CANCELLED)
      whose message contains expected_name
    - Cancellation of the waiting caller itself is re-raised untouched
    - No retries
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from hello.core.domain_types import HelloWorldReturnCode
from hello.core.errors import HelloWorldError, PropertyNameRetrievalTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS: float = 10.0

# Name of the variable being resolved, as reported in error messages
_RETRIEVED_NAME = "property_name"


async def retrieve_property_name(
    resolver: Callable[[], Awaitable[str]],
    expected_name: str,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    """Run resolver in the background and wait for its result with a deadline."""
    task = asyncio.ensure_future(resolver())
    try:
        return await asyncio.wait_for(task, timeout=timeout_seconds)
    except asyncio.TimeoutError as exc:
        logger.error(
            "Property name retrieval timed out",
            extra={"property_name": expected_name},
        )
        raise PropertyNameRetrievalTimeoutError(
            _RETRIEVED_NAME, expected_name, timeout_seconds,
        ) from exc
    except asyncio.CancelledError as exc:
        current = asyncio.current_task()
        if current is not None and current.cancelling():
            raise
        logger.warning(
            "Property name retrieval cancelled",
            extra={
                "property_name": expected_name,
                "error_code": HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED.name,
            },
        )
        raise HelloWorldError(
            exc, HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED,
            _RETRIEVED_NAME, expected_name,
        ) from exc
