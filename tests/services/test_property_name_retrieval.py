"""Property Name Retrieval - bounded wait with cancellation mapping.

Tests cover:
    - Resolved name is returned
    - Resolver cancellation -> HelloWorldError(PROPERTY_NAME_RETRIEVAL_CANCELLED)
    - Deadline missed -> PropertyNameRetrievalTimeoutError (not success)
    - Caller cancellation propagates as CancelledError
    - Resolver failures propagate unchanged (no retries)
"""

import asyncio

import pytest

from hello.core.domain_types import HelloWorldReturnCode
from hello.core.errors import HelloWorldError, PropertyNameRetrievalTimeoutError
from hello.services.property_name_retrieval import (
    DEFAULT_TIMEOUT_SECONDS, retrieve_property_name,
)


def test_default_deadline_is_ten_seconds():
    assert DEFAULT_TIMEOUT_SECONDS == 10.0


@pytest.mark.asyncio
async def test_returns_resolved_name():
    async def resolver():
        return "text"

    assert await retrieve_property_name(resolver, "text") == "text"


@pytest.mark.asyncio
async def test_self_cancelled_resolver_maps_to_domain_error():
    async def resolver():
        raise asyncio.CancelledError()

    with pytest.raises(HelloWorldError) as exc_info:
        await retrieve_property_name(resolver, "text")
    exc = exc_info.value
    assert exc.code is HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED
    assert exc.exit_code == 1
    assert '"text"' in exc.message
    assert isinstance(exc.__cause__, asyncio.CancelledError)


@pytest.mark.asyncio
async def test_externally_cancelled_resolver_maps_to_domain_error():
    started = []

    async def resolver():
        started.append(asyncio.current_task())
        await asyncio.sleep(60)
        return "text"

    waiter = asyncio.create_task(retrieve_property_name(resolver, "text"))
    while not started:
        await asyncio.sleep(0)
    started[0].cancel()

    with pytest.raises(HelloWorldError) as exc_info:
        await waiter
    assert exc_info.value.code is HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED


@pytest.mark.asyncio
async def test_timeout_raises_distinct_error():
    async def resolver():
        await asyncio.sleep(60)
        return "text"

    with pytest.raises(PropertyNameRetrievalTimeoutError) as exc_info:
        await retrieve_property_name(resolver, "text", timeout_seconds=0.01)
    assert not isinstance(exc_info.value, HelloWorldError)
    assert "0.01 seconds" in exc_info.value.message
    assert '"text"' in exc_info.value.message
    assert exc_info.value.expected_name == "text"


@pytest.mark.asyncio
async def test_caller_cancellation_propagates():
    started = []

    async def resolver():
        started.append(True)
        await asyncio.sleep(60)
        return "text"

    waiter = asyncio.create_task(retrieve_property_name(resolver, "text"))
    while not started:
        await asyncio.sleep(0)
    waiter.cancel()

    with pytest.raises(asyncio.CancelledError):
        await waiter


@pytest.mark.asyncio
async def test_resolver_error_propagates_unchanged():
    async def resolver():
        raise LookupError("boom")

    with pytest.raises(LookupError):
        await retrieve_property_name(resolver, "text")
