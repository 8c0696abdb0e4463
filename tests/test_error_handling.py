import asyncio

import pytest
from fastapi import HTTPException

from app.utils.error_handling import (
    MalformedUrl,
    NetworkFailure,
    NonSuccessStatus,
    handle_dog_api_errors,
    handle_errors,
)


def test_wraps_unexpected_errors():
    @handle_dog_api_errors("Lookup failed")
    def lookup():
        raise KeyError("message")

    with pytest.raises(NetworkFailure, match="Lookup failed"):
        lookup()


def test_dog_api_errors_pass_through_unchanged():
    @handle_dog_api_errors()
    def lookup():
        raise NonSuccessStatus("error")

    with pytest.raises(NonSuccessStatus):
        lookup()


def test_default_raises_http_exception():
    @handle_errors("Boom")
    def explode():
        raise RuntimeError("bad")

    with pytest.raises(HTTPException) as exc_info:
        explode()
    assert exc_info.value.status_code == 500


def test_return_value_when_not_reraising():
    @handle_errors(reraise=False, return_value="fallback", log_traceback=False)
    def explode():
        raise RuntimeError("bad")

    assert explode() == "fallback"


def test_async_functions_are_wrapped():
    @handle_errors("Async failed", exception_to_raise=MalformedUrl)
    async def explode():
        raise ValueError("bad")

    with pytest.raises(MalformedUrl, match="Async failed: bad"):
        asyncio.run(explode())


def test_successful_calls_return_normally():
    @handle_dog_api_errors()
    def ok(value, scale=2):
        return value * scale

    assert ok(3, scale=3) == 9
