"""Error handling utilities for the application."""

import functools
import logging
from typing import Callable, TypeVar, Any, Optional, Tuple, Type
import traceback
import inspect
from fastapi import HTTPException

# Define a generic type for function return value
T = TypeVar('T')

logger = logging.getLogger(__name__)

# Custom exceptions
class DogApiError(Exception):
    """Base exception for anything that prevents a dog image from being shown."""
    pass

class NetworkFailure(DogApiError):
    """The Dog API could not be reached or returned an unreadable body."""
    pass

class NonSuccessStatus(DogApiError):
    """The Dog API answered with a status other than "success"."""

    def __init__(self, status: Optional[str], message: str = ""):
        self.status = status
        super().__init__(message or f"Dog API returned status {status!r}")

class MalformedUrl(DogApiError):
    """An image URL has no path segment that could hold a breed slug."""
    pass


def handle_errors(
    error_message: str = "Operation failed",
    exception_to_raise: Type[Exception] = HTTPException,
    log_traceback: bool = True,
    return_value: Optional[Any] = None,
    reraise: bool = True,
    passthrough: Tuple[Type[Exception], ...] = ()
) -> Callable:
    """
    Decorator to handle errors in functions with standardized logging and error reporting.
    Handles both async and sync functions.

    Args:
        error_message: Base error message to log and include in exception
        exception_to_raise: Type of exception to raise (e.g., HTTPException, NetworkFailure)
        log_traceback: Whether to log the full traceback
        return_value: Value to return if reraise is False
        reraise: Whether to raise the exception (True) or return return_value (False)
        passthrough: Exception types re-raised untouched and without logging

    Returns:
        Decorated function
    """
    def _handle(e: Exception):
        if passthrough and isinstance(e, passthrough):
            raise e
        full_error = f"{error_message}: {str(e)}"
        if log_traceback:
            logger.error(f"{full_error}\n{traceback.format_exc()}")
        else:
            logger.error(full_error)

        if reraise:
            if exception_to_raise is HTTPException:
                if isinstance(e, HTTPException):
                    raise e
                else:
                    raise HTTPException(status_code=500, detail=full_error)
            else:
                raise exception_to_raise(full_error) from e
        else:
            return return_value

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        # Check if the original function is async
        is_async_func = inspect.iscoroutinefunction(func)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return _handle(e)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                return _handle(e)

        # Return the correct wrapper based on whether func is async
        return async_wrapper if is_async_func else sync_wrapper
    return decorator


def handle_dog_api_errors(error_message: str = "Dog API request failed") -> Callable:
    """
    Specialized decorator for Dog API calls.

    Anything unexpected becomes a NetworkFailure; errors already in the
    DogApiError family keep their type.

    Args:
        error_message: Base error message

    Returns:
        Decorated function
    """
    return handle_errors(
        error_message=error_message,
        exception_to_raise=NetworkFailure,
        log_traceback=False,
        reraise=True,
        passthrough=(DogApiError,)
    )
