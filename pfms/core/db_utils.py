"""
Database utilities for startup-time connection handling.

Request handlers never retry: a failed query surfaces as a DbError and the
caller re-issues the request. Only the startup work (table creation and
seeding) waits for the database to come up.
"""
import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar, cast

from sqlalchemy.exc import InterfaceError, OperationalError

logger = logging.getLogger(__name__)

T = TypeVar('T')

TRANSIENT_ERRORS = (OperationalError, InterfaceError, ConnectionError)


def with_db_retry(
    max_retries: int = 3,
    retry_delay: float = 0.5
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Retry the wrapped coroutine on transient connection errors.

    Args:
        max_retries: Retries after the first attempt before giving up
        retry_delay: Base delay in seconds, doubled on every retry

    Any other exception propagates immediately.
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except TRANSIENT_ERRORS as e:
                    if attempt >= max_retries:
                        logger.error(
                            f"{func.__name__} failed after {max_retries} retries: {e}"
                        )
                        raise
                    delay = retry_delay * (2 ** attempt)
                    attempt += 1
                    logger.warning(
                        f"Database connection error in {func.__name__}: {e}. "
                        f"Retrying in {delay:.2f}s... (Attempt {attempt}/{max_retries})"
                    )
                    await asyncio.sleep(delay)

        return cast(Callable[..., Awaitable[T]], wrapper)

    return decorator
