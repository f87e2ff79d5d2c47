"""
Callback-style dispatch of service operations.

Each dispatched call runs on its own daemon thread and reports exactly
once through the callback with a ``Result``. Service errors are captured
into the result; any other exception is logged and delivered as an
``APIError`` so the callback still runs.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .exceptions import APIError, AppleMusicServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one service call: a value or an error, never both."""

    value: Optional[T] = None
    error: Optional[AppleMusicServiceError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AppleMusicServiceError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


def run(operation: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Call ``operation`` and capture its outcome as a Result."""
    try:
        return Result.success(operation(*args, **kwargs))
    except AppleMusicServiceError as e:
        logger.debug(
            "%s failed with %s", getattr(operation, "__name__", operation), e.kind.value
        )
        return Result.failure(e)


def dispatch(
    operation: Callable[..., T],
    *args,
    callback: Callable[[Result[T]], Any],
    **kwargs,
) -> threading.Thread:
    """
    Run ``operation`` in the background and hand its Result to ``callback``.

    Returns:
        The started worker thread, so callers may join it if they need to.
    """
    name = getattr(operation, "__name__", "call")

    def worker():
        try:
            result = run(operation, *args, **kwargs)
        except Exception as e:
            logger.exception("Unexpected error in %s", name)
            error = APIError(f"Unexpected error in {name}: {e}")
            error.__cause__ = e
            result = Result.failure(error)
        callback(result)

    thread = threading.Thread(
        target=worker,
        name=f"apple-music-{name}",
        daemon=True,
    )
    thread.start()
    return thread
