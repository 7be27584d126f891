import inspect
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def _log(func: Callable, exc: Exception) -> None:
    logger.error(f"[{func.__qualname__}] {type(exc).__name__}: {exc}")


def log_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Catch, log, and re-raise any exception raised by the decorated callable.

    Works for both plain functions and coroutine functions. The log line
    includes the fully-qualified function name, exception type, and message
    so the source is immediately identifiable without a traceback.

    Usage::

        @log_errors
        async def execute(self, query: str) -> dict: ...
    """

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as exc:
                _log(func, exc)
                raise

        return async_wrapper  # type: ignore[return-value]

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            _log(func, exc)
            raise

    return wrapper
