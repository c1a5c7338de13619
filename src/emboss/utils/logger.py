"""
Logging for railway functions.

Functions that return `returns` containers (`Result` or `IOResult`) are
decorated with :func:`log_railway_function`, which logs the outcome with
loguru without touching the returned container.
"""

from enum import Enum
from functools import wraps
from itertools import chain
import logging
from typing import Any, Callable, Final

from loguru import logger
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success

VERBOSE: Final[bool] = False


class FailureLevel(Enum):
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def _debug_function_signature(func: Callable[..., Any], *args, **kwargs) -> None:
    signature = ", ".join(
        chain(
            (repr(arg) for arg in args),
            (f"{key}={value!r}" for key, value in kwargs.items()),
        )
    )
    logger.debug(f"Calling {func.__name__}({signature})")


def log_failure(failure_message: str, failure_level: FailureLevel, error: str) -> None:
    logger.debug(f"{failure_message}: {error}")
    logger.log(failure_level.name, failure_message)


def _log_result(
    result: Result | IOResult,
    failure_message: str,
    success_message: str | None,
    failure_level: FailureLevel,
) -> None:
    match result:
        case Success() | IOSuccess():
            if success_message:
                logger.info(success_message)
        case Failure(error) | IOFailure(error):
            log_failure(failure_message, failure_level, str(error))


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
):
    """
    Log the outcome of a function returning a `Result` or `IOResult`.

    :param failure_message: Logged at `failure_level` on failure; the error
        itself is logged at DEBUG.
    :param success_message: Logged at INFO on success, if given.
    :param failure_level: Level of the failure message.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if VERBOSE:
                _debug_function_signature(func, *args, **kwargs)
            result = func(*args, **kwargs)
            if isinstance(result, (Result, IOResult)):
                _log_result(result, failure_message, success_message, failure_level)
            return result

        return wrapper

    return decorator
