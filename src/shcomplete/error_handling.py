"""Error handling utilities for completion and LSP feature handlers."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


def wrap_handler(
    *,
    logger: logging.Logger,
    feature_name: str,
    default_factory: Callable[[], R],
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator that isolates a handler from the exceptions it raises.

    Catches exceptions, logs them, and returns a default value so that one
    failing handler (an LSP feature, a value source) cannot abort its caller.

    Args:
        logger: Logger instance for error logging.
        feature_name: Name of the wrapped feature (for error messages).
        default_factory: Callable that returns a default value on error.

    Returns:
        Decorator function.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except Exception:
                logger.exception("Error in %s handler", feature_name)
                return default_factory()

        return wrapper

    return decorator
