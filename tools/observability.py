"""Observability helpers for instrumenting planner operations."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from wardrobe_app.logging_config import correlation_context, get_logger, log_event, redact_for_log

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        if isinstance(value, (list, tuple)):
            preview[key] = f"<{len(value)} entries>"
        else:
            preview[key] = value
    return redact_for_log(preview)


def instrument_operation(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a callable to emit structured start, completion and failure logs."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with correlation_context() as correlation_id:
                start = time.perf_counter()
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_started",
                    operation=operation,
                    correlation_id=correlation_id,
                    kwargs=_preview_kwargs(kwargs),
                )
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "operation_failed",
                        operation=operation,
                        correlation_id=correlation_id,
                        duration_ms=round((time.perf_counter() - start) * 1000, 2),
                        exc_info=True,
                    )
                    raise
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_completed",
                    operation=operation,
                    correlation_id=correlation_id,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
