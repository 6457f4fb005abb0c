"""Observability helpers for instrumenting provider and store calls."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from stylist_app.logging_config import get_logger, log_event, operation_context, scrub

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        preview[key] = value
    return scrub(preview)


def instrument_tool(tool_name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a callable to emit structured start, completion and failure logs.

    Calls made inside an engine operation share its correlation id; a bare
    call gets an id of its own for the duration of the call.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with operation_context(f"tool:{tool_name}"):
                start = time.perf_counter()
                log_event(
                    LOGGER,
                    logging.INFO,
                    "tool_call_started",
                    tool=tool_name,
                    kwargs=_preview_kwargs(kwargs),
                )
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "tool_call_failed",
                        tool=tool_name,
                        duration_ms=round((time.perf_counter() - start) * 1000, 2),
                        exc_info=True,
                    )
                    raise
                log_event(
                    LOGGER,
                    logging.INFO,
                    "tool_call_completed",
                    tool=tool_name,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                return result

        return wrapper

    return decorator


__all__ = ["instrument_tool"]
