# smooth_operator/decorators/envelope.py

import os
import json
import enum
import asyncio
import inspect
import datetime
import functools
import traceback
from typing import Any, Callable

from ..errors import HttpStatusError

import logging
logger = logging.getLogger(__name__)


__all__ = [
    "tool_envelope",
]


def _json_default(o: Any) -> Any:
    """Response models serialize through to_dict(), enums as their wire value."""
    to_dict = getattr(o, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(o, enum.Enum):
        return o.value
    return getattr(o, "__dict__", repr(o))


def _as_text(result: Any) -> str:
    if result is None:
        return ""
    if isinstance(result, str):
        return result
    if isinstance(result, bytes):
        return result.decode("utf-8", "replace")
    try:
        return json.dumps(result, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError):
        return str(result)


def _traceback_enabled() -> bool:
    return os.getenv("SMOOTH_OPERATOR_TOOL_ERRORS_TRACEBACK", "1") not in ("0", "false", "False")


def _failure(tool: str, err: Exception, with_traceback: bool) -> str:
    kind = type(err).__name__
    logger.warning(f"Tool {tool} failed: {kind}: {err}")

    error: dict = {"type": kind, "message": str(err)}
    if isinstance(err, HttpStatusError):
        error["status_code"] = err.status_code
    if with_traceback:
        error["traceback"] = traceback.format_exc()

    return json.dumps(
        {
            "ok": False,
            "summary": f"{kind}: {err}",
            "error": error,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        },
        ensure_ascii=False,
    )


def tool_envelope(func: Callable):
    """
    Make an MCP tool always answer with a JSON string.

    Results: strings pass through, None becomes "", response models and
    other values are dumped as JSON with camelCase keys.

    Errors: any Exception becomes
    ``{"ok": false, "summary", "error": {"type", "message", "status_code"?, "traceback"?}, "timestamp"}``.
    Cancellation is re-raised. SMOOTH_OPERATOR_TOOL_ERRORS_TRACEBACK=0
    (read when the tool is decorated) leaves the traceback out.
    """
    with_tb = _traceback_enabled()
    name = func.__name__

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_tool(*args, **kwargs):
            try:
                return _as_text(await func(*args, **kwargs))
            except asyncio.CancelledError:
                raise
            except Exception as e:
                return _failure(name, e, with_tb)
        return async_tool

    @functools.wraps(func)
    def sync_tool(*args, **kwargs):
        try:
            return _as_text(func(*args, **kwargs))
        except Exception as e:
            return _failure(name, e, with_tb)
    return sync_tool
