# smooth_operator/decorators/ensure.py
import json
import inspect
import functools


def _not_started_payload() -> str:
    return json.dumps({
        "ok": False,
        "error": "server_not_started",
        "message": "Agent Tools server not started. Please call 'start_server' first, "
                   "or set SMOOTH_OPERATOR_BASE_URL to an already running server.",
    })


def ensure_server_ready(fn):
    """
    Short-circuit MCP tools with a JSON error when the client has no base URL,
    instead of letting every tool surface BaseUrlNotSetError on its own.
    """
    if inspect.iscoroutinefunction(fn):
        @functools.wraps(fn)
        async def wrapper(*args, **kwargs):
            from ..context import get_client  # call-time lookup so tests can reset the client

            if not get_client().session.is_started():
                return _not_started_payload()
            return await fn(*args, **kwargs)
        return wrapper

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        from ..context import get_client

        if not get_client().session.is_started():
            return _not_started_payload()
        return fn(*args, **kwargs)
    return wrapper


__all__ = ["ensure_server_ready"]
