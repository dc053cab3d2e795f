# smooth_operator/decorators/__init__.py
from .envelope import tool_envelope
from .ensure import ensure_server_ready

__all__ = [
    "tool_envelope",
    "ensure_server_ready",
]
