"""
Process-wide client used by the MCP front end.

The library itself never uses this; applications create their own
``SmoothOperatorClient`` instances. The MCP server has one agent per
connection and therefore one client per process.

Usage:
    from smooth_operator.context import get_client

    client = get_client()
    if not client.session.is_started():
        await client.start_server()
"""

from typing import Optional

from .client import SmoothOperatorClient


_global_client: Optional[SmoothOperatorClient] = None


def get_client() -> SmoothOperatorClient:
    """
    Get or create the process-wide client from environment configuration.

    All calls return the same instance until reset_client().
    """
    global _global_client

    if _global_client is None:
        _global_client = SmoothOperatorClient.from_env()
    return _global_client


def reset_client() -> None:
    """
    Dispose and forget the process-wide client.

    The next get_client() builds a fresh one (and may start a new server).
    """
    global _global_client
    if _global_client is not None:
        _global_client.dispose()
    _global_client = None


__all__ = [
    "get_client",
    "reset_client",
]
