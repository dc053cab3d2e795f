"""Readiness probing: ping until the server answers "pong"."""

import asyncio
from typing import Optional

import httpx

from ..constants import PING_PATH, PING_EXPECTED
from ..dispatcher import Dispatcher
from ..errors import SmoothOperatorError
from ..utils.retry import poll_until

import logging
logger = logging.getLogger(__name__)

# Connection refused, timeouts, non-2xx and unparseable bodies all mean "not yet".
_NOT_READY = (httpx.HTTPError, SmoothOperatorError, OSError)


async def ping(dispatcher: Dispatcher, timeout: Optional[float] = None) -> bool:
    """Single health check."""
    return await dispatcher.get(PING_PATH, timeout=timeout) == PING_EXPECTED


async def wait_until_ready(dispatcher: Dispatcher, *, deadline: float, interval: float) -> bool:
    """
    Ping repeatedly until the server answers or ``deadline`` passes.

    Time is the only bound; there is no attempt limit. Each ping's HTTP
    timeout is capped at the time left, so a hung request cannot carry
    the wait past ``deadline``.

    Returns:
        bool: True once "pong" was received, False if time ran out
    """
    loop = asyncio.get_running_loop()

    async def attempt() -> bool:
        remaining = deadline - loop.time()
        if remaining <= 0:
            return False
        return await ping(dispatcher, timeout=remaining)

    ok = await poll_until(attempt, deadline=deadline, interval=interval, swallow=_NOT_READY)
    return bool(ok)


__all__ = ["ping", "wait_until_ready"]
