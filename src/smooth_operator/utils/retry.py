"""Deadline-bounded polling."""

import asyncio
import inspect
from typing import Any, Callable, Optional, Tuple, Type

import logging
logger = logging.getLogger(__name__)


async def poll_until(
    check: Callable[[], Any],
    *,
    deadline: float,
    interval: float,
    swallow: Tuple[Type[BaseException], ...] = (),
) -> Optional[Any]:
    """
    Call ``check`` until it returns something truthy or ``deadline`` passes.

    ``deadline`` is on the running loop's clock (``loop.time()``). ``check``
    may be sync or async. Exceptions listed in ``swallow`` count as a miss;
    anything else propagates. Waits between attempts with ``asyncio.sleep``,
    never spins.

    Returns:
        The first truthy value ``check`` produced, or None if time ran out.
    """
    loop = asyncio.get_running_loop()
    while True:
        try:
            result = check()
            if inspect.isawaitable(result):
                result = await result
            if result:
                return result
        except swallow as e:
            logger.debug(f"Poll attempt failed: {e!r}")

        remaining = deadline - loop.time()
        if remaining <= 0:
            return None
        await asyncio.sleep(min(interval, remaining))


__all__ = ["poll_until"]
