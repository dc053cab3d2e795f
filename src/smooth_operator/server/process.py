"""Server process teardown."""

import subprocess
import threading
from typing import Optional

import psutil

import logging
logger = logging.getLogger(__name__)


def _process_tree(pid: int) -> list[psutil.Process]:
    """The process and its descendants, children first (Wine spawns helpers)."""
    parent = psutil.Process(pid)
    try:
        children = parent.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        children = []
    return children + [parent]


def _reap(proc: subprocess.Popen, tree: list[psutil.Process], wait_secs: float) -> None:
    """Wait for the tree to exit, kill whatever is left, collect the exit status."""
    try:
        _, alive = psutil.wait_procs(tree, timeout=wait_secs)
        for p in alive:
            try:
                p.kill()
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                pass
    except Exception as e:
        logger.debug(f"Waiting for server pid={proc.pid} failed: {e!r}")
    try:
        proc.wait(timeout=wait_secs)
    except Exception as e:
        logger.debug(f"Server pid={proc.pid} not reaped: {e!r}")


def terminate_process(proc: subprocess.Popen, wait_secs: float) -> Optional[threading.Thread]:
    """
    Ask the server (and anything it spawned) to exit without blocking the caller.

    Sends terminate to the whole tree, then hands the bounded wait to a
    daemon thread that kills survivors after ``wait_secs``. Never raises:
    a process that is already gone is simply skipped.

    Returns:
        The reaper thread, or None if there was nothing left to wait for.
    """
    try:
        if proc.poll() is not None:
            return None
        tree = _process_tree(proc.pid)
    except psutil.NoSuchProcess:
        return None
    except Exception as e:
        logger.debug(f"Could not inspect server pid={proc.pid}: {e!r}")
        tree = []

    for p in tree:
        try:
            p.terminate()
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.debug(f"Terminate pid={p.pid} skipped: {e!r}")
    if not tree:
        try:
            proc.terminate()
        except OSError as e:
            logger.debug(f"Terminate pid={proc.pid} failed: {e!r}")

    t = threading.Thread(
        target=_reap,
        args=(proc, tree, wait_secs),
        name=f"smooth-operator-reaper-{proc.pid}",
        daemon=True,
    )
    t.start()
    return t


__all__ = ["terminate_process"]
