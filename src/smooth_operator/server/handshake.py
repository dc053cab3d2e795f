"""Port discovery through a file the server writes on startup."""

import random
from pathlib import Path
from typing import Optional

from ..config.paths import port_file_path
from ..constants import HANDSHAKE_TOKEN_MIN, HANDSHAKE_TOKEN_MAX
from ..errors import HandshakeTimeoutError, PortFileError
from ..utils.retry import poll_until

import logging
logger = logging.getLogger(__name__)


def make_handshake_token() -> int:
    """Random token that names this start attempt's port file."""
    return random.randrange(HANDSHAKE_TOKEN_MIN, HANDSHAKE_TOKEN_MAX)


def clear_port_file(path: Path) -> None:
    """Remove a leftover port file from an earlier run with the same token."""
    Path(path).unlink(missing_ok=True)


def read_port_file(path: Path) -> Optional[int]:
    """
    Consume the port file.

    Returns None while the file is missing or still empty (the server may
    have created it but not written yet). Once there is content the file is
    deleted before parsing, so a bad file is never seen twice.

    Raises:
        PortFileError: content is not a port number
    """
    p = Path(path)
    try:
        raw = p.read_bytes()
    except FileNotFoundError:
        return None
    # Undecodable bytes turn into U+FFFD and fail the ASCII check below.
    text = raw.decode("utf-8", "replace").strip()
    if not text:
        return None

    p.unlink(missing_ok=True)
    if not (text.isascii() and text.isdigit()) or not 0 < int(text) < 65536:
        raise PortFileError(text)
    return int(text)


async def wait_for_port(
    install_dir: Path,
    token: int,
    *,
    deadline: float,
    interval: float,
    timeout: float,
) -> int:
    """
    Poll for ``portnr_<token>.txt`` in ``install_dir`` and return the port.

    ``timeout`` is only used for the error message; ``deadline`` bounds the wait.

    Raises:
        HandshakeTimeoutError: the file never appeared before ``deadline``
        PortFileError: the file held garbage
    """
    path = port_file_path(install_dir, token)
    port = await poll_until(lambda: read_port_file(path), deadline=deadline, interval=interval)
    if port is None:
        raise HandshakeTimeoutError(timeout)
    return port


__all__ = [
    "make_handshake_token",
    "clear_port_file",
    "read_port_file",
    "wait_for_port",
]
