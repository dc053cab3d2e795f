"""Server command building and process launch."""

import platform
import subprocess
from pathlib import Path
from typing import Optional

from ..config.paths import server_executable_path
from ..constants import PLACEHOLDER_API_KEY
from ..errors import SpawnError

import logging
logger = logging.getLogger(__name__)


def build_server_command(
    install_dir: Path,
    port_file_name: str,
    system: Optional[str] = None,
) -> list[str]:
    """
    Build the server command line.

    The server is a Windows executable. On Windows it runs directly;
    everywhere else it runs under Wine.

    Args:
        install_dir: Installation folder containing the server executable
        port_file_name: Bare file name (not a path) the server writes its port into
        system: ``platform.system()`` value, defaults to the current platform

    Returns:
        list[str]: argv for ``subprocess.Popen``
    """
    system = system or platform.system()
    exe = str(server_executable_path(install_dir))
    args = [
        "/silent",
        "/close-with-parent-process",
        "/managed-by-lib",
        f"/apikey={PLACEHOLDER_API_KEY}",
        f"/portnrfile={port_file_name}",
    ]
    if system == "Windows":
        return [exe, *args]
    return ["wine", exe, *args]


def launch_server_process(cmd: list[str], cwd: Path) -> subprocess.Popen:
    """
    Spawn the server with the installation folder as working directory.

    Raises:
        SpawnError: the OS refused to start the process, or it has no pid
    """
    kwargs = dict(
        cwd=str(cwd),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    if platform.system() == "Windows":
        kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW

    try:
        proc = subprocess.Popen(cmd, **kwargs)
    except OSError as e:
        raise SpawnError(f"Failed to start the server process: {e}") from e

    if not getattr(proc, "pid", None):
        raise SpawnError("Failed to start the server process.")
    return proc


__all__ = [
    "build_server_command",
    "launch_server_process",
]
