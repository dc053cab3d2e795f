"""Installation folder resolution and port-file naming."""

import os
import platform
from pathlib import Path
from typing import Mapping, Optional

from ..constants import INSTALL_SUBDIR, SERVER_EXECUTABLE, VERSION_MARKER


def app_data_dir(system: str, environ: Mapping[str, str], home: Path) -> Path:
    """
    Return the per-user application-data directory for an OS identifier.

    ``system`` uses ``platform.system()`` spelling: "Windows", "Darwin", "Linux".
    Nothing is cached; callers pass the environment and home directory so
    tests can point this anywhere.
    """
    if system == "Windows":
        appdata = environ.get("APPDATA")
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    if system == "Darwin":
        return home / "Library" / "Application Support"
    xdg = environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else home / ".config"


def installation_folder(
    system: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """
    Folder the installer extracts the server into.

    SMOOTH_OPERATOR_INSTALL_DIR wins when set. Otherwise
    ``<app data>/SmoothOperator/AgentToolsServer``.
    """
    system = system or platform.system()
    environ = os.environ if environ is None else environ
    home = Path.home() if home is None else home

    override = (environ.get("SMOOTH_OPERATOR_INSTALL_DIR") or "").strip()
    if override:
        return Path(override)
    return app_data_dir(system, environ, home).joinpath(*INSTALL_SUBDIR)


def server_executable_path(install_dir: Path) -> Path:
    return Path(install_dir) / SERVER_EXECUTABLE


def version_marker_path(install_dir: Path) -> Path:
    return Path(install_dir) / VERSION_MARKER


def port_file_name(token: int) -> str:
    """Name of the file the server writes its port number into."""
    return f"portnr_{token}.txt"


def port_file_path(install_dir: Path, token: int) -> Path:
    return Path(install_dir) / port_file_name(token)
