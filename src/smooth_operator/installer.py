"""Extract the packaged server into the installation folder when needed."""

import time
import zipfile
from pathlib import Path
from typing import Optional

from .config.paths import installation_folder, server_executable_path, version_marker_path
from .errors import InstallationError

import logging
logger = logging.getLogger(__name__)


def _read_version(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError:
        return None


def needs_extraction(install_dir: Path, packaged_version: str) -> bool:
    """
    True unless the installed version marker matches and the server executable exists.
    """
    installed = _read_version(version_marker_path(install_dir))
    exe_exists = server_executable_path(install_dir).is_file()

    if installed is None:
        logger.info("No existing installation found. Proceeding with extraction.")
        return True
    if installed != packaged_version:
        logger.info(f"Installed version ({installed}) differs from packaged ({packaged_version}). Upgrading.")
        return True
    if not exe_exists:
        logger.info("Version matches but server executable is missing. Re-extracting.")
        return True
    logger.info("Installed version matches packaged version. Skipping extraction.")
    return False


def ensure_installed(
    archive_path: Path,
    version_path: Path,
    install_dir: Optional[Path] = None,
) -> bool:
    """
    Make sure the server in ``archive_path`` is extracted to the installation folder.

    The version marker is written only after a successful extraction, so an
    interrupted install is retried next time.

    Args:
        archive_path: Packaged server zip
        version_path: Text file holding the packaged version
        install_dir: Target folder, defaults to installation_folder()

    Returns:
        bool: True if files were extracted, False if the install was current

    Raises:
        InstallationError: packaged files are missing or extraction failed
    """
    t0 = time.time()
    archive_path, version_path = Path(archive_path), Path(version_path)
    install_dir = Path(install_dir) if install_dir else installation_folder()

    if not version_path.is_file():
        raise InstallationError(f"Packaged version file not found at {version_path}.")
    if not archive_path.is_file():
        raise InstallationError(f"Packaged server archive not found at {archive_path}.")

    install_dir.mkdir(parents=True, exist_ok=True)
    packaged_version = version_path.read_text(encoding="utf-8").strip()
    logger.info(f"Packaged version {packaged_version}, target folder {install_dir}")

    if not needs_extraction(install_dir, packaged_version):
        return False

    try:
        with zipfile.ZipFile(archive_path) as zf:
            zf.extractall(install_dir)
    except (zipfile.BadZipFile, OSError) as e:
        raise InstallationError(f"Failed during server file extraction: {e}") from e

    version_marker_path(install_dir).write_text(packaged_version, encoding="utf-8")
    logger.info(f"Server extracted in {time.time() - t0:.2f}s.")
    return True


__all__ = ["needs_extraction", "ensure_installed"]
