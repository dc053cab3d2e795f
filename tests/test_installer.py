import zipfile

import pytest

from smooth_operator.errors import InstallationError
from smooth_operator.installer import ensure_installed, needs_extraction


@pytest.fixture
def package(tmp_path):
    src = tmp_path / "pkg"
    src.mkdir()
    archive = src / "smooth-operator-server.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("smooth-operator-server.exe", b"MZ")
        zf.writestr("lib/helper.dll", b"dll")
    version = src / "version.txt"
    version.write_text("1.0.0\n")
    return archive, version


def test_fresh_install(tmp_path, package):
    target = tmp_path / "install"
    assert ensure_installed(*package, install_dir=target) is True
    assert (target / "smooth-operator-server.exe").read_bytes() == b"MZ"
    assert (target / "lib" / "helper.dll").exists()
    assert (target / "installedversion.txt").read_text() == "1.0.0"


def test_current_install_skipped(tmp_path, package):
    target = tmp_path / "install"
    ensure_installed(*package, install_dir=target)
    (target / "lib" / "helper.dll").unlink()
    assert ensure_installed(*package, install_dir=target) is False
    assert not (target / "lib" / "helper.dll").exists()


def test_version_change_reextracts(tmp_path, package):
    target = tmp_path / "install"
    ensure_installed(*package, install_dir=target)
    package[1].write_text("1.1.0")
    assert ensure_installed(*package, install_dir=target) is True
    assert (target / "installedversion.txt").read_text() == "1.1.0"


def test_missing_executable_reextracts(tmp_path, package):
    target = tmp_path / "install"
    ensure_installed(*package, install_dir=target)
    (target / "smooth-operator-server.exe").unlink()
    assert needs_extraction(target, "1.0.0") is True
    assert ensure_installed(*package, install_dir=target) is True


def test_missing_packaged_files(tmp_path, package):
    archive, version = package
    with pytest.raises(InstallationError):
        ensure_installed(archive, tmp_path / "nope.txt", install_dir=tmp_path / "i")
    with pytest.raises(InstallationError):
        ensure_installed(tmp_path / "nope.zip", version, install_dir=tmp_path / "i")


def test_corrupt_archive(tmp_path, package):
    archive, version = package
    archive.write_bytes(b"not a zip")
    target = tmp_path / "install"
    with pytest.raises(InstallationError):
        ensure_installed(archive, version, install_dir=target)
    assert not (target / "installedversion.txt").exists()
