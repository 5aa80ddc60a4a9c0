"""Unit tests for jmxctl.api.host.FileManager."""

import stat

import pytest

from jmxctl.api.host.FileManager import FileManager
from tests.conftest import current_user


def _mode(path):
    return stat.S_IMODE(path.stat().st_mode)


def test_ensure_directory_creates_with_mode(tmp_path):
    path = tmp_path / "etc" / "tomcat"
    assert FileManager().ensure_directory(path, current_user(), 0o700) is True
    assert path.is_dir()
    assert _mode(path) == 0o700
    assert FileManager().ensure_directory(path, current_user(), 0o700) is False


def test_ensure_directory_fixes_mode(tmp_path):
    path = tmp_path / "jmx"
    path.mkdir(mode=0o755)
    path.chmod(0o755)
    assert FileManager().ensure_directory(path, current_user(), 0o700) is True
    assert _mode(path) == 0o700


def test_ensure_file_writes_once(tmp_path):
    path = tmp_path / "management.properties"
    files = FileManager()
    assert files.ensure_file(path, "a=1\n", current_user(), 0o600) is True
    assert path.read_text() == "a=1\n"
    assert _mode(path) == 0o600
    assert files.ensure_file(path, "a=1\n", current_user(), 0o600) is False
    assert files.ensure_file(path, "a=2\n", current_user(), 0o600) is True
    assert path.read_text() == "a=2\n"


def test_ensure_file_fixes_mode_only(tmp_path):
    path = tmp_path / "jmxremote.password"
    path.write_text("u p\n")
    path.chmod(0o644)
    assert FileManager().ensure_file(path, "u p\n", current_user(), 0o600) is True
    assert _mode(path) == 0o600


def test_ensure_file_leaves_no_temp_files(tmp_path):
    FileManager().ensure_file(tmp_path / "f", "x", current_user(), 0o600)
    assert [p.name for p in tmp_path.iterdir()] == ["f"]


def test_unknown_owner(tmp_path):
    with pytest.raises(ValueError, match="Unknown user"):
        FileManager().ensure_file(tmp_path / "f", "x", "no-such-user-jmxctl", 0o600)


def test_remove_file(tmp_path):
    path = tmp_path / "jmx.ks"
    path.write_bytes(b"x")
    assert FileManager().remove(path) is True
    assert not path.exists()


def test_remove_empty_directory(tmp_path):
    target = tmp_path / "jmx"
    target.mkdir()
    assert FileManager().remove_directory(target) is True
    assert not target.exists()
    assert FileManager().remove_directory(target) is False


def test_remove_directory_keeps_unmanaged_entries(tmp_path):
    target = tmp_path / "tomcat"
    target.mkdir()
    (target / "server.xml").write_text("<Server/>")
    assert FileManager().remove_directory(target) is False
    assert (target / "server.xml").read_text() == "<Server/>"


def test_remove_missing_is_noop(tmp_path):
    assert FileManager().remove(tmp_path / "missing") is False
