"""Shared test fixtures for baseline auditor tests."""

from __future__ import annotations

import os
import stat
from typing import Callable

import pytest


requires_posix = pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits only")

requires_non_root = pytest.mark.skipif(
    os.name != "posix" or os.geteuid() == 0,
    reason="root ignores directory permissions",
)


@pytest.fixture(autouse=True)
def standard_umask():
    """Fresh files and directories must not start out world-writable."""
    old = os.umask(0o022)
    try:
        yield
    finally:
        os.umask(old)


def make_world_writable(path) -> None:
    mode = os.lstat(path).st_mode
    os.chmod(path, stat.S_IMODE(mode) | stat.S_IWOTH)


@pytest.fixture
def example_tree(tmp_path):
    """
    t/a        regular file, others-write
    t/b        directory, 755
    t/b/c      regular file, others-write
    t/link ->  t/b
    """
    root = tmp_path / "t"
    root.mkdir()

    a = root / "a"
    a.write_text("a")
    os.chmod(a, 0o666)

    b = root / "b"
    b.mkdir()
    os.chmod(b, 0o755)

    c = b / "c"
    c.write_text("c")
    os.chmod(c, 0o666)

    os.symlink(str(b), str(root / "link"))
    return root


@pytest.fixture
def write_file(tmp_path) -> Callable[[str, str], str]:
    """Write text to a file under tmp_path and return its path."""
    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return str(path)
    return _write
