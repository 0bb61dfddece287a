"""Shared test fixtures for cmdclip."""

import os
import subprocess
import sys

import pytest

from cmdclip.clipboard import ClipboardBackend, ClipboardError


@pytest.fixture
def cb_home(tmp_path, monkeypatch):
    """Provide an isolated ~/.cb/ directory for testing.

    Sets CB_HOME env var so config lookups use tmp_path.
    Does NOT create the directory.
    """
    home = tmp_path / ".cb"
    monkeypatch.setenv("CB_HOME", str(home))
    return home


@pytest.fixture
def config_file(cb_home):
    """Write arbitrary TOML content to the test config file.

    Returns a helper function. Call it with a TOML string.
    """
    def _write(content: str):
        cb_home.mkdir(parents=True, exist_ok=True)
        config_path = cb_home / "config.toml"
        config_path.write_text(content, encoding="utf-8")
        return config_path
    return _write


class FakeBackend(ClipboardBackend):
    """In-memory clipboard that records every call."""

    name = "fake"

    def __init__(self, fail_copy=False, fail_clear=False):
        self.content = None
        self.calls = []
        self.fail_copy = fail_copy
        self.fail_clear = fail_clear

    def copy(self, data: bytes) -> None:
        self.calls.append(("copy", data))
        if self.fail_copy:
            raise ClipboardError("fake copy failed")
        self.content = data

    def clear(self) -> None:
        self.calls.append(("clear", b""))
        if self.fail_clear:
            raise ClipboardError("fake clear failed")
        self.content = b""


@pytest.fixture
def fake_clipboard():
    """Provide a fresh in-memory clipboard backend."""
    return FakeBackend()


@pytest.fixture
def make_clipboard():
    """Factory for fake backends that fail on copy or clear."""
    return FakeBackend


@pytest.fixture
def run_cb(tmp_path):
    """Run cb as a subprocess with isolated CB_HOME.

    Returns a callable: run_cb(args, input_data=None)
    The callable has a .home attribute pointing to the cb data dir.
    """
    cb_home = tmp_path / ".cb"

    def _run(args, input_data=None):
        env = os.environ.copy()
        env["CB_HOME"] = str(cb_home)
        cmd = [sys.executable, "-m", "cmdclip"] + args
        return subprocess.run(
            cmd,
            input=input_data,
            capture_output=True,
            text=True,
            env=env,
            timeout=30,
        )

    _run.home = cb_home
    return _run
