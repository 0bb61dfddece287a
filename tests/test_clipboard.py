"""Tests for clipboard backend detection and invocation."""

import subprocess

import pytest

from cmdclip import clipboard
from cmdclip.clipboard import (
    ClipboardError, WaylandBackend, XclipBackend, XselBackend,
    detect_backend, get_backend,
)


@pytest.fixture
def installed(monkeypatch):
    """Pretend only the named helper programs are on PATH."""
    tools = set()

    def fake_which(name):
        return f"/usr/bin/{name}" if name in tools else None

    monkeypatch.setattr(clipboard.shutil, "which", fake_which)
    return tools


class _Calls(list):
    pass


@pytest.fixture
def run_log(monkeypatch):
    """Record (argv, input) for each helper run; set returncode/stderr to fail it."""
    log = _Calls()
    log.returncode = 0
    log.stderr = b""

    def fake_run(cmd, **kwargs):
        log.append((cmd, kwargs.get("input")))
        return subprocess.CompletedProcess(cmd, log.returncode, None, log.stderr)

    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    return log


# ── detection ─────────────────────────────────────────────────────────


def test_wayland_preferred(installed):
    installed.update({"wl-copy", "xclip", "xsel"})
    assert isinstance(detect_backend(), WaylandBackend)


def test_xclip_before_xsel(installed):
    installed.update({"xclip", "xsel"})
    assert isinstance(detect_backend(), XclipBackend)


def test_xsel_fallback(installed):
    installed.add("xsel")
    assert isinstance(detect_backend(), XselBackend)


def test_no_tool_found(installed):
    with pytest.raises(ClipboardError) as exc:
        detect_backend()
    assert "wl-copy, xclip, xsel" in str(exc.value)


def test_get_backend_by_name(installed):
    installed.update({"wl-copy", "xsel"})
    assert isinstance(get_backend("xsel"), XselBackend)
    assert isinstance(get_backend(None), WaylandBackend)


def test_get_backend_unavailable(installed):
    with pytest.raises(ClipboardError, match="not available"):
        get_backend("xclip")


def test_get_backend_unknown(installed):
    with pytest.raises(ClipboardError, match="Unknown backend"):
        get_backend("pbcopy")


# ── copy / clear ──────────────────────────────────────────────────────


@pytest.mark.parametrize("backend_cls, argv", [
    (WaylandBackend, ["wl-copy"]),
    (XclipBackend, ["xclip", "-selection", "clipboard"]),
    (XselBackend, ["xsel", "--clipboard", "--input"]),
])
def test_copy_pipes_data(run_log, backend_cls, argv):
    backend_cls().copy(b"hello\n")
    assert run_log == [(argv, b"hello\n")]


def test_clear_sends_empty_input(run_log):
    XclipBackend().clear()
    assert run_log == [(["xclip", "-selection", "clipboard"], b"")]


def test_copy_failure_carries_stderr(run_log):
    run_log.returncode = 1
    run_log.stderr = b"Error: Can't open display\n"
    with pytest.raises(ClipboardError, match="Can't open display"):
        XclipBackend().copy(b"x")


def test_copy_missing_tool(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    with pytest.raises(ClipboardError, match="wl-copy not found"):
        WaylandBackend().copy(b"x")


def test_copy_timeout(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    with pytest.raises(ClipboardError, match="timed out"):
        XselBackend().copy(b"x")
