"""Unit tests for the shell hook executor."""

from __future__ import annotations

import subprocess
import sys
from types import SimpleNamespace
from typing import Any

import pytest

from beadview.hooks import HookError, HookExecutor, get_shell_command
from beadview.models import Bead


@pytest.fixture
def bead() -> Bead:
    return Bead(id="bv-7", title="Wire hooks", status="in_progress")


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell")
def test_get_shell_command_posix() -> None:
    assert get_shell_command() == ("sh", "-c")


def test_get_shell_command_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("beadview.hooks.executor.sys.platform", "win32")
    assert get_shell_command() == ("cmd", "/C")


def test_run_without_hook_returns_none(bead: Bead) -> None:
    executor = HookExecutor({"on_select": "  "})
    assert executor.has_hook("on_select") is False
    assert executor.run("on_select", bead) is None


def test_run_passes_shell_pair_and_bead_env(
    monkeypatch: pytest.MonkeyPatch, bead: Bead
) -> None:
    calls: list[dict[str, Any]] = []

    def fake_run(args: list[str], **kwargs: Any) -> SimpleNamespace:
        calls.append({"args": args, **kwargs})
        return SimpleNamespace(returncode=0, stdout="opened bv-7\n", stderr="")

    monkeypatch.setattr("beadview.hooks.executor.subprocess.run", fake_run)
    monkeypatch.setattr("beadview.hooks.executor.sys.platform", "linux")

    result = HookExecutor({"on_select": "bd show $BEADVIEW_BEAD_ID"}).run(
        "on_select", bead
    )

    assert result is not None and result.ok
    assert result.stdout == "opened bv-7\n"
    assert calls[0]["args"] == ["sh", "-c", "bd show $BEADVIEW_BEAD_ID"]
    env = calls[0]["env"]
    assert env["BEADVIEW_BEAD_ID"] == "bv-7"
    assert env["BEADVIEW_BEAD_TITLE"] == "Wire hooks"
    assert env["BEADVIEW_BEAD_STATUS"] == "in_progress"


def test_nonzero_exit_is_a_result_not_an_error(
    monkeypatch: pytest.MonkeyPatch, bead: Bead
) -> None:
    monkeypatch.setattr(
        "beadview.hooks.executor.subprocess.run",
        lambda *_a, **_k: SimpleNamespace(returncode=2, stdout="", stderr="boom"),
    )
    result = HookExecutor({"on_select": "false"}).run("on_select", bead)
    assert result is not None
    assert result.ok is False
    assert result.returncode == 2


def test_timeout_raises_hook_error(monkeypatch: pytest.MonkeyPatch, bead: Bead) -> None:
    def fake_run(*_args: Any, **_kwargs: Any) -> None:
        raise subprocess.TimeoutExpired(cmd="sleep 60", timeout=1)

    monkeypatch.setattr("beadview.hooks.executor.subprocess.run", fake_run)
    with pytest.raises(HookError, match="timed out"):
        HookExecutor({"on_select": "sleep 60"}, timeout=1).run("on_select", bead)


def test_spawn_failure_raises_hook_error(
    monkeypatch: pytest.MonkeyPatch, bead: Bead
) -> None:
    def fake_run(*_args: Any, **_kwargs: Any) -> None:
        raise FileNotFoundError("sh")

    monkeypatch.setattr("beadview.hooks.executor.subprocess.run", fake_run)
    with pytest.raises(HookError, match="could not start"):
        HookExecutor({"on_select": "echo hi"}).run("on_select", bead)
