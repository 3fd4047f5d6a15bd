# tests/test_console.py

from __future__ import annotations

import asyncio
import contextlib
import os
import signal
import subprocess
import sys
from collections.abc import AsyncIterator, Iterable
from pathlib import Path

import pytest

from focus_matrix.connectors.console_connector import drain_summaries, run_console_loop
from focus_matrix.llm.errors import NoContent
from focus_matrix.llm.prompt import build_summary_request
from focus_matrix.matrix.categorizer import categorize
from focus_matrix.matrix.schemes import EISENHOWER

from .fakes import FakeSummaryService


@pytest.mark.asyncio
async def test_drain_prints_summary_and_errors(state, capsys) -> None:
    drainer = asyncio.create_task(drain_summaries(state))
    request = build_summary_request(categorize([]), EISENHOWER, model="m")

    try:
        await state.desk.start(FakeSummaryService("Great week."), request)
        for _ in range(10):
            await asyncio.sleep(0)
        assert state.desk.slot.text == "Great week."

        await state.desk.start(FakeSummaryService(next_error=NoContent()), request)
        for _ in range(10):
            await asyncio.sleep(0)
        assert state.desk.slot.is_error is True
    finally:
        drainer.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await drainer

    out = capsys.readouterr().out
    assert "[AI] Strategic summary:" in out
    assert "Great week." in out
    assert "[AI] Error:" in out


async def _feed(items: Iterable[str]) -> AsyncIterator[str]:
    for item in items:
        yield item


@pytest.mark.asyncio
async def test_console_loop_runs_commands_until_exit(state, capsys) -> None:
    lines = _feed(["/add Ship 9 9", "", "hello", "/matrix", "/exit", "/add Never 1 1"])

    await run_console_loop(state, lines)

    out = capsys.readouterr().out
    assert "Plotted 'Ship' in Do." in out
    assert "Commands start with '/'" in out
    assert "[Do] Important, Urgent - 1" in out
    assert [t.name for t in state.task_store] == ["Ship"]


@pytest.mark.asyncio
async def test_console_loop_stops_on_eof(state) -> None:
    await run_console_loop(state, _feed([]))

    assert state.desk.inflight is None


@pytest.mark.asyncio
async def test_console_loop_cancels_inflight_summary_on_exit(state, summary_service: FakeSummaryService) -> None:
    summary_service.gate = asyncio.Event()

    await run_console_loop(state, _feed(["/add A 8 8", "/summary"]))

    assert state.desk.inflight is None
    assert state.desk.slot.is_loading is False


@pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")
def test_ctrl_c_at_prompt_exits_process(tmp_path: Path) -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(src), env.get("PYTHONPATH", "")) if p)
    env["PYTHONUNBUFFERED"] = "1"
    env["FOCUS_DATA_DIR"] = str(tmp_path)
    env["FOCUS_CREDENTIALS_PATH"] = str(tmp_path / "missing.plist")
    env["FOCUS_SEED_DEMO_TASKS"] = "false"

    proc = subprocess.Popen(
        [sys.executable, "-m", "focus_matrix.cli.main"],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        cwd=tmp_path,
        env=env,
        text=True,
    )
    try:
        assert proc.stdout is not None
        for line in proc.stdout:
            if "[CONSOLE]" in line:
                break
        else:
            pytest.fail("console banner never printed")

        # stdin stays open, so the loop is parked waiting for a line.
        proc.send_signal(signal.SIGINT)

        assert proc.wait(timeout=10) == 0
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
