# src/focus_matrix/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import sys
import threading
from collections.abc import AsyncIterator
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.views import render_summary_slot
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


async def stdin_lines() -> AsyncIterator[str]:
    """
    Yield stdin lines without parking a worker thread in input().

    Uses loop.add_reader where the loop supports it. Otherwise a daemon thread
    feeds the queue, so a pending read never blocks interpreter exit.
    Ends at EOF.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[str | None] = asyncio.Queue()
    fd = sys.stdin.fileno()
    buf = b""

    def _on_readable() -> None:
        nonlocal buf
        try:
            chunk = os.read(fd, 4096)
        except OSError:
            chunk = b""
        if not chunk:
            loop.remove_reader(fd)
            if buf:
                queue.put_nowait(buf.decode("utf-8", errors="replace"))
                buf = b""
            queue.put_nowait(None)
            return
        buf += chunk
        *complete, buf = buf.split(b"\n")
        for raw in complete:
            queue.put_nowait(raw.decode("utf-8", errors="replace").rstrip("\r"))

    def _read_blocking() -> None:
        def post(item: str | None) -> None:
            with contextlib.suppress(RuntimeError):  # loop already closed
                loop.call_soon_threadsafe(queue.put_nowait, item)

        try:
            for line in sys.stdin:
                post(line.rstrip("\r\n"))
        except (OSError, ValueError):
            logger.debug("stdin reader stopped.", exc_info=True)
        post(None)

    use_reader = True
    try:
        loop.add_reader(fd, _on_readable)
    except NotImplementedError:
        use_reader = False
        threading.Thread(target=_read_blocking, name="stdin-reader", daemon=True).start()

    try:
        while True:
            line = await queue.get()
            if line is None:
                return
            yield line
    finally:
        if use_reader:
            loop.remove_reader(fd)


async def drain_summaries(state: AppState) -> None:
    """
    Owner side of the summary desk: apply outcomes as they land and print them.
    Runs on the same loop as the command handlers, so the slot has one writer.
    """
    desk = state.desk
    while True:
        outcome = await desk.next_outcome()
        if not desk.apply(outcome):
            continue
        title = "[AI] Strategic summary:" if not desk.slot.is_error else "[AI] Error:"
        _print_ts(f"{title}\n{render_summary_slot(desk.slot)}\n")


async def run_console_loop(state: AppState, lines: AsyncIterator[str] | None = None) -> None:
    """
    Read commands until /exit or EOF. Ctrl+C cancels the awaiting read, and
    the finally block still cancels any in-flight summary.
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Plot tasks with /add, view them with /matrix. Use /help for commands, /exit to quit.\n")

    def emit(text: str) -> None:
        _print_ts(text)

    if lines is None:
        lines = stdin_lines()

    drainer = asyncio.create_task(drain_summaries(state), name="summary-drain")

    try:
        while True:
            print(">>> ", end="", flush=True)
            try:
                user_input = (await anext(lines)).strip()
            except StopAsyncIteration:
                logger.info("Console EOF received, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not user_input.startswith("/"):
                _print_ts("Commands start with '/'. Use /help to list them.")
                continue

            try:
                response = command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                response = "Internal error while handling a command."

            if response is not None:
                _print_ts(response)
    finally:
        aclose = getattr(lines, "aclose", None)
        if aclose is not None:
            with contextlib.suppress(Exception):
                await aclose()
        await state.desk.cancel()
        drainer.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await drainer

    logger.info("Console connector finished.")
