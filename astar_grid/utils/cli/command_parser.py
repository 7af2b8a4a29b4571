"""Simple command parsing utilities for the interactive CLI."""

from __future__ import annotations

import logging
import queue  # For thread-safe command passing
import sys
import threading
from dataclasses import dataclass
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Core CLI machinery
# ---------------------------------------------------------------------------

@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


_cli_command_queue: queue.Queue[CLICommand] = queue.Queue()
_cli_thread_stop_event = threading.Event()


def _cli_input_thread_func(stream: TextIO) -> None:
    """Thread function to read CLI input."""
    while not _cli_thread_stop_event.is_set():
        # readline() blocks, which is fine in a dedicated thread.
        line = stream.readline()
        if not line:  # EOF
            if not _cli_thread_stop_event.is_set():
                logger.info("CLI input stream closed.")
                _cli_command_queue.put(CLICommand(name="quit", args=[]))
            break

        parsed = parse_command(line)
        if parsed:
            _cli_command_queue.put(parsed)
        elif line.strip():
            logger.warning("Commands start with '/'. Type /help for a list.")

    logger.debug("CLI input thread stopped.")


def start_cli_thread(stream: TextIO | None = None) -> threading.Thread:
    """Starts the CLI input thread reading from ``stream`` (``stdin`` by default)."""
    if _cli_thread_stop_event.is_set():  # If previously stopped, reset
        _cli_thread_stop_event.clear()

    thread = threading.Thread(
        target=_cli_input_thread_func,
        args=(stream or sys.stdin,),
        daemon=True,
        name="CLIInputThread",
    )
    thread.start()
    return thread


def stop_cli_thread() -> None:
    """Signals the CLI input thread to stop."""
    # A blocked readline is not interrupted; the daemon thread exits with the app.
    _cli_thread_stop_event.set()


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None

    return CLICommand(name=parts[0].lower(), args=parts[1:])


def poll_command() -> Optional[CLICommand]:
    """Return a command from the internal queue if available, else ``None``."""
    try:
        return _cli_command_queue.get_nowait()
    except queue.Empty:
        return None


__all__ = ["CLICommand", "parse_command", "poll_command", "start_cli_thread", "stop_cli_thread"]
