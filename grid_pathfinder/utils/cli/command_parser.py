"""Command parsing and background stdin reader for the development CLI."""

from __future__ import annotations

import logging
import queue  # Thread-safe hand-off to the main loop
import sys
import threading
from dataclasses import dataclass
from typing import List, Optional


logger = logging.getLogger(__name__)


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


_command_queue: queue.Queue[CLICommand] = queue.Queue()
_stop_event = threading.Event()


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None
    return CLICommand(name=parts[0].lower(), args=parts[1:])


def _reader_loop() -> None:
    """Read lines from stdin until stopped or the stream closes."""
    logger.info("CLI ready. Type /help for commands.")
    while not _stop_event.is_set():
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError) as e:
            logger.error("CLI input error: %s", e)
            break
        if not line:  # EOF
            break
        parsed = parse_command(line)
        if parsed:
            _command_queue.put(parsed)
        elif line.strip():
            logger.info("Commands start with '/'. Try /help.")
    logger.debug("CLI reader stopped.")


def start_cli_thread() -> threading.Thread:
    """Start the daemon thread that feeds :func:`poll_command`."""
    _stop_event.clear()
    thread = threading.Thread(target=_reader_loop, daemon=True, name="CLIInputThread")
    thread.start()
    return thread


def stop_cli_thread() -> None:
    """Ask the reader thread to exit after its current line."""
    _stop_event.set()


def poll_command() -> Optional[CLICommand]:
    """Return the next queued command, or ``None`` if there is none."""
    try:
        return _command_queue.get_nowait()
    except queue.Empty:
        return None


__all__ = ["CLICommand", "parse_command", "poll_command", "start_cli_thread", "stop_cli_thread"]
