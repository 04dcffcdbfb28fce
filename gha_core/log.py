"""Route stdlib logging through workflow commands.

This module provides:
    - WorkflowCommandHandler: renders records as ``::debug::``, ``::warning::``
      and ``::error::`` lines (INFO stays a plain line) on stdout.
    - setup_logger: attaches the handler to the base ``gha_core`` logger once.
    - get_logger: namespaced logger factory (``gha_core.*``).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from gha_core.command import Annotation, issue_command
from gha_core.config import is_debug

BASE_LOGGER = "gha_core"


class WorkflowCommandHandler(logging.Handler):
    """Emit each record as a single workflow command line."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__()
        self._stream = stream
        self.setFormatter(logging.Formatter("%(message)s"))

    @property
    def stream(self) -> TextIO:
        # Resolved per record so pytest's capsys swap is honoured.
        return self._stream or sys.stdout

    def command_for(self, record: logging.LogRecord) -> Optional[Annotation]:
        if record.levelno >= logging.ERROR:
            return Annotation.ERROR
        if record.levelno >= logging.WARNING:
            return Annotation.WARNING
        if record.levelno >= logging.INFO:
            return None
        return Annotation.DEBUG

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            command = self.command_for(record)
            line = message if command is None else issue_command(command.value, message)
            self.stream.write(line + "\n")
            self.stream.flush()
        except Exception:
            self.handleError(record)


def setup_logger(level: Optional[int] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the base ``gha_core`` logger once and return it.

    The level defaults to DEBUG when the runner has step debugging enabled
    and INFO otherwise.
    """
    if level is None:
        level = logging.DEBUG if is_debug() else logging.INFO

    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if any(isinstance(h, WorkflowCommandHandler) for h in base.handlers):
        return base

    base.propagate = False
    base.addHandler(WorkflowCommandHandler(stream))
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger under ``gha_core``."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
