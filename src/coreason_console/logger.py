# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import sys
from functools import partial
from typing import Any, Optional

from coreason_console.context import FormatterContext
from coreason_console.formatter import render_lines
from coreason_console.interfaces import Stream
from coreason_console.levels import Level
from coreason_console.normalizer import MISSING, Untraceable
from coreason_console.source import capture_frames, locate_call_site

# Frames between the capture in _dispatch and the user's call: _dispatch, _log, level method.
CALL_SITE_DEPTH = 3


class Logger:
    """
    A named handle that writes leveled messages to a stream.

    Mechanism:
    1. Gates on the master switch, the logger's own switch and the level gates.
    2. Normalizes the subject into text.
    3. Lets the shared deduplication filter suppress repeats.
    4. Renders aligned, coloured lines and writes them.
    5. Optionally follows up with the call site of the logging call.
    """

    def __init__(
        self,
        prefix: Optional[str] = None,
        stream: Optional[Stream] = None,
        context: Optional[FormatterContext] = None,
    ):
        self._prefix = prefix
        self._context = context or FormatterContext()
        self._context.register_prefix(prefix)
        self.stream = stream
        self.trace_source = False
        self.synchronous = False
        self.enabled = True
        self.min_level = Level.DEBUG

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix

    @property
    def context(self) -> FormatterContext:
        return self._context

    def __repr__(self) -> str:
        return f"Logger(prefix={self._prefix!r})"

    # --- Level methods ---

    def debug(self, subject: Any = MISSING, *args: Any) -> None:
        """Logs a debug message."""
        self._log(Level.DEBUG, subject, *args)

    def info(self, subject: Any = MISSING, *args: Any) -> None:
        """Logs an informational message."""
        self._log(Level.INFO, subject, *args)

    def notice(self, subject: Any = MISSING, *args: Any) -> None:
        """Logs a notice."""
        self._log(Level.NOTICE, subject, *args)

    def warn(self, subject: Any = MISSING, *args: Any) -> None:
        """Logs a warning."""
        self._log(Level.WARN, subject, *args)

    def error(self, subject: Any = MISSING, *args: Any) -> None:
        """Logs an error."""
        self._log(Level.ERROR, subject, *args)

    def critical(self, subject: Any = MISSING, *args: Any) -> None:
        """Logs a critical event."""
        self._log(Level.CRITICAL, subject, *args)

    # Aliases
    verbose = debug
    err = error
    crit = critical

    # --- Fluent configuration ---

    def with_source(self, enable: bool = True) -> "Logger":
        """Appends the call site of every logging call as a follow-up line."""
        self.trace_source = enable
        return self

    def to(self, stream: Optional[Stream]) -> "Logger":
        """Sends output to `stream` (None restores the default)."""
        self.stream = stream
        return self

    def sync(self, enable: bool = True) -> "Logger":
        """Writes immediately instead of deferring to the running event loop."""
        self.synchronous = enable
        return self

    # --- Pipeline ---

    def is_enabled_for(self, level: Level) -> bool:
        context = self._context
        return (
            context.enabled
            and self.enabled
            and level >= self.min_level
            and level not in context.disabled_levels
        )

    def _resolve_stream(self) -> Stream:
        if self.stream is not None:
            return self.stream
        if self._context.stream is not None:
            return self._context.stream
        return sys.stdout

    def _log(self, level: Level, subject: Any = MISSING, *args: Any) -> None:
        if not self.is_enabled_for(level):
            return
        # Exceptions render as Untraceable but their call site is still traced.
        traceable = not isinstance(subject, Untraceable)
        self._dispatch(level, self._context.normalizer.normalize(subject, *args), traceable)

    def _dispatch(self, level: Level, subject: Any, traceable: bool) -> None:
        untraceable = isinstance(subject, Untraceable)
        text = str(subject)
        context = self._context

        if not context.dedup.admit(level, self, text, untraceable, partial(self._log, level)):
            return

        location = None
        if self.trace_source and traceable:
            location = locate_call_site(capture_frames(), CALL_SITE_DEPTH)

        self._write(level, text)
        if location:
            self._write(level, "  " + location)

    def _write(self, level: Level, text: str) -> None:
        context = self._context
        lines = render_lines(level.tag, self._prefix, text, context.max_prefix_width, context.colorizer_for(level))
        context.emitter.emit(lines, self._resolve_stream(), self.synchronous)
