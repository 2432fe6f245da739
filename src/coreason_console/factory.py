# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import weakref
from typing import Iterable, List, Optional, Union

from coreason_console.config import ConsoleSettings
from coreason_console.context import FormatterContext
from coreason_console.interfaces import Stream
from coreason_console.levels import Level
from coreason_console.logger import Logger
from coreason_console.source import capture_frames, infer_module_name
from coreason_console.utils.logger import logger

LevelLike = Union[Level, int, str]

# Frames between the capture in module() and the caller: module itself.
MODULE_CALLER_DEPTH = 1


class LogFactory:
    """
    Creates loggers sharing one FormatterContext and broadcasts global settings to them.

    Only weak references to the created loggers are kept.
    """

    def __init__(self, settings: Optional[ConsoleSettings] = None, context: Optional[FormatterContext] = None):
        self.settings = settings or ConsoleSettings()
        self.context = context or FormatterContext(colorize=self.settings.colorize)
        self.context.enabled = self.settings.enabled
        self.is_silent = False
        self.min_level = self.settings.min_level
        self._loggers: "weakref.WeakSet[Logger]" = weakref.WeakSet()

    @property
    def loggers(self) -> List[Logger]:
        return list(self._loggers)

    @property
    def enabled(self) -> bool:
        """The master switch for every logger of this factory."""
        return self.context.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.context.enabled = value

    def module(self, name: Optional[str] = None, stream: Optional[Stream] = None) -> Logger:
        """
        Constructs a logger for the invoking module.

        Args:
            name: The prefix to use. When omitted, the file name of the caller
                without its extension is used. An empty string means no prefix.
            stream: The stream to write to.
        """
        if name is None:
            name = infer_module_name(capture_frames(), MODULE_CALLER_DEPTH)
            if name is None:
                logger.debug("Could not infer a module name for a new logger")
        return self.instance(name, stream)

    def instance(self, prefix: Optional[str] = None, stream: Optional[Stream] = None) -> Logger:
        """Constructs a logger with the given prefix."""
        log = Logger(prefix, stream, self.context)
        log.enabled = not self.is_silent
        log.min_level = self.min_level
        log.synchronous = self.settings.synchronous
        log.trace_source = self.settings.trace_source
        self._loggers.add(log)
        return log

    def silence(self, be_silent: bool = True) -> None:
        """Silences (or unsilences) all existing and future loggers."""
        self.is_silent = be_silent
        for log in self._loggers:
            log.enabled = not be_silent

    def require(self, level: LevelLike = Level.DEBUG) -> None:
        """Sets the minimum level of all existing and future loggers."""
        self.min_level = Level.parse(level)
        for log in self._loggers:
            log.min_level = self.min_level

    def disable(self, levels: Union[LevelLike, Iterable[LevelLike]]) -> None:
        """
        Turns the given level methods into no-ops for every logger.

        Raises:
            InvalidLevelError: If a name does not refer to a level.
        """
        resolved = Level.parse_many(levels)
        self.context.disabled_levels.update(resolved)
        logger.info(f"Disabled levels: {', '.join(level.name for level in resolved)}")

    def enable(self, levels: Union[LevelLike, Iterable[LevelLike]]) -> None:
        """Re-enables levels turned off by disable()."""
        resolved = Level.parse_many(levels)
        self.context.disabled_levels.difference_update(resolved)

    def to(self, stream: Optional[Stream]) -> None:
        """Sets the default stream of loggers that don't have their own."""
        self.context.stream = stream
