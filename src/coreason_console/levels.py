# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from enum import IntEnum
from typing import Dict, Iterable, List, Union


class InvalidLevelError(ValueError):
    """
    Raised when a level name that does not exist is used for configuration.
    """


class Level(IntEnum):
    """
    Severity levels, ordered so that minimum-level gates can compare them.
    """

    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARN = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def tag(self) -> str:
        """The bracketed, fixed-width tag rendered in front of every first line."""
        return _TAGS[self]

    @classmethod
    def parse(cls, value: Union["Level", int, str]) -> "Level":
        """
        Resolves a level from a Level, its numeric value, or a level/alias name.

        Raises:
            InvalidLevelError: If the value does not name a level.
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name in LEVEL_NAMES:
                return LEVEL_NAMES[name]
            raise InvalidLevelError(f"Invalid logger level: {value!r}")
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidLevelError(f"Invalid logger level: {value!r}") from e
        raise InvalidLevelError(f"Invalid logger level: {value!r}")

    @classmethod
    def parse_many(cls, values: Union["Level", int, str, Iterable[Union["Level", int, str]]]) -> List["Level"]:
        """Resolves a single level or an iterable of levels."""
        if isinstance(values, (Level, int, str)):
            return [cls.parse(values)]
        return [cls.parse(v) for v in values]


_TAGS: Dict[Level, str] = {
    Level.DEBUG: "[DEBUG ]",
    Level.INFO: "[INFO  ]",
    Level.NOTICE: "[NOTICE]",
    Level.WARN: "[WARN  ]",
    Level.ERROR: "[ERROR ]",
    Level.CRITICAL: "[CRITIC]",
}

# Method names (including aliases) that map to a level.
LEVEL_NAMES: Dict[str, Level] = {
    "debug": Level.DEBUG,
    "verbose": Level.DEBUG,
    "info": Level.INFO,
    "notice": Level.NOTICE,
    "warn": Level.WARN,
    "error": Level.ERROR,
    "err": Level.ERROR,
    "critical": Level.CRITICAL,
    "crit": Level.CRITICAL,
}
