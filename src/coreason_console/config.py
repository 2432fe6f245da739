# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import os
from typing import Optional

from pydantic import BaseModel, field_validator

from coreason_console.levels import Level

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: bool = False) -> bool:
    value: Optional[str] = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


class ConsoleSettings(BaseModel):
    """
    Defaults applied by a LogFactory to its context and to every logger it creates.
    """

    enabled: bool = True
    min_level: Level = Level.DEBUG
    colorize: bool = True
    synchronous: bool = False
    trace_source: bool = False

    @field_validator("min_level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> Level:
        return Level.parse(value)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls) -> "ConsoleSettings":
        """
        Reads the settings from the environment.

        Raises:
            InvalidLevelError: If COREASON_CONSOLE_LEVEL does not name a level.
        """
        return cls(
            enabled=not _flag("COREASON_CONSOLE_SILENT"),
            min_level=Level.parse(os.getenv("COREASON_CONSOLE_LEVEL", "debug")),
            colorize=os.getenv("NO_COLOR") is None,
            synchronous=_flag("COREASON_CONSOLE_SYNC"),
            trace_source=_flag("COREASON_CONSOLE_TRACE"),
        )
