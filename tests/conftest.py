# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from datetime import datetime
from typing import List

import pytest
from rich.text import Text

from coreason_console.config import ConsoleSettings
from coreason_console.context import FormatterContext
from coreason_console.factory import LogFactory

FIXED_TIME = datetime(2016, 12, 14, 16, 48, 7, 123000)
TS = "2016-12-14 16:48:07.123"

# --- Mocks ---


class CaptureStream:
    """
    Collects everything written to it.
    `writes` keeps the raw chunks, `lines` the colour-stripped output lines.
    """

    def __init__(self) -> None:
        self.writes: List[str] = []
        self.lines: List[str] = []

    def write(self, data: str) -> int:
        self.writes.append(data)
        plain = Text.from_ansi(data).plain.rstrip("\n")
        self.lines.extend(plain.split("\n"))
        return len(data)


# --- Fixtures ---


@pytest.fixture
def stream() -> CaptureStream:
    return CaptureStream()


@pytest.fixture
def context() -> FormatterContext:
    return FormatterContext(clock=lambda: FIXED_TIME)


@pytest.fixture
def factory(context: FormatterContext) -> LogFactory:
    """A factory with its own context, writing synchronously."""
    return LogFactory(ConsoleSettings(synchronous=True), context=context)


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture
def ts() -> str:
    """The rendered form of fixed_time."""
    return TS
