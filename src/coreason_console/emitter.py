# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import asyncio
from datetime import datetime
from typing import Callable, Sequence

from coreason_console.formatter import format_timestamp
from coreason_console.interfaces import Stream

Clock = Callable[[], datetime]


class LineEmitter:
    """
    Writes rendered lines to a stream, each prefixed with the time it is written.

    Deferred writes are queued on the running asyncio loop in submission order;
    there is no ordering guarantee between different calls.
    """

    def __init__(self, clock: Clock = datetime.now):
        self.clock = clock

    def write(self, stream: Stream, line: str) -> None:
        stream.write(f"{format_timestamp(self.clock())} {line}\n")

    def emit(self, lines: Sequence[str], stream: Stream, synchronous: bool = False) -> None:
        if synchronous:
            for line in lines:
                self.write(stream, line)
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Nothing to defer to outside of an event loop.
            loop = None

        for line in lines:
            if loop is None:
                self.write(stream, line)
            else:
                loop.call_soon(self.write, stream, line)
