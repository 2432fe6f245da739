# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict

from coreason_console.levels import Level
from coreason_console.normalizer import Untraceable

Flush = Callable[[Untraceable], None]


def repeat_summary(count: int) -> str:
    return f"Last message repeated {count} {'time' if count == 1 else 'times'}."


class PendingMessage(BaseModel):
    """
    The last admitted message, and how to report repeats of it.

    `flush` logs through the logger and level that produced the message.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    level: Level
    logger: Any
    text: str
    flush: Flush

    def matches(self, level: Level, logger: Any, text: str) -> bool:
        return self.logger is logger and self.level == level and self.text == text


class DeduplicationFilter:
    """
    Collapses identical consecutive messages into one "Last message repeated" line.
    """

    def __init__(self) -> None:
        self.last: Optional[PendingMessage] = None
        self.repeated = 0

    def admit(self, level: Level, logger: Any, text: str, untraceable: bool, flush: Flush) -> bool:
        """
        Decides whether a message is written.

        A repeat of the last message is counted and suppressed. Any other message
        first flushes the summary of a suppressed streak, then becomes the new last
        message. Untraceable content is never compared and leaves nothing to
        compare against.
        """
        if not untraceable and self.last is not None and self.last.matches(level, logger, text):
            self.repeated += 1
            return False

        if self.last is not None and self.repeated > 0:
            pending, count = self.last, self.repeated
            self.last = None
            self.repeated = 0
            pending.flush(Untraceable(repeat_summary(count)))

        if untraceable:
            self.last = None
        else:
            self.last = PendingMessage(level=level, logger=logger, text=text, flush=flush)
        return True
