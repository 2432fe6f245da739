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
from typing import Dict, Mapping, Optional, Set

from rich.color import ColorSystem
from rich.style import Style

from coreason_console.dedup import DeduplicationFilter
from coreason_console.emitter import Clock, LineEmitter
from coreason_console.interfaces import Colorizer, Stream
from coreason_console.levels import Level
from coreason_console.normalizer import SubjectNormalizer

LEVEL_STYLES: Dict[Level, str] = {
    Level.DEBUG: "bright_black",
    Level.INFO: "cyan",
    Level.NOTICE: "green",
    Level.WARN: "yellow",
    Level.ERROR: "red",
    Level.CRITICAL: "bold red",
}


def style_colorizer(definition: str) -> Colorizer:
    """Builds a colorizer that wraps text in the ANSI codes of a rich style definition."""
    style = Style.parse(definition)

    def colorize(text: str) -> str:
        return style.render(text, color_system=ColorSystem.STANDARD)

    return colorize


def plain(text: str) -> str:
    return text


def default_colorizers() -> Dict[Level, Colorizer]:
    return {level: style_colorizer(definition) for level, definition in LEVEL_STYLES.items()}


class FormatterContext:
    """
    State shared by every logger of one application.

    Holds the alignment width, the deduplication state, the master switch and
    the collaborators used to normalize, colour and write messages. Tests create
    a fresh context to isolate themselves.
    """

    def __init__(
        self,
        stream: Optional[Stream] = None,
        colorize: bool = True,
        colorizers: Optional[Mapping[Level, Colorizer]] = None,
        clock: Clock = datetime.now,
        normalizer: Optional[SubjectNormalizer] = None,
    ):
        self.max_prefix_width = 0
        self.enabled = True
        self.disabled_levels: Set[Level] = set()
        self.stream = stream
        self.colorize = colorize
        self.colorizers: Dict[Level, Colorizer] = dict(colorizers) if colorizers else default_colorizers()
        self.dedup = DeduplicationFilter()
        self.emitter = LineEmitter(clock)
        self.normalizer = normalizer or SubjectNormalizer()

    def register_prefix(self, prefix: Optional[str]) -> None:
        """Widens the prefix column if `prefix` is the longest name seen so far."""
        if prefix:
            self.max_prefix_width = max(self.max_prefix_width, len(prefix))

    def colorizer_for(self, level: Level) -> Colorizer:
        if not self.colorize:
            return plain
        return self.colorizers.get(level, plain)
