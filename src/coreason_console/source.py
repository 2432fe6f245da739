# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import itertools
import re
import sys
import traceback
from pathlib import Path
from types import FrameType
from typing import List, Optional

from coreason_console.schemas import Frame

_getframe = getattr(sys, "_getframe", None)

# Group names: file, line, function. Matches the frame lines of traceback.format_stack().
_FRAME_PATTERN = re.compile(r'^\s*File "(?P<file>.+?)", line (?P<line>\d+), in (?P<function>\S+)\s*$')

UNNAMED = "(unnamed)"


def _column(frame: FrameType) -> int:
    """1-based column of the instruction a frame is executing, 0 when unknown."""
    code = frame.f_code
    if frame.f_lasti < 0 or not hasattr(code, "co_positions"):
        return 0
    position = next(itertools.islice(code.co_positions(), frame.f_lasti // 2, None), None)
    if position is None or position[2] is None:
        return 0
    return position[2] + 1


def capture_frames() -> List[Frame]:
    """
    Captures the current call stack, innermost first, starting at the caller.

    Uses frame introspection where the interpreter offers it, and parses the
    textual stack otherwise.
    """
    if _getframe is None:
        # The last formatted entry is this function itself.
        return parse_frames("".join(traceback.format_stack()))[1:]

    frames: List[Frame] = []
    frame: Optional[FrameType] = _getframe(1)
    while frame is not None:
        frames.append(
            Frame(
                function=frame.f_code.co_name,
                file=frame.f_code.co_filename,
                line=frame.f_lineno or 0,
                column=_column(frame),
            )
        )
        frame = frame.f_back
    return frames


def parse_frames(text: str) -> List[Frame]:
    """
    Parses a `traceback.format_stack()` style text into frames, innermost first.

    Lines that are not frame headers are ignored; a text without any yields [].
    """
    frames: List[Frame] = []
    for raw in text.splitlines():
        match = _FRAME_PATTERN.match(raw)
        if not match:
            continue
        frames.append(Frame(function=match["function"], file=match["file"], line=int(match["line"])))
    frames.reverse()
    return frames


def _display_name(function: Optional[str]) -> str:
    # <module>, <lambda>, <listcomp> and friends have no name of their own.
    if not function or function.startswith("<"):
        return UNNAMED
    return function


def locate_call_site(frames: List[Frame], depth: int) -> Optional[str]:
    """
    Renders the frame at `depth` as `function@file:line:column`.

    Returns None when the stack is shallower than expected.
    """
    if depth < 0 or depth >= len(frames):
        return None
    frame = frames[depth]
    return f"{_display_name(frame.function)}@{frame.file}:{frame.line}:{frame.column}"


def infer_module_name(frames: List[Frame], depth: int) -> Optional[str]:
    """
    Derives a module name from the file of the frame at `depth`, without its extension.
    """
    if depth < 0 or depth >= len(frames):
        return None
    file = frames[depth].file
    if not file or file.startswith("<"):
        return None
    return Path(file).stem or None
