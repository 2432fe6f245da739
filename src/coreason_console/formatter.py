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
from typing import Any, List, Optional

from coreason_console.interfaces import Colorizer


def pad(value: Any, length: int = 2, fill: str = "0") -> str:
    """
    Right-aligns the string form of `value` inside `length` characters.

    Values that are already `length` characters or longer are returned unchanged.
    """
    text = str(value)
    padding = length - len(text)
    return fill * padding + text if padding > 0 else text


def format_timestamp(instant: datetime) -> str:
    """
    Formats an instant as `YYYY-MM-DD HH:mm:ss.mmm` from its wall-clock fields.
    """
    return (
        f"{pad(instant.year, 4)}-{pad(instant.month)}-{pad(instant.day)} "
        f"{pad(instant.hour)}:{pad(instant.minute)}:{pad(instant.second)}.{pad(instant.microsecond // 1000, 3)}"
    )


def construct_prefix_block(prefix: Optional[str], continuation: bool, width: int) -> str:
    """
    Builds the `(prefix)` column for a line.

    If nothing in the process was ever named, there is no column at all.
    Continuation lines and unnamed loggers get blanks of the same width, so the
    message bodies of all loggers line up.
    """
    if not prefix and not width:
        return ""

    if prefix and not continuation:
        return "(" + pad(prefix, width, " ") + ")"
    return " " * (width + 2)


def render_line(tag: str, block: str, body: str) -> str:
    """Joins level tag, prefix block and body."""
    if not block:
        return f"{tag} {body}"
    return f"{tag} {block} {body}"


def render_lines(tag: str, prefix: Optional[str], text: str, width: int, colorize: Colorizer) -> List[str]:
    """
    Splits a normalized message into its output lines.

    Only the first line carries the level tag and the prefix; later lines are
    blank-padded to the same columns.
    """
    lines: List[str] = []
    for index, body in enumerate(text.split("\n")):
        continuation = index > 0
        line_tag = " " * len(tag) if continuation else tag
        block = construct_prefix_block(prefix, continuation, width)
        lines.append(colorize(render_line(line_tag, block, body)))
    return lines
