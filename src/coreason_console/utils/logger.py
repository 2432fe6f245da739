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
import sys
from typing import Any

from loguru import logger as _logger

__all__ = ["logger", "DIAGNOSTICS_LEVEL"]

# Diagnostics about the console logger itself (recovered subjects, config changes).
# They never go to the console stream the library writes to.
DIAGNOSTICS_LEVEL = os.getenv("COREASON_CONSOLE_DIAGNOSTICS", "WARNING").upper()

# Remove default handler
_logger.remove()

_logger.add(
    sys.stderr,
    level=DIAGNOSTICS_LEVEL,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

logger: Any = _logger
