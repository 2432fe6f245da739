# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

"""
coreason-console
"""

__version__ = "0.3.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import ConsoleSettings
from .context import FormatterContext
from .factory import LogFactory
from .levels import InvalidLevelError, Level
from .logger import Logger
from .middleware import access_log_middleware
from .normalizer import SubjectNormalizer, Untraceable

# The process-wide factory and its unnamed logger.
factory = LogFactory(ConsoleSettings.from_env())
log = factory.instance()
module = factory.module
create_logger = factory.module
silence = factory.silence
require = factory.require
disable = factory.disable

__all__ = [
    "ConsoleSettings",
    "FormatterContext",
    "InvalidLevelError",
    "Level",
    "LogFactory",
    "Logger",
    "SubjectNormalizer",
    "Untraceable",
    "access_log_middleware",
    "factory",
    "log",
    "module",
    "create_logger",
    "silence",
    "require",
    "disable",
]
