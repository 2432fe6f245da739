# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import gc
from typing import Any
from unittest.mock import patch

import pytest

from coreason_console.config import ConsoleSettings
from coreason_console.factory import LogFactory
from coreason_console.levels import InvalidLevelError, Level


def test_module_name_inferred_from_caller(factory: LogFactory, stream: Any, ts: str) -> None:
    log = factory.module().to(stream)
    assert log.prefix == "test_factory"
    log.info("!")
    assert stream.lines == [f"{ts} [INFO  ] (test_factory) !"]


def test_module_name_inference_failure_means_no_prefix(factory: LogFactory) -> None:
    with patch("coreason_console.factory.capture_frames", return_value=[]):
        log = factory.module()
    assert log.prefix is None
    assert factory.context.max_prefix_width == 0


def test_instance_registers_width(factory: LogFactory) -> None:
    factory.instance("abc")
    factory.instance("a")
    factory.instance()
    assert factory.context.max_prefix_width == 3


def test_width_never_shrinks(factory: LogFactory) -> None:
    longest = factory.instance("abcdef")
    del longest
    gc.collect()
    factory.instance("ab")
    assert factory.context.max_prefix_width == 6


def test_loggers_are_tracked_weakly(factory: LogFactory) -> None:
    kept = factory.instance("kept")
    dropped = factory.instance("dropped")
    assert len(factory.loggers) == 2

    del dropped
    gc.collect()
    assert factory.loggers == [kept]


def test_settings_apply_to_new_loggers() -> None:
    factory = LogFactory(ConsoleSettings(synchronous=True, trace_source=True, min_level="notice"))
    log = factory.instance()
    assert log.synchronous
    assert log.trace_source
    assert log.min_level == Level.NOTICE


def test_disabled_settings_turn_off_master_switch() -> None:
    factory = LogFactory(ConsoleSettings(enabled=False))
    assert not factory.enabled
    assert not factory.context.enabled


def test_colorize_setting_reaches_context() -> None:
    factory = LogFactory(ConsoleSettings(colorize=False))
    assert factory.context.colorize is False


def test_require_updates_existing_loggers(factory: LogFactory) -> None:
    log = factory.instance()
    factory.require(Level.ERROR)
    assert log.min_level == Level.ERROR
    factory.require()
    assert log.min_level == Level.DEBUG


def test_require_unknown_level_raises(factory: LogFactory) -> None:
    with pytest.raises(InvalidLevelError):
        factory.require("chatty")


def test_silence_toggles_loggers(factory: LogFactory) -> None:
    log = factory.instance()
    factory.silence()
    assert not log.enabled
    assert not factory.instance().enabled
    factory.silence(False)
    assert log.enabled


def test_to_sets_context_stream(factory: LogFactory, stream: Any) -> None:
    factory.to(stream)
    assert factory.context.stream is stream
    factory.to(None)
    assert factory.context.stream is None
