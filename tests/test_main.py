# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import re
from unittest.mock import patch

from typer.testing import CliRunner

from coreason_console import __version__
from coreason_console.main import app, main

runner = CliRunner()

TIMESTAMP = r"\d{4}-\d\d-\d\d \d\d:\d\d:\d\d\.\d{3}"


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"coreason-console v{__version__}" in result.stdout


def test_emit_plain() -> None:
    result = runner.invoke(app, ["emit", "hello", "--level", "warn", "--no-color"])
    assert result.exit_code == 0
    assert re.fullmatch(rf"{TIMESTAMP} \[WARN  \] hello\n", result.stdout)


def test_emit_with_name() -> None:
    result = runner.invoke(app, ["emit", "hello", "-n", "cli", "--no-color"])
    assert result.exit_code == 0
    assert re.fullmatch(rf"{TIMESTAMP} \[INFO  \] \(cli\) hello\n", result.stdout)


def test_emit_colored_by_default() -> None:
    result = runner.invoke(app, ["emit", "hello", "--level", "error"])
    assert result.exit_code == 0
    assert "\x1b[31m" in result.stdout


def test_emit_with_source() -> None:
    result = runner.invoke(app, ["emit", "hello", "--source", "--no-color"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 2
    assert re.search(r"\[INFO  \]   emit@.+main\.py:\d+:\d+$", lines[1])


def test_emit_invalid_level() -> None:
    result = runner.invoke(app, ["emit", "hello", "--level", "shouty"])
    assert result.exit_code == 1
    assert result.stdout == ""


def test_demo() -> None:
    result = runner.invoke(app, ["demo", "--no-color"])
    assert result.exit_code == 0
    out = result.stdout
    assert "[INFO  ] (demo) Logging without source tracing" in out
    assert "RuntimeError: Logging an exception instance." in out
    assert "demo@" in out
    assert "(something weird) ...or do we?" in out
    lines = out.splitlines()
    untraced = next(i for i, line in enumerate(lines) if "You'll never know" in line)
    assert "@" not in lines[untraced + 1]
    assert re.search(r"\[ERROR \] \(\s+main\) ouch", out)


def test_main_entry_point() -> None:
    with patch("coreason_console.main.app") as mock_app:
        main()
        mock_app.assert_called_once()
