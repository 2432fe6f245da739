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
from typing import Any, List

from fastapi import FastAPI
from fastapi.testclient import TestClient

from coreason_console.factory import LogFactory
from coreason_console.middleware import LineForwarder, access_log_middleware


def create_app(middleware: Any) -> FastAPI:
    app = FastAPI()
    app.middleware("http")(middleware)

    @app.get("/items/{item_id}")
    async def read_item(item_id: int) -> dict:
        return {"item_id": item_id}

    return app


def test_line_forwarder_strips_trailing_newline() -> None:
    received: List[str] = []
    forwarder = LineForwarder(received.append)
    assert forwarder.write("GET / 200\n") == 10
    forwarder.write("no newline")
    forwarder.flush()
    assert received == ["GET / 200", "no newline"]


def test_access_line_logged_at_debug_by_default(factory: LogFactory, stream: Any, ts: str) -> None:
    log = factory.module("http").to(stream)
    with TestClient(create_app(access_log_middleware(log))) as client:
        response = client.get("/items/5?verbose=1")

    assert response.status_code == 200
    assert len(stream.lines) == 1
    assert re.fullmatch(
        rf'{ts} \[DEBUG \] \(http\) testclient - "GET /items/5\?verbose=1 HTTP/1\.1" 200 \d+ - \d+\.\d{{3}} ms',
        stream.lines[0],
    )


def test_access_line_uses_chosen_level(factory: LogFactory, stream: Any) -> None:
    log = factory.module("http").to(stream)
    with TestClient(create_app(access_log_middleware(log, how=log.notice))) as client:
        client.get("/missing")

    assert "[NOTICE]" in stream.lines[0]
    assert '"GET /missing HTTP/1.1" 404' in stream.lines[0]


def test_custom_line_format(factory: LogFactory, stream: Any) -> None:
    log = factory.instance().to(stream)
    middleware = access_log_middleware(log, line_format=lambda req, res, ms: f"{req.method} {res.status_code}")
    with TestClient(create_app(middleware)) as client:
        client.get("/items/1")

    assert stream.lines[0].endswith("[DEBUG ] GET 200")
    assert isinstance(middleware.forwarder, LineForwarder)  # type: ignore[attr-defined]
