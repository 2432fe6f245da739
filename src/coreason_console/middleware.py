# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import time
from typing import Any, Awaitable, Callable, Optional

from fastapi import Request, Response

from coreason_console.logger import Logger

LineHandler = Callable[[str], Any]
AccessLineFormat = Callable[[Request, Response, float], str]
CallNext = Callable[[Request], Awaitable[Response]]


class LineForwarder:
    """
    A writable that hands each written line, without its trailing newline, to a level method.
    """

    def __init__(self, how: LineHandler):
        self.how = how

    def write(self, data: str) -> int:
        self.how(data[:-1] if data.endswith("\n") else data)
        return len(data)

    def flush(self) -> None:
        pass


def format_access_line(request: Request, response: Response, elapsed_ms: float) -> str:
    """`ip - "METHOD /path?query HTTP/x" status length - n.nnn ms`"""
    client = request.client.host if request.client else "-"
    target = request.url.path
    if request.url.query:
        target += "?" + request.url.query
    version = request.scope.get("http_version", "1.1")
    length = response.headers.get("content-length", "-")
    return f'{client} - "{request.method} {target} HTTP/{version}" {response.status_code} {length} - {elapsed_ms:.3f} ms'


def access_log_middleware(
    logger: Logger,
    how: Optional[LineHandler] = None,
    line_format: AccessLineFormat = format_access_line,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    """
    Creates an HTTP middleware that logs one access line per request.

    Register it with `app.middleware("http")(access_log_middleware(log))`.

    Args:
        logger: The logger to write to.
        how: The level method receiving each line. Defaults to `logger.debug`.
        line_format: Builds the line from request, response and elapsed milliseconds.
    """
    forwarder = LineForwarder(how or logger.debug)

    async def middleware(request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        forwarder.write(line_format(request, response, (time.perf_counter() - start) * 1000) + "\n")
        return response

    middleware.forwarder = forwarder  # type: ignore[attr-defined]
    return middleware
