# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class Frame(BaseModel):
    """
    One entry of a captured call stack.
    """

    function: Optional[str] = None
    file: str
    line: int
    column: int = 0


class RequestSnapshot(BaseModel):
    """
    The fields of an HTTP request that are worth logging.

    Request subjects are projected onto this allow-list so framework internals
    never end up in the log.
    """

    http_version: Optional[str] = None
    method: str
    url: str
    original_url: Optional[str] = None
    path: str
    host: Optional[str] = None
    protocol: Optional[str] = None
    secure: bool = False
    ip: Optional[str] = None
    ips: List[str] = []
    status_code: Optional[int] = None
    xhr: bool = False
    subdomains: List[str] = []
    headers: Dict[str, str] = {}
    query: Dict[str, str] = {}
    cookies: Dict[str, str] = {}
    params: Dict[str, Any] = {}
