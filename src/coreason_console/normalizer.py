# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import ipaddress
import json
import re
import traceback
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Set, Tuple, Union

from fastapi import Request
from pydantic import BaseModel

from coreason_console.schemas import RequestSnapshot
from coreason_console.utils.logger import logger

RequestAdapter = Callable[[Any], RequestSnapshot]

INVALID_ERROR = "<invalid error>"
UNSERIALIZABLE = "<unserializable subject>"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Stands in for "no subject was passed at all".
MISSING: Any = _Missing()

# Marks an edge that would revisit an already serialized container.
_OMIT = object()


def _repr_or_placeholder(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return UNSERIALIZABLE


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return _repr_or_placeholder(value)


class Untraceable:
    """
    Pre-rendered log content.

    It is never source traced and never compared when deduplicating.
    """

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"Untraceable({self.message!r})"


# A printf-style conversion; "*" widths and precisions consume an argument each.
_CONVERSION = re.compile(r"%(\([^)]*\))?[#0+ -]*(\*|\d+)?(?:\.(\*|\d+))?[hlL]?([diouxXeEfFgGcrsa%])")


def _count_placeholders(subject: str) -> int:
    count = 0
    for match in _CONVERSION.finditer(subject):
        if match.group(4) == "%":
            continue
        count += 1 + (match.group(2) == "*") + (match.group(3) == "*")
    return count


def interpolate(subject: str, args: Tuple[Any, ...]) -> str:
    """
    Applies printf-style interpolation to a subject.

    Placeholders are filled from the leading arguments and any surplus is appended,
    separated by spaces. A single mapping fills `%(key)s` placeholders. When the
    arguments don't fit the format at all, they are all appended instead.
    """
    if not args:
        return subject

    try:
        if len(args) == 1 and isinstance(args[0], Mapping) and "%(" in subject:
            return subject % args[0]
        used = _count_placeholders(subject)
        text = subject % args[:used] if used else subject
        rest = args[used:]
    except Exception as e:
        logger.debug(f"Interpolation of {subject!r} failed, appending arguments: {e}")
        text, rest = subject, args
    return " ".join([text, *(_safe_str(a) for a in rest)])


def _prune(value: Any, seen: Set[int]) -> Any:
    """
    Converts a value into JSON-compatible containers.

    Every container is visited at most once; an edge leading back to one is omitted.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")

    if isinstance(value, (dict, list, tuple, set, frozenset)):
        if id(value) in seen:
            return _OMIT
        seen.add(id(value))

    if isinstance(value, dict):
        result: Dict[Any, Any] = {}
        for key, item in value.items():
            pruned = _prune(item, seen)
            if pruned is _OMIT:
                continue
            if not isinstance(key, (str, int, float, bool)) and key is not None:
                key = str(key)
            result[key] = pruned
        return result

    if isinstance(value, (list, tuple, set, frozenset)):
        items = []
        for item in value:
            pruned = _prune(item, seen)
            items.append(None if pruned is _OMIT else pruned)
        return items

    return value


def stringify(subject: Any) -> str:
    """Serializes a container or model to indented JSON, dropping circular edges."""
    return json.dumps(_prune(subject, set()), indent=2, default=str, ensure_ascii=False)


def format_exception(error: BaseException) -> str:
    """The traceback of an exception, or its message, or a placeholder."""
    try:
        text = "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n")
        if text:
            return text
    except Exception as e:
        logger.warning(f"Could not format traceback of {type(error).__name__}: {e}")

    try:
        message = str(error)
    except Exception:
        message = ""
    return message or INVALID_ERROR


def project_starlette_request(request: Request) -> RequestSnapshot:
    """
    Projects a FastAPI/Starlette request onto the loggable fields.

    `host` is the hostname of the request URL, falling back to the Host header.
    """
    url = request.url
    host = url.hostname or request.headers.get("host")
    client = request.client
    raw_path = request.scope.get("raw_path")
    original_url = raw_path.decode("latin-1") if raw_path else url.path
    if url.query:
        original_url += "?" + url.query
    forwarded = request.headers.get("x-forwarded-for", "")

    subdomains = []
    if host:
        try:
            ipaddress.ip_address(host)
        except ValueError:
            subdomains = list(reversed(host.split(".")[:-2]))

    return RequestSnapshot(
        http_version=request.scope.get("http_version"),
        method=request.method,
        url=str(url),
        original_url=original_url,
        path=url.path,
        host=host,
        protocol=url.scheme,
        secure=url.scheme in ("https", "wss"),
        ip=client.host if client else None,
        ips=[part.strip() for part in forwarded.split(",") if part.strip()],
        status_code=getattr(request.state, "status_code", None),
        xhr=request.headers.get("x-requested-with", "").lower() == "xmlhttprequest",
        subdomains=subdomains,
        headers=dict(request.headers),
        query=dict(request.query_params),
        cookies=dict(request.cookies),
        params=dict(request.path_params),
    )


class SubjectNormalizer:
    """
    Turns anything passed to a level method into loggable text.

    Exceptions become Untraceable tracebacks. Request objects are only unrolled
    when an adapter has been registered for their type.
    """

    def __init__(self, register_defaults: bool = True):
        self._adapters: Dict[type, RequestAdapter] = {}
        if register_defaults:
            self.register(Request, project_starlette_request)

    def register(self, kind: type, adapter: RequestAdapter) -> None:
        """Registers an adapter projecting instances of `kind` onto a RequestSnapshot."""
        self._adapters[kind] = adapter

    def unregister(self, kind: type) -> None:
        self._adapters.pop(kind, None)

    def adapter_for(self, subject: Any) -> Optional[RequestAdapter]:
        for kind in type(subject).__mro__:
            if kind in self._adapters:
                return self._adapters[kind]
        return None

    def normalize(self, subject: Any = MISSING, *args: Any) -> Union[str, Untraceable]:
        """
        Normalizes a subject.

        Args:
            subject: The value passed to the level method.
            args: Interpolation arguments, only applied to string subjects.

        Returns:
            The text to log, or an Untraceable for pre-rendered content.
        """
        if isinstance(subject, Untraceable):
            return subject
        if isinstance(subject, str):
            return interpolate(subject, args)
        if subject is MISSING:
            return "undefined"
        if subject is None:
            return "null"
        if isinstance(subject, BaseException):
            return Untraceable(format_exception(subject))
        if isinstance(subject, (bytes, bytearray)):
            return bytes(subject).decode("utf-8", errors="replace")

        adapter = self.adapter_for(subject)
        if adapter is not None:
            try:
                subject = adapter(subject)
            except Exception as e:
                logger.warning(f"Request adapter for {type(subject).__name__} failed: {e}")
                return _repr_or_placeholder(subject)

        if isinstance(subject, RequestSnapshot):
            subject = subject.model_dump(exclude_none=True)

        if isinstance(subject, (dict, list, tuple, set, frozenset, BaseModel)):
            try:
                return stringify(subject)
            except Exception as e:
                logger.warning(f"Could not serialize {type(subject).__name__}: {e}")
                return _repr_or_placeholder(subject)

        try:
            return str(subject)
        except Exception as e:
            logger.warning(f"Could not convert {type(subject).__name__} to text: {e}")
            return _repr_or_placeholder(subject)
