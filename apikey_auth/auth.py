"""Parse the API key out of an ``Authorization: ApiKey <token>`` header."""

from __future__ import annotations

import re
from enum import Enum
from typing import Mapping, Optional

AUTH_HEADER = "Authorization"
AUTH_SCHEME = "ApiKey"

_SEPARATOR = re.compile(r"\s+")


class ErrorKind(Enum):
    NO_AUTH_HEADER = "no_auth_header"
    MALFORMED_HEADER = "malformed_header"


class APIKeyError(Exception):
    kind = ErrorKind.MALFORMED_HEADER
    message = "invalid authorization header"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class NoAuthHeaderError(APIKeyError):
    kind = ErrorKind.NO_AUTH_HEADER
    message = "no authorization header included"


class MalformedHeaderError(APIKeyError):
    kind = ErrorKind.MALFORMED_HEADER
    message = "malformed authorization header"


def _lookup(headers: Mapping[str, str], name: str) -> Optional[str]:
    # Multi-value header containers join repeats on get(), so take the first
    for attr in ("getlist", "get_list"):
        getter = getattr(headers, attr, None)
        if getter is not None:
            values = getter(name)
            return values[0] if values else None

    # Plain dicts are case-sensitive
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def get_api_key(headers: Mapping[str, str]) -> str:
    """Return the token from an ``ApiKey <token>`` Authorization header.

    The token is everything after the scheme word and the whitespace run
    that follows it, returned without further trimming.

    Raises NoAuthHeaderError when the header is missing or empty and
    MalformedHeaderError when it does not have the ``ApiKey <token>`` shape.
    """
    value = _lookup(headers, AUTH_HEADER)
    if not value:
        raise NoAuthHeaderError()

    parts = _SEPARATOR.split(value, maxsplit=1)
    if len(parts) < 2 or parts[0] != AUTH_SCHEME or not parts[1]:
        raise MalformedHeaderError()
    return parts[1]


extract_api_key = get_api_key
