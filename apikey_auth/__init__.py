from .auth import (
    APIKeyError,
    ErrorKind,
    MalformedHeaderError,
    NoAuthHeaderError,
    extract_api_key,
    get_api_key,
)

__all__ = [
    "APIKeyError",
    "ErrorKind",
    "MalformedHeaderError",
    "NoAuthHeaderError",
    "extract_api_key",
    "get_api_key",
]
