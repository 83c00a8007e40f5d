import logging

from fastapi import HTTPException, Request

from .auth import AUTH_SCHEME, APIKeyError, ErrorKind, get_api_key

logger = logging.getLogger(__name__)


async def require_api_key(request: Request) -> str:
    try:
        return get_api_key(request.headers)
    except APIKeyError as exc:
        logger.warning(f"Rejected request to {request.url.path}: {exc.kind.value}")
        if exc.kind is ErrorKind.NO_AUTH_HEADER:
            raise HTTPException(
                status_code=401,
                detail="Missing Authorization header",
                headers={"WWW-Authenticate": AUTH_SCHEME},
            ) from exc
        raise HTTPException(
            status_code=400,
            detail=f"Malformed Authorization header, expected '{AUTH_SCHEME} <token>'",
        ) from exc
