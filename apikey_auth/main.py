import hashlib
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from .config import get_app_title, get_log_level
from .dependencies import require_api_key

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {app.title}")
    yield
    logger.info(f"Stopping {app.title}")


def create_app() -> FastAPI:
    logging.basicConfig(level=get_log_level())

    app = FastAPI(title=get_app_title(), lifespan=lifespan)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/whoami")
    async def whoami(api_key: str = Depends(require_api_key)):
        # Never echo the raw key back
        fingerprint = hashlib.sha256(api_key.encode()).hexdigest()[:12]
        return {"key_fingerprint": fingerprint}

    return app


app = create_app()
