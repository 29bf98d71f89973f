from contextlib import asynccontextmanager
import logging
import os
from typing import Any

import uvicorn
from fastapi import FastAPI, APIRouter  # type: ignore[import-not-found]
from .logging_config import setup_logging
from .routers import instance
from .services import config_service as config_service_module

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging()
    # Aborts the process before serving when the configuration is unavailable.
    config = config_service_module.config_service.get_config()
    _app.state.config = config
    logger.info("Serving %s at %s", config.general.site_name, config.general.domain)
    yield


app = FastAPI(
    title="gathio",
    description="Instance configuration for a gathio event and group hosting site.",
    version="1.0.0",
    lifespan=lifespan
)

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(instance.router)
app.include_router(v1_router)


@app.get("/")
async def root():
    return {"message": "gathio is running"}


def resolve_port(raw: Any, *, default: int = DEFAULT_PORT) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    text = str(raw).strip()
    if not text:
        return default
    try:
        value = int(text)
    except ValueError:
        logger.warning("Ignoring non-numeric port %r; using %s", raw, default)
        return default
    if value < 1 or value > 65535:
        logger.warning("Ignoring out-of-range port %s; using %s", value, default)
        return default
    return value


def run() -> None:
    # Handlers must be installed before the configuration can fail.
    setup_logging()
    general = config_service_module.config_service.get_config().general
    uvicorn.run(
        "gathio.main:app",
        host=os.environ.get("GATHIO_HOST", "127.0.0.1"),
        port=resolve_port(general.port),
        reload=False,
    )


if __name__ == "__main__":
    run()
