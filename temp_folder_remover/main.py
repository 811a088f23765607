import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from . import __version__
from .config import SERVICE_DESCRIPTION, SERVICE_DISPLAY_NAME
from .dependencies import get_cleanup_service, get_settings
from .logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Service host lifecycle: start cleanup on startup, stop on shutdown."""
    settings = get_settings()
    setup_logging(settings)

    service = get_cleanup_service()
    logging.info(f"{SERVICE_DISPLAY_NAME} starting up...")
    logging.info(f"Settings directory: {settings.settings_directory}")
    await service.start()

    yield

    logging.info(f"{SERVICE_DISPLAY_NAME} shutting down...")
    await service.stop()


app = FastAPI(
    title=SERVICE_DISPLAY_NAME,
    description=SERVICE_DESCRIPTION,
    version=__version__,
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": f"{SERVICE_DISPLAY_NAME} is running"}


@app.get("/health")
async def health():
    """Liveness plus the current service lifecycle state."""
    service = get_cleanup_service()
    return {"status": "healthy", "service": "temp-folder-remover", "state": service.state.value}


@app.get("/status")
async def status():
    return get_cleanup_service().status()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "temp_folder_remover.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":
    run()
