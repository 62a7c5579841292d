"""ASGI entry point: ``printspec.server.main:app``."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Settings are cached on first use, so .env has to be in the environment before the routers import.
load_dotenv(Path(__file__).resolve().parents[2] / ".env")

from .. import __version__
from ..config import Settings, get_settings
from .routers import api, web

STATIC_DIR = Path(__file__).resolve().parent / "web" / "static"

logger = logging.getLogger("uvicorn.error")


def _configure_logging(settings: Settings) -> None:
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if settings.debug:
        logger.debug("Debug logging enabled (verbosity=%s)", settings.log_verbosity)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings)

    validator_app = FastAPI(
        title=settings.app_name,
        summary="Validate print-specification XML files against production rules",
        version=__version__,
    )
    validator_app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    validator_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    validator_app.include_router(api.router)
    validator_app.include_router(web.router)
    return validator_app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("printspec.server.main:app", host=settings.host, port=settings.port, reload=settings.debug)


__all__ = ["STATIC_DIR", "app", "create_app", "logger", "run"]
