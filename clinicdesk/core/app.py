# clinicdesk/core/app.py
import os
import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from .config import settings
from ..exceptions import http_exception_handler, validation_exception_handler
from ..middleware import AccessLogMiddleware, ErrorHandlingMiddleware

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT
    )


def install_common(app: FastAPI) -> None:
    """Error handlers, middleware and CORS shared by both services."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(AccessLogMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def mount_frontend(app: FastAPI, directory: str) -> None:
    """Serve the static front-end; must run after every route is registered."""
    if not os.path.isdir(directory):
        logger.warning(f"Static directory '{directory}' not found; front-end not served")
        return
    app.mount("/", StaticFiles(directory=directory, html=True), name="frontend")
