from contextlib import asynccontextmanager
from typing import Optional
from dotenv import load_dotenv
import logging

load_dotenv()

from fastapi import FastAPI

from .routers import queue_router, health_router
from .core.config import settings
from .core.app import configure_logging, install_common, mount_frontend
from .application.ports.audit_logger import AuditLogger
from .infrastructure.audit.std_logger import StdAuditLogger
from .infrastructure.persistence.memory.queue_store import InMemoryQueueStore

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Queue server running on http://localhost:{settings.QUEUE_PORT}")
    yield
    logger.info("Shutting down queue server...")


def create_queue_app(
    store: Optional[InMemoryQueueStore] = None,
    audit_logger: Optional[AuditLogger] = None,
    static_dir: Optional[str] = None,
) -> FastAPI:
    app = FastAPI(
        title=settings.QUEUE_APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=("/docs" if settings.DOCS_ENABLED else None),
        redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
        openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
    )
    app.state.queue_store = store if store is not None else InMemoryQueueStore()
    app.state.audit_logger = audit_logger if audit_logger is not None else StdAuditLogger()

    install_common(app)

    app.include_router(queue_router.router)
    app.include_router(health_router.router)

    mount_frontend(app, static_dir or settings.QUEUE_STATIC_DIR)
    return app


app = create_queue_app()
