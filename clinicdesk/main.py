from contextlib import asynccontextmanager
from typing import Optional
from dotenv import load_dotenv
import logging

# Load environment variables as early as possible
load_dotenv()

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from starlette.requests import Request
from starlette.routing import Route

from .routers import auth_router, doctors_router, appointments_router, health_router
from .core.config import settings
from .core.app import configure_logging, install_common, mount_frontend
from .application.ports.audit_logger import AuditLogger
from .infrastructure.audit.std_logger import StdAuditLogger
from .infrastructure.persistence.memory.clinic_store import InMemoryClinicStore
from .exceptions import PathNotFound

configure_logging()
logger = logging.getLogger(__name__)


async def api_not_found(request: Request):
    raise PathNotFound()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Appointment server running on http://localhost:{settings.PORT}")
    yield
    logger.info("Shutting down appointment server...")


def create_app(
    store: Optional[InMemoryClinicStore] = None,
    audit_logger: Optional[AuditLogger] = None,
    static_dir: Optional[str] = None,
) -> FastAPI:
    """Build the clinic directory and booking service.

    Each app owns its store, so tests get a clean clinic per instance.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=("/docs" if settings.DOCS_ENABLED else None),
        redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
        openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
    )
    app.state.clinic_store = store if store is not None else InMemoryClinicStore()
    app.state.audit_logger = audit_logger if audit_logger is not None else StdAuditLogger()

    install_common(app)

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/login.html", status_code=302)

    app.include_router(auth_router.router)
    app.include_router(doctors_router.router)
    app.include_router(appointments_router.router)
    app.include_router(health_router.router)

    # Registered last so it only sees requests no API route claimed, whatever the method
    app.router.routes.append(Route("/api/{path:path}", api_not_found, include_in_schema=False))

    mount_frontend(app, static_dir or settings.STATIC_DIR)
    return app


app = create_app()
