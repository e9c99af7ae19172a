# Routers package
from . import auth_router
from . import appointments_router
from . import doctors_router
from . import health_router
from . import queue_router

__all__ = [
    "auth_router",
    "appointments_router",
    "doctors_router",
    "health_router",
    "queue_router",
]
