"""FastAPI dependency injection functions.

Stores live on ``app.state`` for the lifetime of the process; services are
cheap wrappers built per request around them.
"""
from fastapi import Depends, Request

from .application.ports.audit_logger import AuditLogger
from .application.services.auth_service import AuthService
from .application.services.doctors_service import DoctorsService
from .application.services.appointments_service import AppointmentsService
from .application.services.queue_service import QueueService
from .infrastructure.persistence.memory.clinic_store import InMemoryClinicStore
from .infrastructure.persistence.memory.queue_store import InMemoryQueueStore


def get_clinic_store(request: Request) -> InMemoryClinicStore:
    return request.app.state.clinic_store


def get_queue_store(request: Request) -> InMemoryQueueStore:
    return request.app.state.queue_store


def get_audit_logger(request: Request) -> AuditLogger:
    return request.app.state.audit_logger


def get_auth_service(
    store: InMemoryClinicStore = Depends(get_clinic_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> AuthService:
    return AuthService(user_repo=store, audit=audit)


def get_doctors_service(
    store: InMemoryClinicStore = Depends(get_clinic_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> DoctorsService:
    return DoctorsService(repo=store, audit=audit)


def get_appointments_service(
    store: InMemoryClinicStore = Depends(get_clinic_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> AppointmentsService:
    return AppointmentsService(doctors=store, repo=store, audit=audit)


def get_queue_service(
    store: InMemoryQueueStore = Depends(get_queue_store),
    audit: AuditLogger = Depends(get_audit_logger),
) -> QueueService:
    return QueueService(repo=store, audit=audit)
