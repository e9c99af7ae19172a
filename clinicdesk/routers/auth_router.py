from typing import Optional
from fastapi import APIRouter, Depends
import logging

from ..application.services.auth_service import AuthService
from ..dependencies import get_auth_service
from ..schemas import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
def login(
    payload: Optional[LoginRequest] = None,
    auth_service: AuthService = Depends(get_auth_service),
):
    payload = payload or LoginRequest()
    result = auth_service.login(payload.email, payload.password)
    return LoginResponse(id=result.id, email=result.email, role=result.role)
