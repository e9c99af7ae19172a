from fastapi import APIRouter, Request

from ..schemas import HealthResponse

router = APIRouter(prefix="", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request):
    """Health check."""
    return HealthResponse(status="healthy", service=request.app.title)
