from typing import Dict, List, Optional
from fastapi import APIRouter, Depends
import logging

from ..application.services.queue_service import QueueService
from ..dependencies import get_queue_service
from ..schemas import QueueRegisterRequest, QueueRegisterResponse, QueueEntryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["Queue"])


@router.post("/register", response_model=QueueRegisterResponse)
def register(
    payload: Optional[QueueRegisterRequest] = None,
    queue_service: QueueService = Depends(get_queue_service),
):
    payload = payload or QueueRegisterRequest()
    ticket = queue_service.register(payload.name, payload.procedure)
    return QueueRegisterResponse(
        position=ticket.position,
        peopleAhead=ticket.people_ahead,
        waitingTime=ticket.waiting_time,
        duration=ticket.duration,
    )


@router.get("/queue", response_model=List[QueueEntryResponse])
def list_queue(queue_service: QueueService = Depends(get_queue_service)):
    return [
        QueueEntryResponse(name=e.name, procedure=e.procedure, duration=e.duration)
        for e in queue_service.list_queue()
    ]


@router.get("/procedures", response_model=Dict[str, int])
def list_procedures(queue_service: QueueService = Depends(get_queue_service)):
    return queue_service.procedures()
