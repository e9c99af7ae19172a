# clinicdesk/schemas/queue/queue.py
from pydantic import BaseModel
from typing import Optional

class QueueRegisterRequest(BaseModel):
    name: Optional[str] = None
    procedure: Optional[str] = None

class QueueRegisterResponse(BaseModel):
    position: int
    peopleAhead: int
    waitingTime: int
    duration: int

class QueueEntryResponse(BaseModel):
    name: str
    procedure: str
    duration: int
