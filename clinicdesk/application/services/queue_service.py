from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from ..ports.queue_repo import QueueRepository, QueueEntryDto
from ..ports.audit_logger import AuditLogger
from ...exceptions import MissingFields, InvalidProcedure
from ...utils import is_blank

logger = logging.getLogger(__name__)


@dataclass
class QueueTicket:
    position: int
    people_ahead: int
    waiting_time: int
    duration: int


@dataclass
class QueueService:
    repo: QueueRepository
    audit: Optional[AuditLogger] = None

    def register(self, name: Optional[str], procedure: Optional[str]) -> QueueTicket:
        if is_blank(name) or is_blank(procedure):
            raise MissingFields("Name and procedure are required.")
        duration = self.repo.procedure_duration(procedure)
        if duration is None:
            raise InvalidProcedure()

        # Position and wait must be computed against the same snapshot the entry is appended to
        with self.repo.locked():
            ahead = self.repo.entries()
            ticket = QueueTicket(
                position=len(ahead) + 1,
                people_ahead=len(ahead),
                waiting_time=sum(e.duration for e in ahead),
                duration=duration,
            )
            self.repo.append(QueueEntryDto(name=name, procedure=procedure, duration=duration))

        logger.info(f"Queued patient at position {ticket.position}, estimated wait {ticket.waiting_time} min")
        if self.audit:
            self.audit.log("queue.register", subject=name, details={"procedure": procedure, "position": ticket.position})
        return ticket

    def list_queue(self) -> List[QueueEntryDto]:
        return self.repo.entries()

    def procedures(self) -> Dict[str, int]:
        return self.repo.procedures()
