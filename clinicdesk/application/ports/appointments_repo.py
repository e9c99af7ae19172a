from dataclasses import dataclass
from typing import ContextManager, List, Optional, Protocol


@dataclass(frozen=True)
class AppointmentDto:
    doctor_id: int
    doctor_name: str
    date: str
    time: str
    service: str
    patient_email: Optional[str]


class AppointmentsRepository(Protocol):
    def locked(self) -> ContextManager[None]:
        ...

    def add_appointment(self, appointment: AppointmentDto) -> None:
        ...

    def list_appointments(self) -> List[AppointmentDto]:
        ...
