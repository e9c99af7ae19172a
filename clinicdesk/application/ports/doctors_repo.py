from dataclasses import dataclass, field
from typing import ContextManager, Dict, List, Optional, Protocol


@dataclass
class TimeSlotDto:
    time: str
    service: str
    booked: bool = False
    patient_email: Optional[str] = None


@dataclass
class DoctorDto:
    id: int
    name: str
    services: List[str]
    schedule: Dict[str, List[TimeSlotDto]] = field(default_factory=dict)

    def offers(self, service: str) -> bool:
        return service in self.services

    def slots_for(self, date: str) -> Optional[List[TimeSlotDto]]:
        return self.schedule.get(date)

    def find_slot(self, date: str, time: str) -> Optional[TimeSlotDto]:
        return next((s for s in self.schedule.get(date, []) if s.time == time), None)


class DoctorsRepository(Protocol):
    def locked(self) -> ContextManager[None]:
        ...

    def create_doctor(self, name: str, services: List[str]) -> DoctorDto:
        ...

    def get_doctor(self, doctor_id: int) -> Optional[DoctorDto]:
        ...

    def list_doctors(self) -> List[DoctorDto]:
        ...
