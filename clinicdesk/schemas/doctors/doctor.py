# clinicdesk/schemas/doctors/doctor.py
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

class DoctorCreate(BaseModel):
    name: Optional[str] = None
    # Left untyped so a non-list is reported as a missing field, not a body error
    services: Any = None

class TimeslotsCreate(BaseModel):
    date: Optional[str] = None
    times: Any = None
    service: Optional[str] = None

class TimeSlotResponse(BaseModel):
    time: str
    service: str
    booked: bool
    patientEmail: Optional[str] = None

    @classmethod
    def from_dto(cls, slot) -> "TimeSlotResponse":
        return cls(time=slot.time, service=slot.service, booked=slot.booked, patientEmail=slot.patient_email)

class DoctorSummary(BaseModel):
    id: int
    name: str
    services: List[str]

class DoctorResponse(DoctorSummary):
    schedule: Dict[str, List[TimeSlotResponse]] = {}

    @classmethod
    def from_dto(cls, doctor) -> "DoctorResponse":
        return cls(
            id=doctor.id,
            name=doctor.name,
            services=doctor.services,
            schedule={d: [TimeSlotResponse.from_dto(s) for s in slots] for d, slots in doctor.schedule.items()},
        )

class TimeslotsResponse(BaseModel):
    message: str
    schedule: List[TimeSlotResponse]
