# clinicdesk/schemas/appointments/appointment.py
from pydantic import BaseModel
from typing import Any, Optional

class BookingCreate(BaseModel):
    # Parsed strictly by the service; malformed ids read as unknown doctors
    doctorId: Any = None
    date: Optional[str] = None
    time: Optional[str] = None
    patientEmail: Optional[str] = None

class AppointmentResponse(BaseModel):
    doctorId: int
    doctorName: str
    date: str
    time: str
    service: str
    patientEmail: Optional[str] = None

    @classmethod
    def from_dto(cls, appt) -> "AppointmentResponse":
        return cls(
            doctorId=appt.doctor_id,
            doctorName=appt.doctor_name,
            date=appt.date,
            time=appt.time,
            service=appt.service,
            patientEmail=appt.patient_email,
        )
