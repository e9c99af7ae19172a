from dataclasses import dataclass
from typing import Any, List, Optional

from ..ports.doctors_repo import DoctorsRepository
from ..ports.appointments_repo import AppointmentsRepository, AppointmentDto
from ..ports.audit_logger import AuditLogger
from ...exceptions import DoctorNotFound, NoAvailability, SlotNotFound, AlreadyBooked
from ...utils import parse_id


@dataclass
class AppointmentsService:
    doctors: DoctorsRepository
    repo: AppointmentsRepository
    audit: Optional[AuditLogger] = None

    def book(self, doctor_id: Any, date: Optional[str], time: Optional[str], patient_email: Optional[str]) -> AppointmentDto:
        # The check-then-set below must not interleave with another booking
        with self.doctors.locked():
            parsed = parse_id(doctor_id)
            doctor = self.doctors.get_doctor(parsed) if parsed is not None else None
            if not doctor:
                raise DoctorNotFound()
            if doctor.slots_for(date) is None:
                raise NoAvailability()
            slot = doctor.find_slot(date, time)
            if not slot:
                raise SlotNotFound()
            if slot.booked:
                if self.audit:
                    self.audit.log("booking", subject=patient_email, success=False, details={"doctor_id": doctor.id, "date": date, "time": time})
                raise AlreadyBooked()

            slot.booked = True
            slot.patient_email = patient_email
            appt = AppointmentDto(
                doctor_id=doctor.id,
                doctor_name=doctor.name,
                date=date,
                time=time,
                service=slot.service,
                patient_email=patient_email,
            )
            self.repo.add_appointment(appt)

        if self.audit:
            self.audit.log("booking", subject=patient_email, details={"doctor_id": doctor.id, "date": date, "time": time})
        return appt

    def list_appointments(self) -> List[AppointmentDto]:
        return self.repo.list_appointments()
