from dataclasses import dataclass, replace
from typing import Any, List, Optional
import logging

from ..ports.doctors_repo import DoctorsRepository, DoctorDto, TimeSlotDto
from ..ports.audit_logger import AuditLogger
from ...exceptions import DoctorNotFound, MissingFields, MissingDate, ServiceNotRegistered
from ...utils import parse_id, unique_in_order, is_blank

logger = logging.getLogger(__name__)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


@dataclass
class DoctorsService:
    repo: DoctorsRepository
    audit: Optional[AuditLogger] = None

    def _require_doctor(self, doctor_id: Any) -> DoctorDto:
        parsed = parse_id(doctor_id)
        doctor = self.repo.get_doctor(parsed) if parsed is not None else None
        if not doctor:
            raise DoctorNotFound()
        return doctor

    def create_doctor(self, name: Optional[str], services: Any) -> DoctorDto:
        if is_blank(name) or not _is_str_list(services):
            raise MissingFields("Name and services are required.")
        with self.repo.locked():
            created = self.repo.create_doctor(name, unique_in_order(services))
            doctor = replace(created, services=list(created.services), schedule={})
        logger.info(f"Registered doctor {doctor.id} offering {len(doctor.services)} service(s)")
        if self.audit:
            self.audit.log("doctor.create", details={"doctor_id": doctor.id})
        return doctor

    def list_doctors(self) -> List[DoctorDto]:
        return self.repo.list_doctors()

    def add_timeslots(self, doctor_id: Any, date: Optional[str], times: Any, service: Optional[str]) -> List[TimeSlotDto]:
        """Add slots for one date and service, returning that date's full slot list.

        Times already present on the date are skipped, so resubmitting the
        same request is harmless.
        """
        with self.repo.locked():
            doctor = self._require_doctor(doctor_id)
            if is_blank(date) or not _is_str_list(times) or is_blank(service):
                raise MissingFields("Date, times, and service are required.")
            if not doctor.offers(service):
                raise ServiceNotRegistered()

            slots = doctor.schedule.setdefault(date, [])
            existing = {s.time for s in slots}
            added = 0
            for time in times:
                if time in existing:
                    continue
                slots.append(TimeSlotDto(time=time, service=service))
                existing.add(time)
                added += 1

            if self.audit:
                self.audit.log("timeslots.add", details={"doctor_id": doctor.id, "date": date, "added": added})
            # Copies, so callers never see a later booking flip these
            return [replace(s) for s in slots]

    def available_slots(self, doctor_id: Any, date: Optional[str]) -> List[TimeSlotDto]:
        with self.repo.locked():
            doctor = self._require_doctor(doctor_id)
            if is_blank(date):
                raise MissingDate()
            return [replace(s) for s in doctor.schedule.get(date, []) if not s.booked]
