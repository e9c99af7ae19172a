import threading
from typing import Iterable, List, Optional

from .seed import default_users
from ....application.ports.user_repo import UserRepository, UserDto
from ....application.ports.doctors_repo import DoctorsRepository, DoctorDto
from ....application.ports.appointments_repo import AppointmentsRepository, AppointmentDto


class InMemoryClinicStore(UserRepository, DoctorsRepository, AppointmentsRepository):
    """Users, doctors and the appointment log for one process.

    A booking touches a doctor's schedule and the log together, so all three
    collections share one re-entrant lock.
    """

    def __init__(self, users: Optional[Iterable[UserDto]] = None) -> None:
        self._lock = threading.RLock()
        self._users: List[UserDto] = list(users) if users is not None else default_users()
        self._doctors: List[DoctorDto] = []
        self._appointments: List[AppointmentDto] = []
        self._next_doctor_id = 1

    def locked(self):
        return self._lock

    # users
    def find_by_credentials(self, email: str, password: str) -> Optional[UserDto]:
        return next((u for u in self._users if u.email == email and u.password == password), None)

    # doctors
    def create_doctor(self, name: str, services: List[str]) -> DoctorDto:
        with self._lock:
            doctor = DoctorDto(id=self._next_doctor_id, name=name, services=list(services))
            self._next_doctor_id += 1
            self._doctors.append(doctor)
            return doctor

    def get_doctor(self, doctor_id: int) -> Optional[DoctorDto]:
        with self._lock:
            return next((d for d in self._doctors if d.id == doctor_id), None)

    def list_doctors(self) -> List[DoctorDto]:
        with self._lock:
            return list(self._doctors)

    # appointments
    def add_appointment(self, appointment: AppointmentDto) -> None:
        with self._lock:
            self._appointments.append(appointment)

    def list_appointments(self) -> List[AppointmentDto]:
        with self._lock:
            return list(self._appointments)
