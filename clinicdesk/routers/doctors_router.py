from typing import List, Optional
from fastapi import APIRouter, Depends, Query
import logging

from ..application.services.doctors_service import DoctorsService
from ..dependencies import get_doctors_service
from ..schemas import (
    DoctorCreate, DoctorResponse, DoctorSummary,
    TimeslotsCreate, TimeslotsResponse, TimeSlotResponse, ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/doctors",
    tags=["Doctors"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=DoctorResponse)
def create_doctor(
    payload: Optional[DoctorCreate] = None,
    doctors_service: DoctorsService = Depends(get_doctors_service),
):
    payload = payload or DoctorCreate()
    doctor = doctors_service.create_doctor(payload.name, payload.services)
    return DoctorResponse.from_dto(doctor)


@router.get("", response_model=List[DoctorSummary])
def list_doctors(doctors_service: DoctorsService = Depends(get_doctors_service)):
    # Schedules stay private; they carry patient emails
    return [
        DoctorSummary(id=d.id, name=d.name, services=d.services)
        for d in doctors_service.list_doctors()
    ]


@router.post("/{doctor_id}/timeslots", response_model=TimeslotsResponse)
def add_timeslots(
    doctor_id: str,
    payload: Optional[TimeslotsCreate] = None,
    doctors_service: DoctorsService = Depends(get_doctors_service),
):
    payload = payload or TimeslotsCreate()
    slots = doctors_service.add_timeslots(doctor_id, payload.date, payload.times, payload.service)
    return TimeslotsResponse(
        message="Timeslots added successfully.",
        schedule=[TimeSlotResponse.from_dto(s) for s in slots],
    )


@router.get("/{doctor_id}/available", response_model=List[TimeSlotResponse])
def available_slots(
    doctor_id: str,
    date: Optional[str] = Query(None),
    doctors_service: DoctorsService = Depends(get_doctors_service),
):
    return [TimeSlotResponse.from_dto(s) for s in doctors_service.available_slots(doctor_id, date)]
