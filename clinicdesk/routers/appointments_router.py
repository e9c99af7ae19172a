from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
import logging

from ..application.services.appointments_service import AppointmentsService
from ..dependencies import get_appointments_service
from ..schemas import BookingCreate, AppointmentResponse, MessageResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Appointments"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("/bookings", response_model=MessageResponse)
def book_appointment(
    payload: Optional[BookingCreate] = None,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    payload = payload or BookingCreate()
    try:
        appt_service.book(payload.doctorId, payload.date, payload.time, payload.patientEmail)
    except HTTPException as e:
        logger.info(f"Booking rejected ({e.status_code}): {e.detail}")
        raise
    return MessageResponse(message="Appointment booked successfully.")


# Admin-only by convention; callers are not authenticated here
@router.get("/appointments", response_model=List[AppointmentResponse])
def list_appointments(appt_service: AppointmentsService = Depends(get_appointments_service)):
    return [AppointmentResponse.from_dto(a) for a in appt_service.list_appointments()]
