from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class APIException(HTTPException):
    status_code = 400
    message = "Bad request."

    def __init__(self, detail: str = None):
        super().__init__(status_code=self.status_code, detail=detail or self.message)


# Categories

class ValidationError(APIException):
    status_code = 400
    message = "Missing or malformed fields."


class NotFoundError(APIException):
    status_code = 404
    message = "Not found."


class AuthError(APIException):
    status_code = 401
    message = "Authentication failed."


class ConflictError(APIException):
    # Served as 400 to keep the public contract stable
    status_code = 400
    message = "Conflict."


# Booking service

class InvalidCredentials(AuthError):
    message = "Invalid login credentials."


class MissingFields(ValidationError):
    message = "Required fields are missing."


class MissingDate(ValidationError):
    message = "Please specify a date."


class NoAvailability(ValidationError):
    message = "No available times on this date."


class DoctorNotFound(NotFoundError):
    message = "Doctor not found."


class SlotNotFound(NotFoundError):
    message = "This timeslot does not exist."


class PathNotFound(NotFoundError):
    message = "Path not found."


class ServiceNotRegistered(ConflictError):
    message = "Service is not registered for this doctor."


class AlreadyBooked(ConflictError):
    message = "This timeslot is already booked."


# Queue service

class InvalidProcedure(ValidationError):
    message = "Invalid procedure."


def create_error_response(error_message: str) -> dict:
    """Create a standardized error response"""
    return {"error": error_message}


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render every HTTPException as {"error": <message>}"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields are plain 400s"""
    logger.info(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=create_error_response("Invalid request body."),
    )
