"""
Booking Router - Endpoints for the booking confirmation screen.
"""

from fastapi import APIRouter, HTTPException, status

from src.application.dtos.booking_dtos import (
    BookingConfirmationDTO,
    BookingConfirmationRequest,
)
from src.domain.exceptions.domain_exceptions import (
    BookingNotFoundError,
    InvalidBookingError,
    InvalidBookingIdError,
)
from src.domain.value_objects.language import Language
from src.presentation.api.dependencies import (
    GetBookingUseCaseDep,
    RecordBookingUseCaseDep,
)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post(
    "/confirm",
    response_model=BookingConfirmationDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Record a booking",
    description="Store a completed booking so its confirmation can be shown.",
)
async def record_confirmation(
    request: BookingConfirmationRequest,
    use_case: RecordBookingUseCaseDep,
    language: Language = Language.DE,
):
    try:
        return await use_case.execute(request=request, language=language)
    except (InvalidBookingError, InvalidBookingIdError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "/demo",
    response_model=BookingConfirmationDTO,
    summary="Demo confirmation",
)
async def demo_confirmation(
    use_case: GetBookingUseCaseDep,
    language: Language = Language.DE,
):
    return use_case.demo(language)


@router.get(
    "/{booking_id}",
    response_model=BookingConfirmationDTO,
    summary="Get a booking confirmation",
)
async def get_confirmation(
    booking_id: str,
    use_case: GetBookingUseCaseDep,
    language: Language = Language.DE,
):
    try:
        return await use_case.execute(booking_id=booking_id, language=language)
    except BookingNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidBookingIdError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
