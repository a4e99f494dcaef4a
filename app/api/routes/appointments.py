import logging
from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends, status

from app.api.deps import get_booking_submitter, get_clock, get_directory, require_client_session
from app.api.schemas.booking import BookAppointmentRequest, BookAppointmentResponse
from app.core.errors import CollaboratorRejection, NoDateSelected, NoSlotSelected, TransportFailure
from app.core.session import ClientSession
from app.services.booking_flow import BookingFlow
from app.services.booking_service import BookingSubmitter
from app.services.directory_service import ProviderDirectory

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("", response_model=BookAppointmentResponse, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    body: BookAppointmentRequest,
    session: ClientSession = Depends(require_client_session),
    directory: ProviderDirectory = Depends(get_directory),
    submitter: BookingSubmitter = Depends(get_booking_submitter),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> BookAppointmentResponse:
    if not body.slot_time:
        raise NoSlotSelected()
    if body.date is None:
        raise NoDateSelected()
    flow = BookingFlow(session, directory, submitter, body.provider_id, clock=clock)
    await flow.load()
    flow.select_date(body.date)
    flow.select_slot(body.slot_time)
    outcome = await flow.book()
    if outcome.error == "rejected":
        raise CollaboratorRejection(outcome.message)
    if outcome.error == "transport":
        raise TransportFailure(outcome.message)
    return BookAppointmentResponse(message=outcome.message, redirect_to=outcome.redirect_to)
