from collections.abc import Callable
from datetime import date, datetime

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_booking_submitter, get_client_session, get_clock, get_directory
from app.api.schemas.booking import AvailableSlotsResponse, ProviderProfile, WindowDay
from app.core.config import settings
from app.core.session import ClientSession
from app.models.booking import SlotDateKey
from app.models.provider import Provider
from app.services.booking_flow import BookingFlow
from app.services.booking_service import BookingSubmitter
from app.services.directory_service import ProviderDirectory
from app.services.slot_service import NO_SLOTS_MESSAGE
from app.services.window_service import date_label

router = APIRouter(prefix="/providers", tags=["providers"])

RELATED_LIMIT = 5


@router.get("", response_model=list[Provider])
async def list_providers(directory: ProviderDirectory = Depends(get_directory)) -> list[Provider]:
    return await directory.refresh()


@router.get("/{provider_id}", response_model=ProviderProfile)
async def provider_profile(
    provider_id: str,
    session: ClientSession = Depends(get_client_session),
    directory: ProviderDirectory = Depends(get_directory),
    submitter: BookingSubmitter = Depends(get_booking_submitter),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> ProviderProfile:
    """Profile plus the seven bookable days, first day selected by default."""
    flow = BookingFlow(session, directory, submitter, provider_id, clock=clock)
    provider = await flow.load()
    return ProviderProfile(
        provider=provider,
        fee_display=provider.fee_display(settings.currency_symbol),
        window=[
            WindowDay(date=d, label=date_label(d), slot_date_key=SlotDateKey.from_date(d).encode())
            for d in flow.window
        ],
        related=flow.related_providers(limit=RELATED_LIMIT),
    )


@router.get("/{provider_id}/slots", response_model=AvailableSlotsResponse)
async def available_slots(
    provider_id: str,
    date_param: date = Query(..., alias="date"),
    session: ClientSession = Depends(get_client_session),
    directory: ProviderDirectory = Depends(get_directory),
    submitter: BookingSubmitter = Depends(get_booking_submitter),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> AvailableSlotsResponse:
    """Slot labels still bookable on the given day (must be inside the window)."""
    flow = BookingFlow(session, directory, submitter, provider_id, clock=clock)
    await flow.load()
    flow.select_date(date_param)
    slots = flow.available_slots()
    return AvailableSlotsResponse(
        date=date_param.isoformat(),
        slot_date_key=SlotDateKey.from_date(date_param).encode(),
        slots=slots,
        message=None if slots else NO_SLOTS_MESSAGE,
    )
