import logging
from datetime import date, datetime

from app.core.config import settings
from app.core.errors import (
    CollaboratorRejection,
    NoDateSelected,
    NoSlotSelected,
    NotAuthenticated,
    TransportFailure,
)
from app.core.session import ClientSession
from app.models.booking import BookingOutcome, BookingRequest, SlotDateKey
from app.services.backend_client import BackendClient

logger = logging.getLogger(__name__)

BOOKING_FAILED_MESSAGE = "Error booking appointment"


class CancellationHandle:
    """Lets a newer selection invalidate a booking that is still in flight."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


def _superseded(outcome: BookingOutcome | None = None) -> BookingOutcome:
    if outcome is None:
        return BookingOutcome(success=False, message="Booking cancelled", superseded=True)
    # The backend may still have accepted it; keep its verdict, drop follow-ups.
    return outcome.model_copy(
        update={"superseded": True, "refresh_providers": False, "redirect_to": None}
    )


class BookingSubmitter:
    """Validates and sends a single booking request.

    No retries and no de-duplication: two identical submissions are two
    requests. Rejecting a double booking is the backend's job.
    """

    def __init__(self, client: BackendClient) -> None:
        self.client = client

    def build_request(
        self, provider_id: str, selected_date: date | datetime | None, slot_time: str | None
    ) -> BookingRequest:
        if not slot_time:
            raise NoSlotSelected()
        if selected_date is None:
            raise NoDateSelected()
        if isinstance(selected_date, datetime):
            selected_date = selected_date.date()
        return BookingRequest(
            provider_id=provider_id,
            slot_date=SlotDateKey.from_date(selected_date),
            slot_time=slot_time,
        )

    async def submit(
        self,
        session: ClientSession,
        provider_id: str,
        selected_date: date | datetime | None,
        slot_time: str | None,
        cancel: CancellationHandle | None = None,
    ) -> BookingOutcome:
        """Raises ValidationError subclasses before any network call; otherwise
        always returns an outcome."""
        if not session.is_authenticated:
            raise NotAuthenticated(redirect_to=settings.login_redirect)
        request = self.build_request(provider_id, selected_date, slot_time)
        if cancel is not None and cancel.cancelled:
            return _superseded()

        try:
            reply = await self.client.book_appointment(request, session.token)
            if not reply.success:
                raise CollaboratorRejection(reply.message or BOOKING_FAILED_MESSAGE)
        except CollaboratorRejection as e:
            logger.warning(
                "Booking rejected: provider=%s date=%s time=%s -> %s",
                provider_id,
                request.slot_date,
                slot_time,
                e.message,
            )
            outcome = BookingOutcome(success=False, message=e.message, error="rejected")
        except TransportFailure:
            logger.exception("Booking request failed: provider=%s", provider_id)
            outcome = BookingOutcome(
                success=False, message=BOOKING_FAILED_MESSAGE, error="transport"
            )
        else:
            logger.info(
                "Booked provider=%s date=%s time=%s", provider_id, request.slot_date, slot_time
            )
            outcome = BookingOutcome(
                success=True,
                message=reply.message,
                refresh_providers=True,
                redirect_to=settings.bookings_redirect,
            )

        if cancel is not None and cancel.cancelled:
            logger.info("Discarding stale booking response for provider=%s", provider_id)
            return _superseded(outcome)
        return outcome
