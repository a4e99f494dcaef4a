import logging
from collections.abc import Callable
from datetime import date, datetime

from app.core.errors import (
    CollaboratorRejection,
    DateOutsideWindow,
    ProviderNotFound,
    SlotNotAvailable,
    TransportFailure,
)
from app.core.session import ClientSession
from app.models.booking import BookingOutcome
from app.models.provider import Provider
from app.services.booking_service import BookingSubmitter, CancellationHandle
from app.services.directory_service import ProviderDirectory
from app.services.slot_service import filter_available
from app.services.window_service import generate_window, in_window

logger = logging.getLogger(__name__)


class BookingFlow:
    """One client's selection state on one provider's profile.

    Available slots are never cached: they are recomputed from the provider's
    labels, the selected date and the clock on every call. Changing the
    selection cancels any booking still in flight.
    """

    def __init__(
        self,
        session: ClientSession,
        directory: ProviderDirectory,
        submitter: BookingSubmitter,
        provider_id: str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.session = session
        self.directory = directory
        self.submitter = submitter
        self.provider_id = provider_id
        self.clock = clock
        self.provider: Provider | None = None
        self.window: list[date] = []
        self.selected_date: date | None = None
        self.slot_time: str = ""
        self._pending: CancellationHandle | None = None

    async def load(self) -> Provider:
        provider = self.directory.get(self.provider_id)
        if provider is None:
            await self.directory.refresh()
            provider = self.directory.get(self.provider_id)
        if provider is None:
            raise ProviderNotFound()
        self.provider = provider
        self.window = generate_window(self.clock())
        self.selected_date = self.window[0]
        return provider

    def available_slots(self) -> list[str]:
        if self.provider is None or self.selected_date is None:
            return []
        return filter_available(self.provider.available_slots, self.selected_date, self.clock())

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def select_date(self, d: date) -> None:
        if not in_window(self.window, d):
            raise DateOutsideWindow()
        self._cancel_pending()
        self.selected_date = d
        if self.slot_time and self.slot_time not in self.available_slots():
            self.slot_time = ""

    def select_slot(self, label: str) -> None:
        if label not in self.available_slots():
            raise SlotNotAvailable()
        self._cancel_pending()
        self.slot_time = label

    async def book(self) -> BookingOutcome:
        self._cancel_pending()
        handle = CancellationHandle()
        self._pending = handle
        try:
            outcome = await self.submitter.submit(
                self.session, self.provider_id, self.selected_date, self.slot_time, cancel=handle
            )
        finally:
            if self._pending is handle:
                self._pending = None
        if outcome.refresh_providers:
            try:
                await self.directory.refresh()
            except (CollaboratorRejection, TransportFailure) as e:
                logger.warning("Provider refresh after booking failed: %s", e.message)
            else:
                self.provider = self.directory.get(self.provider_id) or self.provider
        return outcome

    def related_providers(self, limit: int | None = None) -> list[Provider]:
        if self.provider is None:
            return []
        return self.directory.related(self.provider, limit)
