import re
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, ConfigDict

_KEY_RE = re.compile(r"^(\d{1,2})_(\d{1,2})_(\d{4})$")


@dataclass(frozen=True)
class SlotDateKey:
    """Calendar date as the booking backend keys it: ``day_month_year``.

    ``month`` is 0-indexed (0 = January). The encoded form is part of the wire
    contract with the backend, so encode/decode must stay exact.
    """

    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, d: date) -> "SlotDateKey":
        return cls(day=d.day, month=d.month - 1, year=d.year)

    @classmethod
    def decode(cls, key: str) -> "SlotDateKey":
        m = _KEY_RE.match(key)
        if not m:
            raise ValueError(f"Malformed slot date key: {key!r}")
        day, month, year = (int(g) for g in m.groups())
        if not 0 <= month <= 11:
            raise ValueError(f"Month out of range in slot date key: {key!r}")
        # Rejects 31_1_2024 and similar impossible dates
        date(year, month + 1, day)
        return cls(day=day, month=month, year=year)

    def encode(self) -> str:
        return f"{self.day}_{self.month}_{self.year}"

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    def __str__(self) -> str:
        return self.encode()


class BookingRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider_id: str
    slot_date: SlotDateKey
    slot_time: str

    def to_payload(self) -> dict[str, str]:
        return {
            "docId": self.provider_id,
            "slotDate": self.slot_date.encode(),
            "slotTime": self.slot_time,
        }


class CollaboratorReply(BaseModel):
    """``{success, message}`` body returned by every backend write endpoint."""

    model_config = ConfigDict(extra="ignore")

    success: bool
    message: str = ""


class BookingOutcome(BaseModel):
    success: bool
    message: str
    error: str | None = None  # "rejected" | "transport"
    refresh_providers: bool = False
    redirect_to: str | None = None
    superseded: bool = False
