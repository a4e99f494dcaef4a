import datetime as dt

from pydantic import BaseModel

from app.models.provider import Provider


class WindowDay(BaseModel):
    date: dt.date
    label: str  # e.g. "Tue Mar 05 2024"
    slot_date_key: str  # day_month_year, month 0-indexed


class ProviderProfile(BaseModel):
    provider: Provider
    fee_display: str
    window: list[WindowDay]
    related: list[Provider]


class AvailableSlotsResponse(BaseModel):
    date: str  # YYYY-MM-DD
    slot_date_key: str
    slots: list[str]
    message: str | None = None  # set when slots is empty


class BookAppointmentRequest(BaseModel):
    provider_id: str
    date: dt.date | None = None
    slot_time: str = ""


class BookAppointmentResponse(BaseModel):
    message: str
    redirect_to: str | None = None
