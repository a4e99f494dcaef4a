import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class Speciality(str, Enum):
    WILDLIFE = "Wildlife Photography"
    FASHION = "Fashion Photography"
    LANDSCAPE = "Landscape Photography"
    CONCERT = "Concert Photography"
    ADVERTISING = "Advertising Photography"
    EVENT = "Event Photography"


class Experience(str, Enum):
    # The registration form never offered 7 years.
    ONE = "1 Year"
    TWO = "2 Year"
    THREE = "3 Year"
    FOUR = "4 Year"
    FIVE = "5 Year"
    SIX = "6 Year"
    EIGHT = "8 Year"
    NINE = "9 Year"
    TEN = "10 Year"


class Address(BaseModel):
    line1: str = ""
    line2: str = ""


class Provider(BaseModel):
    """Read-only snapshot of a provider as served by the directory endpoint.

    Speciality and experience stay plain strings here so one unexpected value
    does not invalidate the whole directory.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    name: str
    email: str | None = None
    speciality: str = ""
    degree: str = ""
    experience: str = ""
    fee: float = Field(default=0, ge=0, allow_inf_nan=False, alias="fees")
    about: str = ""
    address: Address = Field(default_factory=Address)
    image: str | None = None
    available: bool = True
    available_slots: list[str] = Field(default_factory=list)

    @field_validator("available_slots", mode="before")
    @classmethod
    def _keep_string_labels(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            logger.debug("Ignoring non-list available_slots %r", v)
            return []
        labels = [label for label in v if isinstance(label, str)]
        if len(labels) != len(v):
            logger.debug("Dropped %d non-string slot label(s)", len(v) - len(labels))
        return labels

    def fee_display(self, currency_symbol: str) -> str:
        if self.fee == int(self.fee):
            return f"{currency_symbol}{int(self.fee)}"
        return f"{currency_symbol}{self.fee:.2f}"
