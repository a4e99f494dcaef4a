import json
from dataclasses import dataclass

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.provider import Address, Experience, Speciality


@dataclass(frozen=True)
class RegistrationImage:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


def _format_number(value: float) -> str:
    return str(int(value)) if value == int(value) else str(value)


class ProviderRegistration(BaseModel):
    name: str
    email: EmailStr
    password: str
    experience: Experience = Experience.ONE
    fee: float = Field(ge=0, allow_inf_nan=False)
    about: str = ""
    speciality: Speciality = Speciality.WILDLIFE
    degree: str = ""
    address: Address = Field(default_factory=Address)
    slots: list[str] = Field(default_factory=list)

    @field_validator("slots")
    @classmethod
    def _slots_unique_and_non_blank(cls, v: list[str]) -> list[str]:
        seen: set[str] = set()
        for label in v:
            if not label.strip() or label in seen:
                raise ValueError("Invalid or duplicate slot")
            seen.add(label)
        return v

    def to_form_fields(self) -> dict[str, str]:
        """Multipart text fields in the shape the add-provider endpoint expects."""
        return {
            "name": self.name,
            "email": str(self.email),
            "password": self.password,
            "experience": self.experience.value,
            "fees": _format_number(self.fee),
            "about": self.about,
            "speciality": self.speciality.value,
            "degree": self.degree,
            "address": json.dumps({"line1": self.address.line1, "line2": self.address.line2}),
            "slots": json.dumps(self.slots),
        }


class RegistrationOutcome(BaseModel):
    success: bool
    message: str
    error: str | None = None
