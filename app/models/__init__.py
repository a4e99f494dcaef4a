from app.models.booking import BookingOutcome, BookingRequest, CollaboratorReply, SlotDateKey
from app.models.provider import Address, Experience, Provider, Speciality
from app.models.registration import ProviderRegistration, RegistrationImage, RegistrationOutcome

__all__ = [
    "Address",
    "BookingOutcome",
    "BookingRequest",
    "CollaboratorReply",
    "Experience",
    "Provider",
    "ProviderRegistration",
    "RegistrationImage",
    "RegistrationOutcome",
    "SlotDateKey",
    "Speciality",
]
