"""Failure taxonomy for the booking core.

Validation errors are raised before any network call. Collaborator rejections
and transport failures are raised by the backend client and turned into failed
outcomes by the submitters, so callers always get control back.
"""


class BookingError(Exception):
    message = "Booking error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(BookingError):
    message = "Invalid request"


class NotAuthenticated(ValidationError):
    message = "Login to book appointment"

    def __init__(self, message: str | None = None, redirect_to: str = "/login") -> None:
        super().__init__(message)
        self.redirect_to = redirect_to


class NoSlotSelected(ValidationError):
    message = "Please select a slot before booking."


class NoDateSelected(ValidationError):
    message = "Please select a date before booking."


class DateOutsideWindow(ValidationError):
    message = "Selected date is not bookable"


class SlotNotAvailable(ValidationError):
    message = "Selected slot is not available"


class InvalidOrDuplicateSlot(ValidationError):
    message = "Invalid or duplicate slot"


class ImageNotSelected(ValidationError):
    message = "Image Not Selected"


class ProviderNotFound(BookingError):
    message = "Provider not found"


class CollaboratorRejection(BookingError):
    """Backend answered with success=false; message is the server's own text."""


class TransportFailure(BookingError):
    message = "Request to booking backend failed"

    def __init__(self, message: str | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
