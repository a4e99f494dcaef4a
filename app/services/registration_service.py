import logging

from app.core.errors import CollaboratorRejection, ImageNotSelected, NotAuthenticated, TransportFailure
from app.core.session import AdminSession
from app.models.registration import ProviderRegistration, RegistrationImage, RegistrationOutcome
from app.services.backend_client import BackendClient

logger = logging.getLogger(__name__)


class ProviderRegistrationSubmitter:
    def __init__(self, client: BackendClient) -> None:
        self.client = client

    async def submit(
        self,
        session: AdminSession,
        registration: ProviderRegistration,
        image: RegistrationImage | None,
    ) -> RegistrationOutcome:
        """Send one multipart add-provider request.

        Missing admin token or image fail locally. Backend rejections and
        transport errors come back as a failed outcome carrying their message.
        """
        if not session.is_authenticated:
            raise NotAuthenticated("Admin login required")
        if image is None or not image.content:
            raise ImageNotSelected()

        try:
            reply = await self.client.add_provider(
                registration.to_form_fields(), image, session.token
            )
            if not reply.success:
                raise CollaboratorRejection(reply.message or "Provider was not added")
        except CollaboratorRejection as e:
            logger.warning("Provider registration rejected for %s: %s", registration.email, e.message)
            return RegistrationOutcome(success=False, message=e.message, error="rejected")
        except TransportFailure as e:
            logger.exception("Provider registration failed for %s", registration.email)
            return RegistrationOutcome(success=False, message=e.message, error="transport")

        logger.info(
            "Registered provider %s with %d slot(s)", registration.email, len(registration.slots)
        )
        return RegistrationOutcome(success=True, message=reply.message)
