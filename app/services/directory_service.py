import logging

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import CollaboratorRejection, TransportFailure
from app.models.provider import Provider
from app.services.backend_client import BackendClient

logger = logging.getLogger(__name__)


class ProviderDirectory:
    """Holds the last provider snapshot read from the backend. Never mutates providers."""

    def __init__(self, client: BackendClient) -> None:
        self.client = client
        self._providers: list[Provider] = []

    @property
    def providers(self) -> list[Provider]:
        return list(self._providers)

    async def refresh(self) -> list[Provider]:
        body = await self.client.list_providers()
        if not body.get("success"):
            raise CollaboratorRejection(str(body.get("message") or "Could not load providers"))
        try:
            providers = [Provider.model_validate(p) for p in body.get("doctors") or []]
        except PydanticValidationError as e:
            raise TransportFailure("Malformed provider list", cause=e) from e
        self._providers = providers
        logger.debug("Provider snapshot refreshed: %d provider(s)", len(providers))
        return self.providers

    def get(self, provider_id: str) -> Provider | None:
        for p in self._providers:
            if p.id == provider_id:
                return p
        return None

    def related(self, provider: Provider, limit: int | None = None) -> list[Provider]:
        """Other providers sharing ``provider``'s speciality."""
        out = [
            p for p in self._providers if p.speciality == provider.speciality and p.id != provider.id
        ]
        return out[:limit] if limit is not None else out
