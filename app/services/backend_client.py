import logging
from typing import Any

import httpx

from app.core.config import settings
from app.core.errors import TransportFailure
from app.models.booking import BookingRequest, CollaboratorReply
from app.models.registration import RegistrationImage

logger = logging.getLogger(__name__)


class BackendClient:
    """Async client for the booking backend (directory, bookings, admin).

    A fresh httpx.AsyncClient is opened per call. ``transport`` lets tests plug
    in an httpx.MockTransport.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )

    async def _send(self, method: str, path: str, **kwargs: Any) -> dict:
        try:
            async with self._client() as client:
                resp = await client.request(method, path, **kwargs)
                if resp.status_code >= 400:
                    logger.warning(
                        "Backend error: %s %s -> %s body=%s",
                        method,
                        path,
                        resp.status_code,
                        resp.text[:500],
                    )
                resp.raise_for_status()
                body = resp.json()
        except httpx.HTTPError as e:
            raise TransportFailure(str(e) or type(e).__name__, cause=e) from e
        except ValueError as e:
            raise TransportFailure(f"Invalid JSON from {path}", cause=e) from e
        if not isinstance(body, dict):
            raise TransportFailure(f"Unexpected response shape from {path}")
        return body

    @staticmethod
    def _reply(body: dict) -> CollaboratorReply:
        return CollaboratorReply(
            success=bool(body.get("success")), message=str(body.get("message") or "")
        )

    async def list_providers(self) -> dict:
        """GET provider list: ``{success, doctors: [...]}`` or ``{success: false, message}``."""
        return await self._send("GET", settings.provider_list_path)

    async def book_appointment(self, request: BookingRequest, token: str) -> CollaboratorReply:
        body = await self._send(
            "POST",
            settings.booking_path,
            json=request.to_payload(),
            headers={"token": token},
        )
        return self._reply(body)

    async def add_provider(
        self, fields: dict[str, str], image: RegistrationImage, admin_token: str
    ) -> CollaboratorReply:
        body = await self._send(
            "POST",
            settings.add_provider_path,
            data=fields,
            files={"image": (image.filename, image.content, image.content_type)},
            headers={"aToken": admin_token},
        )
        return self._reply(body)
