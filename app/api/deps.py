from collections.abc import Callable
from datetime import datetime

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings
from app.core.errors import NotAuthenticated
from app.core.session import AdminSession, ClientSession
from app.services.backend_client import BackendClient
from app.services.booking_service import BookingSubmitter
from app.services.directory_service import ProviderDirectory
from app.services.registration_service import ProviderRegistrationSubmitter

optional_bearer = HTTPBearer(auto_error=False)


def _bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    if not credentials or credentials.scheme.lower() != "bearer":
        return None
    return credentials.credentials


def get_client_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(optional_bearer),
) -> ClientSession:
    return ClientSession(token=_bearer_token(credentials))


def require_client_session(session: ClientSession = Depends(get_client_session)) -> ClientSession:
    """Fail before touching the backend when the client is not logged in."""
    if not session.is_authenticated:
        raise NotAuthenticated(redirect_to=settings.login_redirect)
    return session


def get_admin_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(optional_bearer),
) -> AdminSession:
    return AdminSession(token=_bearer_token(credentials))


def get_clock() -> Callable[[], datetime]:
    return datetime.now


def get_backend_client() -> BackendClient:
    return BackendClient()


def get_directory(client: BackendClient = Depends(get_backend_client)) -> ProviderDirectory:
    return ProviderDirectory(client)


def get_booking_submitter(client: BackendClient = Depends(get_backend_client)) -> BookingSubmitter:
    return BookingSubmitter(client)


def get_registration_submitter(
    client: BackendClient = Depends(get_backend_client),
) -> ProviderRegistrationSubmitter:
    return ProviderRegistrationSubmitter(client)
