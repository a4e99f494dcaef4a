from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from project root (slotbook/) so it loads regardless of cwd
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Booking backend (provider directory, bookings, admin registration)
    backend_url: str = "http://localhost:4000"
    provider_list_path: str = "/api/doctor/list"
    booking_path: str = "/api/user/book-appointment"
    add_provider_path: str = "/api/admin/add-doctor"
    http_timeout_seconds: float = 10.0

    # CORS
    cors_origins: str = "http://localhost:5173"

    # Where the front end should go after auth failure / successful booking
    login_redirect: str = "/login"
    bookings_redirect: str = "/my-appointments"

    currency_symbol: str = "$"

    # Env
    env: str = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
