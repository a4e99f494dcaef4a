from dataclasses import dataclass


@dataclass(frozen=True)
class ClientSession:
    """Auth state of one browsing client. Passed explicitly into each submission."""

    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.token.strip())


@dataclass(frozen=True)
class AdminSession:
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.token.strip())
