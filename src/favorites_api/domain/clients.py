"""Domain models for client accounts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClientRecord:
    """Client account as stored, including the password digest."""

    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def to_profile(self) -> "ClientProfile":
        """Return the redacted projection of the account."""
        return ClientProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(frozen=True)
class ClientProfile:
    """Client account without credentials."""

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    """Claims carried by a session token."""

    client_id: int
    email: str


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    token: str
    client: ClientProfile
