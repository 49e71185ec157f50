"""Login and session token handling."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from favorites_api.domain.clients import LoginResult, TokenClaims
from favorites_api.domain.errors import InvalidCredentialsError, InvalidTokenError

if TYPE_CHECKING:
    from favorites_api.services.clients import ClientService


class PasswordHasher(Protocol):
    """One-way password hashing capability."""

    def hash(self, plaintext: str) -> str:
        """Return a digest for the password."""

    def verify(self, plaintext: str, digest: str) -> bool:
        """Return True when the password matches the digest."""


class TokenSigner(Protocol):
    """Signed, time-bounded token capability."""

    def sign(self, claims: dict[str, object], ttl_seconds: int) -> str:
        """Return a token carrying the claims that expires after the TTL."""

    def verify(self, token: str) -> dict[str, object]:
        """Return the claims of a valid token or raise InvalidTokenError."""


@dataclass
class AuthService:
    """Authenticates clients and issues bearer tokens."""

    client_service: "ClientService"
    token_signer: TokenSigner
    token_ttl_seconds: int = 7 * 24 * 3600

    def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials and return a token with the client profile."""
        record = self.client_service.authenticate(email, password)
        if record is None:
            raise InvalidCredentialsError
        token = self.issue_token(TokenClaims(client_id=record.id, email=record.email))
        return LoginResult(token=token, client=record.to_profile())

    def issue_token(self, claims: TokenClaims) -> str:
        """Sign a token for the given claims."""
        return self.token_signer.sign(
            {"clientId": claims.client_id, "email": claims.email},
            ttl_seconds=self.token_ttl_seconds,
        )

    def verify_token(self, token: str) -> TokenClaims:
        """Return the claims of a valid token."""
        payload = self.token_signer.verify(token)
        client_id = payload.get("clientId")
        email = payload.get("email")
        if not isinstance(client_id, int) or isinstance(client_id, bool):
            raise InvalidTokenError
        if not isinstance(email, str):
            raise InvalidTokenError
        return TokenClaims(client_id=client_id, email=email)
