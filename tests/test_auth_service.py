"""Tests for login and token handling."""

from dataclasses import dataclass

import pytest

from favorites_api.adapters.authlib_token_signer import AuthlibTokenSigner
from favorites_api.domain.clients import TokenClaims
from favorites_api.domain.errors import InvalidCredentialsError, InvalidTokenError
from favorites_api.services.auth import AuthService
from favorites_api.services.clients import ClientService


@dataclass
class StaticTokenSigner:
    """Signer returning fixed claims, for claim-shape checks."""

    claims: dict[str, object]

    def sign(self, claims: dict[str, object], ttl_seconds: int) -> str:
        return "static"

    def verify(self, token: str) -> dict[str, object]:
        return self.claims


def test_login_returns_token_for_valid_credentials(
    auth_service: AuthService, client_service: ClientService
) -> None:
    profile = client_service.register("A", "a@x.com", "secret12")

    result = auth_service.login("a@x.com", "secret12")

    assert result.token
    assert result.client == profile
    assert auth_service.verify_token(result.token) == TokenClaims(
        client_id=profile.id, email="a@x.com"
    )


def test_login_failures_are_indistinguishable(
    auth_service: AuthService, client_service: ClientService
) -> None:
    client_service.register("A", "a@x.com", "secret12")

    with pytest.raises(InvalidCredentialsError) as unknown:
        auth_service.login("nonexistent@x.com", "secret12")
    with pytest.raises(InvalidCredentialsError) as wrong:
        auth_service.login("a@x.com", "wrong-password")

    assert type(unknown.value) is type(wrong.value)
    assert str(unknown.value) == str(wrong.value) == "Invalid credentials"


def test_issue_and_verify_token_roundtrip(auth_service: AuthService) -> None:
    token = auth_service.issue_token(TokenClaims(client_id=7, email="b@x.com"))

    assert auth_service.verify_token(token) == TokenClaims(client_id=7, email="b@x.com")


def test_verify_token_rejects_garbage(auth_service: AuthService) -> None:
    with pytest.raises(InvalidTokenError):
        auth_service.verify_token("not-a-token")


@pytest.mark.parametrize(
    "claims",
    [
        {"email": "a@x.com"},
        {"clientId": "7", "email": "a@x.com"},
        {"clientId": True, "email": "a@x.com"},
        {"clientId": 7},
    ],
)
def test_verify_token_requires_well_formed_claims(
    client_service: ClientService, claims: dict[str, object]
) -> None:
    service = AuthService(client_service, token_signer=StaticTokenSigner(claims))

    with pytest.raises(InvalidTokenError):
        service.verify_token("static")


def test_expired_token_fails_like_forged_token(
    client_service: ClientService, auth_service: AuthService
) -> None:
    expired_service = AuthService(
        client_service,
        token_signer=auth_service.token_signer,
        token_ttl_seconds=-10,
    )
    expired = expired_service.issue_token(TokenClaims(client_id=1, email="a@x.com"))
    forged = AuthlibTokenSigner(secret="another-signing-secret-0123456789abcdef").sign(
        {"clientId": 1, "email": "a@x.com"}, ttl_seconds=3600
    )

    with pytest.raises(InvalidTokenError) as expired_error:
        auth_service.verify_token(expired)
    with pytest.raises(InvalidTokenError) as forged_error:
        auth_service.verify_token(forged)

    assert str(expired_error.value) == str(forged_error.value)
