"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

from favorites_api.domain.clients import TokenClaims  # noqa: TC001
from favorites_api.domain.errors import AuthenticationRequiredError

if TYPE_CHECKING:
    from favorites_api.containers import AppContainer

_BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_client(
    request: Request,
    authorization: str | None = Header(default=None),
) -> TokenClaims:
    """Resolve the authenticated client from the bearer token."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise AuthenticationRequiredError
    token = authorization[len(_BEARER_PREFIX) :].strip()
    if not token:
        raise AuthenticationRequiredError
    return get_container(request).auth_service.verify_token(token)
