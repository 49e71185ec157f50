"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from favorites_api.adapters.authlib_token_signer import AuthlibTokenSigner
from favorites_api.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from favorites_api.adapters.product_catalog_client import HttpxProductCatalogClient
from favorites_api.adapters.supabase_client_repository import SupabaseClientRepository
from favorites_api.adapters.supabase_favorite_repository import (
    SupabaseFavoriteRepository,
)
from favorites_api.config import Settings
from favorites_api.services.auth import AuthService
from favorites_api.services.clients import ClientService
from favorites_api.services.favorites import FavoriteService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    client_service: ClientService
    auth_service: AuthService
    favorite_service: FavoriteService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    client_service = ClientService(
        repository=SupabaseClientRepository(supabase_client),
        password_hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
    )
    auth_service = AuthService(
        client_service=client_service,
        token_signer=AuthlibTokenSigner(
            secret=resolved_settings.jwt_secret,
            algorithm=resolved_settings.jwt_algorithm,
        ),
        token_ttl_seconds=resolved_settings.jwt_expires_in_seconds,
    )
    catalog_client = HttpxProductCatalogClient.create(
        base_url=resolved_settings.products_api_url,
        timeout_seconds=resolved_settings.products_api_timeout_seconds,
    )
    favorite_service = FavoriteService(
        repository=SupabaseFavoriteRepository(supabase_client),
        catalog=catalog_client,
    )

    async def close_resources() -> None:
        await catalog_client.close()

    return AppContainer(
        settings=resolved_settings,
        client_service=client_service,
        auth_service=auth_service,
        favorite_service=favorite_service,
        close_resources=close_resources,
    )
