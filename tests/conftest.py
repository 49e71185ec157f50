"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from favorites_api.adapters.authlib_token_signer import AuthlibTokenSigner
from favorites_api.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from favorites_api.adapters.product_catalog_client import ProductCatalogClient
from favorites_api.config import Settings
from favorites_api.containers import AppContainer
from favorites_api.domain.clients import ClientRecord
from favorites_api.domain.errors import DuplicateRecordError, ProductNotFoundError
from favorites_api.domain.favorites import FavoriteReference, ProductInfo
from favorites_api.services.auth import AuthService
from favorites_api.services.clients import ClientRepository, ClientService
from favorites_api.services.favorites import FavoriteRepository, FavoriteService

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


@dataclass
class InMemoryFavoriteRepository(FavoriteRepository):
    """In-memory favorite repository enforcing (client, product) uniqueness."""

    rows: list[FavoriteReference] = field(default_factory=list)
    next_id: int = 1

    def get_favorite(self, client_id: int, product_id: str) -> FavoriteReference | None:
        for row in self.rows:
            if row.client_id == client_id and row.product_id == product_id:
                return row
        return None

    def create_favorite(self, client_id: int, product_id: str) -> FavoriteReference:
        if any(
            row.client_id == client_id and row.product_id == product_id
            for row in self.rows
        ):
            raise DuplicateRecordError
        reference = FavoriteReference(
            id=self.next_id,
            client_id=client_id,
            product_id=product_id,
            created_at=_EPOCH + timedelta(seconds=self.next_id),
        )
        self.next_id += 1
        self.rows.append(reference)
        return reference

    def delete_favorite(self, client_id: int, product_id: str) -> bool:
        before = len(self.rows)
        self.rows = [
            row
            for row in self.rows
            if not (row.client_id == client_id and row.product_id == product_id)
        ]
        return len(self.rows) < before

    def list_favorites(self, client_id: int) -> list[FavoriteReference]:
        return sorted(
            (row for row in self.rows if row.client_id == client_id),
            key=lambda row: (row.created_at, row.id),
            reverse=True,
        )

    def delete_for_client(self, client_id: int) -> None:
        self.rows = [row for row in self.rows if row.client_id != client_id]


@dataclass
class InMemoryClientRepository(ClientRepository):
    """In-memory client repository enforcing email uniqueness."""

    clients: dict[int, ClientRecord] = field(default_factory=dict)
    favorites: InMemoryFavoriteRepository | None = None
    next_id: int = 1

    def get_by_id(self, client_id: int) -> ClientRecord | None:
        return self.clients.get(client_id)

    def get_by_email(self, email: str) -> ClientRecord | None:
        for record in self.clients.values():
            if record.email == email:
                return record
        return None

    def email_in_use(self, email: str, exclude_client_id: int | None = None) -> bool:
        return self._email_exists(email, exclude_client_id)

    def create_client(self, name: str, email: str, password_hash: str) -> ClientRecord:
        if self._email_exists(email, exclude_client_id=None):
            raise DuplicateRecordError
        now = _EPOCH + timedelta(minutes=self.next_id)
        record = ClientRecord(
            id=self.next_id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.clients[record.id] = record
        self.next_id += 1
        return record

    def update_client(
        self, client_id: int, changes: dict[str, str]
    ) -> ClientRecord | None:
        current = self.clients.get(client_id)
        if current is None:
            return None
        email = changes.get("email", current.email)
        if self._email_exists(email, exclude_client_id=client_id):
            raise DuplicateRecordError
        updated = ClientRecord(
            id=current.id,
            name=changes.get("name", current.name),
            email=email,
            password_hash=current.password_hash,
            created_at=current.created_at,
            updated_at=current.updated_at + timedelta(seconds=1),
        )
        self.clients[client_id] = updated
        return updated

    def delete_client(self, client_id: int) -> bool:
        removed = self.clients.pop(client_id, None)
        if removed is not None and self.favorites is not None:
            self.favorites.delete_for_client(client_id)
        return removed is not None

    def _email_exists(self, email: str, exclude_client_id: int | None) -> bool:
        return any(
            record.email == email and record.id != exclude_client_id
            for record in self.clients.values()
        )


@dataclass
class FakeProductCatalogClient(ProductCatalogClient):
    """Fake catalog with per-product failures and latencies."""

    products: dict[str, ProductInfo] = field(default_factory=dict)
    failures: dict[str, Exception] = field(default_factory=dict)
    delays: dict[str, float] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    in_flight: int = 0
    peak_in_flight: int = 0

    def add(self, product_id: str, title: str = "Product", price: float = 1.0) -> None:
        self.products[product_id] = ProductInfo(
            id=product_id, title=title, price=price, image=f"https://img/{product_id}"
        )

    async def fetch_product(self, product_id: str) -> ProductInfo:
        self.calls.append(product_id)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(product_id, 0))
            if product_id in self.failures:
                raise self.failures[product_id]
            if product_id not in self.products:
                raise ProductNotFoundError
            return self.products[product_id]
        finally:
            self.in_flight -= 1


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        jwt_secret="test-signing-secret-0123456789abcdef",
        bcrypt_rounds=4,
    )


@pytest.fixture
def favorite_repository() -> InMemoryFavoriteRepository:
    return InMemoryFavoriteRepository()


@pytest.fixture
def client_repository(
    favorite_repository: InMemoryFavoriteRepository,
) -> InMemoryClientRepository:
    return InMemoryClientRepository(favorites=favorite_repository)


@pytest.fixture
def catalog() -> FakeProductCatalogClient:
    return FakeProductCatalogClient()


@pytest.fixture
def client_service(client_repository: InMemoryClientRepository) -> ClientService:
    return ClientService(
        repository=client_repository,
        password_hasher=BcryptPasswordHasher(rounds=4),
    )


@pytest.fixture
def auth_service(settings: Settings, client_service: ClientService) -> AuthService:
    return AuthService(
        client_service=client_service,
        token_signer=AuthlibTokenSigner(secret=settings.jwt_secret),
        token_ttl_seconds=settings.jwt_expires_in_seconds,
    )


@pytest.fixture
def favorite_service(
    favorite_repository: InMemoryFavoriteRepository,
    catalog: FakeProductCatalogClient,
) -> FavoriteService:
    return FavoriteService(repository=favorite_repository, catalog=catalog)


@pytest.fixture
def container(
    settings: Settings,
    client_service: ClientService,
    auth_service: AuthService,
    favorite_service: FavoriteService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        client_service=client_service,
        auth_service=auth_service,
        favorite_service=favorite_service,
        close_resources=close_resources,
    )
