"""Favorite products reconciliation against the external catalog."""

import asyncio
from dataclasses import dataclass
from typing import Protocol

from favorites_api.adapters.product_catalog_client import ProductCatalogClient
from favorites_api.domain.errors import (
    AlreadyFavoritedError,
    CatalogUnavailableError,
    DuplicateRecordError,
    ProductNotFoundError,
)
from favorites_api.domain.favorites import FavoriteEntry, FavoriteReference, ProductInfo


class FavoriteRepository(Protocol):
    """Persistence interface for favorite references."""

    def get_favorite(self, client_id: int, product_id: str) -> FavoriteReference | None:
        """Return the reference for a client/product pair, if present."""

    def create_favorite(self, client_id: int, product_id: str) -> FavoriteReference:
        """Insert a reference; raise DuplicateRecordError if the pair exists."""

    def delete_favorite(self, client_id: int, product_id: str) -> bool:
        """Delete a reference and report whether a row was removed."""

    def list_favorites(self, client_id: int) -> list[FavoriteReference]:
        """Return the client's references, newest first."""


@dataclass
class FavoriteService:
    """Keeps favorite references consistent with the product catalog."""

    repository: FavoriteRepository
    catalog: ProductCatalogClient

    async def add_favorite(self, client_id: int, product_id: str) -> FavoriteEntry:
        """Favorite a product after confirming it exists in the catalog."""
        product = await self.catalog.fetch_product(product_id)
        if self.repository.get_favorite(client_id, product_id) is not None:
            raise AlreadyFavoritedError
        # Concurrent identical requests can both pass the check above.
        try:
            reference = self.repository.create_favorite(client_id, product_id)
        except DuplicateRecordError as exc:
            raise AlreadyFavoritedError from exc
        return FavoriteEntry(reference=reference, product=product)

    def remove_favorite(self, client_id: int, product_id: str) -> bool:
        """Remove a favorite; returns False when there was nothing to remove."""
        return self.repository.delete_favorite(client_id, product_id)

    async def list_favorites(self, client_id: int) -> list[FavoriteEntry]:
        """List favorites newest first with live product details.

        Products are resolved concurrently. A product that cannot be resolved
        is replaced by a stand-in instead of failing the whole listing.
        """
        references = self.repository.list_favorites(client_id)
        products = await asyncio.gather(
            *(self._resolve_for_listing(ref.product_id) for ref in references)
        )
        return [
            FavoriteEntry(reference=reference, product=product)
            for reference, product in zip(references, products, strict=True)
        ]

    def is_favorite(self, client_id: int, product_id: str) -> bool:
        """Return True when the client has favorited the product."""
        return self.repository.get_favorite(client_id, product_id) is not None

    async def _resolve_for_listing(self, product_id: str) -> ProductInfo:
        try:
            return await self.catalog.fetch_product(product_id)
        except (ProductNotFoundError, CatalogUnavailableError):
            return ProductInfo.stand_in(product_id)
