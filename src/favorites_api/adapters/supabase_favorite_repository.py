"""Supabase-backed favorite reference repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from favorites_api.adapters.supabase_errors import execute_write
from favorites_api.domain.favorites import FavoriteReference
from favorites_api.services.favorites import FavoriteRepository

_COLUMNS = "id, client_id, product_id, created_at"


@dataclass
class SupabaseFavoriteRepository(FavoriteRepository):
    """Supabase implementation for favorite references."""

    client: Client

    def get_favorite(self, client_id: int, product_id: str) -> FavoriteReference | None:
        """Return the reference for a client/product pair, if present."""
        response = (
            self.client.table("favorite_products")
            .select(_COLUMNS)
            .eq("client_id", client_id)
            .eq("product_id", product_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_reference(response.data[0])

    def create_favorite(self, client_id: int, product_id: str) -> FavoriteReference:
        """Insert a reference row and return it."""
        response = execute_write(
            self.client.table("favorite_products")
            .insert({"client_id": client_id, "product_id": product_id})
            .execute
        )
        if not response.data:
            raise RuntimeError("Failed to create favorite in Supabase")
        return _to_reference(response.data[0])

    def delete_favorite(self, client_id: int, product_id: str) -> bool:
        """Delete a reference row and report whether one existed."""
        response = (
            self.client.table("favorite_products")
            .delete()
            .eq("client_id", client_id)
            .eq("product_id", product_id)
            .execute()
        )
        return bool(response.data)

    def list_favorites(self, client_id: int) -> list[FavoriteReference]:
        """Return the client's references, newest first."""
        response = (
            self.client.table("favorite_products")
            .select(_COLUMNS)
            .eq("client_id", client_id)
            .order("created_at", desc=True)
            .order("id", desc=True)
            .execute()
        )
        return [_to_reference(row) for row in response.data or []]


def _to_reference(row: dict[str, object]) -> FavoriteReference:
    created_at = row["created_at"]
    if not isinstance(created_at, datetime):
        created_at = datetime.fromisoformat(str(created_at))
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return FavoriteReference(
        id=int(row["id"]),
        client_id=int(row["client_id"]),
        product_id=str(row["product_id"]),
        created_at=created_at,
    )
