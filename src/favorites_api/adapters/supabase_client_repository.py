"""Supabase-backed client account repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from favorites_api.adapters.supabase_errors import execute_write
from favorites_api.domain.clients import ClientRecord
from favorites_api.services.clients import ClientRepository

_COLUMNS = "id, name, email, password_hash, created_at, updated_at"


@dataclass
class SupabaseClientRepository(ClientRepository):
    """Supabase implementation for client persistence."""

    client: Client

    def get_by_id(self, client_id: int) -> ClientRecord | None:
        """Return the client with the given id, if present."""
        response = (
            self.client.table("clients")
            .select(_COLUMNS)
            .eq("id", client_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def get_by_email(self, email: str) -> ClientRecord | None:
        """Return the client with the given email, if present."""
        response = (
            self.client.table("clients")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def email_in_use(self, email: str, exclude_client_id: int | None = None) -> bool:
        """Return True when another client already uses the email."""
        query = self.client.table("clients").select("id").eq("email", email)
        if exclude_client_id is not None:
            query = query.neq("id", exclude_client_id)
        response = query.limit(1).execute()
        return bool(response.data)

    def create_client(self, name: str, email: str, password_hash: str) -> ClientRecord:
        """Insert a client row and return it."""
        response = execute_write(
            self.client.table("clients")
            .insert({"name": name, "email": email, "password_hash": password_hash})
            .execute
        )
        if not response.data:
            raise RuntimeError("Failed to create client in Supabase")
        return _to_record(response.data[0])

    def update_client(
        self, client_id: int, changes: dict[str, str]
    ) -> ClientRecord | None:
        """Apply changes to a client row and return it, or None if missing."""
        payload: dict[str, object] = {
            **changes,
            "updated_at": datetime.now(tz=UTC).isoformat(),
        }
        response = execute_write(
            self.client.table("clients").update(payload).eq("id", client_id).execute
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def delete_client(self, client_id: int) -> bool:
        """Delete a client row; favorites cascade in the database."""
        response = self.client.table("clients").delete().eq("id", client_id).execute()
        return bool(response.data)


def _to_record(row: dict[str, object]) -> ClientRecord:
    return ClientRecord(
        id=int(row["id"]),
        name=str(row["name"]),
        email=str(row["email"]),
        password_hash=str(row["password_hash"]),
        created_at=_parse_timestamp(row["created_at"]),
        updated_at=_parse_timestamp(row["updated_at"]),
    )


def _parse_timestamp(value: object) -> datetime:
    if isinstance(value, datetime):
        return value
    parsed = datetime.fromisoformat(str(value))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
