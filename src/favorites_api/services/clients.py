"""Client account lifecycle."""

from dataclasses import dataclass
from typing import Protocol

from favorites_api.domain.clients import ClientProfile, ClientRecord
from favorites_api.domain.errors import (
    ClientNotFoundError,
    DuplicateRecordError,
    EmailTakenError,
)
from favorites_api.services.auth import PasswordHasher


class ClientRepository(Protocol):
    """Persistence interface for client accounts."""

    def get_by_id(self, client_id: int) -> ClientRecord | None:
        """Return the client with the given id, if present."""

    def get_by_email(self, email: str) -> ClientRecord | None:
        """Return the client with the given email, if present."""

    def email_in_use(self, email: str, exclude_client_id: int | None = None) -> bool:
        """Return True when another client already uses the email."""

    def create_client(self, name: str, email: str, password_hash: str) -> ClientRecord:
        """Insert a client; raise DuplicateRecordError if the email exists."""

    def update_client(
        self, client_id: int, changes: dict[str, str]
    ) -> ClientRecord | None:
        """Apply changes and return the updated client, or None if missing."""

    def delete_client(self, client_id: int) -> bool:
        """Delete a client and report whether a row was removed."""


@dataclass
class ClientService:
    """Application service for client accounts."""

    repository: ClientRepository
    password_hasher: PasswordHasher

    def register(self, name: str, email: str, password: str) -> ClientProfile:
        """Create a client account with a hashed password."""
        if self.repository.email_in_use(email):
            raise EmailTakenError
        password_hash = self.password_hasher.hash(password)
        try:
            created = self.repository.create_client(name, email, password_hash)
        except DuplicateRecordError as exc:
            raise EmailTakenError from exc
        return created.to_profile()

    def get_client(self, client_id: int) -> ClientProfile:
        """Return a client's profile."""
        record = self.repository.get_by_id(client_id)
        if record is None:
            raise ClientNotFoundError
        return record.to_profile()

    def update_client(
        self, client_id: int, name: str | None = None, email: str | None = None
    ) -> ClientProfile:
        """Update name and/or email, keeping emails unique."""
        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            if self.repository.email_in_use(email, exclude_client_id=client_id):
                raise EmailTakenError
            changes["email"] = email
        if not changes:
            return self.get_client(client_id)

        try:
            updated = self.repository.update_client(client_id, changes)
        except DuplicateRecordError as exc:
            raise EmailTakenError from exc
        if updated is None:
            raise ClientNotFoundError
        return updated.to_profile()

    def delete_client(self, client_id: int) -> None:
        """Delete a client account; favorites are removed by cascade."""
        if not self.repository.delete_client(client_id):
            raise ClientNotFoundError

    def authenticate(self, email: str, password: str) -> ClientRecord | None:
        """Return the client when the password matches, otherwise None."""
        record = self.repository.get_by_email(email)
        if record is None:
            return None
        if not self.password_hasher.verify(password, record.password_hash):
            return None
        return record
