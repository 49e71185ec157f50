"""Domain error taxonomy shared by services and the API layer."""

from enum import Enum


class FavoritesApiError(Exception):
    """Base class for all expected application failures."""

    message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        """Human readable message safe to return to callers."""
        return str(self)


class NotFoundError(FavoritesApiError):
    """A referenced entity does not exist."""

    message = "Not found"


class ProductNotFoundError(NotFoundError):
    """The catalog has no product with the requested id."""

    message = "Product not found"


class ClientNotFoundError(NotFoundError):
    """No client account matches the requested id."""

    message = "Client not found"


class FavoriteNotFoundError(NotFoundError):
    """The client has not favorited the requested product."""

    message = "Favorite product not found"


class ConflictError(FavoritesApiError):
    """The operation would violate a uniqueness rule."""

    message = "Conflict"


class EmailTakenError(ConflictError):
    """Another client already uses the email address."""

    message = "Email already registered"


class AlreadyFavoritedError(ConflictError):
    """The product is already in the client's favorites."""

    message = "Product already in favorites"


class UnauthorizedError(FavoritesApiError):
    """The caller could not be authenticated."""

    message = "Unauthorized"


class InvalidCredentialsError(UnauthorizedError):
    """Unknown email or wrong password; deliberately indistinguishable."""

    message = "Invalid credentials"


class InvalidTokenError(UnauthorizedError):
    """Bearer token is tampered, expired or malformed."""

    message = "Invalid or expired token"


class AuthenticationRequiredError(UnauthorizedError):
    """No bearer token was supplied."""

    message = "Authentication required"


class CatalogFailure(Enum):
    """Reasons a catalog lookup could not reach a definitive answer."""

    TIMEOUT = "timeout"
    UNREACHABLE = "unreachable"
    TRANSPORT = "transport"
    UPSTREAM_ERROR = "upstream_error"


_CATALOG_FAILURE_MESSAGES = {
    CatalogFailure.TIMEOUT: "Product catalog timed out",
    CatalogFailure.UNREACHABLE: "Product catalog is unreachable",
    CatalogFailure.TRANSPORT: "Product catalog request failed",
    CatalogFailure.UPSTREAM_ERROR: "Product catalog returned an error",
}


class TransientError(FavoritesApiError):
    """A failure the caller may reasonably retry later."""

    message = "Service temporarily unavailable"


class CatalogUnavailableError(TransientError):
    """The product catalog could not be queried."""

    def __init__(self, reason: CatalogFailure, detail: str | None = None) -> None:
        self.reason = reason
        text = _CATALOG_FAILURE_MESSAGES[reason]
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)


class DuplicateRecordError(ConflictError):
    """Storage rejected a write because of a uniqueness constraint."""

    message = "Duplicate record"
