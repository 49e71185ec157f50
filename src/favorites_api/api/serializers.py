"""JSON shaping of domain objects for API responses."""

from favorites_api.domain.clients import ClientProfile
from favorites_api.domain.favorites import FavoriteEntry, ProductInfo


def serialize_client(profile: ClientProfile) -> dict[str, object]:
    """Return the public JSON shape of a client, without the password hash."""
    return {
        "id": profile.id,
        "name": profile.name,
        "email": profile.email,
        "created_at": profile.created_at.isoformat(),
        "updated_at": profile.updated_at.isoformat(),
    }


def serialize_product(product: ProductInfo) -> dict[str, object]:
    """Return catalog fields; reviewScore appears only when the catalog sent one."""
    payload: dict[str, object] = {
        "id": product.id,
        "title": product.title,
        "price": product.price,
        "image": product.image,
    }
    if product.review_score is not None:
        payload["reviewScore"] = product.review_score
    return payload


def serialize_favorite(entry: FavoriteEntry) -> dict[str, object]:
    """Return a favorite reference with its resolved product."""
    return {
        "id": entry.reference.id,
        "product": serialize_product(entry.product),
        "created_at": entry.reference.created_at.isoformat(),
    }
