"""Domain models for favorite products."""

from dataclasses import dataclass
from datetime import datetime

UNAVAILABLE_PRODUCT_TITLE = "Product not available"


@dataclass(frozen=True)
class ProductInfo:
    """Normalized product details from the catalog."""

    id: str
    title: str
    price: float
    image: str
    review_score: float | None = None

    @classmethod
    def stand_in(cls, product_id: str) -> "ProductInfo":
        """Placeholder shown when the catalog cannot resolve a product."""
        return cls(id=product_id, title=UNAVAILABLE_PRODUCT_TITLE, price=0, image="")


@dataclass(frozen=True)
class FavoriteReference:
    """Stored pointer from a client to a catalog product."""

    id: int
    client_id: int
    product_id: str
    created_at: datetime


@dataclass(frozen=True)
class FavoriteEntry:
    """Favorite reference paired with live product details."""

    reference: FavoriteReference
    product: ProductInfo
