"""Favorite products endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status

from favorites_api.api.deps import get_container, require_client
from favorites_api.api.serializers import serialize_favorite
from favorites_api.domain.clients import TokenClaims
from favorites_api.domain.errors import FavoriteNotFoundError

router = APIRouter(prefix="/api/favorites", tags=["favorites"])

ProductId = Annotated[str, Path(min_length=1, max_length=255)]


@router.get("")
async def list_favorites(
    request: Request, claims: TokenClaims = Depends(require_client)
) -> dict[str, object]:
    """Return the client's favorites with live product details."""
    favorites = await get_container(request).favorite_service.list_favorites(
        claims.client_id
    )
    return {
        "count": len(favorites),
        "favorites": [serialize_favorite(entry) for entry in favorites],
    }


@router.post("/{product_id}", status_code=status.HTTP_201_CREATED)
async def add_favorite(
    product_id: ProductId,
    request: Request,
    claims: TokenClaims = Depends(require_client),
) -> dict[str, object]:
    """Add a catalog product to the client's favorites."""
    entry = await get_container(request).favorite_service.add_favorite(
        claims.client_id, product_id
    )
    return {
        "message": "Product added to favorites",
        "favorite": serialize_favorite(entry),
    }


@router.get("/{product_id}")
async def favorite_status(
    product_id: ProductId,
    request: Request,
    claims: TokenClaims = Depends(require_client),
) -> dict[str, object]:
    """Report whether a product is in the client's favorites."""
    is_favorite = get_container(request).favorite_service.is_favorite(
        claims.client_id, product_id
    )
    return {"productId": product_id, "favorite": is_favorite}


@router.delete("/{product_id}")
async def remove_favorite(
    product_id: ProductId,
    request: Request,
    claims: TokenClaims = Depends(require_client),
) -> dict[str, str]:
    """Remove a product from the client's favorites."""
    removed = get_container(request).favorite_service.remove_favorite(
        claims.client_id, product_id
    )
    if not removed:
        raise FavoriteNotFoundError
    return {"message": "Product removed from favorites"}
