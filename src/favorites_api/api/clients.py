"""Client profile endpoints."""

from fastapi import APIRouter, Depends, Request

from favorites_api.api.deps import get_container, require_client
from favorites_api.api.models import UpdateClientRequest
from favorites_api.api.serializers import serialize_client
from favorites_api.domain.clients import TokenClaims

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("/me")
async def current_client(
    request: Request, claims: TokenClaims = Depends(require_client)
) -> dict[str, object]:
    """Return the authenticated client's profile."""
    profile = get_container(request).client_service.get_client(claims.client_id)
    return serialize_client(profile)


@router.put("/me")
async def update_current_client(
    payload: UpdateClientRequest,
    request: Request,
    claims: TokenClaims = Depends(require_client),
) -> dict[str, object]:
    """Update the authenticated client's name and/or email."""
    profile = get_container(request).client_service.update_client(
        claims.client_id, name=payload.name, email=payload.email
    )
    return {
        "message": "Client updated successfully",
        "client": serialize_client(profile),
    }


@router.delete("/me")
async def delete_current_client(
    request: Request, claims: TokenClaims = Depends(require_client)
) -> dict[str, str]:
    """Delete the authenticated client and its favorites."""
    get_container(request).client_service.delete_client(claims.client_id)
    return {"message": "Client deleted successfully"}


@router.get("/{client_id}", dependencies=[Depends(require_client)])
async def client_detail(client_id: int, request: Request) -> dict[str, object]:
    """Return a client's profile by id."""
    profile = get_container(request).client_service.get_client(client_id)
    return serialize_client(profile)
