"""Registration and login endpoints."""

from fastapi import APIRouter, Request, status

from favorites_api.api.deps import get_container
from favorites_api.api.models import LoginRequest, RegisterRequest
from favorites_api.api.serializers import serialize_client

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, request: Request) -> dict[str, object]:
    """Register a new client."""
    profile = get_container(request).client_service.register(
        name=payload.name, email=payload.email, password=payload.password
    )
    return {
        "message": "Client created successfully",
        "client": serialize_client(profile),
    }


@router.post("/login")
def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Authenticate a client and return a bearer token."""
    result = get_container(request).auth_service.login(
        payload.email, payload.password
    )
    return {
        "message": "Login successful",
        "token": result.token,
        "client": {
            "id": result.client.id,
            "name": result.client.name,
            "email": result.client.email,
        },
    }
