"""Pydantic request models for the HTTP API."""

from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, StringConstraints

ClientName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]


class RegisterRequest(BaseModel):
    """Client registration payload."""

    name: ClientName
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)


class LoginRequest(BaseModel):
    """Login payload."""

    email: EmailStr
    password: str = Field(min_length=1)


class UpdateClientRequest(BaseModel):
    """Partial client profile update."""

    name: ClientName | None = None
    email: EmailStr | None = None
