"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials for login. Presence is checked by the handler, not the schema."""

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class PublicUser(BaseModel):
    """User view returned to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: str
    email: str


class LoginResponse(BaseModel):
    """Bearer token and user view returned after successful login."""

    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: PublicUser


class CurrentUser(BaseModel):
    """Authenticated identity (id, username, role) decoded from a bearer token."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: str
