"""Request/response schemas for account and auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.account import Role


class RegisterRequest(BaseModel):
    """Registration body. email and password are checked by the route so a missing one is a 400."""

    name: str | None = Field(default=None, max_length=255, description="Display name")
    email: str | None = Field(default=None, max_length=255, description="Login email")
    password: str | None = Field(default=None, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = Field(default=None, description="Login email")
    password: str | None = Field(default=None, description="Password")


class LoginResponse(BaseModel):
    """Bearer token returned after successful login."""

    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    role: Role


class TokenClaims(BaseModel):
    """Identity carried inside a verified token."""

    model_config = ConfigDict(frozen=True)

    id: int
    role: Role
    email: str


class AccountOut(BaseModel):
    """Public view of an account (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    email: str
    role: Role
    status: str | None = None
    created_at: datetime | None = None


class AccountResponse(BaseModel):
    """Response for POST /register and GET /me."""

    user: AccountOut


class AccountsListResponse(BaseModel):
    """Response for GET /admin/users (admin only)."""

    users: list[AccountOut]
