"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AccountOut,
    AccountResponse,
    AccountsListResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
)
from app.schemas.health import HealthResponse

__all__ = [
    "AccountOut",
    "AccountResponse",
    "AccountsListResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "TokenClaims",
]
