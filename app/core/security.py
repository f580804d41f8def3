"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from app.core.config import Settings
from app.schemas.auth import TokenClaims

# Bcrypt cost (rounds). Fixed; changing it only affects newly created hashes.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72

REQUIRED_CLAIMS = ["sub", "email", "role", "iat", "exp"]

# Token validity is fixed, not configurable.
ACCESS_TOKEN_TTL = timedelta(days=7)


class InvalidTokenError(Exception):
    """Raised when a bearer token is tampered, malformed, expired or carries bad claims."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. A malformed hash never matches."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def create_access_token(
    account_id: int,
    role: str,
    email: str,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT carrying sub (account id), role, email, iat and exp."""
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(account_id),
        "role": role,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + ACCESS_TOKEN_TTL,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings) -> TokenClaims:
    """
    Verify signature and expiry, then validate the claims.
    Raises InvalidTokenError for any failure; unverified claims are never returned.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token") from e

    try:
        return TokenClaims(
            id=int(payload["sub"]),
            role=payload["role"],
            email=payload["email"],
        )
    except (TypeError, ValueError, ValidationError) as e:
        raise InvalidTokenError("Invalid token payload") from e
