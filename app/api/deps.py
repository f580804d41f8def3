"""Request dependencies: settings, account store, and the auth gates."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import InvalidTokenError, decode_access_token
from app.models import ROLE_ADMIN
from app.schemas.auth import TokenClaims
from app.services.accounts import AccountStore, SqlAccountStore

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

# Missing, malformed, tampered and expired tokens all get this same response.
UNAUTHENTICATED_DETAIL = "Invalid or missing token"


def unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_account_store(db: Annotated[Session, Depends(get_db)]) -> AccountStore:
    """Dependency: account store bound to the request's DB session."""
    return SqlAccountStore(db)


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """Dependency: require a valid `Authorization: Bearer <jwt>` and return its claims. Raises 401."""
    if credentials is None or credentials.scheme != "Bearer" or not credentials.credentials:
        raise unauthenticated()
    try:
        return decode_access_token(credentials.credentials, settings)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token", extra={"reason": e.message})
        raise unauthenticated() from e


def require_admin(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> TokenClaims:
    """Dependency: require authenticated claims with role 'admin'. Raises 403 for non-admin."""
    if claims.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin only",
        )
    return claims
