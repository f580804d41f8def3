"""Account routes: register, login, current profile and admin listing."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_account_store, get_current_claims, require_admin, unauthenticated
from app.core.config import Settings, get_settings
from app.core.security import create_access_token, hash_password, verify_password
from app.models import ROLE_USER
from app.schemas.auth import (
    AccountOut,
    AccountResponse,
    AccountsListResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
)
from app.services.accounts import AccountStore, AccountStoreError, EmailAlreadyExistsError

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_CREDENTIALS_DETAIL = "email & password required"
INVALID_CREDENTIALS_DETAIL = "Invalid credentials"


def _require_credentials(email: str | None, password: str | None) -> tuple[str, str]:
    if not email or not email.strip() or not password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MISSING_CREDENTIALS_DETAIL,
        )
    return email, password


def _store_failure(e: AccountStoreError) -> HTTPException:
    logger.exception("Account store failure")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=e.message,
    )


@router.post("/register", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountResponse:
    """Create an account with role 'user'. Returns the public account fields."""
    email, password = _require_credentials(body.email, body.password)
    name = body.name or None

    try:
        account = store.insert_account(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=ROLE_USER,
        )
    except EmailAlreadyExistsError as e:
        logger.info("Registration rejected: email already exists")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except AccountStoreError as e:
        raise _store_failure(e) from e

    logger.info("Account registered", extra={"account_id": account.id})
    return AccountResponse(user=AccountOut.model_validate(account))


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    store: Annotated[AccountStore, Depends(get_account_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT and the account role.
    Include the token in the Authorization header as: Bearer <token>
    """
    email, password = _require_credentials(body.email, body.password)

    try:
        account = store.find_account_by_email(email)
    except AccountStoreError as e:
        raise _store_failure(e) from e

    if account is None or not verify_password(password, account.password_hash):
        logger.info("Login failed")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_DETAIL,
        )

    token = create_access_token(
        account_id=account.id,
        role=account.role,
        email=account.email,
        settings=settings,
    )
    return LoginResponse(token=token, role=account.role)


@router.get("/me", response_model=AccountResponse)
def me(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountResponse:
    """Current account, read fresh from the store (not echoed from the token)."""
    try:
        account = store.find_account_by_id(claims.id)
    except AccountStoreError as e:
        raise _store_failure(e) from e
    if account is None:
        raise unauthenticated()
    return AccountResponse(user=AccountOut.model_validate(account))


@router.get("/admin/users", response_model=AccountsListResponse)
def list_users(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountsListResponse:
    """List all accounts, newest first (admin only)."""
    try:
        accounts = store.list_accounts()
    except AccountStoreError as e:
        raise _store_failure(e) from e
    return AccountsListResponse(users=[AccountOut.model_validate(a) for a in accounts])
