"""Account store: the only place that reads and writes the users table."""

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import ROLE_USER, Account, Role

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation (PostgreSQL).
PG_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"


class AccountStoreError(Exception):
    """Raised when the store fails for any reason other than a duplicate email."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmailAlreadyExistsError(AccountStoreError):
    """Raised when inserting an account whose email is already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Email already exists")


class AccountStore(Protocol):
    """Operations the auth routes need from account persistence."""

    def insert_account(
        self, name: str | None, email: str, password_hash: str, role: Role = ROLE_USER
    ) -> Account: ...

    def find_account_by_email(self, email: str) -> Account | None: ...

    def find_account_by_id(self, account_id: int) -> Account | None: ...

    def list_accounts(self) -> list[Account]: ...


def normalize_email(email: str) -> str:
    """Emails are compared and stored lower-cased and trimmed."""
    return email.strip().lower()


def _is_unique_violation(exc: IntegrityError) -> bool:
    """Check the DB driver's error code; never the message text."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    return getattr(orig, "sqlite_errorname", None) == SQLITE_UNIQUE_VIOLATION


def _store_error(exc: SQLAlchemyError) -> AccountStoreError:
    """Wrap a driver error, keeping the underlying message."""
    return AccountStoreError(str(getattr(exc, "orig", None) or exc))


class SqlAccountStore:
    """AccountStore backed by a SQLAlchemy session (one per request)."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert_account(
        self, name: str | None, email: str, password_hash: str, role: Role = ROLE_USER
    ) -> Account:
        """
        Insert and commit a new account; returns it with id and created_at populated.
        Raises EmailAlreadyExistsError on a duplicate email, AccountStoreError otherwise.
        """
        normalized = normalize_email(email)
        account = Account(
            name=name,
            email=normalized,
            password_hash=password_hash,
            role=role,
        )
        self.session.add(account)
        try:
            self.session.commit()
            self.session.refresh(account)
        except IntegrityError as e:
            self.session.rollback()
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(normalized) from e
            raise _store_error(e) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise _store_error(e) from e
        return account

    def find_account_by_email(self, email: str) -> Account | None:
        try:
            return (
                self.session.query(Account)
                .filter(Account.email == normalize_email(email))
                .first()
            )
        except SQLAlchemyError as e:
            raise _store_error(e) from e

    def find_account_by_id(self, account_id: int) -> Account | None:
        try:
            return self.session.get(Account, account_id)
        except SQLAlchemyError as e:
            raise _store_error(e) from e

    def list_accounts(self) -> list[Account]:
        """All accounts, newest (highest id) first."""
        try:
            return self.session.query(Account).order_by(Account.id.desc()).all()
        except SQLAlchemyError as e:
            raise _store_error(e) from e
