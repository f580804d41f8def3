"""SQLAlchemy ORM models."""

from app.models.account import ROLE_ADMIN, ROLE_USER, ROLES, Account, Role
from app.models.base import Base

__all__ = ["Account", "Base", "ROLE_ADMIN", "ROLE_USER", "ROLES", "Role"]
