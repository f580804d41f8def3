"""ORM model for registered accounts (auth and RBAC)."""

from typing import Literal

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func

from app.models.base import Base

Role = Literal["user", "admin"]
ROLE_USER: Role = "user"
ROLE_ADMIN: Role = "admin"
ROLES: tuple[Role, ...] = (ROLE_USER, ROLE_ADMIN)


class Account(Base):
    """
    Registered account for JWT authentication and role-based access control.

    email is stored lower-cased, so the unique index makes it unique case-insensitively.
    role: 'admin' or 'user'
    """

    __tablename__ = "users"
    __table_args__ = (CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER, server_default=ROLE_USER)
    status = Column(String(32), nullable=True, default="active", server_default="active")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
