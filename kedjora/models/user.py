"""ORM model for admin users (credential login)."""

import enum

from sqlalchemy import Column, Integer, String

from kedjora.models.base import Base, created_at_column, updated_at_column


class Role(str, enum.Enum):
    ADMIN = "ADMIN"


class User(Base):
    """
    Account that can sign in to the admin area.

    Created by the seed script; never modified by the public site.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    role = Column(String(32), nullable=False, default=Role.ADMIN.value)
    created_at = created_at_column()
    updated_at = updated_at_column()
