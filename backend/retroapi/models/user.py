"""
Retro Board Backend — User SQLAlchemy Model
============================================

What:  ORM model representing the `users` table.
Who:   Written by UserService at signup; read at signin, by the auth
       dependency, and when retros resolve their admin and participants.

Table Design:
    - UUID primary key generated in Python (portable across PostgreSQL and SQLite)
    - username: unique index, always stored lowercase
    - password_hash: bcrypt output, never returned by read routes
    - access_token: indexed for the per-request auth lookup; uniqueness is
      expected from the token's randomness, not enforced by the schema
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from retroapi.database import Base
from retroapi.security import generate_access_token


class User(Base):
    """
    A registered account.

    Lifecycle:
        Created at signup with a fresh access token; never updated or deleted.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        unique=True,
        index=True,
        comment="Lowercased login name",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash of the password",
    )

    access_token: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        index=True,
        default=generate_access_token,
        comment="Opaque bearer credential sent in the Authorization header",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
