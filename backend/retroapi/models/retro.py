"""
Retro Board Backend — Retro SQLAlchemy Model
=============================================

What:  ORM model for the `retros` table and its `retro_participants`
       association table.
Who:   Used by RetroService for CRUD operations.

Table Design:
    - admin_id: nullable FK to users; the admin is loaded eagerly
    - participants: many-to-many through `retro_participants`. The association
      table has its own autoincrement key, and the relationship orders by it,
      so participants come back in the order they were attached.
    - created_at: epoch milliseconds (BIGINT), set once at creation

    Deleting a retro removes its association rows only. Thoughts and action
    items reference retros by plain id and are left untouched.
"""

import time
import uuid
from typing import List, Optional

from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, Integer, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from retroapi.database import Base
from retroapi.models.user import User


def epoch_millis() -> int:
    return int(time.time() * 1000)


retro_participants = Table(
    "retro_participants",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("retro_id", Uuid, ForeignKey("retros.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
)


class Retro(Base):
    """
    A retrospective session.

    Lifecycle:
        1. Created via POST /retros with resolved admin and participants
        2. Any of description/admin/participants/active overwritten via PATCH
        3. Removed via DELETE (child thoughts and action items are kept)
    """

    __tablename__ = "retros"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    admin_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=epoch_millis,
        comment="Creation time in epoch milliseconds",
    )

    # lazy="selectin": async sessions cannot lazy-load on attribute access
    admin: Mapped[Optional[User]] = relationship(User, lazy="selectin")

    participants: Mapped[List[User]] = relationship(
        User,
        secondary=retro_participants,
        order_by=retro_participants.c.id,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Retro(id={self.id}, active={self.active}, created_at={self.created_at})>"
