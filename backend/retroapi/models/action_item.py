"""
Retro Board Backend — ActionItem SQLAlchemy Model
==================================================

What:  ORM model for the `action_items` table.
Who:   Used by ActionItemService.

Same reference semantics as Thought: retro_id is a plain indexed id.
"""

import uuid
from typing import Optional

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from retroapi.database import Base


class ActionItem(Base):
    """A follow-up task agreed on during a retro."""

    __tablename__ = "action_items"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Who owns the action item",
    )

    retro_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<ActionItem(id={self.id}, retro_id={self.retro_id})>"
