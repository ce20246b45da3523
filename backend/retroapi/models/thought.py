"""
Retro Board Backend — Thought SQLAlchemy Model
===============================================

What:  ORM model for the `thoughts` table.
Who:   Used by ThoughtService.

retro_id is an indexed identifier without a foreign-key constraint: a
thought outlives the retro it was written in.
"""

import enum
import uuid
from typing import Optional

from sqlalchemy import Enum, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from retroapi.database import Base


class ThoughtCategory(str, enum.Enum):
    """The four retro columns a thought can be filed under."""

    Drop = "Drop"
    Add = "Add"
    Keep = "Keep"
    Improve = "Improve"


class Thought(Base):
    """A categorized note submitted within a retro."""

    __tablename__ = "thoughts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    retro_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True, index=True)

    category: Mapped[Optional[ThoughtCategory]] = mapped_column(
        Enum(
            ThoughtCategory,
            name="thought_category",
            native_enum=False,
            validate_strings=True,
            length=16,
        ),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Thought(id={self.id}, retro_id={self.retro_id}, category={self.category})>"
