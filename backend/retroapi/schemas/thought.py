"""
Retro Board Backend — Thought and Action Item Schemas
======================================================

What:  Request/response models for the two retro-scoped resources.

The parent retro always comes from the URL on create; a `retro` key in a
create body is ignored. On PATCH, `retro` moves the record to another
existing retro.
"""

import uuid
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from retroapi.models.thought import ThoughtCategory


# ══════════════════════════════════════════════════════════════════════════
# Thoughts
# ══════════════════════════════════════════════════════════════════════════


class ThoughtCreate(BaseModel):
    description: Optional[str] = None
    category: ThoughtCategory = Field(description="One of Drop, Add, Keep, Improve")


class ThoughtUpdate(BaseModel):
    description: Optional[str] = None
    category: Optional[ThoughtCategory] = None
    retro: Optional[uuid.UUID] = None

    model_config = {"extra": "forbid"}


class ThoughtResponse(BaseModel):
    id: uuid.UUID
    description: Optional[str] = None
    category: Optional[ThoughtCategory] = None
    retro: Optional[uuid.UUID] = Field(default=None, validation_alias=AliasChoices("retro_id", "retro"))

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Action Items
# ══════════════════════════════════════════════════════════════════════════


class ActionItemCreate(BaseModel):
    description: Optional[str] = None
    name: Optional[str] = Field(default=None, max_length=255, description="Owner of the action item")


class ActionItemUpdate(BaseModel):
    description: Optional[str] = None
    name: Optional[str] = Field(default=None, max_length=255, description="Owner of the action item")
    retro: Optional[uuid.UUID] = None

    model_config = {"extra": "forbid"}


class ActionItemResponse(BaseModel):
    id: uuid.UUID
    description: Optional[str] = None
    name: Optional[str] = None
    retro: Optional[uuid.UUID] = Field(default=None, validation_alias=AliasChoices("retro_id", "retro"))

    model_config = {"from_attributes": True}
