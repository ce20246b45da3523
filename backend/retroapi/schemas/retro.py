"""
Retro Board Backend — Retro Schemas
====================================

What:  Request bodies for creating and patching retros, and the retro
       response model with resolved admin and participants.

Participants are sent as `[{"text": "<username>"}]`, the shape produced
by the frontend's tag input. Usernames that do not exist are dropped.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from retroapi.schemas.user import UserPublic


class ParticipantRef(BaseModel):
    text: str = Field(description="Username of the participant")


class RetroCreate(BaseModel):
    description: Optional[str] = None
    admin: Optional[uuid.UUID] = Field(
        default=None,
        description="User id of the admin; defaults to the authenticated user",
    )
    participants: List[ParticipantRef] = Field(default_factory=list)
    active: bool = True


class RetroUpdate(BaseModel):
    """Only the fields present in the body are overwritten."""

    description: Optional[str] = None
    admin: Optional[uuid.UUID] = None
    participants: Optional[List[ParticipantRef]] = None
    active: Optional[bool] = None

    model_config = {"extra": "forbid"}


class RetroResponse(BaseModel):
    id: uuid.UUID
    description: Optional[str] = None
    admin: Optional[UserPublic] = None
    participants: List[UserPublic] = Field(default_factory=list)
    active: bool
    created_at: int = Field(description="Creation time in epoch milliseconds")

    model_config = {"from_attributes": True}
