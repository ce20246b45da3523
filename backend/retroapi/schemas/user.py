"""
Retro Board Backend — User Schemas
===================================

What:  Request bodies for signup/signin and the two user projections.

Projections:
    UserPublic     {id, username}; used everywhere a user is embedded or listed
    AuthResponse   {user_id, username, access_token}; only signup and signin
"""

import uuid

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Body of POST /signup and POST /signin."""

    username: str = Field(max_length=150, description="Login name; compared case-insensitively")
    password: str = Field(description="Plain-text password (min length enforced at signup)")


class AuthResponse(BaseModel):
    user_id: uuid.UUID
    username: str
    access_token: str = Field(description="Send this value verbatim in the Authorization header")


class UserPublic(BaseModel):
    id: uuid.UUID
    username: str

    model_config = {"from_attributes": True}
