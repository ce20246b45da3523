"""
Retro Board Backend — User Service
===================================

What:  Signup, signin, and user lookups.
How:   Hashes passwords and issues access tokens through retroapi.security;
       all reads and writes go through the request's AsyncSession.
Who:   Called by the user routes and by the auth dependency.

Signup order of operations:
    1. Normalize username (strip + lowercase)
    2. Validate username and password length
    3. Reject a taken username (409)
    4. Hash the password and insert the user with a fresh token
    Nothing is written when steps 2 or 3 fail.
"""

import logging
import uuid
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.config import settings
from retroapi.exceptions import ConflictError, DatabaseError, NotFoundError, ValidationError
from retroapi.models.user import User
from retroapi.schemas.user import AuthResponse, UserPublic
from retroapi.security import generate_access_token, hash_password, verify_password
from retroapi.services.filters import FilterField, build_filters, parse_uuid

logger = logging.getLogger(__name__)

SIGNIN_MISMATCH = "Username or password doesn't match."

# Credential columns are not filterable
USER_FILTERS = {
    "id": FilterField(parse_uuid, lambda v: User.id == v),
    "username": FilterField(lambda raw: raw.strip().lower(), lambda v: User.username == v),
}


def normalize_username(username: str) -> str:
    return (username or "").strip().lower()


class UserService:
    """
    Business logic for user accounts.

    Error Handling Strategy:
        Business-rule failures raise ValidationError/ConflictError/NotFoundError.
        SQLAlchemy errors are logged and wrapped in DatabaseError.
    """

    def validate_credentials(self, username: str, password: str) -> None:
        """Raise ValidationError unless the signup credentials are acceptable."""
        if not username:
            raise ValidationError(message="Username is required", field="username")
        if len(password or "") < settings.password_min_length:
            raise ValidationError(
                message=f"Password must be at least {settings.password_min_length} characters long",
                field="password",
            )

    async def signup(self, db: AsyncSession, username: str, password: str) -> AuthResponse:
        """
        Create a user and return its id, username and access token.

        Raises:
            ValidationError: Empty username or short password (→ 400)
            ConflictError: Username already taken (→ 409)
        """
        username = normalize_username(username)
        self.validate_credentials(username, password)

        try:
            existing = await db.execute(select(User.id).where(User.username == username))
            if existing.scalar_one_or_none() is not None:
                raise ConflictError(
                    message=f"Username '{username}' is already taken",
                    context={"username": username},
                )

            user = User(
                username=username,
                password_hash=hash_password(password),
                access_token=generate_access_token(),
            )
            db.add(user)
            await db.flush()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same name
            await db.rollback()
            raise ConflictError(
                message=f"Username '{username}' is already taken",
                context={"username": username},
            )
        except SQLAlchemyError as e:
            logger.error("Database error during signup: %s", str(e))
            raise DatabaseError(context={"operation": "signup"})

        logger.info("User created: %s (%s)", user.username, user.id)
        return AuthResponse(user_id=user.id, username=user.username, access_token=user.access_token)

    async def signin(self, db: AsyncSession, username: str, password: str) -> AuthResponse:
        """
        Verify credentials and return the token issued at signup.

        Raises:
            NotFoundError: Unknown username or wrong password (→ 404, same message)
        """
        username = normalize_username(username)
        try:
            result = await db.execute(select(User).where(User.username == username))
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error during signin: %s", str(e))
            raise DatabaseError(context={"operation": "signin"})

        if user is None or not verify_password(password or "", user.password_hash):
            raise NotFoundError(resource="user", message=SIGNIN_MISMATCH)

        return AuthResponse(user_id=user.id, username=user.username, access_token=user.access_token)

    async def get_by_access_token(self, db: AsyncSession, access_token: str) -> Optional[User]:
        """Exact-match token lookup used by the auth dependency."""
        try:
            result = await db.execute(select(User).where(User.access_token == access_token))
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error during token lookup: %s", str(e))
            raise DatabaseError(context={"operation": "authenticate"})

    async def get_user(self, db: AsyncSession, user_id: uuid.UUID) -> UserPublic:
        try:
            user = await db.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", user_id, str(e))
            raise DatabaseError(context={"user_id": str(user_id)})
        if user is None:
            raise NotFoundError(resource="user", resource_id=str(user_id))
        return UserPublic.model_validate(user)

    async def list_users(
        self,
        db: AsyncSession,
        params: Iterable[Tuple[str, str]] = (),
    ) -> List[UserPublic]:
        clauses = build_filters(params, USER_FILTERS)
        try:
            result = await db.execute(select(User).where(*clauses).order_by(User.username))
            users = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e))
            raise DatabaseError(context={"operation": "list_users"})
        return [UserPublic.model_validate(user) for user in users]


user_service = UserService()
