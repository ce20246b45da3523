"""
Retro Board Backend — Reference Resolvers
==========================================

What:  Turn ids and usernames from request bodies into stored records
       before an entity is constructed or patched.
Who:   RetroService (admin, participants), ThoughtService and
       ActionItemService (parent retro).

Each resolver either returns the record(s) or raises NotFoundError.
The one exception is resolve_participants: unknown usernames are dropped.
"""

import logging
import uuid
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.exceptions import NotFoundError
from retroapi.models.retro import Retro
from retroapi.models.user import User

logger = logging.getLogger(__name__)


async def resolve_user(db: AsyncSession, user_id: uuid.UUID) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError(resource="user", resource_id=str(user_id))
    return user


async def resolve_retro(db: AsyncSession, retro_id: uuid.UUID) -> Retro:
    retro = await db.get(Retro, retro_id)
    if retro is None:
        raise NotFoundError(resource="retro", resource_id=str(retro_id))
    return retro


async def resolve_participants(db: AsyncSession, usernames: Iterable[str]) -> List[User]:
    """
    Resolve usernames to Users, keeping the order of first appearance.

    Matching is case-insensitive (usernames are stored lowercase).
    Duplicates collapse to one entry and unknown names are silently dropped.
    """
    wanted: List[str] = []
    for name in usernames:
        key = name.strip().lower()
        if key and key not in wanted:
            wanted.append(key)
    if not wanted:
        return []

    result = await db.execute(select(User).where(User.username.in_(wanted)))
    by_name = {user.username: user for user in result.scalars().all()}

    missing = [name for name in wanted if name not in by_name]
    if missing:
        logger.info("Dropping unknown participants: %s", ", ".join(missing))

    return [by_name[name] for name in wanted if name in by_name]
