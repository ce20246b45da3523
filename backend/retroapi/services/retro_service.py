"""
Retro Board Backend — Retro Service
====================================

What:  Create, patch, delete, fetch and list retros.
How:   References in request bodies (admin id, participant usernames) are
       resolved to Users before the Retro is built or patched.
Who:   Called by the retro routes.

Decisions:
    - PATCH returns the document as it is after the update.
    - Unknown participant usernames are dropped, an unknown admin id is a 404.
    - Deleting a retro leaves its thoughts and action items in place.
    - List routes return an empty list when nothing matches; only
      single-record lookups produce 404.
"""

import logging
import uuid
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.exceptions import DatabaseError, NotFoundError, ValidationError
from retroapi.models.retro import Retro
from retroapi.models.user import User
from retroapi.schemas.retro import RetroCreate, RetroResponse, RetroUpdate
from retroapi.services.filters import FilterField, build_filters, parse_bool, parse_str, parse_uuid
from retroapi.services.resolvers import resolve_participants, resolve_user

logger = logging.getLogger(__name__)

RETRO_FILTERS = {
    "id": FilterField(parse_uuid, lambda v: Retro.id == v),
    "description": FilterField(parse_str, lambda v: Retro.description == v),
    "active": FilterField(parse_bool, lambda v: Retro.active == v),
    "admin": FilterField(parse_uuid, lambda v: Retro.admin_id == v),
    "participants": FilterField(parse_uuid, lambda v: Retro.participants.any(User.id == v)),
    "created_at": FilterField(int, lambda v: Retro.created_at == v),
}


class RetroService:
    """Business logic for retrospective sessions."""

    async def create_retro(
        self,
        db: AsyncSession,
        data: RetroCreate,
        current_user: Optional[User] = None,
    ) -> RetroResponse:
        """
        Create a retro with resolved admin and participants.

        The admin defaults to `current_user` when the body has none.

        Raises:
            NotFoundError: The admin id does not exist (→ 404)
            ValidationError: No admin given and no authenticated user (→ 400)
        """
        try:
            if data.admin is not None:
                admin = await resolve_user(db, data.admin)
            elif current_user is not None:
                admin = current_user
            else:
                raise ValidationError(message="A retro needs an admin", field="admin")

            participants = await resolve_participants(db, (p.text for p in data.participants))

            retro = Retro(
                description=data.description,
                admin=admin,
                participants=participants,
                active=data.active,
            )
            db.add(retro)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating retro: %s", str(e))
            raise DatabaseError(context={"operation": "create_retro"})

        logger.info(
            "Retro created: %s (admin=%s, %d participants)",
            retro.id, admin.username, len(participants),
        )
        return RetroResponse.model_validate(retro)

    async def update_retro(
        self,
        db: AsyncSession,
        retro_id: uuid.UUID,
        data: RetroUpdate,
    ) -> RetroResponse:
        """
        Overwrite the fields present in the PATCH body.

        Returns:
            The retro after the update

        Raises:
            NotFoundError: Unknown retro id, or an admin id that does not exist
            ValidationError: `active` explicitly set to null
        """
        changes = data.model_dump(exclude_unset=True)
        try:
            retro = await self._get(db, retro_id)

            if "description" in changes:
                retro.description = changes["description"]
            if "active" in changes:
                if changes["active"] is None:
                    raise ValidationError(message="'active' must be true or false", field="active")
                retro.active = changes["active"]
            if "admin" in changes:
                retro.admin = (
                    await resolve_user(db, changes["admin"]) if changes["admin"] is not None else None
                )
            if "participants" in changes:
                refs = data.participants or []
                resolved = await resolve_participants(db, (p.text for p in refs))
                # Association row ids carry the order, so every row is rewritten
                retro.participants = []
                await db.flush()
                retro.participants = resolved

            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating retro %s: %s", retro_id, str(e))
            raise DatabaseError(context={"retro_id": str(retro_id)})

        logger.info("Retro %s updated: %s", retro_id, ", ".join(sorted(changes)) or "no fields")
        return RetroResponse.model_validate(retro)

    async def delete_retro(self, db: AsyncSession, retro_id: uuid.UUID) -> RetroResponse:
        """Remove a retro and return it as it was. Child records are not touched."""
        try:
            retro = await self._get(db, retro_id)
            deleted = RetroResponse.model_validate(retro)
            await db.delete(retro)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting retro %s: %s", retro_id, str(e))
            raise DatabaseError(context={"retro_id": str(retro_id)})

        logger.info("Retro deleted: %s", retro_id)
        return deleted

    async def get_retro(self, db: AsyncSession, retro_id: uuid.UUID) -> RetroResponse:
        try:
            retro = await self._get(db, retro_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching retro %s: %s", retro_id, str(e))
            raise DatabaseError(context={"retro_id": str(retro_id)})
        return RetroResponse.model_validate(retro)

    async def list_retros(
        self,
        db: AsyncSession,
        params: Iterable[Tuple[str, str]] = (),
    ) -> List[RetroResponse]:
        clauses = build_filters(params, RETRO_FILTERS)
        return await self._list(db, clauses)

    async def list_retros_for_user(self, db: AsyncSession, user_id: uuid.UUID) -> List[RetroResponse]:
        """Retros where the user is the admin or one of the participants."""
        clause = or_(Retro.admin_id == user_id, Retro.participants.any(User.id == user_id))
        return await self._list(db, [clause])

    async def _get(self, db: AsyncSession, retro_id: uuid.UUID) -> Retro:
        retro = await db.get(Retro, retro_id)
        if retro is None:
            raise NotFoundError(resource="retro", resource_id=str(retro_id))
        return retro

    async def _list(self, db: AsyncSession, clauses) -> List[RetroResponse]:
        try:
            result = await db.execute(
                select(Retro).where(*clauses).order_by(Retro.created_at, Retro.id)
            )
            retros = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing retros: %s", str(e))
            raise DatabaseError(context={"operation": "list_retros"})
        return [RetroResponse.model_validate(retro) for retro in retros]


retro_service = RetroService()
