"""
Retro Board Backend — Retro-Scoped Item Services
=================================================

What:  CRUD for the two record types that hang off a retro: thoughts and
       action items.
How:   RetroItemService implements the shared flow once; ThoughtService and
       ActionItemService bind it to a model, a response schema and the
       filterable fields, and add their own field rules.
Who:   Called by the thought and action-item routes.

Flow per operation:
    create         resolve parent retro from the URL → insert → flush
    update         load by id → resolve `retro` if present → overwrite fields
    delete         load by id → snapshot → delete
    get            load by id (404 when absent)
    list_items     query-string filters (empty list when nothing matches)
    list_for_retro all items whose retro_id matches (no existence check)
"""

import logging
import uuid
from typing import Any, Dict, Generic, Iterable, List, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.database import Base
from retroapi.exceptions import DatabaseError, NotFoundError, ValidationError
from retroapi.models.action_item import ActionItem
from retroapi.models.thought import Thought, ThoughtCategory
from retroapi.schemas.thought import ActionItemResponse, ThoughtResponse
from retroapi.services.filters import FilterField, build_filters, parse_str, parse_uuid
from retroapi.services.resolvers import resolve_retro

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class RetroItemService(Generic[ModelT, ResponseT]):
    """Shared CRUD for records that reference a parent retro by id."""

    model: Type[ModelT]
    response_model: Type[ResponseT]
    resource: str
    filters: Dict[str, FilterField]

    def check_changes(self, changes: Dict[str, Any]) -> None:
        """Hook for per-resource field rules on PATCH bodies."""

    async def create(self, db: AsyncSession, retro_id: uuid.UUID, data: BaseModel) -> ResponseT:
        """
        Insert a new item under an existing retro.

        Raises:
            NotFoundError: The retro in the URL does not exist (→ 404)
        """
        try:
            retro = await resolve_retro(db, retro_id)
            item = self.model(retro_id=retro.id, **data.model_dump(exclude={"retro"}))
            db.add(item)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating %s: %s", self.resource, str(e))
            raise DatabaseError(context={"operation": f"create_{self.resource}"})

        logger.info("%s created: %s (retro=%s)", self.resource.capitalize(), item.id, retro_id)
        return self.response_model.model_validate(item)

    async def update(self, db: AsyncSession, item_id: uuid.UUID, data: BaseModel) -> ResponseT:
        """
        Overwrite the fields present in the PATCH body and return the result.

        Raises:
            NotFoundError: Unknown item id, or `retro` naming a missing retro
            ValidationError: A field rule rejected the body
        """
        changes = data.model_dump(exclude_unset=True)
        self.check_changes(changes)
        try:
            item = await self._get(db, item_id)
            if "retro" in changes:
                new_retro = changes.pop("retro")
                if new_retro is None:
                    raise ValidationError(message="'retro' must be a retro id", field="retro")
                item.retro_id = (await resolve_retro(db, new_retro)).id
            for field, value in changes.items():
                setattr(item, field, value)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating %s %s: %s", self.resource, item_id, str(e))
            raise DatabaseError(context={"resource": self.resource, "id": str(item_id)})

        return self.response_model.model_validate(item)

    async def delete(self, db: AsyncSession, item_id: uuid.UUID) -> ResponseT:
        try:
            item = await self._get(db, item_id)
            deleted = self.response_model.model_validate(item)
            await db.delete(item)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting %s %s: %s", self.resource, item_id, str(e))
            raise DatabaseError(context={"resource": self.resource, "id": str(item_id)})

        logger.info("%s deleted: %s", self.resource.capitalize(), item_id)
        return deleted

    async def get(self, db: AsyncSession, item_id: uuid.UUID) -> ResponseT:
        try:
            item = await self._get(db, item_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching %s %s: %s", self.resource, item_id, str(e))
            raise DatabaseError(context={"resource": self.resource, "id": str(item_id)})
        return self.response_model.model_validate(item)

    async def list_items(
        self,
        db: AsyncSession,
        params: Iterable[Tuple[str, str]] = (),
    ) -> List[ResponseT]:
        clauses = build_filters(params, self.filters)
        return await self._list(db, clauses)

    async def list_for_retro(self, db: AsyncSession, retro_id: uuid.UUID) -> List[ResponseT]:
        return await self._list(db, [self.model.retro_id == retro_id])

    async def _get(self, db: AsyncSession, item_id: uuid.UUID) -> ModelT:
        item = await db.get(self.model, item_id)
        if item is None:
            raise NotFoundError(resource=self.resource, resource_id=str(item_id))
        return item

    async def _list(self, db: AsyncSession, clauses) -> List[ResponseT]:
        try:
            result = await db.execute(select(self.model).where(*clauses))
            items = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing %ss: %s", self.resource, str(e))
            raise DatabaseError(context={"operation": f"list_{self.resource}s"})
        return [self.response_model.model_validate(item) for item in items]


class ThoughtService(RetroItemService[Thought, ThoughtResponse]):
    model = Thought
    response_model = ThoughtResponse
    resource = "thought"
    filters = {
        "id": FilterField(parse_uuid, lambda v: Thought.id == v),
        "description": FilterField(parse_str, lambda v: Thought.description == v),
        "category": FilterField(ThoughtCategory, lambda v: Thought.category == v),
        "retro": FilterField(parse_uuid, lambda v: Thought.retro_id == v),
    }

    def check_changes(self, changes: Dict[str, Any]) -> None:
        if "category" in changes and changes["category"] is None:
            raise ValidationError(
                message="'category' must be one of: "
                + ", ".join(c.value for c in ThoughtCategory),
                field="category",
            )


class ActionItemService(RetroItemService[ActionItem, ActionItemResponse]):
    model = ActionItem
    response_model = ActionItemResponse
    resource = "action item"
    filters = {
        "id": FilterField(parse_uuid, lambda v: ActionItem.id == v),
        "description": FilterField(parse_str, lambda v: ActionItem.description == v),
        "name": FilterField(parse_str, lambda v: ActionItem.name == v),
        "retro": FilterField(parse_uuid, lambda v: ActionItem.retro_id == v),
    }


thought_service = ThoughtService()
action_item_service = ActionItemService()
