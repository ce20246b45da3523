"""
Retro Board Backend — Action Item Route Handlers
=================================================

What:  CRUD for action items. New items are attached to the retro in the URL.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.database import get_db_session
from retroapi.middleware.auth import authenticate_user
from retroapi.schemas.common import Envelope, ErrorResponse, envelope
from retroapi.schemas.thought import ActionItemCreate, ActionItemResponse, ActionItemUpdate
from retroapi.services.retro_items import action_item_service

router = APIRouter(tags=["Action Items"])

NOT_FOUND = {404: {"description": "Action item or retro not found", "model": ErrorResponse}}


@router.post(
    "/retros/{retro_id}/actionitems",
    status_code=201,
    response_model=Envelope[ActionItemResponse],
    responses=NOT_FOUND,
    dependencies=[Depends(authenticate_user)],
    summary="Add an action item to a retro",
)
async def create_action_item(
    retro_id: uuid.UUID,
    body: ActionItemCreate,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    item = await action_item_service.create(db, retro_id, body)
    return envelope(item)


@router.get(
    "/retros/{retro_id}/actionitems",
    response_model=Envelope[List[ActionItemResponse]],
    summary="Action items attached to a retro",
)
async def list_retro_action_items(
    retro_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    items = await action_item_service.list_for_retro(db, retro_id)
    return envelope(items)


@router.patch(
    "/retros/actionitems/{action_id}",
    response_model=Envelope[ActionItemResponse],
    responses=NOT_FOUND,
    dependencies=[Depends(authenticate_user)],
    summary="Overwrite fields of an action item and return the updated item",
)
async def update_action_item(
    action_id: uuid.UUID,
    body: ActionItemUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    item = await action_item_service.update(db, action_id, body)
    return envelope(item)


@router.get(
    "/actionitems",
    response_model=Envelope[List[ActionItemResponse]],
    summary="List action items, optionally filtered",
)
async def list_action_items(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    items = await action_item_service.list_items(db, request.query_params.multi_items())
    return envelope(items)


@router.get(
    "/actionitems/{action_id}",
    response_model=Envelope[ActionItemResponse],
    responses=NOT_FOUND,
    summary="Get an action item by id",
)
async def get_action_item(
    action_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    item = await action_item_service.get(db, action_id)
    return envelope(item)


@router.delete(
    "/actionitems/{action_id}",
    response_model=Envelope[ActionItemResponse],
    responses=NOT_FOUND,
    dependencies=[Depends(authenticate_user)],
    summary="Delete an action item",
)
async def delete_action_item(
    action_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    item = await action_item_service.delete(db, action_id)
    return envelope(item)
