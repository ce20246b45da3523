"""
Retro Board Backend — Thought Route Handlers
=============================================

What:  CRUD for thoughts. New thoughts are filed under the retro in the URL.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.database import get_db_session
from retroapi.middleware.auth import authenticate_user
from retroapi.schemas.common import Envelope, ErrorResponse, envelope
from retroapi.schemas.thought import ThoughtCreate, ThoughtResponse, ThoughtUpdate
from retroapi.services.retro_items import thought_service

router = APIRouter(tags=["Thoughts"])

NOT_FOUND = {404: {"description": "Thought or retro not found", "model": ErrorResponse}}


@router.post(
    "/retros/{retro_id}/thoughts",
    status_code=201,
    response_model=Envelope[ThoughtResponse],
    responses=NOT_FOUND,
    dependencies=[Depends(authenticate_user)],
    summary="Add a thought to a retro",
)
async def create_thought(
    retro_id: uuid.UUID,
    body: ThoughtCreate,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    thought = await thought_service.create(db, retro_id, body)
    return envelope(thought)


@router.get(
    "/retros/{retro_id}/thoughts",
    response_model=Envelope[List[ThoughtResponse]],
    summary="Thoughts filed under a retro",
)
async def list_retro_thoughts(
    retro_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    thoughts = await thought_service.list_for_retro(db, retro_id)
    return envelope(thoughts)


@router.patch(
    "/retros/thoughts/{thought_id}",
    response_model=Envelope[ThoughtResponse],
    responses=NOT_FOUND,
    dependencies=[Depends(authenticate_user)],
    summary="Overwrite fields of a thought and return the updated thought",
)
async def update_thought(
    thought_id: uuid.UUID,
    body: ThoughtUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    thought = await thought_service.update(db, thought_id, body)
    return envelope(thought)


@router.get(
    "/thoughts",
    response_model=Envelope[List[ThoughtResponse]],
    summary="List thoughts, optionally filtered",
)
async def list_thoughts(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    thoughts = await thought_service.list_items(db, request.query_params.multi_items())
    return envelope(thoughts)


@router.get(
    "/thoughts/{thought_id}",
    response_model=Envelope[ThoughtResponse],
    responses=NOT_FOUND,
    summary="Get a thought by id",
)
async def get_thought(
    thought_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    thought = await thought_service.get(db, thought_id)
    return envelope(thought)


@router.delete(
    "/thoughts/{thought_id}",
    response_model=Envelope[ThoughtResponse],
    responses=NOT_FOUND,
    dependencies=[Depends(authenticate_user)],
    summary="Delete a thought",
)
async def delete_thought(
    thought_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    thought = await thought_service.delete(db, thought_id)
    return envelope(thought)
