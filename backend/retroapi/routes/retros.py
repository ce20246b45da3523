"""
Retro Board Backend — Retro Route Handlers
===========================================

What:  Create, patch, delete, fetch and list retros, plus the per-user
       retro listing.
How:   Thin handlers over RetroService. Mutating routes require an access
       token; the authenticated user becomes the admin when the create body
       names none.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.database import get_db_session
from retroapi.middleware.auth import authenticate_user
from retroapi.models.user import User
from retroapi.schemas.common import Envelope, ErrorResponse, envelope
from retroapi.schemas.retro import RetroCreate, RetroResponse, RetroUpdate
from retroapi.services.retro_service import retro_service

router = APIRouter(tags=["Retros"])

NOT_FOUND = {404: {"description": "Retro not found", "model": ErrorResponse}}
UNAUTHORIZED = {401: {"description": "Missing or unknown access token", "model": ErrorResponse}}


@router.post(
    "/retros",
    status_code=201,
    response_model=Envelope[RetroResponse],
    responses={**UNAUTHORIZED, 404: {"description": "Admin user not found", "model": ErrorResponse}},
    summary="Create a retro",
    description=(
        "Participants are matched by username; names without an account are dropped. "
        "The admin defaults to the caller."
    ),
)
async def create_retro(
    body: RetroCreate,
    current_user: User = Depends(authenticate_user),
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    retro = await retro_service.create_retro(db, body, current_user=current_user)
    return envelope(retro)


@router.get(
    "/retros",
    response_model=Envelope[List[RetroResponse]],
    summary="List retros, optionally filtered",
)
async def list_retros(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    retros = await retro_service.list_retros(db, request.query_params.multi_items())
    return envelope(retros)


@router.get(
    "/retros/{retro_id}",
    response_model=Envelope[RetroResponse],
    responses=NOT_FOUND,
    summary="Get a retro by id",
)
async def get_retro(
    retro_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    retro = await retro_service.get_retro(db, retro_id)
    return envelope(retro)


@router.patch(
    "/retros/{retro_id}",
    response_model=Envelope[RetroResponse],
    responses={**UNAUTHORIZED, **NOT_FOUND},
    dependencies=[Depends(authenticate_user)],
    summary="Overwrite fields of a retro and return the updated retro",
)
async def update_retro(
    retro_id: uuid.UUID,
    body: RetroUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    retro = await retro_service.update_retro(db, retro_id, body)
    return envelope(retro)


@router.delete(
    "/retros/{retro_id}",
    response_model=Envelope[RetroResponse],
    responses={**UNAUTHORIZED, **NOT_FOUND},
    dependencies=[Depends(authenticate_user)],
    summary="Delete a retro (its thoughts and action items are kept)",
)
async def delete_retro(
    retro_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    retro = await retro_service.delete_retro(db, retro_id)
    return envelope(retro)


@router.get(
    "/users/{user_id}/retros",
    response_model=Envelope[List[RetroResponse]],
    summary="Retros a user administers or participates in",
)
async def list_user_retros(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    retros = await retro_service.list_retros_for_user(db, user_id)
    return envelope(retros)
