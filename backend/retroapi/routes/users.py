"""
Retro Board Backend — User Route Handlers
==========================================

What:  Signup, signin, user lookup and user listing.
How:   Parses the request, delegates to UserService, wraps the result in
       the response envelope.

Status codes:
    POST /signup       201 created | 400 invalid input | 409 username taken
    POST /signin       200 ok      | 404 username or password mismatch
    GET  /users/{id}   200 ok      | 401 no/unknown token | 404 | 400 malformed id
    GET  /users        200 ok (possibly empty) | 400 unknown filter
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.database import get_db_session
from retroapi.middleware.auth import authenticate_user
from retroapi.schemas.common import Envelope, ErrorResponse, envelope
from retroapi.schemas.user import AuthResponse, Credentials, UserPublic
from retroapi.services.user_service import user_service


router = APIRouter(tags=["Users"])


@router.post(
    "/signup",
    status_code=201,
    response_model=Envelope[AuthResponse],
    responses={
        400: {"description": "Empty username or password too short", "model": ErrorResponse},
        409: {"description": "Username already taken", "model": ErrorResponse},
    },
    summary="Create an account and receive an access token",
)
async def signup(
    body: Credentials,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    result = await user_service.signup(db, username=body.username, password=body.password)
    return envelope(result)


@router.post(
    "/signin",
    response_model=Envelope[AuthResponse],
    responses={404: {"description": "Username or password doesn't match", "model": ErrorResponse}},
    summary="Exchange username and password for the account's access token",
)
async def signin(
    body: Credentials,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    result = await user_service.signin(db, username=body.username, password=body.password)
    return envelope(result)


@router.get(
    "/users",
    response_model=Envelope[List[UserPublic]],
    responses={400: {"description": "Unknown filter or malformed value", "model": ErrorResponse}},
    summary="List users, optionally filtered by id or username",
)
async def list_users(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    users = await user_service.list_users(db, request.query_params.multi_items())
    return envelope(users)


@router.get(
    "/users/{user_id}",
    response_model=Envelope[UserPublic],
    responses={
        401: {"description": "Missing or unknown access token", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    dependencies=[Depends(authenticate_user)],
    summary="Get a user by id",
)
async def get_user(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> dict:
    user = await user_service.get_user(db, user_id)
    return envelope(user)
