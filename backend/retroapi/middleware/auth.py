"""
Retro Board Backend — Access-Token Authentication
==================================================

What:  FastAPI dependency that gates routes behind an access token.
How:   Reads the `Authorization` header and looks up the User whose
       access_token equals it exactly. There is no "Bearer " prefix handling,
       signing, or expiry: the header value is the token.
Who:   Declared on GET /users/{user_id} and on every mutating route.

Outcomes:
    token matches   → the User is returned to the route
    missing/no match → AuthenticationError (401, "Please, log in")
    store failure   → DatabaseError (500)
"""

import logging
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from retroapi.database import get_db_session
from retroapi.exceptions import AuthenticationError
from retroapi.middleware.request_id import request_id_var
from retroapi.models.user import User
from retroapi.services.user_service import user_service

logger = logging.getLogger(__name__)


async def authenticate_user(
    authorization: Optional[str] = Header(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> User:
    if not authorization:
        raise AuthenticationError()

    user = await user_service.get_by_access_token(db, authorization)
    if user is None:
        logger.warning("[%s] Rejected unknown access token", request_id_var.get(""))
        raise AuthenticationError()
    return user
