"""
Retro Board Backend — Discovery Routes
=======================================

What:  GET / (welcome) and GET /endpoints (every registered API route with
       its methods), for people exploring the API by hand.
"""

from typing import List

from fastapi import APIRouter, Request

from retroapi.schemas.common import EndpointInfo, Envelope, WelcomeResponse, envelope

router = APIRouter(tags=["Discovery"])


@router.get("/", response_model=Envelope[WelcomeResponse], summary="Welcome message")
async def welcome() -> dict:
    return envelope(
        WelcomeResponse(
            message="Welcome to the Retro App API",
            endpoints="/endpoints",
        )
    )


@router.get(
    "/endpoints",
    response_model=Envelope[List[EndpointInfo]],
    summary="List every API route",
)
async def list_endpoints(request: Request) -> dict:
    """One entry per path, built from the OpenAPI document (docs routes are not part of it)."""
    paths = request.app.openapi().get("paths", {})
    endpoints = [
        EndpointInfo(path=path, methods=sorted(method.upper() for method in operations))
        for path, operations in paths.items()
    ]
    return envelope(endpoints)
