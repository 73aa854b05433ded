"""
Information endpoint for API v1.

Returns the service name and version together with the number of
records held by each collection.  Useful as a liveness probe that
also exercises the database.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(request: Request) -> Dict[str, Any]:
    state = request.app.state
    return {
        "name": state.settings.project_name,
        "version": state.settings.api_version,
        "collections": state.repositories.counts(),
    }
