"""
Health endpoint for API v1.

Used by load balancers and container orchestrators to check that the
process is up.  It does not touch the database.
"""

from typing import Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def health(request: Request) -> Dict[str, str]:
    """Return the service status together with its name and version."""
    return {"status": "ok", "name": request.app.title, "version": request.app.version}
