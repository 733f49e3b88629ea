"""
# Health Routes

Liveness and readiness probe for load balancers and container platforms.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from sports_buddy.database import db_manager

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Report whether the API can reach MongoDB.

    Returns 200 with ``status: healthy`` when the database answers a ping, 503 with
    ``status: unhealthy`` otherwise.
    """
    database_ok = await db_manager.health_check()
    if database_ok:
        return {"status": "healthy", "database": True}
    return JSONResponse(status_code=503, content={"status": "unhealthy", "database": False})
