"""
Ping endpoint for connectivity checks
"""

from fastapi import APIRouter

from mockflights.core import settings

router = APIRouter(tags=["ping"])


@router.get("/ping", summary="Ping")
async def ping():
    return {"message": settings.PING_MESSAGE}
