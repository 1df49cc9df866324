"""
Health check endpoint
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Liveness probe
    Returns HTTP 200 with ok true
    """
    return {"ok": True}
