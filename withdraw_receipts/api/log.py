"""
Client event log endpoint
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["log"])


@router.post("/log")
async def log_event(payload: Optional[Dict[str, Any]] = Body(default=None)):
    """Record a client-side event in the server log"""
    payload = payload or {}
    event = payload.get("event") or "unknown"
    data = payload.get("data") or {}
    logger.info(f"[LOG] {event} {data}")
    return {"status": "logged"}
