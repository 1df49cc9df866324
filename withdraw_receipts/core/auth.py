"""
Shared admin key check for the admin listing and status endpoints
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, Query, Request

from withdraw_receipts.api.deps import get_settings
from withdraw_receipts.core.config import Settings
from withdraw_receipts.core.errors import AdminUnauthorized

logger = logging.getLogger(__name__)


def admin_key_matches(provided: Optional[str], expected: Optional[str]) -> bool:
    """Constant-time key comparison. An unset admin key matches nothing."""
    if not expected or provided is None:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def require_admin_key(
    request: Request,
    key: Optional[str] = Query(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency that rejects the request unless ?key= equals the admin key."""
    if not admin_key_matches(key, settings.admin_key):
        client = request.client.host if request.client else "unknown"
        logger.warning(f"Rejected admin request to {request.url.path} from {client}")
        raise AdminUnauthorized()
