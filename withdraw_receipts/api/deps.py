"""
Request-scoped dependencies
"""

from typing import Optional

from fastapi import Request

from withdraw_receipts.core.config import Settings
from withdraw_receipts.services.receipts import ReceiptService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_receipt_service(request: Request) -> ReceiptService:
    return request.app.state.receipt_service


def get_client_ip(request: Request) -> Optional[str]:
    """First X-Forwarded-For hop if present, else the connection address."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client:
        return request.client.host
    return None
