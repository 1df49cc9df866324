"""
Public withdrawal request API
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request

from withdraw_receipts.api.deps import get_client_ip, get_receipt_service, get_settings
from withdraw_receipts.core.config import Settings
from withdraw_receipts.core.errors import IntakeValidationError, RecordNotFound
from withdraw_receipts.core.metrics import WITHDRAW_REQUEST_COUNT
from withdraw_receipts.services.intake import WithdrawSubmission
from withdraw_receipts.services.receipts import ReceiptService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["withdrawals"])


def receipt_url(settings: Settings, receipt_id: str) -> str:
    return f"{settings.public_base_url.rstrip('/')}/receipt/{receipt_id}"


@router.post("/withdraw-request")
async def create_withdraw_request(
    request: Request,
    submission: Optional[WithdrawSubmission] = Body(default=None),
    service: ReceiptService = Depends(get_receipt_service),
    settings: Settings = Depends(get_settings),
):
    """Validate and store a withdrawal request, returning its receipt id and link"""
    if submission is None:
        submission = WithdrawSubmission()

    try:
        result = service.submit_request(submission, source_ip=get_client_ip(request))
    except IntakeValidationError as e:
        WITHDRAW_REQUEST_COUNT.labels(status="rejected").inc()
        logger.warning(f"Withdrawal request rejected: {e.message}")
        raise

    WITHDRAW_REQUEST_COUNT.labels(status="accepted").inc()
    return {
        "ok": True,
        "receiptId": result.id,
        "url": receipt_url(settings, result.id),
    }


@router.get("/receipt/{receipt_id}")
async def get_receipt(
    receipt_id: str,
    service: ReceiptService = Depends(get_receipt_service),
):
    """Receipt JSON for a withdrawal request id"""
    record = service.get_receipt(receipt_id)
    if record is None:
        raise RecordNotFound()
    return {"ok": True, "receipt": record.to_dict()}
