"""
Admin JSON endpoints: listing and status changes, behind the shared admin key
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from withdraw_receipts.api.deps import get_receipt_service
from withdraw_receipts.core.auth import require_admin_key
from withdraw_receipts.core.errors import RecordNotFound
from withdraw_receipts.models.enums import WithdrawStatus
from withdraw_receipts.services.receipts import ReceiptService

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin_key)],
)


class StatusUpdate(BaseModel):
    """Status change request model"""
    status: WithdrawStatus = Field(..., description="Completed or Rejected")


@router.get("/withdrawals")
async def list_withdrawals(service: ReceiptService = Depends(get_receipt_service)):
    """All withdrawal requests, oldest first"""
    records = service.list_records()
    return {
        "ok": True,
        "count": len(records),
        "withdrawals": [r.to_dict() for r in records],
    }


@router.post("/withdrawals/{receipt_id}/status")
async def update_withdrawal_status(
    receipt_id: str,
    update: StatusUpdate,
    service: ReceiptService = Depends(get_receipt_service),
):
    """Mark a pending withdrawal Completed or Rejected"""
    if not service.update_status(receipt_id, update.status):
        raise RecordNotFound()
    return {"ok": True, "receipt": service.get_receipt(receipt_id).to_dict()}
