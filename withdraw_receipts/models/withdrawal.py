"""
Withdrawal record kept in process memory
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from withdraw_receipts.models.enums import WithdrawStatus


@dataclass
class WithdrawalRecord:
    """A stored withdrawal request, addressed by its receipt id"""

    id: str
    status: WithdrawStatus
    created_at: datetime
    chain: str
    address: str
    amount: str
    public_code: str
    requirement_confirmed: bool = True
    source_ip: Optional[str] = None

    def __repr__(self):
        return f"<WithdrawalRecord(id={self.id}, chain={self.chain}, amount={self.amount}, status={self.status.value})>"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat().replace("+00:00", "Z"),
            "chain": self.chain,
            "address": self.address,
            "amount": self.amount,
            "publicCode": self.public_code,
            "requirementConfirmed": self.requirement_confirmed,
            "sourceIp": self.source_ip,
        }
