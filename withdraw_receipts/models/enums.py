"""
Status enums for withdrawal records
"""

import enum


class WithdrawStatus(enum.Enum):
    """Withdraw status enum"""
    PENDING = "Pending"
    COMPLETED = "Completed"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not WithdrawStatus.PENDING
