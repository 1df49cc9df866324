# Models Package
from .enums import WithdrawStatus
from .withdrawal import WithdrawalRecord

__all__ = [
    "WithdrawStatus",
    "WithdrawalRecord",
]
