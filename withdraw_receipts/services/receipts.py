"""
Receipt service: submission, lookup and status changes for withdrawal records,
plus the display helpers used by the receipt and admin pages.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Callable, List, Optional

from withdraw_receipts.core.errors import InvalidStatusTransition
from withdraw_receipts.models.enums import WithdrawStatus
from withdraw_receipts.models.withdrawal import WithdrawalRecord
from withdraw_receipts.repos.withdrawal_repo import RecordStore
from withdraw_receipts.services.intake import WithdrawSubmission, validate_submission

logger = logging.getLogger(__name__)

AMOUNT_PLACES = Decimal("0.00000001")
REQUIRED_BALANCE_PCT = Decimal("0.10")

CHAIN_UNITS = {
    "bitcoin": "BTC",
    "ethereum": "ETH",
    "dogecoin": "DOGE",
    "litecoin": "LTC",
    "tron": "TRX",
    "solana": "SOL",
}


def _new_receipt_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_amount(amount) -> Decimal:
    """Numeric value of an amount; anything non-numeric counts as zero."""
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        return Decimal(0)
    if not value.is_finite():
        return Decimal(0)
    return value


def _render_amount(value: Decimal) -> str:
    # precision must cover every integer digit plus the 8 decimal places
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 8, value.adjusted() + 9)
        rounded = value.quantize(AMOUNT_PLACES, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            return "0"
        return format(rounded.normalize(), "f")


def format_amount(amount) -> str:
    """
    Round an amount to 8 decimal places (half away from zero) and render it
    as a plain decimal string without trailing zeros.

    format_amount("1.123456789") -> "1.12345679"
    format_amount("abc") -> "0"
    """
    return _render_amount(_parse_amount(amount))


def required_balance(amount) -> str:
    """Existing balance shown on the receipt: 10% of the requested amount."""
    value = _parse_amount(amount)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 2)
        share = value * REQUIRED_BALANCE_PCT
    return _render_amount(share)


def unit_for_chain(chain: Optional[str]) -> str:
    """Display unit for a chain identifier; unknown chains show uppercased."""
    if not chain:
        return ""
    return CHAIN_UNITS.get(chain.strip().lower(), chain.upper())


@dataclass
class SubmissionResult:
    id: str
    record: WithdrawalRecord


class ReceiptService:
    """Creates withdrawal records from submissions and serves them back by id"""

    def __init__(
        self,
        store: RecordStore,
        id_factory: Callable[[], str] = _new_receipt_id,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.store = store
        self._id_factory = id_factory
        self._clock = clock

    def submit_request(
        self,
        submission: WithdrawSubmission,
        source_ip: Optional[str] = None,
    ) -> SubmissionResult:
        """
        Validate a submission and store it as a Pending record.

        Raises IntakeValidationError without touching the store when a check
        fails.
        """
        normalized = validate_submission(submission)

        record = WithdrawalRecord(
            id=self._id_factory(),
            status=WithdrawStatus.PENDING,
            created_at=self._clock(),
            chain=normalized.chain,
            address=normalized.address,
            amount=normalized.amount,
            public_code=normalized.public_code,
            requirement_confirmed=normalized.requirement_confirmed,
            source_ip=source_ip,
        )
        self.store.append(record)

        logger.info(f"Withdrawal request {record.id} created (chain={record.chain}, amount={record.amount})")
        return SubmissionResult(id=record.id, record=record)

    def get_receipt(self, record_id: str) -> Optional[WithdrawalRecord]:
        return self.store.get_by_id(record_id)

    def list_records(self) -> List[WithdrawalRecord]:
        """All records in submission order, for the admin listing."""
        return self.store.all()

    def update_status(self, record_id: str, new_status: WithdrawStatus) -> bool:
        """
        Move a Pending record to Completed or Rejected.

        Returns False for an unknown id. Completed and Rejected are terminal;
        changing them, or moving a record back to Pending, raises
        InvalidStatusTransition.
        """
        with self.store.lock:
            record = self.store.get_by_id(record_id)
            if record is None:
                return False

            if new_status is WithdrawStatus.PENDING:
                raise InvalidStatusTransition("Status can only move from Pending to Completed or Rejected")
            if record.status.is_terminal:
                raise InvalidStatusTransition(f"Withdrawal is already {record.status.value}")

            return self.store.update_status(record_id, new_status)
