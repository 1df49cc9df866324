"""
In-memory withdrawal record store.

Records live for the lifetime of the process: an ordered list for the admin
listing and an id index for receipt lookups. Every operation takes the same
lock, so appending to the list and the index is a single step for concurrent
request threads.
"""

import logging
import threading
from typing import Dict, List, Optional

from withdraw_receipts.models.enums import WithdrawStatus
from withdraw_receipts.models.withdrawal import WithdrawalRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Append-only store of withdrawal records keyed by id"""

    def __init__(self):
        self._records: List[WithdrawalRecord] = []
        self._by_id: Dict[str, WithdrawalRecord] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Lock shared by every store operation, for multi-step callers."""
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def append(self, record: WithdrawalRecord) -> None:
        """Add a record to the ordered collection and the id index."""
        with self._lock:
            self._records.append(record)
            self._by_id[record.id] = record

    def get_by_id(self, record_id: str) -> Optional[WithdrawalRecord]:
        """Exact-match lookup; an unknown id returns None."""
        with self._lock:
            return self._by_id.get(record_id)

    def all(self) -> List[WithdrawalRecord]:
        """All records, oldest first."""
        with self._lock:
            return list(self._records)

    def update_status(self, record_id: str, new_status: WithdrawStatus) -> bool:
        """Set the status of a record in place. Returns False for an unknown id."""
        with self._lock:
            record = self._by_id.get(record_id)
            if record is None:
                return False
            record.status = new_status
        logger.info(f"Withdrawal {record_id} status set to {new_status.value}")
        return True
