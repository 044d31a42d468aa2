"""
Per-employee leave records.

Employee lookup is an exact, case-insensitive name comparison. There is
deliberately no fuzzy matching on this path.
"""
import logging
from typing import Iterable, Optional, Tuple

from ..models import LeaveRecord
from ..normalizer import normalize

logger = logging.getLogger(__name__)


class LeaveRegistry:

    def __init__(self, records: Iterable[LeaveRecord] = ()):
        self._records: Tuple[LeaveRecord, ...] = tuple(records)

    @classmethod
    def build(cls, records: Iterable[LeaveRecord]) -> "LeaveRegistry":
        kept = []
        for record in records:
            if not isinstance(record.employee_name, str) or not normalize(record.employee_name):
                logger.warning(f"Skipping leave record without employee name: {record!r}")
                continue
            kept.append(record)

        logger.info(f"Leave registry built: {len(kept)} records")
        return cls(kept)

    def lookup(self, employee_name: str) -> Optional[LeaveRecord]:
        """
        Find the first record whose employee name matches (case-insensitive).

        :param employee_name: Name as typed by the user
        :return: LeaveRecord or None
        """
        wanted = normalize(employee_name)
        for record in self._records:
            if normalize(record.employee_name) == wanted:
                return record
        return None

    @staticmethod
    def format(record: LeaveRecord) -> str:
        """Render a leave record as a multi-line reply."""
        return (
            f"Leave details for {record.employee_name}:\n\n"
            f"Leave Type: {record.leave_type}\n"
            f"Leave Balance: {record.balance}\n"
            f"Leave Taken: {record.taken}\n"
            f"Leave Accruals: {record.accrued}\n"
            f"Adjustments: {record.adjustments}"
        )

    @property
    def records(self) -> Tuple[LeaveRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)
