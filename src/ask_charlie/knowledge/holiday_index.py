import logging
from datetime import date, datetime
from typing import Iterable, Optional, Tuple

from ..models import HolidayRecord

logger = logging.getLogger(__name__)


class HolidayIndex:
    """Holiday records in load order; answers "next holiday" queries."""

    def __init__(self, holidays: Iterable[HolidayRecord] = ()):
        self._holidays: Tuple[HolidayRecord, ...] = tuple(holidays)

    @classmethod
    def build(cls, records: Iterable[HolidayRecord]) -> "HolidayIndex":
        holidays = []
        for record in records:
            if not isinstance(record.date, date) or not isinstance(record.name, str) or not record.name.strip():
                logger.warning(f"Skipping malformed holiday record: {record!r}")
                continue
            if isinstance(record.date, datetime):
                record = HolidayRecord(date=record.date.date(), name=record.name)
            holidays.append(record)

        logger.info(f"Holiday index built: {len(holidays)} holidays")
        return cls(holidays)

    def next_holiday_on_or_after(self, today: date) -> Optional[HolidayRecord]:
        """
        Earliest holiday dated today or later.

        Ties on the same date resolve to the first record in load order.

        :param today: Reference calendar date
        :return: HolidayRecord or None if nothing is upcoming
        """
        best: Optional[HolidayRecord] = None
        for holiday in self._holidays:
            if holiday.date < today:
                continue
            if best is None or holiday.date < best.date:
                best = holiday
        return best

    @property
    def holidays(self) -> Tuple[HolidayRecord, ...]:
        return self._holidays

    def __len__(self) -> int:
        return len(self._holidays)
