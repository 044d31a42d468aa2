"""
Record suppliers feeding the knowledge indexes.

The engine never touches files itself; a supplier hands it parsed
records. CsvRecordSupplier reads spreadsheet exports, while
InMemoryRecordSupplier serves fixtures and embedded data.
"""
import csv
import logging
import re
from datetime import date
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from dateutil import parser as date_parser

from .models import HolidayRecord, LeaveRecord, QnARecord

logger = logging.getLogger(__name__)


DEFAULT_LEAVE_RECORDS = (
    LeaveRecord("Vinod Sai", "Vacation Leave", balance=15, taken=5, accrued=2, adjustments=0),
    LeaveRecord("Akhil", "Sick Leave", balance=10, taken=2, accrued=1, adjustments=0),
    LeaveRecord("Yogesh", "Personal Leave", balance=8, taken=3, accrued=1, adjustments=0),
)


class RecordSupplier(Protocol):
    """Source of the three record sequences the service is built from."""

    def qna_records(self) -> Iterable[QnARecord]:
        ...

    def holiday_records(self) -> Iterable[HolidayRecord]:
        ...

    def leave_records(self) -> Iterable[LeaveRecord]:
        ...


class InMemoryRecordSupplier:
    """Supplies records held in memory."""

    def __init__(
        self,
        qna: Sequence[QnARecord] = (),
        holidays: Sequence[HolidayRecord] = (),
        leave: Sequence[LeaveRecord] = (),
    ):
        self._qna = tuple(qna)
        self._holidays = tuple(holidays)
        self._leave = tuple(leave)

    def qna_records(self) -> List[QnARecord]:
        return list(self._qna)

    def holiday_records(self) -> List[HolidayRecord]:
        return list(self._holidays)

    def leave_records(self) -> List[LeaveRecord]:
        return list(self._leave)


class CsvRecordSupplier:
    """
    Loads and normalizes records from CSV exports of the HR sheets.

    Expected headers (case-insensitive):
    - QnA: Question, Response, Synonyms
    - Holidays: Date, Name
    - Leave: Employee Name, Leave Type, Leave Balance, Leave Taken,
      Leave Accruals, Adjustments

    Rows that cannot be parsed are skipped.
    """

    def __init__(
        self,
        qna_path: Optional[str] = None,
        holidays_path: Optional[str] = None,
        leave_path: Optional[str] = None,
    ):
        self.qna_path = qna_path
        self.holidays_path = holidays_path
        self.leave_path = leave_path

    def qna_records(self) -> List[QnARecord]:
        if not self.qna_path:
            return []

        records: List[QnARecord] = []
        for row in self._read_rows(self.qna_path):
            record = self._parse_qna_row(row)
            if record:
                records.append(record)
        logger.info(f"Loaded {len(records)} QnA rows from {self.qna_path}")
        return records

    def holiday_records(self) -> List[HolidayRecord]:
        if not self.holidays_path:
            return []

        records: List[HolidayRecord] = []
        for row in self._read_rows(self.holidays_path):
            record = self._parse_holiday_row(row)
            if record:
                records.append(record)
        logger.info(f"Loaded {len(records)} holidays from {self.holidays_path}")
        return records

    def leave_records(self) -> List[LeaveRecord]:
        if not self.leave_path:
            return list(DEFAULT_LEAVE_RECORDS)

        records: List[LeaveRecord] = []
        for row in self._read_rows(self.leave_path):
            record = self._parse_leave_row(row)
            if record:
                records.append(record)
        logger.info(f"Loaded {len(records)} leave records from {self.leave_path}")
        return records

    def _read_rows(self, path: str) -> List[Dict[str, Optional[str]]]:
        with open(path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            return [
                {(key or "").strip().lower(): value for key, value in row.items()}
                for row in reader
            ]

    def _parse_qna_row(self, row: dict) -> Optional[QnARecord]:
        question = self._clean_text(row.get("question"))
        response = self._clean_text(row.get("response"))
        if not question or not response:
            logger.warning(f"Skipping QnA row without question or response: {row}")
            return None

        return QnARecord(
            question=question,
            response=response,
            synonyms=self._clean_text(row.get("synonyms")),
        )

    def _parse_holiday_row(self, row: dict) -> Optional[HolidayRecord]:
        holiday_date = self._parse_date(row.get("date"))
        name = self._clean_text(row.get("name"))
        if holiday_date is None or not name:
            logger.warning(f"Skipping holiday row with missing date or name: {row}")
            return None

        return HolidayRecord(date=holiday_date, name=name)

    def _parse_leave_row(self, row: dict) -> Optional[LeaveRecord]:
        employee_name = self._clean_text(row.get("employee name"))
        counts = [
            self._parse_int(row.get(column))
            for column in ("leave balance", "leave taken", "leave accruals", "adjustments")
        ]
        if not employee_name or any(count is None for count in counts):
            logger.warning(f"Skipping malformed leave row: {row}")
            return None

        balance, taken, accrued, adjustments = counts
        return LeaveRecord(
            employee_name=employee_name,
            leave_type=self._clean_text(row.get("leave type")) or "",
            balance=balance,
            taken=taken,
            accrued=accrued,
            adjustments=adjustments,
        )

    def _clean_text(self, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value if value else None

    def _parse_int(self, value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        found = re.search(r"-?\d+", value)
        return int(found.group()) if found else None

    def _parse_date(self, value: Optional[str]) -> Optional[date]:
        value = self._clean_text(value)
        if not value:
            return None
        try:
            return date_parser.parse(value).date()
        except (ValueError, OverflowError):
            return None
