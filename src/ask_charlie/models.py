from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class QnARecord:
    question: Optional[str]
    response: Optional[str]
    synonyms: Optional[str] = None


@dataclass(frozen=True)
class HolidayRecord:
    date: Optional[date]
    name: Optional[str]


@dataclass(frozen=True)
class LeaveRecord:
    employee_name: str
    leave_type: str
    balance: int
    taken: int
    accrued: int
    adjustments: int
