"""
In-memory indexes built once from loaded records.

- KnowledgeBase: question/synonym to response mapping
- HolidayIndex: next holiday on or after a date
- LeaveRegistry: exact-name leave lookups and formatting
"""
from .knowledge_base import KnowledgeBase
from .holiday_index import HolidayIndex
from .leave_registry import LeaveRegistry

__all__ = ["KnowledgeBase", "HolidayIndex", "LeaveRegistry"]
