"""
Ask Charlie: HR helpdesk intent resolution.

Routes free-text questions to leave-balance lookups, next-holiday
lookups or fuzzy-matched knowledge-base answers.
"""
from .app import AskCharlieApp
from .config import AskCharlieConfig
from .data_loader import CsvRecordSupplier, InMemoryRecordSupplier, RecordSupplier
from .exceptions import AgentNotInitializedError, AskCharlieError, ConfigurationError
from .interaction import ChatResponse, IntentType
from .models import HolidayRecord, LeaveRecord, QnARecord
from .normalizer import normalize
from .service import AskCharlieService, KnowledgeSnapshot

__all__ = [
    "AskCharlieApp",
    "AskCharlieConfig",
    "AskCharlieService",
    "KnowledgeSnapshot",
    "RecordSupplier",
    "CsvRecordSupplier",
    "InMemoryRecordSupplier",
    "ChatResponse",
    "IntentType",
    "QnARecord",
    "HolidayRecord",
    "LeaveRecord",
    "normalize",
    "AskCharlieError",
    "ConfigurationError",
    "AgentNotInitializedError",
]
