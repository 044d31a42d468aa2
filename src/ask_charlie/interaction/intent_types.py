"""
Intent types for query classification.

Defines the possible intents a user query can be routed to.
"""
from enum import Enum, auto


class IntentType(Enum):
    """Types of user intents, in routing priority order."""
    QUERY_TOO_SHORT = auto()
    LEAVE_BALANCE = auto()
    NEXT_HOLIDAY = auto()
    KNOWLEDGE_BASE = auto()
