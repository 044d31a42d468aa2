"""
Fixed user-facing replies and the structured response type.
"""
from dataclasses import dataclass
from typing import Optional

from .intent_types import IntentType

WELCOME_MESSAGE = "Hello and welcome!"
QUERY_TOO_SHORT_MESSAGE = "Please provide a longer question."
LEAVE_NOT_FOUND_MESSAGE = "Sorry, I couldn't find the leave details for {name}."
NEXT_HOLIDAY_MESSAGE = "Next holiday: {name} on {date}"
NO_UPCOMING_HOLIDAYS_MESSAGE = "There are no upcoming holidays."
UNKNOWN_ANSWER_MESSAGE = "Sorry, I don't know the answer to that."


@dataclass(frozen=True)
class ChatResponse:
    """
    Routed answer for a single query.

    Attributes:
        answer: Text sent back to the user
        intent: Intent that produced the answer
        matched_question: Knowledge-base key used for fuzzy answers
        score: Fuzzy score of the best candidate, when one was scored
    """
    answer: str
    intent: IntentType
    matched_question: Optional[str] = None
    score: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "answer": self.answer,
            "intent": self.intent.name,
            "matched_question": self.matched_question,
            "score": self.score,
        }
