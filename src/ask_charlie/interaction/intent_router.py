"""
Deterministic intent router for HR helpdesk queries.

Routes a query through a fixed, ordered list of intent rules. The first
rule whose predicate matches produces the response.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple

from ..knowledge import HolidayIndex, KnowledgeBase, LeaveRegistry
from ..normalizer import normalize
from ..resolution import FuzzyMatcher
from .intent_types import IntentType
from .responses import (
    ChatResponse,
    LEAVE_NOT_FOUND_MESSAGE,
    NEXT_HOLIDAY_MESSAGE,
    NO_UPCOMING_HOLIDAYS_MESSAGE,
    QUERY_TOO_SHORT_MESSAGE,
    UNKNOWN_ANSWER_MESSAGE,
)

logger = logging.getLogger(__name__)

LEAVE_BALANCE_PREFIX = "leave balance for "
NEXT_HOLIDAY_PHRASE = "next holiday"


@dataclass(frozen=True)
class IntentRule:
    """A predicate on the normalized query paired with the action it triggers."""
    intent: IntentType
    matches: Callable[[str], bool]
    respond: Callable[[str, date], ChatResponse]


class IntentRouter:
    """
    Ordered intent dispatch.

    Rules, in priority order:
    1. Length gate: queries shorter than min_query_length are rejected
       before any other check, even if they would match an intent.
    2. Leave balance: "leave balance for <name>" prefix.
    3. Next holiday: "next holiday" anywhere in the query.
    4. Knowledge base: fuzzy fallback over every stored question.
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        holidays: HolidayIndex,
        leave_registry: LeaveRegistry,
        matcher: Optional[FuzzyMatcher] = None,
        min_query_length: int = 8,
        holiday_date_format: str = "%Y-%m-%d",
    ):
        self._knowledge_base = knowledge_base
        self._holidays = holidays
        self._leave_registry = leave_registry
        self._matcher = matcher or FuzzyMatcher()
        self.min_query_length = min_query_length
        self.holiday_date_format = holiday_date_format

        self._rules: Tuple[IntentRule, ...] = (
            IntentRule(IntentType.QUERY_TOO_SHORT, self._is_too_short, self._reject_short),
            IntentRule(IntentType.LEAVE_BALANCE, self._is_leave_balance, self._answer_leave_balance),
            IntentRule(IntentType.NEXT_HOLIDAY, self._is_next_holiday, self._answer_next_holiday),
            IntentRule(IntentType.KNOWLEDGE_BASE, lambda query: True, self._answer_from_knowledge_base),
        )

    @property
    def rules(self) -> Tuple[IntentRule, ...]:
        return self._rules

    def classify(self, query: str) -> IntentType:
        """Intent the query would be routed to, without answering it."""
        return self._select(normalize(query)).intent

    def route(self, query: str, today: date) -> ChatResponse:
        """
        Route a raw query to a response.

        :param query: Raw user query
        :param today: Calendar date used by the holiday intent
        :return: ChatResponse
        """
        q = normalize(query)
        rule = self._select(q)
        logger.debug(f"Routing '{q}' to {rule.intent.name}")
        return rule.respond(q, today)

    def _select(self, query: str) -> IntentRule:
        # The last rule always matches
        return next(rule for rule in self._rules if rule.matches(query))

    # ----------------------------
    # Predicates
    # ----------------------------
    def _is_too_short(self, query: str) -> bool:
        return len(query) < self.min_query_length

    def _is_leave_balance(self, query: str) -> bool:
        return query.startswith(LEAVE_BALANCE_PREFIX)

    def _is_next_holiday(self, query: str) -> bool:
        return NEXT_HOLIDAY_PHRASE in query

    # ----------------------------
    # Actions
    # ----------------------------
    def _reject_short(self, query: str, today: date) -> ChatResponse:
        return ChatResponse(answer=QUERY_TOO_SHORT_MESSAGE, intent=IntentType.QUERY_TOO_SHORT)

    def _answer_leave_balance(self, query: str, today: date) -> ChatResponse:
        employee_name = query[len(LEAVE_BALANCE_PREFIX):].strip()
        record = self._leave_registry.lookup(employee_name)
        if record is None:
            logger.info(f"No leave record for '{employee_name}'")
            answer = LEAVE_NOT_FOUND_MESSAGE.format(name=employee_name)
        else:
            answer = LeaveRegistry.format(record)
        return ChatResponse(answer=answer, intent=IntentType.LEAVE_BALANCE)

    def _answer_next_holiday(self, query: str, today: date) -> ChatResponse:
        holiday = self._holidays.next_holiday_on_or_after(today)
        if holiday is None:
            answer = NO_UPCOMING_HOLIDAYS_MESSAGE
        else:
            answer = NEXT_HOLIDAY_MESSAGE.format(
                name=holiday.name,
                date=holiday.date.strftime(self.holiday_date_format),
            )
        return ChatResponse(answer=answer, intent=IntentType.NEXT_HOLIDAY)

    def _answer_from_knowledge_base(self, query: str, today: date) -> ChatResponse:
        match = self._matcher.best_match(query, self._knowledge_base.keys())
        if match is None:
            return ChatResponse(answer=UNKNOWN_ANSWER_MESSAGE, intent=IntentType.KNOWLEDGE_BASE)

        return ChatResponse(
            answer=self._knowledge_base.lookup(match.candidate),
            intent=IntentType.KNOWLEDGE_BASE,
            matched_question=match.candidate,
            score=match.score,
        )
