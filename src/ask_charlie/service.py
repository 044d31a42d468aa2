import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, List, Optional, TypeVar

from .config import AskCharlieConfig
from .data_loader import RecordSupplier
from .interaction import ChatResponse, IntentRouter
from .knowledge import HolidayIndex, KnowledgeBase, LeaveRegistry
from .resolution import FuzzyMatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class KnowledgeSnapshot:
    """
    The three indexes built together from one load.

    A snapshot is never mutated; reloading builds a new one.
    """
    knowledge_base: KnowledgeBase
    holidays: HolidayIndex
    leave_registry: LeaveRegistry
    router: IntentRouter

    def sizes(self) -> dict:
        return {
            "knowledge_keys": len(self.knowledge_base),
            "holidays": len(self.holidays),
            "leave_records": len(self.leave_registry),
        }


class AskCharlieService:
    """
    Facade over the intent resolution engine.
    The ONLY entry point for the transport layers.
    """

    def __init__(self, supplier: RecordSupplier, config: Optional[AskCharlieConfig] = None):
        """
        Composition root. Builds the first snapshot synchronously.

        :param supplier: Source of QnA, holiday and leave records
        :param config: AskCharlieConfig (defaults when omitted)
        """
        self.config = config or AskCharlieConfig()
        self._supplier = supplier
        self._matcher = FuzzyMatcher(
            threshold=self.config.fuzzy_threshold,
            scorer=self.config.fuzzy_scorer,
        )
        self._snapshot = self._build_snapshot()

    @property
    def snapshot(self) -> KnowledgeSnapshot:
        return self._snapshot

    # ----------------------------
    # Query handling
    # ----------------------------
    def respond(self, query: str, today: date) -> ChatResponse:
        """
        Route a query and return the structured response.

        :param query: Raw user query
        :param today: Calendar date supplied by the caller
        """
        return self._snapshot.router.route(query, today)

    def resolve(self, query: str, today: date) -> str:
        """Route a query and return only the answer text."""
        return self.respond(query, today).answer

    # ----------------------------
    # Loading
    # ----------------------------
    def reload(self) -> KnowledgeSnapshot:
        """
        Rebuild every index from the supplier and swap it in.

        Queries already running keep the snapshot they started with.
        """
        snapshot = self._build_snapshot()
        self._snapshot = snapshot
        logger.info(f"Knowledge reloaded: {snapshot.sizes()}")
        return snapshot

    def _build_snapshot(self) -> KnowledgeSnapshot:
        knowledge_base = KnowledgeBase.build(_load("QnA", self._supplier.qna_records))
        holidays = HolidayIndex.build(_load("holiday", self._supplier.holiday_records))
        leave_registry = LeaveRegistry.build(_load("leave", self._supplier.leave_records))

        router = IntentRouter(
            knowledge_base=knowledge_base,
            holidays=holidays,
            leave_registry=leave_registry,
            matcher=self._matcher,
            min_query_length=self.config.min_query_length,
            holiday_date_format=self.config.holiday_date_format,
        )
        return KnowledgeSnapshot(
            knowledge_base=knowledge_base,
            holidays=holidays,
            leave_registry=leave_registry,
            router=router,
        )


def _load(kind: str, fetch: Callable[[], Iterable[T]]) -> List[T]:
    """Materialize a supplier sequence; a failing supplier yields no records."""
    try:
        return list(fetch())
    except Exception as e:
        logger.error(f"Failed to load {kind} records: {str(e)}", exc_info=True)
        return []
