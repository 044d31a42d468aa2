"""
Question/response knowledge base with synonym aliases.

Canonical questions and synonyms share one mapping from normalized text
to response. Canonical rows overwrite; synonyms only fill empty keys.
"""
import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from ..models import QnARecord
from ..normalizer import normalize

logger = logging.getLogger(__name__)

SYNONYM_DELIMITER = ","


class KnowledgeBase:
    """
    Immutable lookup of normalized question text to response.

    Key order is insertion order, which the fuzzy matcher relies on for
    tie-breaking. Use KnowledgeBase.build() to construct one from records.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def build(cls, records: Iterable[QnARecord]) -> "KnowledgeBase":
        """
        Build a knowledge base from records in load order.

        Records missing a question or response are skipped.

        :param records: QnA records
        :return: KnowledgeBase instance
        """
        entries: Dict[str, str] = {}
        skipped = 0

        for record in records:
            if not _is_text(record.question, record.response) or not _is_text(record.synonyms, optional=True):
                skipped += 1
                logger.warning(f"Skipping QnA record with non-text fields: {record!r}")
                continue

            question = normalize(record.question)
            response = (record.response or "").strip()
            if not question or not response:
                skipped += 1
                logger.warning(f"Skipping malformed QnA record: {record!r}")
                continue

            # Last canonical row wins
            entries[question] = response

            for synonym in _split_synonyms(record.synonyms):
                if synonym not in entries:
                    entries[synonym] = response

        logger.info(f"Knowledge base built: {len(entries)} keys, {skipped} records skipped")
        return cls(entries)

    def keys(self) -> Tuple[str, ...]:
        """All lookup keys (canonical and synonym) in insertion order."""
        return tuple(self._entries)

    def lookup(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    @property
    def entries(self) -> Mapping[str, str]:
        """Read-only view of the mapping."""
        return self._entries

    def as_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def _is_text(*values, optional: bool = False) -> bool:
    return all(isinstance(v, str) or (optional and v is None) for v in values)


def _split_synonyms(synonyms: Optional[str]):
    if not synonyms:
        return []
    return [s for s in (normalize(part) for part in synonyms.split(SYNONYM_DELIMITER)) if s]
