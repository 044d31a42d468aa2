"""
Fuzzy matching of queries against knowledge-base questions using rapidfuzz.

The default scorer is a windowed partial ratio: it rewards queries that
are a fragment of a longer stored question, or vice versa.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from rapidfuzz import fuzz
from rapidfuzz.distance import LCSseq

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """
    Best accepted candidate.

    Attributes:
        candidate: The matched knowledge-base key
        score: Similarity score between 0 and 100
    """
    candidate: str
    score: int


def partial_ratio(query: str, candidate: str) -> int:
    """
    Score how well the shorter string fits inside the longer one.

    The shorter string is slid over every full-overlap window of the
    longer one. Each window is scored by the length of its longest common
    subsequence with the shorter string; the best window gives M and the
    score is round(100 * M / len(shorter)).

    :param query: Normalized query
    :param candidate: Normalized candidate
    :return: Integer score in [0, 100]
    """
    if len(query) <= len(candidate):
        shorter, longer = query, candidate
    else:
        shorter, longer = candidate, query

    width = len(shorter)
    if width == 0:
        return 0

    best = 0
    for offset in range(len(longer) - width + 1):
        matched = LCSseq.similarity(shorter, longer[offset:offset + width])
        if matched > best:
            best = matched
            if best == width:
                break

    return max(0, min(100, round(100 * best / width)))


def _rounded(scorer: Callable[[str, str], float]) -> Callable[[str, str], int]:
    def score(query: str, candidate: str) -> int:
        return round(scorer(query, candidate))
    return score


class FuzzyMatcher:
    """
    Picks the highest-scoring candidate above a threshold.

    Candidates are scored in enumeration order and the first one wins a
    tie, so callers control tie-breaking through candidate order.
    """

    def __init__(
        self,
        threshold: float = 70,
        scorer: str = "partial_ratio",
    ):
        """
        Initialize fuzzy matcher.

        :param threshold: A match must score strictly above this (0-100)
        :param scorer: "partial_ratio" or a rapidfuzz scorer name
            ("ratio", "token_sort_ratio", "token_set_ratio")
        """
        if not 0 <= threshold <= 100:
            raise ValueError(f"Threshold must be between 0 and 100, got {threshold}")

        self.threshold = threshold
        self.scorer = scorer

        self._scorer_map: Dict[str, Callable[[str, str], int]] = {
            "partial_ratio": partial_ratio,
            "ratio": _rounded(fuzz.ratio),
            "token_sort_ratio": _rounded(fuzz.token_sort_ratio),
            "token_set_ratio": _rounded(fuzz.token_set_ratio),
        }

        if scorer not in self._scorer_map:
            raise ValueError(
                f"Unknown scorer '{scorer}'. "
                f"Must be one of: {list(self._scorer_map.keys())}"
            )

    def score(self, query: str, candidate: str) -> int:
        return self._scorer_map[self.scorer](query, candidate)

    def best_match(self, query: str, candidates: Iterable[str]) -> Optional[MatchResult]:
        """
        Find the best candidate for a normalized query.

        :param query: Normalized query
        :param candidates: Normalized candidates, in tie-break order
        :return: MatchResult if the best score is above threshold, else None
        """
        best = self.best_candidate(query, candidates)
        if best is None:
            logger.debug(f"No candidates to match '{query}' against")
            return None

        if best.score > self.threshold:
            logger.debug(f"Fuzzy match for '{query}': '{best.candidate}' ({best.score})")
            return best

        logger.debug(
            f"Best candidate for '{query}' below threshold: "
            f"'{best.candidate}' ({best.score} <= {self.threshold})"
        )
        return None

    def best_candidate(self, query: str, candidates: Iterable[str]) -> Optional[MatchResult]:
        """Highest-scoring candidate regardless of threshold."""
        best: Optional[MatchResult] = None
        for candidate in candidates:
            score = self.score(query, candidate)
            if best is None or score > best.score:
                best = MatchResult(candidate=candidate, score=score)
        return best
