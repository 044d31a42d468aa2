"""
Approximate matching of user queries to knowledge-base questions.
"""
from .fuzzy_matcher import FuzzyMatcher, MatchResult, partial_ratio

__all__ = ["FuzzyMatcher", "MatchResult", "partial_ratio"]
