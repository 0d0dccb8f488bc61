# src/filters/fuzzy_matcher.py

"""Approximate string matching used by the search filters."""

from typing import Protocol

from rapidfuzz import fuzz, utils

from src.config.settings import Settings


class FuzzyMatcher(Protocol):
    """Scores how far *text* is from *query* on a 0–1 scale.

    ``0.0`` is an exact (sub)string hit, ``1.0`` is unrelated.  A text
    matches when its distance is at most ``threshold``.
    """

    threshold: float

    def distance(self, query: str, text: str) -> float: ...


class RapidFuzzMatcher:
    """Case-insensitive partial-ratio matcher backed by rapidfuzz.

    ``partial_ratio`` scores the best-aligned substring, so a query that
    appears inside a longer title scores as an exact hit and one or two
    typos stay under the default threshold.  A text shorter than the
    query is scored with the plain ``ratio`` instead: the query is the
    needle, never the haystack.
    """

    def __init__(self, threshold: float = Settings.FUZZY_THRESHOLD) -> None:
        if not 0.0 <= threshold <= 1.0:
            msg = f"threshold must be within [0, 1], got {threshold}"
            raise ValueError(msg)
        self.threshold = threshold

    def distance(self, query: str, text: str) -> float:
        query = utils.default_process(query)
        text = utils.default_process(text)
        if not query or not text:
            return 1.0
        if len(query) <= len(text):
            score = fuzz.partial_ratio(query, text)
        else:
            score = fuzz.ratio(query, text)
        return 1.0 - score / 100.0
