"""Fuzzy "did you mean" suggestions for unrecognized names using rapidfuzz.

Name lookups in the code tables are exact-case, so a user typing "canada"
gets no match. The suggester ranks the known display names against the input
so the caller can offer the closest ones.
"""

import logging
from typing import Iterable

from rapidfuzz import fuzz, process
from rapidfuzz.utils import default_process

logger = logging.getLogger(__name__)


class NameSuggester:
    """Ranks known names by similarity to a query."""

    def __init__(self, threshold: float = 70.0, limit: int = 3):
        """Initialize the suggester.

        Args:
            threshold: Minimum similarity score (0-100) for a suggestion.
            limit: Maximum number of suggestions to return.
        """
        self.threshold = threshold
        self.limit = limit

    def suggest(self, query: str, candidates: Iterable[str]) -> list[str]:
        """Find the candidates closest to the query.

        Case-insensitive exact matches always rank first.

        Args:
            query: The unrecognized name.
            candidates: Known display names.

        Returns:
            Candidate names sorted by score descending.
        """
        if self.limit <= 0 or not query or not query.strip():
            return []

        choices = list(dict.fromkeys(c for c in candidates if c))
        if not choices:
            return []

        folded = query.strip().casefold()
        exact = [c for c in choices if c.casefold() == folded]

        matches = process.extract(
            query,
            choices,
            scorer=fuzz.WRatio,
            processor=default_process,
            score_cutoff=self.threshold,
            limit=None,
        )
        ranked = exact + [name for name, _score, _idx in matches if name not in exact]

        logger.debug(f"Suggestions for '{query}': {ranked[: self.limit]}")
        return ranked[: self.limit]


def suggest_names(
    query: str,
    candidates: Iterable[str],
    limit: int = 3,
    threshold: float = 70.0,
) -> list[str]:
    """Convenience wrapper around NameSuggester.suggest()."""
    return NameSuggester(threshold=threshold, limit=limit).suggest(query, candidates)
