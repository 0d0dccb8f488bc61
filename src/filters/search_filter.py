# src/filters/search_filter.py

"""Free-text and category filtering over catalog collections.

A :class:`SearchFilter` is configured with the fields to search and the
field holding the category (``type`` for places, ``category`` for
products).  Items may be dataclasses or plain mappings; they are only
read, never modified.

Query filtering runs first, then the category filter is applied to what
survived, so the two always compose as AND.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from src.config.settings import Settings
from src.filters.fuzzy_matcher import FuzzyMatcher, RapidFuzzMatcher

logger = logging.getLogger("border_helper.filters")

T = TypeVar("T")


def _field_value(item: Any, field_name: str) -> str:
    """Read *field_name* from a mapping or an object, as text."""
    if isinstance(item, Mapping):
        value = item.get(field_name)
    else:
        value = getattr(item, field_name, None)
    if value is None:
        return ""
    return str(value)


class SearchFilter:
    """Compose fuzzy text search with an exact category filter."""

    def __init__(
        self,
        search_fields: Sequence[str],
        category_field: str,
        matcher: FuzzyMatcher | None = None,
        all_label: str = Settings.ALL_CATEGORY,
    ) -> None:
        self.search_fields = tuple(search_fields)
        self.category_field = category_field
        self.matcher: FuzzyMatcher = matcher or RapidFuzzMatcher()
        self.all_label = all_label

    # ── Presets ──────────────────────────────────────────

    @classmethod
    def for_products(
        cls, matcher: FuzzyMatcher | None = None
    ) -> "SearchFilter":
        return cls(("name", "category"), "category", matcher)

    @classmethod
    def for_places(
        cls, matcher: FuzzyMatcher | None = None
    ) -> "SearchFilter":
        return cls(("title", "type", "description"), "type", matcher)

    @classmethod
    def for_job_posts(
        cls, matcher: FuzzyMatcher | None = None
    ) -> "SearchFilter":
        return cls(
            ("title", "subtitle", "location", "description"),
            "location",
            matcher,
        )

    # ── Operations ───────────────────────────────────────

    def filter_by_query(self, items: Sequence[T], query: str) -> list[T]:
        """Return items matching *query*, best match first.

        A blank query returns every item in its original order.
        """
        needle = query.strip() if query else ""
        if not needle:
            return list(items)

        scored: list[tuple[float, int, T]] = []
        for index, item in enumerate(items):
            best = min(
                (
                    self.matcher.distance(
                        needle, _field_value(item, name)
                    )
                    for name in self.search_fields
                ),
                default=1.0,
            )
            if best <= self.matcher.threshold:
                scored.append((best, index, item))

        # index breaks ties so equal scores keep input order
        scored.sort(key=lambda entry: (entry[0], entry[1]))
        matches = [item for _, _, item in scored]

        logger.debug(
            "Query '%s' matched %d of %d items",
            needle,
            len(matches),
            len(items),
        )
        return matches

    def filter_by_category(
        self, items: Sequence[T], category: str | None
    ) -> list[T]:
        """Keep items whose category equals *category* exactly.

        ``None`` or the "All" label disables the filter.
        """
        if category is None or category == self.all_label:
            return list(items)
        return [
            item
            for item in items
            if _field_value(item, self.category_field) == category
        ]

    def compose_filters(
        self,
        items: Sequence[T],
        query: str,
        category: str | None,
    ) -> list[T]:
        """Apply the query filter, then the category filter."""
        by_query = self.filter_by_query(items, query)
        result = self.filter_by_category(by_query, category)
        logger.info(
            "Filters (query='%s', category=%s) kept %d of %d items",
            query,
            category,
            len(result),
            len(items),
        )
        return result

    def derive_facet_list(self, items: Sequence[Any]) -> list[str]:
        """Return ``["All", ...]`` followed by each category once.

        Categories keep first-seen order; blank categories are skipped.
        An empty collection yields an empty list.
        """
        if not items:
            return []
        facets: dict[str, None] = {}
        for item in items:
            value = _field_value(item, self.category_field)
            if value and value != self.all_label:
                facets.setdefault(value, None)
        return [self.all_label, *facets]
