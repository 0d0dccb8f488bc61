# tests/test_search_filter.py

"""Tests for SearchFilter query/category composition."""

import unittest

from src.filters.search_filter import SearchFilter
from src.models.place import Place
from src.models.product import Product


def _places() -> list[Place]:
    """A small attraction collection."""
    return [
        Place(
            id="1",
            title="Shwedagon Pagoda",
            type="Pagoda",
            description="Golden stupa replica on the hill",
        ),
        Place(
            id="2",
            title="Night Bazaar",
            type="Night Market",
            description="Street food and souvenirs after dark",
        ),
        Place(
            id="3",
            title="Wat Phra That Doi Wao",
            type="Viewpoint",
            description="Scorpion temple overlooking the border",
        ),
        Place(
            id="4",
            title="Tachileik Market",
            type="Night Market",
            description="Border market stalls",
        ),
    ]


class _SubstringMatcher:
    """Deterministic matcher: 0 on substring, 0.5 on prefix, else 1."""

    threshold = 0.5

    def distance(self, query: str, text: str) -> float:
        q, t = query.lower(), text.lower()
        if q in t:
            return 0.0
        if t and q[:2] == t[:2]:
            return 0.5
        return 1.0


class TestFilterByQuery(unittest.TestCase):
    """SearchFilter.filter_by_query behaviour."""

    def setUp(self) -> None:
        self.search = SearchFilter.for_places()
        self.items = _places()

    def test_empty_query_is_identity(self) -> None:
        result = self.search.filter_by_query(self.items, "")
        self.assertEqual(result, self.items)

    def test_whitespace_query_is_identity(self) -> None:
        result = self.search.filter_by_query(self.items, "   \t ")
        self.assertEqual(result, self.items)

    def test_pagoda_matches_only_the_pagoda(self) -> None:
        items = [
            {"title": "Shwedagon Pagoda", "type": "Pagoda"},
            {"title": "Night Bazaar", "type": "Night Market"},
        ]
        result = self.search.filter_by_query(items, "pagoda")
        self.assertEqual(result, [items[0]])

    def test_case_insensitive(self) -> None:
        result = self.search.filter_by_query(self.items, "NIGHT BAZAAR")
        self.assertEqual(result[0].id, "2")

    def test_tolerates_a_typo(self) -> None:
        result = self.search.filter_by_query(self.items, "Pgoda")
        self.assertIn("1", [p.id for p in result])

    def test_matches_description_field(self) -> None:
        result = self.search.filter_by_query(self.items, "scorpion")
        self.assertEqual([p.id for p in result], ["3"])

    def test_unrelated_query_matches_nothing(self) -> None:
        result = self.search.filter_by_query(self.items, "xylophone")
        self.assertEqual(result, [])

    def test_short_field_inside_query_does_not_match(self) -> None:
        items = [
            {"title": "Relax Spa", "type": "Spa"},
            {"title": "Night Bazaar", "type": "Market"},
        ]
        result = self.search.filter_by_query(items, "spaghetti restaurant")
        self.assertEqual(result, [])

    def test_best_match_first(self) -> None:
        search = SearchFilter(
            ("title",), "type", matcher=_SubstringMatcher()
        )
        items = [
            {"title": "Market Hall"},   # prefix only -> 0.5
            {"title": "Tachileik Market"},  # substring -> 0.0
            {"title": "Bridge"},        # no match
        ]
        result = search.filter_by_query(items, "market hall east")
        self.assertEqual(result, [items[0]])

        result = search.filter_by_query(
            [{"title": "Marble Gate"}, {"title": "Old Market"}], "market"
        )
        self.assertEqual(
            [r["title"] for r in result], ["Old Market", "Marble Gate"]
        )

    def test_ties_keep_input_order(self) -> None:
        search = SearchFilter(
            ("title",), "type", matcher=_SubstringMatcher()
        )
        items = [{"title": "Market B"}, {"title": "Market A"}]
        self.assertEqual(search.filter_by_query(items, "market"), items)

    def test_empty_items(self) -> None:
        self.assertEqual(self.search.filter_by_query([], "pagoda"), [])

    def test_input_not_mutated(self) -> None:
        snapshot = list(self.items)
        self.search.filter_by_query(self.items, "market")
        self.assertEqual(self.items, snapshot)


class TestFilterByCategory(unittest.TestCase):
    """SearchFilter.filter_by_category behaviour."""

    def setUp(self) -> None:
        self.search = SearchFilter.for_places()
        self.items = _places()

    def test_all_returns_everything(self) -> None:
        self.assertEqual(
            self.search.filter_by_category(self.items, "All"), self.items
        )

    def test_none_returns_everything(self) -> None:
        self.assertEqual(
            self.search.filter_by_category(self.items, None), self.items
        )

    def test_exact_match(self) -> None:
        result = self.search.filter_by_category(self.items, "Night Market")
        self.assertEqual([p.id for p in result], ["2", "4"])

    def test_case_sensitive(self) -> None:
        self.assertEqual(
            self.search.filter_by_category(self.items, "night market"), []
        )

    def test_unknown_category_is_empty(self) -> None:
        self.assertEqual(
            self.search.filter_by_category(self.items, "Waterfall"), []
        )

    def test_empty_items(self) -> None:
        self.assertEqual(self.search.filter_by_category([], "Pagoda"), [])

    def test_products_use_category_field(self) -> None:
        products = [
            Product(id="1", name="Nike Air Max", price=120, category="Shoes"),
            Product(id="2", name="Smart Watch", price=199, category="Electronics"),
        ]
        result = SearchFilter.for_products().filter_by_category(
            products, "Shoes"
        )
        self.assertEqual([p.id for p in result], ["1"])


class TestComposeFilters(unittest.TestCase):
    """Query and category filters compose as AND."""

    def setUp(self) -> None:
        self.search = SearchFilter.for_places()
        self.items = _places()

    def test_equivalent_to_category_after_query(self) -> None:
        cases = [
            ("", None),
            ("", "Night Market"),
            ("market", None),
            ("market", "Night Market"),
            ("market", "Pagoda"),
            ("pagoda", "All"),
            ("   ", "Viewpoint"),
        ]
        for query, category in cases:
            with self.subTest(query=query, category=category):
                expected = self.search.filter_by_category(
                    self.search.filter_by_query(self.items, query),
                    category,
                )
                self.assertEqual(
                    self.search.compose_filters(
                        self.items, query, category
                    ),
                    expected,
                )

    def test_restrictive_and(self) -> None:
        result = self.search.compose_filters(
            self.items, "pagoda", "Night Market"
        )
        self.assertEqual(result, [])

    def test_empty_items(self) -> None:
        self.assertEqual(self.search.compose_filters([], "x", "All"), [])


class TestDeriveFacetList(unittest.TestCase):
    """SearchFilter.derive_facet_list behaviour."""

    def test_all_first_then_unique_in_order(self) -> None:
        facets = SearchFilter.for_places().derive_facet_list(_places())
        self.assertEqual(
            facets, ["All", "Pagoda", "Night Market", "Viewpoint"]
        )

    def test_blank_categories_skipped(self) -> None:
        items = [{"type": ""}, {"type": "Pagoda"}, {}]
        facets = SearchFilter.for_places().derive_facet_list(items)
        self.assertEqual(facets, ["All", "Pagoda"])

    def test_empty_items(self) -> None:
        self.assertEqual(SearchFilter.for_places().derive_facet_list([]), [])

    def test_product_facets(self) -> None:
        products = [
            Product(id="1", name="A", price=1, category="Shoes"),
            Product(id="2", name="B", price=1, category="Electronics"),
            Product(id="3", name="C", price=1, category="Shoes"),
        ]
        self.assertEqual(
            SearchFilter.for_products().derive_facet_list(products),
            ["All", "Shoes", "Electronics"],
        )


if __name__ == "__main__":
    unittest.main()
