"""
Tests for catalog construction and title filtering.
"""

from __future__ import annotations

from app.catalog import CATALOG, FRUITS, build_image_url, filter_items, format_price, make_catalog


def test_make_catalog_from_names() -> None:
    """Each name becomes a priced card with an image reference."""
    items = make_catalog(["Apple", "Kiwi"])
    assert [i.title for i in items] == ["Apple", "Kiwi"]
    assert all(i.price == 8 for i in items)
    assert "Apple" in items[0].image_url
    assert "Kiwi" in items[1].image_url
    assert items[0].description == "This is a picture of Apple."


def test_image_url_is_base_plus_title() -> None:
    assert build_image_url("Mango", "https://img.example/300/?") == "https://img.example/300/?Mango"


def test_image_url_missing_for_unusable_title() -> None:
    assert build_image_url("Passion fruit") is None
    assert make_catalog(["Passion fruit"])[0].image_url is None


def test_catalog_ids_are_unique() -> None:
    ids = [item.id for item in CATALOG]
    assert len(set(ids)) == len(ids)


def test_default_catalog_has_all_fruits() -> None:
    assert len(CATALOG) == 12
    assert FRUITS[0] == "Apple"
    assert FRUITS[-1] == "Watermelon"


def test_empty_query_returns_items_unchanged() -> None:
    assert filter_items(CATALOG, "") is CATALOG


def test_filter_is_case_insensitive() -> None:
    items = make_catalog(["Apple"])
    assert filter_items(items, "apple") == filter_items(items, "APPLE") == items


def test_filter_preserves_order() -> None:
    out = filter_items(CATALOG, "berry")
    assert [i.title for i in out] == ["Strawberry", "Berry"]


def test_exact_title_matches() -> None:
    out = filter_items(CATALOG, "Pineapple")
    assert [i.title for i in out] == ["Pineapple"]


def test_no_match_is_empty() -> None:
    assert filter_items(CATALOG, "zzz") == []
    assert filter_items(CATALOG, "123 !?") == []


def test_filter_does_not_mutate_source() -> None:
    before = list(CATALOG)
    filter_items(CATALOG, "an")
    assert CATALOG == before


def test_filter_unicode_case_folding() -> None:
    items = make_catalog(["Straße", "ÄPFEL", "Ябоко"])
    assert [i.title for i in filter_items(items, "STRASSE")] == ["Straße"]
    assert [i.title for i in filter_items(items, "äpfel")] == ["ÄPFEL"]
    assert [i.title for i in filter_items(items, "ЯБ")] == ["Ябоко"]


def test_format_price() -> None:
    assert format_price(8) == "8 SR"
