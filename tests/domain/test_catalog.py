"""Tests for the pricing catalog."""

from decimal import Decimal

from billing_log.domain.catalog import (
    LINE_ITEMS,
    LINE_ITEM_KEYS,
    get_line_item,
    group_line_items_by_category,
)


def test_catalog_keys_are_unique() -> None:
    assert len(LINE_ITEM_KEYS) == len(set(LINE_ITEM_KEYS)) == 18


def test_get_line_item() -> None:
    item = get_line_item("consult_a_90020")

    assert item is not None
    assert item.minutes_per_unit == 2
    assert item.base_amount == Decimal("20.05")
    assert item.secondary_amount == Decimal("8.6")
    assert get_line_item("missing") is None


def test_categories_cover_catalog_in_order() -> None:
    """Every item lands in exactly one category, in catalog order."""
    categories = group_line_items_by_category()

    assert [category.name for category in categories] == [
        "Facilities",
        "Standard Consults",
        "After Hours Consults",
        "Other Services",
    ]
    grouped = [item for category in categories for item in category.items]
    assert sorted(item.key for item in grouped) == sorted(LINE_ITEM_KEYS)
    for category in categories:
        positions = [LINE_ITEMS.index(item) for item in category.items]
        assert positions == sorted(positions)


def test_after_hours_category_uses_key_markers() -> None:
    after_hours = group_line_items_by_category()[2]

    assert [item.key for item in after_hours.items] == [
        "consult_a_ah_5010",
        "consult_b_ah_5028",
        "consult_c_5049",
        "consult_d_5067",
        "consult_e_5077",
    ]
