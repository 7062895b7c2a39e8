"""Static pricing catalog of billable items.

Catalog order is the iteration order of the totals engine and the display
order of every page and export.
"""

from decimal import Decimal

from billing_log.domain.models.catalog import (
    LineItemCategory,
    LineItemDefinition,
)


def _item(
    key: str,
    label: str,
    minutes: int,
    base: str,
    bbi: str,
) -> LineItemDefinition:
    return LineItemDefinition(
        key=key,
        label=label,
        minutes_per_unit=minutes,
        base_amount=Decimal(base),
        secondary_amount=Decimal(bbi),
    )


LINE_ITEMS: tuple[LineItemDefinition, ...] = (
    _item("facilities_visited", "Facilities Visited", 0, "64.15", "0.00"),
    _item("consult_a_90020", "Consult - A (90020)", 2, "20.05", "8.60"),
    _item("consult_b_90035", "Consult - B (90035)", 6, "43.90", "25.70"),
    _item("consult_c_90043", "Consult - C (90043)", 20, "84.90", "25.70"),
    _item("consult_d_90051", "Consult - D (90051)", 40, "125.10", "25.70"),
    _item("consult_e_90054", "Consult - E (90054)", 60, "202.65", "25.70"),
    _item("consult_a_ah_5010", "Consult - A AH (5010)", 2, "37.70", "8.60"),
    _item("consult_b_ah_5028", "Consult - B AH (5028)", 6, "61.05", "25.70"),
    _item("consult_c_5049", "Consult - C (5049)", 20, "101.90", "25.70"),
    _item("consult_d_5067", "Consult - D (5067)", 40, "141.30", "25.70"),
    _item("consult_e_5077", "Consult - E (5077)", 60, "237.30", "25.70"),
    _item(
        "urgent_unsociable_599",
        "Urgent Unsociable (599)",
        15,
        "178.50",
        "8.60",
    ),
    _item("health_ax", "Health Ax", 60, "313.60", "8.60"),
    _item("rmmr_standalone", "RMMR - Standalone", 10, "123.70", "8.60"),
    _item("rmmr_cobilled", "RMMR - Co-billed", 10, "123.70", "8.60"),
    _item(
        "mdcp_731_standalone",
        "MDCP (731) - Standalone",
        10,
        "82.10",
        "8.60",
    ),
    _item(
        "mdcp_731_cobilled",
        "MDCP (731) - Co-billed",
        10,
        "82.10",
        "8.60",
    ),
    _item("mdt_739", "MDT (739)", 20, "141.05", "8.60"),
)

LINE_ITEM_KEYS: tuple[str, ...] = tuple(item.key for item in LINE_ITEMS)

_ITEMS_BY_KEY = {item.key: item for item in LINE_ITEMS}

AFTER_HOURS_MARKERS = ("ah_", "5049", "5067", "5077")

OTHER_SERVICE_KEYS = (
    "urgent_unsociable_599",
    "health_ax",
    "rmmr_standalone",
    "rmmr_cobilled",
    "mdcp_731_standalone",
    "mdcp_731_cobilled",
    "mdt_739",
)


def get_line_item(key: str) -> LineItemDefinition | None:
    """Return the catalog definition for ``key`` or None."""
    return _ITEMS_BY_KEY.get(key)


def _is_after_hours(item: LineItemDefinition) -> bool:
    return any(marker in item.key for marker in AFTER_HOURS_MARKERS)


def group_line_items_by_category() -> list[LineItemCategory]:
    """Group catalog items into the four display categories.

    Returns:
        list[LineItemCategory]: Facilities, standard consults, after-hours
        consults and other services, each in catalog order.
    """
    return [
        LineItemCategory(
            name="Facilities",
            items=tuple(
                item
                for item in LINE_ITEMS
                if item.key == "facilities_visited"
            ),
        ),
        LineItemCategory(
            name="Standard Consults",
            items=tuple(
                item
                for item in LINE_ITEMS
                if item.key.startswith("consult_")
                and not _is_after_hours(item)
            ),
        ),
        LineItemCategory(
            name="After Hours Consults",
            items=tuple(item for item in LINE_ITEMS if _is_after_hours(item)),
        ),
        LineItemCategory(
            name="Other Services",
            items=tuple(
                item for item in LINE_ITEMS if item.key in OTHER_SERVICE_KEYS
            ),
        ),
    ]


__all__ = [
    "LINE_ITEMS",
    "LINE_ITEM_KEYS",
    "get_line_item",
    "group_line_items_by_category",
]
