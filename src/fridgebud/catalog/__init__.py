"""Static catalog data: common items and default meal patterns."""

from fridgebud.catalog.common_items import (
    COMMON_ITEMS,
    CommonItem,
    find_common_item,
    get_recent_items,
    items_by_category,
)
from fridgebud.catalog.meal_patterns import (
    DEFAULT_MEAL_PATTERNS,
    get_patterns_by_meal_type,
    get_patterns_by_tag,
)

__all__ = [
    "COMMON_ITEMS",
    "CommonItem",
    "DEFAULT_MEAL_PATTERNS",
    "find_common_item",
    "get_patterns_by_meal_type",
    "get_patterns_by_tag",
    "get_recent_items",
    "items_by_category",
]
