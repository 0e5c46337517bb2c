"""API routes for the built-in item and meal pattern catalog."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, HTTPException, Query, status

from fridgebud.catalog import (
    COMMON_ITEMS,
    DEFAULT_MEAL_PATTERNS,
    find_common_item,
    get_patterns_by_meal_type,
    get_patterns_by_tag,
    get_recent_items,
    items_by_category,
)
from fridgebud.models import MealPattern

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("/items")
async def list_common_items(
    category: str | None = Query(None, description="Only items in this category"),
) -> list[dict[str, Any]]:
    """List known items with their default storage locations."""
    items = items_by_category().get(category, []) if category else COMMON_ITEMS
    return [asdict(item) for item in items]


@router.get("/items/recent")
async def list_recent_items(
    names: list[str] = Query([]),
) -> list[dict[str, Any]]:
    """Resolve recently used item names to catalog entries."""
    return [asdict(item) for item in get_recent_items(names)]


@router.get("/items/{name}")
async def get_common_item(name: str) -> dict[str, Any]:
    """Look up a single known item by name."""
    item = find_common_item(name)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item '{name}' not in catalog",
        )
    return asdict(item)


@router.get("/patterns", response_model=list[MealPattern])
async def list_meal_patterns(
    meal_type: str | None = Query(None, description="breakfast, lunch, dinner or snack"),
    tag: str | None = Query(None),
) -> list[MealPattern]:
    """List the default meal patterns, optionally filtered."""
    patterns = get_patterns_by_meal_type(meal_type) if meal_type else DEFAULT_MEAL_PATTERNS
    if tag:
        tagged = {p.id for p in get_patterns_by_tag(tag)}
        patterns = [p for p in patterns if p.id in tagged]
    return patterns
