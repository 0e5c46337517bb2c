"""Matching inventory items against ingredient slots."""

from fridgebud.models import IngredientSlot, InventoryItem


def satisfies(item: InventoryItem, slot: IngredientSlot) -> bool:
    """
    Check whether an inventory item fills a slot.

    Specific item names take precedence over categories. Names match by
    case-insensitive substring in either direction, so "Chicken" fills a
    slot asking for "Chicken breast" and vice versa. A slot with neither
    names nor categories is never satisfied.
    """
    if slot.specific_items:
        item_name = item.name.lower()
        return any(
            name.lower() in item_name or item_name in name.lower() for name in slot.specific_items
        )

    if slot.accepted_categories:
        return item.category in slot.accepted_categories

    return False


def find_candidates(slot: IngredientSlot, inventory: list[InventoryItem]) -> list[InventoryItem]:
    """Get every inventory item that fills the slot, in inventory order."""
    return [item for item in inventory if satisfies(item, slot)]
