"""Item type and discovered item models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast

ItemType = Literal["skills", "extensions", "tools", "prompts"]

# Display order
ITEM_TYPES: tuple[ItemType, ...] = ("skills", "extensions", "tools", "prompts")

GroupedItems = dict[ItemType, list[str]]


def validate_item_type(value: str) -> ItemType:
    """Validate and return item type.

    Args:
        value: String to validate

    Returns:
        Valid ItemType

    Raises:
        ValueError: If value is not a known item type
    """
    if value not in ITEM_TYPES:
        expected = ", ".join(ITEM_TYPES)
        raise ValueError(f"Unknown item type: {value}. Expected one of {expected}.")
    return cast(ItemType, value)


@dataclass(frozen=True)
class DiscoveredItem:
    """An installable item found in the shared repo."""

    path: str  # Repo-relative, forward slashes (e.g. "skills/writing-helper")
    absolute_path: Path
    item_type: ItemType


DiscoveredItems = dict[ItemType, list[DiscoveredItem]]


def empty_grouped_items() -> GroupedItems:
    """Create a grouping with every item type present and empty."""
    return {item_type: [] for item_type in ITEM_TYPES}


def group_discovered_items(items: DiscoveredItems) -> GroupedItems:
    """Reduce discovered items to their repo-relative paths per type."""
    return {item_type: [item.path for item in items.get(item_type, [])] for item_type in ITEM_TYPES}
