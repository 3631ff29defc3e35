"""Models for the shared quartermaster_sets.json manifest."""

import math
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quartermaster.models.item import ITEM_TYPES, ItemType

SetItems = dict[ItemType, list[str]]

SetUpdateStatus = Literal["added", "already present", "removed", "missing"]


def parse_manifest_version(value: object) -> int | float:
    """Validate the manifest version field.

    The version must be a finite number greater than zero. Numeric strings are
    accepted; booleans and missing values are not.

    Raises:
        ValueError: If the version is missing or not a positive finite number
    """
    number: int | float | None = None
    if isinstance(value, bool) or value is None:
        number = None
    elif isinstance(value, int | float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                number = None

    if number is None or not math.isfinite(number) or number <= 0:
        raise ValueError(f"Sets file has invalid version: {value}")
    if isinstance(number, float) and number.is_integer():
        number = int(number)
    return number


def normalize_set_items(raw: object) -> SetItems:
    """Normalize a partial items mapping so every item type is present.

    Entries are stringified and trimmed; empty entries are dropped. Unknown
    keys and non-list values are ignored.
    """
    source = raw if isinstance(raw, dict) else {}
    items: SetItems = {}
    for item_type in ITEM_TYPES:
        entries = source.get(item_type)
        if not isinstance(entries, list):
            entries = []
        stripped = (str(entry).strip() for entry in entries)
        items[item_type] = [entry for entry in stripped if entry]
    return items


class SetDefinition(BaseModel):
    """A named group of items across all item types."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    items: SetItems = Field(default_factory=lambda: normalize_set_items(None))

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Trim the name and reject empty names."""
        name = v.strip()
        if not name:
            msg = "set name cannot be empty"
            raise ValueError(msg)
        return name

    @field_validator("description", mode="before")
    @classmethod
    def normalize_description(cls, v: object) -> str | None:
        """Trim the description; an empty description becomes absent."""
        if v is None:
            return None
        description = str(v).strip()
        return description or None

    @field_validator("items", mode="before")
    @classmethod
    def normalize_items(cls, v: object) -> SetItems:
        """Fill in missing item types and drop empty entries."""
        return normalize_set_items(v)

    def has_item(self, item_type: ItemType, path: str) -> bool:
        return path in self.items[item_type]

    def count(self, item_type: ItemType) -> int:
        return len(self.items[item_type])

    def with_item(self, item_type: ItemType, path: str) -> "SetDefinition":
        """Return new definition with path appended to the item type's list."""
        new_items = {**self.items, item_type: [*self.items[item_type], path]}
        return self.model_copy(update={"items": new_items})

    def without_item(self, item_type: ItemType, path: str) -> "SetDefinition":
        """Return new definition with every occurrence of path removed."""
        remaining = [entry for entry in self.items[item_type] if entry != path]
        new_items = {**self.items, item_type: remaining}
        return self.model_copy(update={"items": new_items})

    def normalized(self) -> "SetDefinition":
        """Return new definition with deduplicated, sorted item lists."""
        new_items = {item_type: sorted(set(self.items[item_type])) for item_type in ITEM_TYPES}
        return self.model_copy(update={"items": new_items})


class SetsManifest(BaseModel):
    """Complete quartermaster_sets.json structure."""

    model_config = ConfigDict(frozen=True)

    version: int | float
    sets: dict[str, SetDefinition] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v: object) -> int | float:
        return parse_manifest_version(v)

    @field_validator("sets")
    @classmethod
    def sort_sets(cls, v: dict[str, SetDefinition]) -> dict[str, SetDefinition]:
        """Key sets by their (trimmed) name, in name order."""
        by_name = {definition.name: definition for definition in v.values()}
        return dict(sorted(by_name.items()))

    def get_set(self, name: str) -> SetDefinition | None:
        return self.sets.get(name.strip())

    def with_set(self, definition: SetDefinition) -> "SetsManifest":
        """Return new manifest with the set added or replaced (maintaining immutability)."""
        new_sets = {**self.sets, definition.name: definition}
        return SetsManifest(version=self.version, sets=new_sets)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk format.

        Sets are ordered by name, item lists are deduplicated and sorted, every
        item type key is present, and absent descriptions are omitted.
        """
        sets_data: dict[str, Any] = {}
        for name, definition in sorted(self.sets.items()):
            normalized = definition.normalized()
            entry: dict[str, Any] = {}
            if normalized.description is not None:
                entry["description"] = normalized.description
            entry["items"] = {item_type: normalized.items[item_type] for item_type in ITEM_TYPES}
            sets_data[name] = entry
        return {"version": self.version, "sets": sets_data}

    @staticmethod
    def empty() -> "SetsManifest":
        """Create an empty manifest at version 1."""
        return SetsManifest(version=1, sets={})


@dataclass(frozen=True)
class SetUpdateResult:
    """One line of an add-to-set/remove-from-set report."""

    status: SetUpdateStatus
    set_name: str
    path: str
