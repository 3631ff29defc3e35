"""Formatting functions for command output."""

import click

from quartermaster.models.item import ITEM_TYPES, GroupedItems, ItemType
from quartermaster.models.link import ItemResult
from quartermaster.models.sets import SetsManifest, SetUpdateResult

_STATUS_COLORS = {
    "linked": "green",
    "removed": "green",
    "added": "green",
    "already linked": "white",
    "already present": "white",
    "missing": "yellow",
    "failed": "red",
}


def format_status(status: str) -> str:
    """Color a result status; unknown statuses are left plain."""
    color = _STATUS_COLORS.get(status)
    if color is None:
        return status
    return click.style(status, fg=color)


def format_item_results(header: str, results: list[ItemResult]) -> str:
    """Format install/remove results.

    Args:
        header: First line, e.g. "Install results:"
        results: One entry per item

    Returns:
        Lines of the form ``- STATUS ITEM[: DETAIL]``
    """
    lines = [click.style(header, bold=True)]
    for result in results:
        detail = f": {result.detail}" if result.detail else ""
        lines.append(f"- {format_status(result.status)} {result.item}{detail}")
    return "\n".join(lines)


def format_grouped_items(
    header: str,
    items: GroupedItems,
    item_types: tuple[ItemType, ...] = ITEM_TYPES,
) -> str:
    """Format items grouped per type, with ``(none)`` for empty types."""
    lines = [click.style(header, bold=True)]
    for item_type in item_types:
        lines.append(f"{item_type}:")
        entries = items.get(item_type, [])
        if not entries:
            lines.append(click.style("  (none)", dim=True))
            continue
        lines.extend(f"  - {entry}" for entry in entries)
    return "\n".join(lines)


def format_sets(manifest: SetsManifest | None, sets_path: str) -> str:
    """Format the set listing, or a notice when there is nothing to list."""
    if manifest is None:
        return f"No sets file found at {sets_path}."
    if not manifest.sets:
        return f"No sets defined in {sets_path}."

    lines = [click.style(f"Sets (version {manifest.version}):", bold=True)]
    for definition in manifest.sets.values():
        counts = " ".join(
            f"{item_type}:{definition.count(item_type)}" for item_type in ITEM_TYPES
        )
        description = f" - {definition.description}" if definition.description else ""
        name = click.style(definition.name, fg="cyan")
        lines.append(f"- {name} ({counts}){description}")
    return "\n".join(lines)


def format_set_update_results(results: list[SetUpdateResult]) -> str:
    lines = [click.style("Set update results:", bold=True)]
    for result in results:
        lines.append(f"- {format_status(result.status)} {result.set_name} {result.path}")
    return "\n".join(lines)


def format_config_status(local_display: str | None, global_display: str | None) -> str:
    """Describe which config files exist; None means that file is absent."""
    if local_display is not None and global_display is not None:
        return f"Config: local ({local_display}) and global ({global_display})."
    if local_display is not None:
        return f"Config: local ({local_display})."
    if global_display is not None:
        return f"Config: global ({global_display})."
    return "Config: none found."
