"""Scanner for items currently installed in a project's local root."""

from pathlib import Path

from quartermaster.models.item import ITEM_TYPES, GroupedItems, empty_grouped_items
from quartermaster.operations.paths import local_root, to_slash_path


def _collect_symlinks(directory: Path, base_root: Path) -> list[str]:
    results: list[str] = []
    for entry in directory.iterdir():
        if entry.is_symlink():
            results.append(to_slash_path(base_root, entry))
            continue
        if entry.is_dir():
            results.extend(_collect_symlinks(entry, base_root))
    return results


def list_installed(cwd: Path) -> GroupedItems:
    """List symlinks under each ``.pi/<type>`` directory, at any depth.

    Symlinks are reported, not followed. Regular directories are descended;
    regular files are ignored.

    Args:
        cwd: Project directory holding the local root

    Returns:
        Paths relative to the local root, sorted per type
    """
    base_root = local_root(cwd)
    grouped = empty_grouped_items()

    for item_type in ITEM_TYPES:
        type_dir = base_root / item_type
        if not type_dir.is_dir():
            continue
        grouped[item_type] = sorted(_collect_symlinks(type_dir, base_root))

    return grouped
