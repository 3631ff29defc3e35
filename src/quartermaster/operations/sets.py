"""Set operations: batch install/remove and set membership edits."""

import logging
from pathlib import Path

from quartermaster.exceptions import UnknownSetError
from quartermaster.filesystem.abc import Filesystem
from quartermaster.io.sets_file import load_sets_manifest, save_sets_manifest
from quartermaster.models.config import QuartermasterConfig
from quartermaster.models.item import ITEM_TYPES, ItemType
from quartermaster.models.link import ItemResult
from quartermaster.models.sets import (
    SetDefinition,
    SetsManifest,
    SetUpdateResult,
    SetUpdateStatus,
)
from quartermaster.operations.links import link_item, remove_item
from quartermaster.operations.paths import (
    normalize_set_item_path,
    resolve_install_paths,
    resolve_remove_target,
    strip_type_prefix,
)

logger = logging.getLogger(__name__)


def validate_set_name(name: str) -> str:
    """Trim a set name.

    Raises:
        ValueError: If the name is empty after trimming
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValueError("Missing set name.")
    return trimmed


def find_set(manifest: SetsManifest, name: str) -> SetDefinition:
    """Look up a set by (trimmed) name.

    Raises:
        UnknownSetError: If no set has that name
    """
    set_name = validate_set_name(name)
    definition = manifest.get_set(set_name)
    if definition is None:
        raise UnknownSetError(set_name)
    return definition


def iter_set_items(definition: SetDefinition) -> list[tuple[ItemType, str]]:
    """Flatten a set into (type, path) pairs in display order."""
    return [
        (item_type, path) for item_type in ITEM_TYPES for path in definition.items[item_type]
    ]


def _failed_item(item_type: ItemType, path: str, error: Exception) -> ItemResult:
    return ItemResult(
        status="failed",
        item=f"{item_type}/{strip_type_prefix(item_type, path)}",
        detail=str(error),
    )


def install_set(
    fs: Filesystem,
    config: QuartermasterConfig,
    name: str,
    cwd: Path,
    home: Path,
) -> list[ItemResult]:
    """Link every item of a set into the local root.

    A failure on one item is recorded and the remaining items are still
    processed.

    Raises:
        SetsFileNotFoundError: If the sets file does not exist
        UnknownSetError: If the set is not defined
    """
    repo_path = config.repo_root(cwd)
    manifest = load_sets_manifest(repo_path, config.sets_file, create_missing=False)
    definition = find_set(manifest, name)

    results: list[ItemResult] = []
    for item_type, path in iter_set_items(definition):
        try:
            resolved = resolve_install_paths(item_type, path, repo_path, cwd, home)
            outcome = link_item(fs, resolved.source_path, resolved.target_path)
        except (ValueError, OSError) as e:
            logger.debug("Install of %s %s failed: %s", item_type, path, e)
            results.append(_failed_item(item_type, path, e))
            continue
        results.append(ItemResult(outcome.status, resolved.display_path, outcome.detail))

    return results


def remove_set(
    fs: Filesystem,
    config: QuartermasterConfig,
    name: str,
    cwd: Path,
    home: Path,
) -> list[ItemResult]:
    """Unlink every item of a set from the local root.

    Raises:
        SetsFileNotFoundError: If the sets file does not exist
        UnknownSetError: If the set is not defined
    """
    repo_path = config.repo_root(cwd)
    manifest = load_sets_manifest(repo_path, config.sets_file, create_missing=False)
    definition = find_set(manifest, name)

    results: list[ItemResult] = []
    for item_type, path in iter_set_items(definition):
        try:
            target = resolve_remove_target(item_type, path, cwd, home)
            outcome = remove_item(fs, target.target_path)
        except (ValueError, OSError) as e:
            logger.debug("Removal of %s %s failed: %s", item_type, path, e)
            results.append(_failed_item(item_type, path, e))
            continue
        results.append(ItemResult(outcome.status, target.display_path, outcome.detail))

    return results


def add_to_set(
    repo_path: Path,
    sets_file: str,
    set_name: str,
    item_type: ItemType,
    item_path: str,
) -> SetUpdateResult:
    """Add a repo-relative item to a set, creating the set and file as needed.

    The sets file is rewritten even when the item was already present.

    Raises:
        ValueError: If the set name or item path is empty, or the path is external
    """
    name = validate_set_name(set_name)
    normalized = normalize_set_item_path(item_type, item_path)
    manifest = load_sets_manifest(repo_path, sets_file, create_missing=True)
    status: SetUpdateStatus

    definition = manifest.get_set(name) or SetDefinition(name=name)
    if definition.has_item(item_type, normalized):
        status = "already present"
    else:
        definition = definition.with_item(item_type, normalized)
        status = "added"

    save_sets_manifest(repo_path, sets_file, manifest.with_set(definition))
    logger.debug("add-to-set %s %s: %s", name, normalized, status)
    return SetUpdateResult(status=status, set_name=name, path=normalized)


def remove_from_set(
    repo_path: Path,
    sets_file: str,
    set_name: str,
    item_type: ItemType,
    item_path: str,
) -> SetUpdateResult:
    """Remove an item from an existing set.

    A set left with no items is kept. The sets file is rewritten even when
    the item was not in the set.

    Raises:
        SetsFileNotFoundError: If the sets file does not exist
        UnknownSetError: If the set is not defined
        ValueError: If the set name or item path is empty, or the path is external
    """
    name = validate_set_name(set_name)
    normalized = normalize_set_item_path(item_type, item_path)
    manifest = load_sets_manifest(repo_path, sets_file, create_missing=False)
    definition = find_set(manifest, name)
    status: SetUpdateStatus

    if definition.has_item(item_type, normalized):
        definition = definition.without_item(item_type, normalized)
        status = "removed"
    else:
        status = "missing"

    save_sets_manifest(repo_path, sets_file, manifest.with_set(definition))
    logger.debug("remove-from-set %s %s: %s", name, normalized, status)
    return SetUpdateResult(status=status, set_name=name, path=normalized)
