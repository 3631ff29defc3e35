"""Discovery of installable items in the shared repo.

Each item type has its own detection rule:

- skills: any directory (at any depth) containing ``SKILL.md``
- prompts: any ``.md`` file (at any depth)
- extensions, tools: direct children only; ``.ts``/``.js`` files, directories
  with ``index.ts``/``index.js``, or directories whose ``package.json`` has a
  truthy ``pi`` key
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from quartermaster.models.item import ITEM_TYPES, DiscoveredItem, DiscoveredItems, ItemType
from quartermaster.operations.paths import to_slash_path

logger = logging.getLogger(__name__)

SKILL_MARKER = "SKILL.md"
PROMPT_SUFFIX = ".md"
ENTRYPOINT_SUFFIXES = (".ts", ".js")
INDEX_FILENAMES = ("index.ts", "index.js")
PACKAGE_MANIFEST = "package.json"
# Key in package.json that registers a directory as a plugin
PLUGIN_REGISTRATION_KEY = "pi"


def _child_entries(root: Path) -> list[Path]:
    if not root.is_dir():
        return []
    return sorted(root.iterdir())


def _is_real_dir(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()


def _is_real_file(path: Path) -> bool:
    return path.is_file() and not path.is_symlink()


def find_skill_dirs(skills_root: Path) -> list[Path]:
    """Find directories containing SKILL.md, without descending into them."""
    results: list[Path] = []
    for entry in _child_entries(skills_root):
        if not _is_real_dir(entry):
            continue
        if (entry / SKILL_MARKER).exists():
            results.append(entry)
            continue
        results.extend(find_skill_dirs(entry))
    return results


def find_prompt_files(prompts_root: Path) -> list[Path]:
    """Find all markdown files below prompts_root."""
    results: list[Path] = []
    for entry in _child_entries(prompts_root):
        if _is_real_dir(entry):
            results.extend(find_prompt_files(entry))
            continue
        if _is_real_file(entry) and entry.name.endswith(PROMPT_SUFFIX):
            results.append(entry)
    return results


def _has_plugin_registration(package_json: Path) -> bool:
    if not package_json.exists():
        return False
    data = json.loads(package_json.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return False
    return bool(data.get(PLUGIN_REGISTRATION_KEY))


def find_entrypoints(root: Path) -> list[Path]:
    """Find extension-style items among the direct children of root.

    Used for both extensions/ and tools/. Directories are never descended
    beyond their own index or package.json.

    Raises:
        ValueError: If a candidate directory's package.json is not valid JSON
    """
    results: list[Path] = []
    for entry in _child_entries(root):
        if _is_real_file(entry):
            if entry.name.endswith(ENTRYPOINT_SUFFIXES):
                results.append(entry)
            continue

        if not _is_real_dir(entry):
            continue

        if any((entry / name).exists() for name in INDEX_FILENAMES):
            results.append(entry)
            continue

        if _has_plugin_registration(entry / PACKAGE_MANIFEST):
            results.append(entry)
    return results


def _to_items(repo_path: Path, item_type: ItemType, paths: list[Path]) -> list[DiscoveredItem]:
    items = [
        DiscoveredItem(
            path=to_slash_path(repo_path, absolute_path),
            absolute_path=absolute_path,
            item_type=item_type,
        )
        for absolute_path in paths
    ]
    return sorted(items, key=lambda item: item.path)


def discover_items(repo_path: Path) -> DiscoveredItems:
    """Discover all installable items in the shared repo, grouped by type.

    The four type walks run concurrently; each list is sorted by repo-relative
    path once every walk has completed. Missing type directories yield empty
    lists.

    Args:
        repo_path: Shared repo root

    Returns:
        Mapping with every item type present
    """
    finders = {
        "skills": find_skill_dirs,
        "extensions": find_entrypoints,
        "tools": find_entrypoints,
        "prompts": find_prompt_files,
    }

    with ThreadPoolExecutor(max_workers=len(ITEM_TYPES)) as executor:
        futures = {
            item_type: executor.submit(finders[item_type], repo_path / item_type)
            for item_type in ITEM_TYPES
        }
        found = {item_type: future.result() for item_type, future in futures.items()}

    items: DiscoveredItems = {
        item_type: _to_items(repo_path, item_type, found[item_type]) for item_type in ITEM_TYPES
    }
    logger.debug(
        "Discovered items in %s: %s",
        repo_path,
        ", ".join(f"{item_type}={len(items[item_type])}" for item_type in ITEM_TYPES),
    )
    return items
