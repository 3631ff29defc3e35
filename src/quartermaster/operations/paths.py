"""Resolution of user-supplied item paths to source and target locations.

Three input shapes are accepted:

- Repo-relative (``skills/foo`` or ``foo``): the type prefix is optional.
  The source lives under ``<repo>/<type>/...`` and the target mirrors the
  relative path under ``<cwd>/.pi/<type>/...``.
- Home-relative (``~`` or ``~/...``): expanded against the supplied home.
- Absolute: used as-is.

Home-relative and absolute paths are "external": only their final segment is
kept locally, at ``<cwd>/.pi/<type>/<basename>``.

Everything here is pure. Callers pass cwd and home explicitly.
"""

import logging
import os
from pathlib import Path

from quartermaster.exceptions import EmptyItemPathError, ExternalPathError
from quartermaster.models.item import ItemType
from quartermaster.models.link import RemoveTarget, ResolvedInstall

logger = logging.getLogger(__name__)

LOCAL_ROOT_DIRNAME = ".pi"


def local_root(cwd: Path) -> Path:
    """Return the local install root for a project directory."""
    return cwd / LOCAL_ROOT_DIRNAME


def to_slash_path(base: Path, target: Path) -> str:
    """Express target relative to base using forward slashes."""
    relative = os.path.relpath(target, base)
    return relative.replace(os.sep, "/")


def normalize_input_path(item_path: str) -> str:
    """Normalize separators and strip a single leading ``./``."""
    normalized = item_path.replace("\\", "/")
    if normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.strip()


def strip_type_prefix(item_type: ItemType, item_path: str) -> str:
    prefix = f"{item_type}/"
    if item_path.startswith(prefix):
        return item_path[len(prefix) :]
    return item_path


def is_external_path(item_path: str) -> bool:
    """Check if path is absolute or home-relative."""
    return item_path.startswith("~") or os.path.isabs(item_path)


def expand_home_path(item_path: str, home: Path) -> str:
    """Expand a leading ``~`` against home.

    ``~`` maps to home itself; ``~/x`` and ``~x`` both map to ``home/x``.
    """
    if not item_path.startswith("~"):
        return item_path

    if item_path == "~":
        return str(home)

    remainder = item_path[1:]
    if remainder.startswith(("/", os.sep)):
        remainder = remainder[1:]
    return str(home / remainder)


def _repo_relative_parts(item_type: ItemType, trimmed: str) -> list[str]:
    normalized = normalize_input_path(trimmed)
    without_prefix = strip_type_prefix(item_type, normalized)
    if not without_prefix:
        raise EmptyItemPathError()
    return without_prefix.split("/")


def _join(base: Path, *parts: str) -> Path:
    return Path(os.path.normpath(base.joinpath(*parts)))


def resolve_install_paths(
    item_type: ItemType,
    item_path: str,
    repo_path: Path,
    cwd: Path,
    home: Path,
) -> ResolvedInstall:
    """Resolve an item path to its shared source and local target.

    Args:
        item_type: Type the item is installed as
        item_path: Repo-relative, home-relative, or absolute path
        repo_path: Shared repo root
        cwd: Project directory holding the local root
        home: Home directory used for ``~`` expansion

    Returns:
        ResolvedInstall with absolute source/target and a display path

    Raises:
        EmptyItemPathError: If nothing remains of the path after normalization
    """
    trimmed = item_path.strip()
    if not trimmed:
        raise EmptyItemPathError()

    base_root = local_root(cwd)

    if is_external_path(trimmed):
        source_path = Path(os.path.normpath(expand_home_path(trimmed, home)))
        target_path = base_root / item_type / source_path.name
    else:
        parts = _repo_relative_parts(item_type, trimmed)
        source_path = _join(repo_path / item_type, *parts)
        target_path = _join(base_root / item_type, *parts)

    resolved = ResolvedInstall(
        source_path=source_path,
        target_path=target_path,
        display_path=to_slash_path(base_root, target_path),
    )
    logger.debug(
        "Resolved install %s %r: source=%s target=%s",
        item_type,
        item_path,
        resolved.source_path,
        resolved.target_path,
    )
    return resolved


def resolve_remove_target(
    item_type: ItemType,
    item_path: str,
    cwd: Path,
    home: Path,
) -> RemoveTarget:
    """Resolve an item path to the local target a removal acts on.

    Uses the same rules as resolve_install_paths; no source is computed.

    Raises:
        EmptyItemPathError: If nothing remains of the path after normalization
    """
    trimmed = item_path.strip()
    if not trimmed:
        raise EmptyItemPathError()

    base_root = local_root(cwd)

    if is_external_path(trimmed):
        expanded = Path(os.path.normpath(expand_home_path(trimmed, home)))
        target_path = base_root / item_type / expanded.name
    else:
        parts = _repo_relative_parts(item_type, trimmed)
        target_path = _join(base_root / item_type, *parts)

    return RemoveTarget(
        target_path=target_path,
        display_path=to_slash_path(base_root, target_path),
    )


def normalize_set_item_path(item_type: ItemType, item_path: str) -> str:
    """Normalize a path for storage in a set: ``<type>/<relative path>``.

    Raises:
        EmptyItemPathError: If nothing remains of the path after normalization
        ExternalPathError: If the path is absolute or home-relative
    """
    trimmed = item_path.strip()
    if not trimmed:
        raise EmptyItemPathError()
    if is_external_path(trimmed):
        raise ExternalPathError(trimmed)

    parts = [part for part in _repo_relative_parts(item_type, trimmed) if part]
    if not parts:
        raise EmptyItemPathError()
    return "/".join([item_type, *parts])
