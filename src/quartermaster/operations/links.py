"""Symlink engine: install and remove a single item.

The install target is always in one of four states (see TargetState). Every
state other than ABSENT maps to a fixed outcome; ABSENT is the only state in
which the filesystem is changed.
"""

import logging
import os
from pathlib import Path

from quartermaster.filesystem.abc import Filesystem
from quartermaster.models.link import LinkResult, TargetState

logger = logging.getLogger(__name__)

SOURCE_NOT_FOUND = "source not found"
TARGET_NOT_SYMLINK = "target exists and is not a symlink"
TARGET_LINKS_ELSEWHERE = "target already links elsewhere"

# Outcome for each state in which install leaves the filesystem untouched
LINK_OUTCOMES: dict[TargetState, LinkResult] = {
    TargetState.LINKED_TO_SOURCE: LinkResult(status="already linked"),
    TargetState.LINKED_ELSEWHERE: LinkResult(status="failed", detail=TARGET_LINKS_ELSEWHERE),
    TargetState.OCCUPIED: LinkResult(status="failed", detail=TARGET_NOT_SYMLINK),
}


def _resolve_link_destination(fs: Filesystem, link_path: Path) -> Path:
    """Resolve a symlink's destination lexically against the link's directory."""
    destination = fs.read_link(link_path)
    return Path(os.path.normpath(link_path.parent / destination))


def inspect_target(fs: Filesystem, source_path: Path, target_path: Path) -> TargetState:
    """Classify target_path relative to the source it should link to."""
    if not fs.lexists(target_path):
        return TargetState.ABSENT
    if not fs.is_symlink(target_path):
        return TargetState.OCCUPIED

    existing = _resolve_link_destination(fs, target_path)
    if existing == Path(os.path.normpath(source_path)):
        return TargetState.LINKED_TO_SOURCE
    return TargetState.LINKED_ELSEWHERE


def link_item(fs: Filesystem, source_path: Path, target_path: Path) -> LinkResult:
    """Link target_path to source_path unless something is already there.

    Never overwrites real files or directories and never repoints an existing
    symlink.

    Args:
        fs: Filesystem to operate on
        source_path: Absolute path of the shared item
        target_path: Absolute path of the link to create

    Returns:
        LinkResult: linked, already linked, or failed with a reason
    """
    if not fs.exists(source_path):
        logger.debug("Source missing: %s", source_path)
        return LinkResult(status="failed", detail=SOURCE_NOT_FOUND)

    state = inspect_target(fs, source_path, target_path)
    logger.debug("Install target %s is %s", target_path, state.value)
    if state != TargetState.ABSENT:
        return LINK_OUTCOMES[state]

    fs.make_dirs(target_path.parent)
    fs.symlink(target_path, source_path)
    return LinkResult(status="linked")


def remove_item(fs: Filesystem, target_path: Path) -> LinkResult:
    """Remove the symlink at target_path.

    Real files and directories are left alone. The link's source is never
    touched.

    Returns:
        LinkResult: removed, missing, or failed with a reason
    """
    if not fs.lexists(target_path):
        return LinkResult(status="missing")
    if not fs.is_symlink(target_path):
        return LinkResult(status="failed", detail=TARGET_NOT_SYMLINK)

    fs.unlink(target_path)
    logger.debug("Removed symlink %s", target_path)
    return LinkResult(status="removed")
