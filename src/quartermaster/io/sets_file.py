"""I/O operations for the shared quartermaster_sets.json manifest.

Reads normalize every set; writes always replace the whole file, atomically.
There is no locking: concurrent writers race and the last one wins.
"""

import json
import logging
from pathlib import Path

from quartermaster.exceptions import SetsFileNotFoundError
from quartermaster.models.sets import SetDefinition, SetsManifest, parse_manifest_version

logger = logging.getLogger(__name__)


def get_sets_path(repo_path: Path, sets_file: str) -> Path:
    """Get the sets file path; sets_file is relative to the repo root."""
    return repo_path / sets_file


def parse_sets_manifest(raw: str) -> SetsManifest:
    """Parse and normalize sets file contents.

    Raises:
        ValueError: If the JSON is malformed or the version is invalid
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        data = {}

    version = parse_manifest_version(data.get("version"))

    entries = data.get("sets")
    if not isinstance(entries, dict):
        entries = {}

    definitions: dict[str, SetDefinition] = {}
    for name, entry in entries.items():
        if not str(name).strip():
            logger.debug("Skipping set with blank name")
            continue
        entry_data = entry if isinstance(entry, dict) else {}
        definition = SetDefinition(
            name=name,
            description=entry_data.get("description"),
            items=entry_data.get("items"),
        )
        if definition.name in definitions:
            logger.debug("Set name %r repeats after trimming; keeping the last", definition.name)
        definitions[definition.name] = definition

    return SetsManifest(version=version, sets=definitions)


def read_sets_manifest(repo_path: Path, sets_file: str) -> SetsManifest | None:
    """Load the sets file for read-only use.

    Returns None if the file doesn't exist.

    Raises:
        ValueError: If the file is malformed or has an invalid version
    """
    sets_path = get_sets_path(repo_path, sets_file)
    if not sets_path.exists():
        return None

    return parse_sets_manifest(sets_path.read_text(encoding="utf-8"))


def load_sets_manifest(repo_path: Path, sets_file: str, *, create_missing: bool) -> SetsManifest:
    """Load the sets file for a lookup or a read-modify-write.

    Args:
        repo_path: Shared repo root
        sets_file: Sets file name, relative to repo_path
        create_missing: Treat a missing file as an empty version 1 manifest

    Raises:
        SetsFileNotFoundError: If the file is missing and create_missing is False
        ValueError: If the file is malformed or has an invalid version
    """
    manifest = read_sets_manifest(repo_path, sets_file)
    if manifest is not None:
        return manifest
    if create_missing:
        return SetsManifest.empty()
    raise SetsFileNotFoundError(get_sets_path(repo_path, sets_file))


def save_sets_manifest(repo_path: Path, sets_file: str, manifest: SetsManifest) -> None:
    """Rewrite the sets file atomically.

    Writes to a temporary file first, then renames to avoid corruption. Sets
    are ordered by name and every item list is deduplicated and sorted.
    """
    sets_path = get_sets_path(repo_path, sets_file)
    sets_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = sets_path.with_name(sets_path.name + ".tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(manifest.to_dict(), f, indent=2, ensure_ascii=False)
        f.write("\n")

    temp_path.replace(sets_path)
    logger.debug("Wrote %d set(s) to %s", len(manifest.sets), sets_path)
