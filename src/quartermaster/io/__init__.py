"""I/O operations for quartermaster."""

from quartermaster.io.config import (
    read_config,
    resolve_config,
    write_config,
)
from quartermaster.io.sets_file import (
    get_sets_path,
    load_sets_manifest,
    read_sets_manifest,
    save_sets_manifest,
)

__all__ = [
    "get_sets_path",
    "load_sets_manifest",
    "read_config",
    "read_sets_manifest",
    "resolve_config",
    "save_sets_manifest",
    "write_config",
]
