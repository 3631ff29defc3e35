"""Real filesystem implementation using os and pathlib."""

import os
from pathlib import Path

from quartermaster.filesystem.abc import Filesystem


class RealFilesystem(Filesystem):
    """Production implementation backed by the host filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def lexists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def read_link(self, path: Path) -> Path:
        return Path(os.readlink(path))

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def symlink(self, link_path: Path, destination: Path) -> None:
        link_path.symlink_to(destination)

    def unlink(self, path: Path) -> None:
        path.unlink()
