"""Fake Filesystem implementation for testing.

FakeFilesystem is an in-memory implementation that models files, directories
and symlinks as plain sets and dicts, enabling engine tests without touching
disk.
"""

import os
from pathlib import Path

from quartermaster.filesystem.abc import Filesystem


class FakeFilesystem(Filesystem):
    """In-memory fake implementation that tracks link mutations.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.

    Paths are compared lexically; symlink destinations are resolved against the
    link's parent directory when following links.
    """

    def __init__(
        self,
        *,
        files: set[Path] | None = None,
        directories: set[Path] | None = None,
        symlinks: dict[Path, Path] | None = None,
    ) -> None:
        """Create FakeFilesystem with pre-configured state.

        Args:
            files: Paths of regular files
            directories: Paths of directories (parents of files are implied)
            symlinks: Mapping of link path to raw destination
        """
        self._files: set[Path] = set(files) if files is not None else set()
        self._directories: set[Path] = set(directories) if directories is not None else set()
        self._symlinks: dict[Path, Path] = dict(symlinks) if symlinks is not None else {}
        self._created_links: list[tuple[Path, Path]] = []
        self._removed_links: list[Path] = []
        self._created_directories: list[Path] = []

    @property
    def symlinks(self) -> dict[Path, Path]:
        """Current symlinks (link path to raw destination), for test assertions."""
        return dict(self._symlinks)

    @property
    def files(self) -> set[Path]:
        """Current regular files, for test assertions."""
        return set(self._files)

    @property
    def created_links(self) -> list[tuple[Path, Path]]:
        """(link_path, destination) for every symlink() call, for test assertions."""
        return self._created_links

    @property
    def removed_links(self) -> list[Path]:
        """Paths passed to unlink() that were symlinks, for test assertions."""
        return self._removed_links

    @property
    def created_directories(self) -> list[Path]:
        """Paths passed to make_dirs(), for test assertions."""
        return self._created_directories

    def _is_directory(self, path: Path) -> bool:
        if path in self._directories:
            return True
        return any(path in existing.parents for existing in self._files | self._directories)

    def _follow(self, path: Path) -> Path | None:
        seen: set[Path] = set()
        current = path
        while current in self._symlinks:
            if current in seen:
                return None
            seen.add(current)
            destination = self._symlinks[current]
            current = Path(os.path.normpath(current.parent / destination))
        return current

    def exists(self, path: Path) -> bool:
        resolved = self._follow(path)
        if resolved is None:
            return False
        return resolved in self._files or self._is_directory(resolved)

    def lexists(self, path: Path) -> bool:
        return path in self._symlinks or path in self._files or self._is_directory(path)

    def is_symlink(self, path: Path) -> bool:
        return path in self._symlinks

    def read_link(self, path: Path) -> Path:
        if path not in self._symlinks:
            raise OSError(f"Invalid argument: {path}")
        return self._symlinks[path]

    def make_dirs(self, path: Path) -> None:
        if path in self._files or path in self._symlinks:
            raise FileExistsError(f"File exists: {path}")
        self._directories.add(path)
        self._created_directories.append(path)

    def symlink(self, link_path: Path, destination: Path) -> None:
        if self.lexists(link_path):
            raise FileExistsError(f"File exists: {link_path}")
        self._symlinks[link_path] = destination
        self._created_links.append((link_path, destination))

    def unlink(self, path: Path) -> None:
        if path in self._symlinks:
            del self._symlinks[path]
            self._removed_links.append(path)
            return
        if path in self._files:
            self._files.remove(path)
            return
        raise FileNotFoundError(f"No such file or directory: {path}")
