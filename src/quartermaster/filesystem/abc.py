"""Filesystem operations abstraction for the symlink engine.

This module provides an ABC over the handful of filesystem calls the
install/remove algorithms make, so the transition logic can be exercised
against an in-memory implementation.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract filesystem operations for dependency injection."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether path exists, following symlinks."""
        ...

    @abstractmethod
    def lexists(self, path: Path) -> bool:
        """Check whether path exists without following a final symlink.

        Broken symlinks exist by this definition.
        """
        ...

    @abstractmethod
    def is_symlink(self, path: Path) -> bool:
        """Check whether path is a symlink (dangling or not)."""
        ...

    @abstractmethod
    def read_link(self, path: Path) -> Path:
        """Return the raw destination stored in the symlink at path.

        Raises:
            OSError: If path is not a symlink
        """
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create path and any missing parents; existing directories are fine."""
        ...

    @abstractmethod
    def symlink(self, link_path: Path, destination: Path) -> None:
        """Create a symlink at link_path pointing to destination."""
        ...

    @abstractmethod
    def unlink(self, path: Path) -> None:
        """Remove the file or symlink at path."""
        ...
