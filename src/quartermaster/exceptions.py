"""Exceptions raised by quartermaster operations.

Each subclasses the builtin the CLI error boundary already reports cleanly.
"""

from pathlib import Path


class EmptyItemPathError(ValueError):
    """Raised when an item path is empty after normalization."""

    def __init__(self) -> None:
        super().__init__("Missing item path.")


class ExternalPathError(ValueError):
    """Raised when an absolute or home-relative path is used as a set member."""

    def __init__(self, item_path: str) -> None:
        self.item_path = item_path
        super().__init__(f"Set items must be repo-relative paths: {item_path}")


class UnknownSetError(ValueError):
    """Raised when a set name is not defined in the sets file."""

    def __init__(self, set_name: str) -> None:
        self.set_name = set_name
        super().__init__(f"Unknown set: {set_name}.")


class SetsFileNotFoundError(FileNotFoundError):
    """Raised when a lookup needs the sets file and it does not exist."""

    def __init__(self, sets_path: Path) -> None:
        self.sets_path = sets_path
        super().__init__(f"No sets file found at {sets_path}.")


class ConfigNotFoundError(ValueError):
    """Raised when no repo path is configured and none can be prompted for."""

    def __init__(self) -> None:
        super().__init__(
            "Quartermaster repo path not configured. Run `quartermaster setup` or pass --repo."
        )
