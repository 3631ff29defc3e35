"""Install/remove resolution and outcome models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal

LinkStatus = Literal["linked", "already linked", "removed", "missing", "failed"]


class TargetState(Enum):
    """State of an install target path relative to its expected source."""

    ABSENT = "absent"
    LINKED_TO_SOURCE = "linked_to_source"
    LINKED_ELSEWHERE = "linked_elsewhere"
    OCCUPIED = "occupied"  # Regular file or directory


@dataclass(frozen=True)
class ResolvedInstall:
    """Source and target of a single item install."""

    source_path: Path
    target_path: Path
    display_path: str  # Relative to the local root, forward slashes


@dataclass(frozen=True)
class RemoveTarget:
    """Target of a single item removal."""

    target_path: Path
    display_path: str


@dataclass(frozen=True)
class LinkResult:
    """Outcome of linking or unlinking a single item."""

    status: LinkStatus
    detail: str | None = None

    @property
    def ok(self) -> bool:
        """Return True unless the operation failed."""
        return self.status != "failed"


@dataclass(frozen=True)
class ItemResult:
    """One line of an install/remove report."""

    status: LinkStatus
    item: str
    detail: str | None = None
