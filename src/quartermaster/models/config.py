"""Configuration models for quartermaster."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SETS_FILE = "quartermaster_sets.json"
CONFIG_FILENAME = "quartermaster.json"

ConfigScope = Literal["local", "global", "auto"]


class QuartermasterConfig(BaseModel):
    """Contents of quartermaster.json.

    Serialized with the camelCase keys the file has always used
    (``repoPath``, ``setsFile``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    repo_path: str = Field(alias="repoPath")
    sets_file: str = Field(default=DEFAULT_SETS_FILE, alias="setsFile")

    @field_validator("repo_path", mode="before")
    @classmethod
    def validate_repo_path(cls, v: object) -> str:
        repo_path = "" if v is None else str(v).strip()
        if not repo_path:
            msg = "Quartermaster repo path is required."
            raise ValueError(msg)
        return repo_path

    @field_validator("sets_file", mode="before")
    @classmethod
    def default_sets_file(cls, v: object) -> str:
        """Fall back to the default file name when blank."""
        sets_file = "" if v is None else str(v).strip()
        return sets_file or DEFAULT_SETS_FILE

    def repo_root(self, cwd: Path) -> Path:
        """Shared repo directory; a relative repo path is taken from cwd."""
        return cwd / self.repo_path

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
