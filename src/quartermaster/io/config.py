"""Configuration file I/O for quartermaster.json.

Two locations are supported: a local file under the project's ``.pi``
directory and a global one in the agent directory. Callers pass cwd and the
global directory explicitly.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

from quartermaster.exceptions import ConfigNotFoundError
from quartermaster.models.config import CONFIG_FILENAME, ConfigScope, QuartermasterConfig
from quartermaster.operations.paths import local_root

logger = logging.getLogger(__name__)

AGENT_DIR_ENV_VAR = "PI_CODING_AGENT_DIR"
REPO_PROMPT = "Path to shared Quartermaster repo"

RepoPrompt = Callable[[str], str]


def get_local_config_path(cwd: Path) -> Path:
    """Get the local config path: ./.pi/quartermaster.json."""
    return local_root(cwd) / CONFIG_FILENAME


def get_global_config_dir(home: Path, agent_dir: str | None) -> Path:
    """Get the global agent directory.

    Args:
        home: User home directory
        agent_dir: Value of PI_CODING_AGENT_DIR, if set

    Returns:
        agent_dir when set, otherwise ~/.pi/agent
    """
    if agent_dir:
        return Path(agent_dir)
    return home / ".pi" / "agent"


def get_global_config_path(global_config_dir: Path) -> Path:
    return global_config_dir / CONFIG_FILENAME


def build_config(repo_path: object, sets_file: object) -> QuartermasterConfig:
    """Build a config, reporting a blank repo path with a plain message.

    Raises:
        ValueError: If repo_path is missing or blank
    """
    if repo_path is None or not str(repo_path).strip():
        raise ValueError("Quartermaster repo path is required.")
    return QuartermasterConfig(repo_path=repo_path, sets_file=sets_file)


def read_config(config_path: Path) -> QuartermasterConfig | None:
    """Load a config file.

    Returns None if file doesn't exist.

    Raises:
        ValueError: If the file is malformed or has no repo path
    """
    if not config_path.exists():
        return None

    data = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Quartermaster config is not a JSON object: {config_path}")
    return build_config(data.get("repoPath"), data.get("setsFile"))


def read_scoped_config(
    cwd: Path,
    global_config_dir: Path,
    scope: ConfigScope,
) -> QuartermasterConfig | None:
    """Load config for a scope; ``auto`` falls back from local to global."""
    if scope == "global":
        return read_config(get_global_config_path(global_config_dir))

    local = read_config(get_local_config_path(cwd))
    if scope == "auto" and local is None:
        return read_config(get_global_config_path(global_config_dir))
    return local


def validate_repo_path(repo_path: Path) -> None:
    """Check that the shared repo exists and is a directory.

    Raises:
        ValueError: If the path does not exist or is not a directory
    """
    if not repo_path.exists():
        raise ValueError(f"Quartermaster repo path does not exist: {repo_path}")
    if not repo_path.is_dir():
        raise ValueError(f"Quartermaster repo path is not a directory: {repo_path}")


def write_config(
    config: QuartermasterConfig, config_path: Path, cwd: Path
) -> QuartermasterConfig:
    """Validate and save a config file.

    A relative repo path is validated against cwd and stored as given.
    Creates parent directories if they don't exist.

    Raises:
        ValueError: If the repo path is missing or not a directory
    """
    validate_repo_path(config.repo_root(cwd))

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote config to %s", config_path)
    return config


def get_config_path_for_scope(cwd: Path, global_config_dir: Path, scope: ConfigScope) -> Path:
    """Get the path a config write goes to; only ``global`` writes globally."""
    if scope == "global":
        return get_global_config_path(global_config_dir)
    return get_local_config_path(cwd)


def resolve_config(
    cwd: Path,
    global_config_dir: Path,
    *,
    scope: ConfigScope = "auto",
    repo_override: str | None = None,
    sets_file_override: str | None = None,
    prompt: RepoPrompt | None = None,
) -> QuartermasterConfig:
    """Resolve the effective configuration.

    Precedence:
    1. repo_override: saved to the write scope and returned
    2. existing config for the scope: repo validated, sets file override applied
    3. prompt (interactive only): answer saved to the write scope
    4. otherwise ConfigNotFoundError

    Raises:
        ConfigNotFoundError: If nothing is configured and no prompt is available
        ValueError: If the configured repo path is missing or not a directory
    """
    existing = read_scoped_config(cwd, global_config_dir, scope)
    sets_file = sets_file_override
    if sets_file is None and existing is not None:
        sets_file = existing.sets_file
    write_path = get_config_path_for_scope(cwd, global_config_dir, scope)

    if repo_override:
        override = build_config(repo_override, sets_file)
        return write_config(override, write_path, cwd)

    if existing is not None:
        validate_repo_path(existing.repo_root(cwd))
        return QuartermasterConfig(repo_path=existing.repo_path, sets_file=sets_file)

    if prompt is not None:
        answer = prompt(REPO_PROMPT)
        prompted = build_config(answer, sets_file)
        return write_config(prompted, write_path, cwd)

    raise ConfigNotFoundError()
