"""Helpers shared by commands that need the shared repo configuration."""

import click

from quartermaster.context import QuartermasterContext
from quartermaster.io.config import resolve_config
from quartermaster.models.config import ConfigScope, QuartermasterConfig
from quartermaster.models.item import ITEM_TYPES, ItemType, validate_item_type


def prompt_for_repo(message: str) -> str:
    return click.prompt(message, type=str)


def load_config(ctx: QuartermasterContext, scope: ConfigScope = "auto") -> QuartermasterConfig:
    """Resolve config from the context's overrides and config files.

    Prompts for the repo path only when stdin is interactive.
    """
    return resolve_config(
        ctx.cwd,
        ctx.global_config_dir,
        scope=scope,
        repo_override=ctx.repo_override,
        sets_file_override=ctx.sets_file_override,
        prompt=prompt_for_repo if ctx.interactive else None,
    )


def selected_types(item_type: str | None) -> tuple[ItemType, ...]:
    """Types to display: all of them, or only the validated filter."""
    if item_type is None:
        return ITEM_TYPES
    return (validate_item_type(item_type),)
