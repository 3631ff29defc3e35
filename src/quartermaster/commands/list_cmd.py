"""List items available in the shared repo."""

import click

from quartermaster.commands.common import load_config, selected_types
from quartermaster.commands.formatting import format_grouped_items
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.models.item import group_discovered_items
from quartermaster.operations.discovery import discover_items


@click.command("list")
@click.argument("item_type", metavar="[TYPE]", required=False)
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: QuartermasterContext, item_type: str | None) -> None:
    """List installable items in the shared repo, optionally for one TYPE."""
    item_types = selected_types(item_type)
    config = load_config(ctx)
    items = discover_items(config.repo_root(ctx.cwd))
    click.echo(format_grouped_items("Available items:", group_discovered_items(items), item_types))
