"""List items linked into the current project."""

import click

from quartermaster.commands.common import selected_types
from quartermaster.commands.formatting import format_grouped_items
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.operations.installed import list_installed


@click.command("installed")
@click.argument("item_type", metavar="[TYPE]", required=False)
@click.pass_obj
@cli_error_boundary
def installed_cmd(ctx: QuartermasterContext, item_type: str | None) -> None:
    """List symlinked items under ./.pi, optionally for one TYPE.

    Does not need a configured shared repo.
    """
    item_types = selected_types(item_type)
    click.echo(format_grouped_items("Installed items:", list_installed(ctx.cwd), item_types))
