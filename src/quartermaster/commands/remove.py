"""Remove an installed item or a whole set from the current project."""

import click

from quartermaster.commands.common import load_config
from quartermaster.commands.formatting import format_item_results
from quartermaster.commands.install import SET_KEYWORD
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.models.item import validate_item_type
from quartermaster.models.link import ItemResult
from quartermaster.operations.links import remove_item
from quartermaster.operations.paths import resolve_remove_target
from quartermaster.operations.sets import remove_set


@click.command("remove")
@click.argument("kind", metavar="TYPE|set")
@click.argument("target", metavar="PATH|NAME")
@click.pass_obj
@cli_error_boundary
def remove_cmd(ctx: QuartermasterContext, kind: str, target: str) -> None:
    """Remove an item's symlink from ./.pi, or every item of a set.

    Only symlinks are removed; the shared source is never touched. Removing a
    single item does not need a configured shared repo.
    """
    if kind == SET_KEYWORD:
        config = load_config(ctx)
        results = remove_set(ctx.filesystem, config, target, ctx.cwd, ctx.home)
        click.echo(format_item_results("Remove results:", results))
        return

    item_type = validate_item_type(kind)
    removal = resolve_remove_target(item_type, target, ctx.cwd, ctx.home)
    outcome = remove_item(ctx.filesystem, removal.target_path)
    result = ItemResult(outcome.status, removal.display_path, outcome.detail)
    click.echo(format_item_results("Remove results:", [result]))
