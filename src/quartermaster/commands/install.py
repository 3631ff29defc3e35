"""Install an item or a whole set into the current project."""

import click

from quartermaster.commands.common import load_config
from quartermaster.commands.formatting import format_item_results
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.models.item import validate_item_type
from quartermaster.models.link import ItemResult
from quartermaster.operations.links import link_item
from quartermaster.operations.paths import resolve_install_paths
from quartermaster.operations.sets import install_set

SET_KEYWORD = "set"


@click.command("install")
@click.argument("kind", metavar="TYPE|set")
@click.argument("target", metavar="PATH|NAME")
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: QuartermasterContext, kind: str, target: str) -> None:
    """Symlink an item into ./.pi, or every item of a set.

    \b
    Examples:
      quartermaster install skills writing-helper
      quartermaster install extensions ~/dev/my-ext.ts
      quartermaster install set writer
    """
    if kind == SET_KEYWORD:
        config = load_config(ctx)
        results = install_set(ctx.filesystem, config, target, ctx.cwd, ctx.home)
        click.echo(format_item_results("Install results:", results))
        return

    item_type = validate_item_type(kind)
    config = load_config(ctx)
    resolved = resolve_install_paths(
        item_type, target, config.repo_root(ctx.cwd), ctx.cwd, ctx.home
    )
    outcome = link_item(ctx.filesystem, resolved.source_path, resolved.target_path)
    result = ItemResult(outcome.status, resolved.display_path, outcome.detail)
    click.echo(format_item_results("Install results:", [result]))
