"""Edit set membership in the shared sets file."""

import click

from quartermaster.commands.common import load_config
from quartermaster.commands.formatting import format_set_update_results
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.models.item import validate_item_type
from quartermaster.operations.sets import add_to_set, remove_from_set


@click.command("add-to-set")
@click.argument("set_name", metavar="NAME")
@click.argument("kind", metavar="TYPE")
@click.argument("item_path", metavar="PATH")
@click.pass_obj
@cli_error_boundary
def add_to_set_cmd(ctx: QuartermasterContext, set_name: str, kind: str, item_path: str) -> None:
    """Add a repo-relative item to set NAME, creating the set if needed."""
    item_type = validate_item_type(kind)
    config = load_config(ctx)
    result = add_to_set(
        config.repo_root(ctx.cwd), config.sets_file, set_name, item_type, item_path
    )
    click.echo(format_set_update_results([result]))


@click.command("remove-from-set")
@click.argument("set_name", metavar="NAME")
@click.argument("kind", metavar="TYPE")
@click.argument("item_path", metavar="PATH")
@click.pass_obj
@cli_error_boundary
def remove_from_set_cmd(
    ctx: QuartermasterContext, set_name: str, kind: str, item_path: str
) -> None:
    """Remove an item from set NAME. The set is kept even when it ends up empty."""
    item_type = validate_item_type(kind)
    config = load_config(ctx)
    result = remove_from_set(
        config.repo_root(ctx.cwd), config.sets_file, set_name, item_type, item_path
    )
    click.echo(format_set_update_results([result]))
