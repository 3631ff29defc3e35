"""List the sets defined in the shared repo."""

import click

from quartermaster.commands.common import load_config
from quartermaster.commands.formatting import format_sets
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.io.sets_file import get_sets_path, read_sets_manifest


@click.command("sets")
@click.pass_obj
@cli_error_boundary
def sets_cmd(ctx: QuartermasterContext) -> None:
    """List sets with per-type item counts."""
    config = load_config(ctx)
    repo_path = config.repo_root(ctx.cwd)
    manifest = read_sets_manifest(repo_path, config.sets_file)
    click.echo(format_sets(manifest, str(get_sets_path(repo_path, config.sets_file))))
