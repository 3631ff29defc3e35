"""Report configuration status."""

import click

from quartermaster.commands.formatting import format_config_status
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.io.config import (
    get_global_config_path,
    get_local_config_path,
    read_scoped_config,
)
from quartermaster.operations.paths import to_slash_path


@click.command("status")
@click.pass_obj
@cli_error_boundary
def status_cmd(ctx: QuartermasterContext) -> None:
    """Show which config files exist and the repo they point to."""
    local_path = get_local_config_path(ctx.cwd)
    global_path = get_global_config_path(ctx.global_config_dir)

    local_display = f"./{to_slash_path(ctx.cwd, local_path)}" if local_path.exists() else None
    global_display = str(global_path) if global_path.exists() else None
    click.echo(format_config_status(local_display, global_display))

    config = read_scoped_config(ctx.cwd, ctx.global_config_dir, "auto")
    if config is None:
        return
    click.echo(f"Repo: {config.repo_path}")
    click.echo(f"Sets file: {config.sets_file}")
