"""Write the quartermaster configuration file."""

import click

from quartermaster.commands.common import prompt_for_repo
from quartermaster.context import QuartermasterContext
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.io.config import (
    REPO_PROMPT,
    build_config,
    get_config_path_for_scope,
    write_config,
)


@click.command("setup")
@click.argument("repo", required=False)
@click.option(
    "--global",
    "use_global",
    is_flag=True,
    help="Write the global config instead of ./.pi/quartermaster.json",
)
@click.option("--sets-file", "sets_file", default=None, help="Sets file name inside the repo")
@click.pass_obj
@cli_error_boundary
def setup_cmd(
    ctx: QuartermasterContext, repo: str | None, use_global: bool, sets_file: str | None
) -> None:
    """Point quartermaster at a shared repo.

    Prompts for REPO when it is omitted and stdin is interactive. The repo
    must be an existing directory.
    """
    repo_path = repo or ctx.repo_override
    if repo_path is None and ctx.interactive:
        repo_path = prompt_for_repo(REPO_PROMPT)

    config = build_config(repo_path, sets_file or ctx.sets_file_override)
    config_path = get_config_path_for_scope(
        ctx.cwd, ctx.global_config_dir, "global" if use_global else "local"
    )
    write_config(config, config_path, ctx.cwd)

    click.echo(f"Saved config to {config_path}")
    click.echo(f"  repo: {config.repo_path}")
    click.echo(f"  sets file: {config.sets_file}")
