import logging

import click

from quartermaster.commands.install import install_cmd
from quartermaster.commands.installed import installed_cmd
from quartermaster.commands.list_cmd import list_cmd
from quartermaster.commands.remove import remove_cmd
from quartermaster.commands.set_membership import add_to_set_cmd, remove_from_set_cmd
from quartermaster.commands.sets import sets_cmd
from quartermaster.commands.setup import setup_cmd
from quartermaster.commands.status import status_cmd
from quartermaster.context import create_context
from quartermaster.error_boundary import cli_error_boundary
from quartermaster.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--repo", "repo", default=None, help="Shared repo path (saved to the local config)")
@click.option("--sets-file", "sets_file", default=None, help="Sets file name inside the repo")
@click.option("--debug", is_flag=True, help="Log resolution and filesystem decisions to stderr")
@click.pass_context
def cli(ctx: click.Context, repo: str | None, sets_file: str | None, debug: bool) -> None:
    """Share skills, extensions, tools, and prompts across projects with symlinks."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(repo_override=repo, sets_file_override=sets_file, debug=debug)
    else:
        ctx.obj = ctx.obj.with_overrides(
            repo_override=repo, sets_file_override=sets_file, debug=debug
        )
    configure_logging(ctx.obj.debug)


cli.add_command(list_cmd)
cli.add_command(installed_cmd)
cli.add_command(sets_cmd)
cli.add_command(install_cmd)
cli.add_command(remove_cmd)
cli.add_command(remove_cmd, name="rm")
cli.add_command(add_to_set_cmd)
cli.add_command(remove_from_set_cmd)
cli.add_command(setup_cmd)
cli.add_command(status_cmd)


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()
