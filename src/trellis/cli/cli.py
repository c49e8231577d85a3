import logging
import os

import click

from trellis.cli.commands.bootstrap import bootstrap_cmd
from trellis.cli.commands.classify import classify_cmd
from trellis.cli.commands.config import config_group
from trellis.cli.commands.labels import labels_cmd
from trellis.cli.commands.project import project_cmd
from trellis.cli.commands.protect import protect_cmd
from trellis.cli.commands.rules import rules_cmd
from trellis.cli.commands.setup_all import setup_all_cmd
from trellis.cli.ensure import Ensure
from trellis.cli.help_formatter import GroupedCommandGroup, help_requested
from trellis.core.context import create_context
from trellis.output import format_error, user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Commands that never call the GitHub CLI
OFFLINE_COMMANDS = frozenset({"config", "rules"})


@click.group(
    cls=GroupedCommandGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(package_name="trellis")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Provision GitHub repositories for a hierarchical issue workflow."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    # Help needs neither gh nor config
    if help_requested(ctx):
        return

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        if ctx.invoked_subcommand not in OFFLINE_COMMANDS:
            Ensure.gh_installed()
        try:
            ctx.obj = create_context(dry_run=False)
        except ValueError as e:
            user_output(format_error(f"Invalid configuration: {e}"))
            raise SystemExit(1) from e


cli.add_command(bootstrap_cmd)
cli.add_command(classify_cmd)
cli.add_command(config_group)
cli.add_command(labels_cmd)
cli.add_command(project_cmd)
cli.add_command(protect_cmd)
cli.add_command(rules_cmd)
cli.add_command(setup_all_cmd)


def main() -> None:
    """CLI entry point used by the `trellis` console script."""
    if os.getenv("TRELLIS_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    cli()
