"""Command to show the classification rules."""

import click

from trellis.cli.rendering import render_rules_table
from trellis.core.classifier import HIERARCHY_RULES


@click.command("rules")
def rules_cmd() -> None:
    """Show the title patterns classify recognizes, in evaluation order."""
    render_rules_table(HIERARCHY_RULES)
