"""Output helpers for CLI commands.

user_output is for human-readable progress. Keep it the single path to the
console so tests can capture everything a command prints.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a progress message for the operator."""
    click.echo(message, nl=nl)


def format_error(message: str) -> str:
    """Prefix a message with a red ``Error:`` marker."""
    return click.style("Error: ", fg="red") + message
