"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use a red "Error:"
prefix and exit with code 1 before any further GitHub call is made.
"""

import shutil
from typing import TypeVar

from trellis.output import format_error, user_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(format_error(error_message))
            raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Returns:
            The value unchanged if not None

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(format_error(error_message))
            raise SystemExit(1)
        return value

    @staticmethod
    def gh_installed() -> None:
        """Ensure GitHub CLI (gh) is installed and available on PATH.

        Raises:
            SystemExit: If gh CLI is not found on PATH
        """
        if shutil.which("gh") is None:
            user_output(
                format_error(
                    "GitHub CLI (gh) is not installed\n\n"
                    + "Install it from: https://cli.github.com/\n"
                    + "Then authenticate with: gh auth login"
                )
            )
            raise SystemExit(1)

