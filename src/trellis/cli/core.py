"""Helpers shared by CLI commands."""

from typing import NoReturn

import click

from trellis.core.context import TrellisContext
from trellis.output import format_error, user_output


def exit_with_gh_error(error: RuntimeError) -> NoReturn:
    """Report an unrecoverable gh failure and exit 1."""
    user_output(format_error(str(error)))
    raise SystemExit(1) from error


def resolve_repo(ctx: TrellisContext, repo: str | None) -> str:
    """Target repository: --repo, else config default, else the repo at cwd.

    Raises:
        SystemExit: If the repository cannot be resolved
    """
    if repo is not None:
        return repo
    if ctx.config.repo is not None:
        return ctx.config.repo
    try:
        return ctx.repos.get_current_repo(ctx.cwd)
    except RuntimeError as e:
        user_output(
            format_error("Could not determine the repository; pass --repo owner/name")
            + "\n"
            + click.style(str(e), dim=True)
        )
        raise SystemExit(1) from e


def resolve_owner(ctx: TrellisContext, owner: str | None) -> str:
    """Project owner: --owner, else config default, else the authenticated user.

    Raises:
        SystemExit: If no owner can be determined
    """
    if owner is not None:
        return owner
    if ctx.config.owner is not None:
        return ctx.config.owner
    username = ctx.repos.get_current_username()
    if username is None:
        user_output(
            format_error("Could not determine the owner; pass --owner or run gh auth login")
        )
        raise SystemExit(1)
    return username
