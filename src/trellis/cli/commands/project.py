"""Command to create or update the project board."""

import click

from trellis.cli.core import exit_with_gh_error, resolve_owner
from trellis.cli.ensure import Ensure
from trellis.cli.rendering import dry_run_prefix, render_items
from trellis.core.context import TrellisContext, with_dry_run
from trellis.core.provisioning import STANDARD_FIELDS, ItemStatus, setup_project
from trellis.output import user_output


def _fields_help() -> str:
    lines = ["\b", "Standard fields:"]
    for field in STANDARD_FIELDS:
        kind = field.data_type.replace("_", " ").title()
        options = f": {', '.join(field.options)}" if field.options else ""
        lines.append(f"  {field.name:<12} ({kind}){options}")
    return "\n".join(lines)


def run_project_step(ctx: TrellisContext, owner: str, title: str, repo: str | None) -> str:
    """Find or create the board, add standard fields, link repo.

    Returns:
        The project URL

    Raises:
        RuntimeError: If gh CLI fails on a hard step (listing or creating the project)
    """
    prefix = dry_run_prefix(ctx.dry_run)
    user_output(f"{prefix}Checking for existing project '{title}'...")
    result = setup_project(ctx.projects, owner, title, repo, dry_run=ctx.dry_run)

    if not result.created:
        user_output(f"Project already exists: #{result.project.number}")
    elif ctx.dry_run:
        user_output(f"{prefix}Would create project '{title}'")
    else:
        user_output(f"Created project #{result.project.number}")

    user_output("")
    user_output("=== Adding Standard Fields ===")
    render_items(result.fields)

    if result.link is not None:
        user_output("")
        if result.link.status == ItemStatus.CREATED:
            user_output(f"Linked repository {repo} to project.")
        elif result.link.status == ItemStatus.SOFT_FAILED:
            user_output("Repository may already be linked.")
        else:
            user_output(f"{prefix}Would link repository {repo} to project.")

    user_output("")
    user_output(f"Done. Project URL: {result.project.url}")
    return result.project.url


@click.command("project", epilog=_fields_help())
@click.option("--owner", help="GitHub user or org that owns the project (default: you).")
@click.option("--project-title", help="Name of the project (required).")
@click.option("--repo", help="Link this repository to the project (optional).")
@click.option("--dry-run", is_flag=True, default=False, help="Show what would be created.")
@click.pass_obj
def project_cmd(
    ctx: TrellisContext,
    owner: str | None,
    project_title: str | None,
    repo: str | None,
    dry_run: bool,
) -> None:
    """Create or update a project board with the standard workflow fields."""
    title = Ensure.not_none(
        project_title or ctx.config.project_title, "--project-title is required."
    )
    if dry_run:
        ctx = with_dry_run(ctx)
    resolved_owner = resolve_owner(ctx, owner)

    try:
        run_project_step(ctx, resolved_owner, title, repo)
    except RuntimeError as e:
        exit_with_gh_error(e)
