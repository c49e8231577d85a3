"""Command to run every provisioning step in sequence."""

import click

from trellis.cli.commands.labels import resolve_label_groups, run_labels_step
from trellis.cli.commands.project import run_project_step
from trellis.cli.commands.protect import resolve_mode, run_protect_step
from trellis.cli.config import DEFAULT_BRANCH
from trellis.cli.core import exit_with_gh_error
from trellis.cli.rendering import render_banner
from trellis.core.context import TrellisContext, with_dry_run
from trellis.output import format_error, user_output


def run_setup_steps(
    ctx: TrellisContext,
    repo: str,
    owner: str,
    project_title: str,
    mode: str,
    *,
    first_step: int = 1,
    total_steps: int = 3,
) -> str:
    """Labels, then branch protection, then project board; returns the project URL.

    Raises:
        RuntimeError: On the first hard gh failure
    """
    groups = resolve_label_groups(ctx, None)
    branch = ctx.config.branch or DEFAULT_BRANCH

    render_banner(f"Step {first_step}/{total_steps}: Labels")
    run_labels_step(ctx, repo, groups)

    user_output("")
    render_banner(f"Step {first_step + 1}/{total_steps}: Branch Protection")
    run_protect_step(ctx, repo, branch, mode)

    user_output("")
    render_banner(f"Step {first_step + 2}/{total_steps}: Project Board")
    return run_project_step(ctx, owner, project_title, repo)


@click.command("setup-all")
@click.option("--repo", help="Target repository as owner/name (required).")
@click.option("--owner", help="GitHub user or org for the project board (required).")
@click.option("--project-title", help="Project board name (required).")
@click.option("--mode", help="Branch protection mode: solo (default) or team.")
@click.option("--dry-run", is_flag=True, default=False, help="Show what would be done.")
@click.pass_obj
def setup_all_cmd(
    ctx: TrellisContext,
    repo: str | None,
    owner: str | None,
    project_title: str | None,
    mode: str | None,
    dry_run: bool,
) -> None:
    """Provision a repository with the full workflow in one command.

    Runs: labels → protect → project. Stops at the first failure.
    """
    target_repo = repo or ctx.config.repo
    target_owner = owner or ctx.config.owner
    title = project_title or ctx.config.project_title
    if target_repo is None or target_owner is None or title is None:
        user_output(
            format_error(
                "--repo, --owner, and --project-title are all required.\n"
                "Run with --help for usage."
            )
        )
        raise SystemExit(1)
    resolved_mode = resolve_mode(ctx, mode)
    if dry_run:
        ctx = with_dry_run(ctx)

    render_banner("Workflow — Full Repository Setup")
    user_output("")
    user_output(f"  Repository:    {target_repo}")
    user_output(f"  Owner:         {target_owner}")
    user_output(f"  Project:       {title}")
    user_output(f"  Branch Mode:   {resolved_mode}")
    user_output("")

    try:
        run_setup_steps(ctx, target_repo, target_owner, title, resolved_mode)
    except RuntimeError as e:
        exit_with_gh_error(e)

    user_output("")
    render_banner("Setup Complete")
    user_output("")
    user_output("Next steps:")
    user_output("  1. Add issue templates, the pull request template and workflows")
    user_output("     (trellis bootstrap --source-repo syncs them for new repositories)")
    user_output(f"  2. Run: trellis classify --repo {target_repo}")
    user_output("     (to classify existing issues)")
