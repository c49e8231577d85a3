"""Command to configure branch protection."""

import click

from trellis.cli.config import DEFAULT_BRANCH, DEFAULT_MODE
from trellis.cli.core import exit_with_gh_error, resolve_repo
from trellis.cli.ensure import Ensure
from trellis.cli.rendering import dry_run_prefix
from trellis.core.context import TrellisContext, with_dry_run
from trellis.core.provisioning import PROTECTION_MODES, apply_branch_protection
from trellis.output import user_output


def resolve_mode(ctx: TrellisContext, mode: str | None) -> str:
    """Protection mode from --mode, else config, else solo; exits 1 if invalid."""
    resolved = mode or ctx.config.mode or DEFAULT_MODE
    Ensure.invariant(
        resolved in PROTECTION_MODES,
        f"--mode must be 'solo' or 'team' (got '{resolved}')",
    )
    return resolved


def run_protect_step(ctx: TrellisContext, repo: str, branch: str, mode: str) -> None:
    """Apply branch protection and print what was done.

    Raises:
        RuntimeError: If gh CLI fails
    """
    prefix = dry_run_prefix(ctx.dry_run)
    user_output(f"{prefix}Configuring branch protection for {repo} (mode: {mode})...")
    apply_branch_protection(ctx.repos, repo, branch, mode)
    user_output("")
    user_output(f"{prefix}Branch protection configured for {branch} branch.")


@click.command("protect")
@click.option("--repo", help="Target repository as owner/name (default: current repo).")
@click.option("--mode", help="Protection level: solo (default) or team.")
@click.option("--branch", help="Branch to protect (default: main).")
@click.option("--dry-run", is_flag=True, default=False, help="Show what would be configured.")
@click.pass_obj
def protect_cmd(
    ctx: TrellisContext,
    repo: str | None,
    mode: str | None,
    branch: str | None,
    dry_run: bool,
) -> None:
    """Configure branch protection rules.

    \b
    solo: no force push, no deletions, 0 required reviews
    team: 1 required review, strict status checks, conversation resolution

    Admins can temporarily disable protection in the repository settings
    during an emergency; re-run this command afterwards to restore it.
    """
    resolved_mode = resolve_mode(ctx, mode)
    resolved_branch = branch or ctx.config.branch or DEFAULT_BRANCH
    if dry_run:
        ctx = with_dry_run(ctx)
    target_repo = resolve_repo(ctx, repo)

    try:
        run_protect_step(ctx, target_repo, resolved_branch, resolved_mode)
    except RuntimeError as e:
        exit_with_gh_error(e)

    if not ctx.dry_run:
        user_output("")
        user_output(
            f"Verification: try 'git push --force origin {resolved_branch}'"
            " — it should be rejected."
        )
