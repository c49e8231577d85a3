"""Command to classify existing issues into the hierarchy."""

import logging

import click

from trellis.cli.core import exit_with_gh_error
from trellis.cli.ensure import Ensure
from trellis.cli.rendering import (
    dry_run_prefix,
    render_classification_summary,
    render_event,
    render_rule_header,
)
from trellis.core.classifier import (
    HIERARCHY_RULES,
    BoardTarget,
    classify_issues,
    fetch_open_issues,
)
from trellis.core.context import TrellisContext, with_dry_run
from trellis.output import user_output

logger = logging.getLogger(__name__)


def _pattern_help() -> str:
    lines = ["\b", "Detected patterns:"]
    for rule in HIERARCHY_RULES:
        lines.append(f"  {rule.example:<12} → {rule.label}")
    return "\n".join(lines)


@click.command("classify", epilog=_pattern_help())
@click.option("--repo", help="Target repository as owner/name (required).")
@click.option("--project-owner", help="Project owner for adding issues to a project board.")
@click.option(
    "--project-number",
    type=int,
    help="Project number for adding issues to a project board.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Report changes without applying them.",
)
@click.pass_obj
def classify_cmd(
    ctx: TrellisContext,
    repo: str | None,
    project_owner: str | None,
    project_number: int | None,
    dry_run: bool,
) -> None:
    """Apply hierarchy labels to open issues based on title patterns.

    Every open issue is read once. Each rule's label is added to matching
    issues that do not carry it yet; issues that already do are skipped, so
    re-running is safe. With --project-owner and --project-number, every
    matched issue is also added to that project board (best effort).

    A failure to label one issue is reported and the scan continues; the
    command then exits with status 1.
    """
    target_repo = Ensure.not_none(repo or ctx.config.repo, "--repo is required.")
    Ensure.invariant(
        (project_owner is None) == (project_number is None),
        "--project-owner and --project-number must be given together.",
    )

    if dry_run:
        ctx = with_dry_run(ctx)

    board = None
    if project_owner is not None and project_number is not None:
        board = BoardTarget(owner=project_owner, number=project_number)

    logger.debug("classify(repo=%s, board=%s, dry_run=%s)", target_repo, board, ctx.dry_run)
    prefix = dry_run_prefix(ctx.dry_run)
    user_output(f"{prefix}Scanning issues in {target_repo}...")

    try:
        snapshot = fetch_open_issues(ctx.issues, target_repo)
    except RuntimeError as e:
        exit_with_gh_error(e)

    summary = classify_issues(
        ctx.issues,
        target_repo,
        snapshot,
        HIERARCHY_RULES,
        dry_run=ctx.dry_run,
        projects=ctx.projects,
        board=board,
        on_rule=render_rule_header,
        on_event=render_event,
    )
    render_classification_summary(summary)

    if summary.failed:
        raise SystemExit(1)
