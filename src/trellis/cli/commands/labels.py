"""Command to create the standard workflow label set."""

from pathlib import Path

import click

from trellis.cli.core import exit_with_gh_error, resolve_repo
from trellis.cli.rendering import dry_run_prefix, render_label_groups
from trellis.core.context import TrellisContext, with_dry_run
from trellis.core.provisioning import (
    STANDARD_LABEL_GROUPS,
    LabelGroup,
    ensure_labels,
    load_label_file,
)
from trellis.output import format_error, user_output


def resolve_label_groups(
    ctx: TrellisContext, labels_file: Path | None
) -> tuple[LabelGroup, ...]:
    """Label groups to create: the file's labels, or the standard set plus config extras.

    Raises:
        SystemExit: If the label file is malformed
    """
    if labels_file is not None:
        try:
            return load_label_file(labels_file)
        except ValueError as e:
            user_output(format_error(str(e)))
            raise SystemExit(1) from e

    if ctx.config.extra_labels:
        return STANDARD_LABEL_GROUPS + (LabelGroup("Extra Labels", ctx.config.extra_labels),)
    return STANDARD_LABEL_GROUPS


def run_labels_step(ctx: TrellisContext, repo: str, groups: tuple[LabelGroup, ...]) -> None:
    """Create missing labels and print one line per label.

    Raises:
        RuntimeError: If gh CLI fails
    """
    user_output(f"{dry_run_prefix(ctx.dry_run)}Fetching existing labels in {repo}...")
    results = ensure_labels(ctx.labels, repo, groups, dry_run=ctx.dry_run)
    render_label_groups(results)
    user_output("")
    user_output("Done. All labels are in place.")


@click.command("labels")
@click.option("--repo", help="Target repository as owner/name (default: current repo).")
@click.option(
    "--labels-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML list of labels to create instead of the standard set.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Show labels that would be created.")
@click.pass_obj
def labels_cmd(
    ctx: TrellisContext, repo: str | None, labels_file: Path | None, dry_run: bool
) -> None:
    """Create the standard workflow label set.

    Idempotent: labels that already exist are left untouched, so it is safe
    to run multiple times.
    """
    groups = resolve_label_groups(ctx, labels_file)
    if dry_run:
        ctx = with_dry_run(ctx)
    target_repo = resolve_repo(ctx, repo)

    try:
        run_labels_step(ctx, target_repo, groups)
    except RuntimeError as e:
        exit_with_gh_error(e)
