"""Text rendering for command output.

Commands collect result values from the core modules and hand them to these
helpers, so the console transcript of a run is fully determined by its results.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from trellis.core.classifier import (
    BoardStatus,
    ClassificationEvent,
    ClassificationOutcome,
    ClassificationRule,
    ClassificationSummary,
)
from trellis.core.provisioning import ItemStatus, LabelGroupResult, ProvisionItem
from trellis.output import user_output

BANNER_RULE = "=" * 44
DRY_RUN_PREFIX = "[DRY RUN] "


def dry_run_prefix(dry_run: bool) -> str:
    return DRY_RUN_PREFIX if dry_run else ""


def render_banner(title: str) -> None:
    user_output(BANNER_RULE)
    user_output(f" {title}")
    user_output(BANNER_RULE)


def render_rule_header(rule: ClassificationRule, match_count: int) -> None:
    user_output("")
    user_output(f"=== Scanning for {rule.type_name} issues ===")
    if match_count == 0:
        user_output("  No matches found.")


def format_event(event: ClassificationEvent) -> list[str]:
    """Console lines for one classification event (label line, then board line)."""
    number = event.issue.number
    title = event.issue.title
    label = event.rule.label

    if event.outcome == ClassificationOutcome.ALREADY_LABELED:
        lines = [f"  [skip] #{number} — already has {label}"]
    elif event.outcome == ClassificationOutcome.WOULD_LABEL:
        lines = [f"  [would label] #{number} — {title} → {label}"]
    elif event.outcome == ClassificationOutcome.LABELED:
        lines = [f"  [labeled] #{number} — {title} → {label}"]
    else:
        lines = [f"  [failed] #{number} — {title} → {label} ({event.error})"]

    if event.board is not None:
        if event.board.status == BoardStatus.WOULD_ADD:
            lines.append(f"  [would add to project] #{number}")
        elif event.board.status == BoardStatus.ADDED:
            lines.append(f"  [added to project] #{number}")
        else:
            lines.append(f"  [project add failed] #{number} ({event.board.error})")
    return lines


def render_event(event: ClassificationEvent) -> None:
    for line in format_event(event):
        user_output(line)


def render_classification_summary(summary: ClassificationSummary) -> None:
    prefix = dry_run_prefix(summary.dry_run)
    user_output("")
    user_output("=== Summary ===")
    user_output(f"{prefix}Issues scanned: {summary.scanned}")
    user_output(f"{prefix}Labels applied: {summary.labeled}")
    user_output(f"{prefix}Already correct: {summary.already_correct}")
    if summary.failed:
        user_output(f"{prefix}Failed: {summary.failed}")
    if summary.board_enabled:
        user_output(f"{prefix}Added to project: {summary.added_to_board}")
        if summary.board_failures:
            user_output(f"{prefix}Project add failures: {summary.board_failures}")


def format_item(item: ProvisionItem) -> str:
    if item.status == ItemStatus.SOFT_FAILED:
        tag = "skip"
    else:
        tag = item.status.value
    line = f"  [{tag}] {item.name}"
    if item.detail:
        line += f" ({item.detail})"
    return line


def render_items(items: Sequence[ProvisionItem]) -> None:
    for item in items:
        user_output(format_item(item))


def render_label_groups(results: Sequence[LabelGroupResult]) -> None:
    for group in results:
        user_output("")
        user_output(f"=== {group.title} ===")
        render_items(group.items)


def render_rules_table(rules: Sequence[ClassificationRule]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("type", style="cyan", no_wrap=True)
    table.add_column("title prefix", no_wrap=True)
    table.add_column("pattern", no_wrap=True)
    table.add_column("label", no_wrap=True)
    for rule in rules:
        # Text cells: patterns contain brackets that rich would read as markup
        table.add_row(
            Text(rule.type_name), Text(rule.example), Text(rule.pattern), Text(rule.label)
        )

    console = Console(width=120)
    console.print(table)
