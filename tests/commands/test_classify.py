"""Tests for the classify command."""

import dataclasses

from click.testing import CliRunner

from tests.test_utils.builders import make_issue
from trellis.cli.cli import cli
from trellis.cli.config import LoadedConfig
from trellis.core.context import TrellisContext
from trellis.github.issues import FakeGitHubIssues
from trellis.github.projects import FakeGitHubProjects


def test_classify_requires_repo() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues()
    ctx = TrellisContext.for_test(issues=issues)

    result = runner.invoke(cli, ["classify"], obj=ctx)

    assert result.exit_code == 1
    assert "--repo is required." in result.output
    assert issues.list_calls == 0


def test_classify_labels_matching_issues() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues(
        issues=[
            make_issue(1, "Epic 1: Onboarding"),
            make_issue(2, "F1.1: Sign up", ["type:feature"]),
            make_issue(3, "Tidy README"),
        ]
    )
    ctx = TrellisContext.for_test(issues=issues)

    result = runner.invoke(cli, ["classify", "--repo", "acme/widgets"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert issues.added_labels == [(1, "type:epic")]
    assert "Scanning issues in acme/widgets..." in result.output
    assert "=== Scanning for Epic issues ===" in result.output
    assert "  [labeled] #1 — Epic 1: Onboarding → type:epic" in result.output
    assert "  [skip] #2 — already has type:feature" in result.output
    assert "Issues scanned: 2" in result.output
    assert "Labels applied: 1" in result.output
    assert "Already correct: 1" in result.output
    assert "Failed:" not in result.output
    assert "Tidy README" not in result.output


def test_classify_reports_rules_without_matches() -> None:
    runner = CliRunner()
    ctx = TrellisContext.for_test(issues=FakeGitHubIssues())

    result = runner.invoke(cli, ["classify", "--repo", "acme/widgets"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.count("  No matches found.") == 6
    assert "Issues scanned: 0" in result.output


def test_classify_dry_run_changes_nothing() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues(issues=[make_issue(7, "[Registry] Artifact")])
    ctx = TrellisContext.for_test(issues=issues)

    result = runner.invoke(cli, ["classify", "--repo", "acme/widgets", "--dry-run"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert issues.added_labels == []
    assert "[DRY RUN] Scanning issues in acme/widgets..." in result.output
    assert "  [would label] #7 — [Registry] Artifact → type:registry" in result.output
    assert "[DRY RUN] Labels applied: 1" in result.output


def test_classify_continues_past_failures_and_exits_1() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues(
        issues=[make_issue(1, "Epic 1: A"), make_issue(2, "Epic 2: B"), make_issue(3, "[PBS] C")],
        failing_label_issues={2},
    )
    ctx = TrellisContext.for_test(issues=issues)

    result = runner.invoke(cli, ["classify", "--repo", "acme/widgets"], obj=ctx)

    assert result.exit_code == 1
    assert issues.added_labels == [(1, "type:epic"), (3, "type:pbs")]
    assert "  [failed] #2 — Epic 2: B → type:epic" in result.output
    assert "Failed: 1" in result.output
    assert "Labels applied: 2" in result.output


def test_classify_listing_failure_exits_1() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues(list_error="gh: Could not resolve to a Repository")
    ctx = TrellisContext.for_test(issues=issues)

    result = runner.invoke(cli, ["classify", "--repo", "acme/missing"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: gh: Could not resolve to a Repository" in result.output
    assert "=== Summary ===" not in result.output


def test_classify_adds_matches_to_project_board() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues(issues=[make_issue(1, "Epic 1: A"), make_issue(2, "chore")])
    projects = FakeGitHubProjects()
    ctx = TrellisContext.for_test(issues=issues, projects=projects)

    result = runner.invoke(
        cli,
        [
            "classify",
            "--repo",
            "acme/widgets",
            "--project-owner",
            "acme",
            "--project-number",
            "3",
        ],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert projects.added_items == [(3, "https://github.com/acme/widgets/issues/1")]
    assert "  [added to project] #1" in result.output
    assert "Added to project: 1" in result.output


def test_classify_board_failure_does_not_fail_command() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues(issues=[make_issue(1, "Epic 1: A")])
    projects = FakeGitHubProjects(
        failing_item_urls={"https://github.com/acme/widgets/issues/1"}
    )
    ctx = TrellisContext.for_test(issues=issues, projects=projects)

    result = runner.invoke(
        cli,
        ["classify", "--repo", "acme/widgets", "--project-owner", "acme", "--project-number", "3"],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert issues.added_labels == [(1, "type:epic")]
    assert "  [project add failed] #1" in result.output


def test_classify_requires_both_board_options() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues()
    ctx = TrellisContext.for_test(issues=issues)

    result = runner.invoke(
        cli, ["classify", "--repo", "acme/widgets", "--project-owner", "acme"], obj=ctx
    )

    assert result.exit_code == 1
    assert "must be given together" in result.output
    assert issues.list_calls == 0


def test_classify_uses_configured_repo() -> None:
    runner = CliRunner()
    issues = FakeGitHubIssues(issues=[make_issue(1, "[WBS] Task")])
    config = dataclasses.replace(LoadedConfig.empty(), repo="acme/configured")
    ctx = TrellisContext.for_test(issues=issues, config=config)

    result = runner.invoke(cli, ["classify"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Scanning issues in acme/configured..." in result.output
    assert issues.added_labels == [(1, "type:wbs")]


def test_classify_help_lists_patterns() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["classify", "--help"], obj=TrellisContext.for_test())

    assert result.exit_code == 0
    assert "Detected patterns:" in result.output
    assert "SN.x.y:" in result.output
    assert "type:registry" in result.output
