"""Tests for the project command."""

from click.testing import CliRunner

from trellis.cli.cli import cli
from trellis.core.context import TrellisContext
from trellis.github.projects import FakeGitHubProjects, ProjectInfo
from trellis.github.projects.fake import BUILTIN_FIELDS
from trellis.github.repos import FakeGitHubRepos


def test_project_requires_title() -> None:
    runner = CliRunner()
    ctx = TrellisContext.for_test()

    result = runner.invoke(cli, ["project"], obj=ctx)

    assert result.exit_code == 1
    assert "--project-title is required." in result.output


def test_project_creates_board_for_current_user() -> None:
    runner = CliRunner()
    projects = FakeGitHubProjects()
    ctx = TrellisContext.for_test(projects=projects)

    result = runner.invoke(cli, ["project", "--project-title", "Roadmap"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert [p.title for p in projects.created_projects] == ["Roadmap"]
    assert "Checking for existing project 'Roadmap'..." in result.output
    assert "Created project #1" in result.output
    assert "=== Adding Standard Fields ===" in result.output
    assert "  [created] Type" in result.output
    assert "  [skip] Status (already exists)" in result.output
    assert "Done. Project URL: https://github.com/users/testuser/projects/1" in result.output


def test_project_reuses_existing_board_and_links_repo() -> None:
    runner = CliRunner()
    projects = FakeGitHubProjects(
        projects=[ProjectInfo(4, "Roadmap", "https://github.com/orgs/acme/projects/4")],
        fields={4: BUILTIN_FIELDS + ["Type"]},
    )
    ctx = TrellisContext.for_test(projects=projects)

    result = runner.invoke(
        cli,
        ["project", "--owner", "acme", "--project-title", "Roadmap", "--repo", "acme/widgets"],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert projects.created_projects == []
    assert "Project already exists: #4" in result.output
    assert "  [skip] Type (already exists)" in result.output
    assert projects.linked_repos == [(4, "acme/widgets")]
    assert "Linked repository acme/widgets to project." in result.output


def test_project_link_failure_is_not_fatal() -> None:
    runner = CliRunner()
    projects = FakeGitHubProjects(link_error="already linked")
    ctx = TrellisContext.for_test(projects=projects)

    result = runner.invoke(
        cli, ["project", "--project-title", "Roadmap", "--repo", "acme/widgets"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "Repository may already be linked." in result.output


def test_project_dry_run() -> None:
    runner = CliRunner()
    projects = FakeGitHubProjects()
    ctx = TrellisContext.for_test(projects=projects)

    result = runner.invoke(
        cli, ["project", "--project-title", "Roadmap", "--repo", "acme/widgets", "--dry-run"],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert projects.created_projects == []
    assert projects.created_fields == []
    assert "[DRY RUN] Would create project 'Roadmap'" in result.output
    assert "  [would create] Estimate" in result.output
    assert "[DRY RUN] Would link repository acme/widgets to project." in result.output


def test_project_without_owner_fails() -> None:
    runner = CliRunner()
    ctx = TrellisContext.for_test(repos=FakeGitHubRepos(username=None))

    result = runner.invoke(cli, ["project", "--project-title", "Roadmap"], obj=ctx)

    assert result.exit_code == 1
    assert "Could not determine the owner" in result.output
