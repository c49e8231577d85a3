"""Tests for the bootstrap command."""

from click.testing import CliRunner

from trellis.cli.cli import cli
from trellis.core.context import TrellisContext
from trellis.core.provisioning import TEMPLATE_FILES
from trellis.github.labels import FakeGitHubLabels
from trellis.github.projects import FakeGitHubProjects
from trellis.github.repos import FakeGitHubRepos


def test_bootstrap_creates_and_configures_repository() -> None:
    runner = CliRunner()
    labels = FakeGitHubLabels()
    repos = FakeGitHubRepos()
    projects = FakeGitHubProjects()
    ctx = TrellisContext.for_test(labels=labels, repos=repos, projects=projects)

    result = runner.invoke(cli, ["bootstrap", "widgets"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert repos.created_repos == [("testuser/widgets", False)]
    assert "  [created] testuser/widgets" in result.output
    assert "  [skip] no --source-repo given" in result.output
    assert len(labels.created_labels) == 20
    assert [(repo, branch) for repo, branch, _ in repos.protections] == [
        ("testuser/widgets", "main")
    ]
    assert [p.title for p in projects.created_projects] == ["widgets"]
    assert projects.linked_repos == [(1, "testuser/widgets")]
    assert "Step 5/5: Project Board" in result.output
    assert "https://github.com/testuser/widgets/issues/new/choose" in result.output
    assert "https://github.com/users/testuser/projects/1" in result.output


def test_bootstrap_copies_templates_from_source() -> None:
    runner = CliRunner()
    source = "acme/templates"
    repos = FakeGitHubRepos(
        files={
            (source, ".github/ISSUE_TEMPLATE/epic.yml"): "name: Epic\n",
            (source, ".github/labels.yml"): "- name: type:epic\n",
        }
    )
    ctx = TrellisContext.for_test(repos=repos)

    result = runner.invoke(
        cli,
        ["bootstrap", "widgets", "--owner", "acme", "--source-repo", source, "--private"],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert repos.created_repos == [("acme/widgets", True)]
    assert repos.file_content("acme/widgets", ".github/ISSUE_TEMPLATE/epic.yml") == (
        "name: Epic\n"
    )
    written = [path for _, path, _ in repos.written_files]
    assert written == [".github/ISSUE_TEMPLATE/epic.yml", ".github/labels.yml"]
    skipped = len(TEMPLATE_FILES) - 2
    assert result.output.count(f"(not found in {source})") == skipped


def test_bootstrap_reuses_existing_repository() -> None:
    runner = CliRunner()
    repos = FakeGitHubRepos(existing_repos={"testuser/widgets"})
    ctx = TrellisContext.for_test(repos=repos)

    result = runner.invoke(cli, ["bootstrap", "widgets"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert repos.created_repos == []
    assert "  [skip] testuser/widgets (already exists)" in result.output


def test_bootstrap_dry_run_for_new_repository() -> None:
    runner = CliRunner()
    labels = FakeGitHubLabels()
    repos = FakeGitHubRepos()
    projects = FakeGitHubProjects()
    ctx = TrellisContext.for_test(labels=labels, repos=repos, projects=projects)

    result = runner.invoke(cli, ["bootstrap", "widgets", "--dry-run"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert repos.created_repos == []
    assert labels.list_calls == 0
    assert projects.created_projects == []
    assert "  [would create] testuser/widgets" in result.output
    assert "[DRY RUN] Repository does not exist yet" in result.output
    assert "Step 2/5" not in result.output


def test_bootstrap_rejects_invalid_mode() -> None:
    runner = CliRunner()
    repos = FakeGitHubRepos()
    ctx = TrellisContext.for_test(repos=repos)

    result = runner.invoke(cli, ["bootstrap", "widgets", "--mode", "strict"], obj=ctx)

    assert result.exit_code == 1
    assert repos.created_repos == []


def test_bootstrap_requires_name() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["bootstrap"], obj=TrellisContext.for_test())

    assert result.exit_code == 1
    assert "Missing argument 'NAME'" in result.output
