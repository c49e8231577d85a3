"""Tests for context construction and dry-run wrapping."""

from pathlib import Path

from trellis.core.context import TrellisContext, create_context, with_dry_run
from trellis.github.issues import DryRunGitHubIssues, RealGitHubIssues
from trellis.github.labels import DryRunGitHubLabels
from trellis.github.projects import DryRunGitHubProjects
from trellis.github.repos import DryRunGitHubRepos


def test_with_dry_run_wraps_every_gateway() -> None:
    ctx = TrellisContext.for_test()

    dry = with_dry_run(ctx)

    assert dry.dry_run
    assert isinstance(dry.issues, DryRunGitHubIssues)
    assert isinstance(dry.labels, DryRunGitHubLabels)
    assert isinstance(dry.projects, DryRunGitHubProjects)
    assert isinstance(dry.repos, DryRunGitHubRepos)
    assert not ctx.dry_run


def test_with_dry_run_is_idempotent() -> None:
    dry = with_dry_run(TrellisContext.for_test())

    assert with_dry_run(dry) is dry


def test_create_context_reads_config(tmp_path: Path) -> None:
    config_dir = tmp_path / ".trellis"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        '[defaults]\nrepo = "acme/widgets"\nmode = "team"\n', encoding="utf-8"
    )

    ctx = create_context(dry_run=False, cwd=tmp_path)

    assert isinstance(ctx.issues, RealGitHubIssues)
    assert ctx.cwd == tmp_path
    assert ctx.config.repo == "acme/widgets"
    assert ctx.config.mode == "team"


def test_create_context_without_config(tmp_path: Path) -> None:
    ctx = create_context(dry_run=True, cwd=tmp_path)

    assert ctx.dry_run
    assert ctx.config.repo is None
    assert ctx.config.extra_labels == ()
