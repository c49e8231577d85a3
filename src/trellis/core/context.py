"""Application context with dependency injection."""

import dataclasses
from dataclasses import dataclass
from pathlib import Path

from trellis.cli.config import CONFIG_DIR_NAME, LoadedConfig, load_config
from trellis.github.issues import DryRunGitHubIssues, GitHubIssues, RealGitHubIssues
from trellis.github.labels import DryRunGitHubLabels, GitHubLabels, RealGitHubLabels
from trellis.github.projects import DryRunGitHubProjects, GitHubProjects, RealGitHubProjects
from trellis.github.repos import DryRunGitHubRepos, GitHubRepos, RealGitHubRepos


@dataclass(frozen=True)
class TrellisContext:
    """Immutable context holding all dependencies for trellis operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    issues: GitHubIssues
    labels: GitHubLabels
    projects: GitHubProjects
    repos: GitHubRepos
    cwd: Path  # Current working directory at CLI invocation
    config: LoadedConfig
    dry_run: bool

    @staticmethod
    def for_test(
        issues: GitHubIssues | None = None,
        labels: GitHubLabels | None = None,
        projects: GitHubProjects | None = None,
        repos: GitHubRepos | None = None,
        cwd: Path | None = None,
        config: LoadedConfig | None = None,
        dry_run: bool = False,
    ) -> "TrellisContext":
        """Create test context with optional pre-configured gateways.

        Args:
            issues: Optional GitHubIssues. If None, creates empty FakeGitHubIssues.
            labels: Optional GitHubLabels. If None, creates empty FakeGitHubLabels.
            projects: Optional GitHubProjects. If None, creates empty FakeGitHubProjects.
            repos: Optional GitHubRepos. If None, creates default FakeGitHubRepos.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            config: Optional LoadedConfig. If None, uses empty defaults.
            dry_run: Whether to enable dry-run mode (default False).
        """
        from trellis.github.issues import FakeGitHubIssues
        from trellis.github.labels import FakeGitHubLabels
        from trellis.github.projects import FakeGitHubProjects
        from trellis.github.repos import FakeGitHubRepos

        return TrellisContext(
            issues=issues if issues is not None else FakeGitHubIssues(),
            labels=labels if labels is not None else FakeGitHubLabels(),
            projects=projects if projects is not None else FakeGitHubProjects(),
            repos=repos if repos is not None else FakeGitHubRepos(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            config=config if config is not None else LoadedConfig.empty(),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, cwd: Path | None = None) -> TrellisContext:
    """Create production context with real gateways.

    Reads `.trellis/config.toml` from cwd once, here, so commands never touch
    the filesystem for configuration.

    Raises:
        ValueError: If the config file is malformed
    """
    resolved_cwd = cwd if cwd is not None else Path.cwd()
    ctx = TrellisContext(
        issues=RealGitHubIssues(),
        labels=RealGitHubLabels(),
        projects=RealGitHubProjects(),
        repos=RealGitHubRepos(),
        cwd=resolved_cwd,
        config=load_config(resolved_cwd / CONFIG_DIR_NAME),
        dry_run=False,
    )
    if dry_run:
        return with_dry_run(ctx)
    return ctx


def with_dry_run(ctx: TrellisContext) -> TrellisContext:
    """Return a copy of ctx whose write operations are no-ops.

    Idempotent: an already dry-run context is returned unchanged.
    """
    if ctx.dry_run:
        return ctx
    return dataclasses.replace(
        ctx,
        issues=DryRunGitHubIssues(ctx.issues),
        labels=DryRunGitHubLabels(ctx.labels),
        projects=DryRunGitHubProjects(ctx.projects),
        repos=DryRunGitHubRepos(ctx.repos),
        dry_run=True,
    )
