"""No-op wrapper for GitHub issue operations."""

from trellis.github.issues.abc import GitHubIssues
from trellis.github.issues.types import IssueInfo


class DryRunGitHubIssues(GitHubIssues):
    """No-op wrapper for GitHub issue operations.

    Read operations are delegated to the wrapped implementation.
    Write operations return without executing (no-op behavior).
    """

    def __init__(self, wrapped: GitHubIssues) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real GitHubIssues implementation to wrap
        """
        self._wrapped = wrapped

    def list_issues(
        self,
        repo: str,
        state: str | None = None,
        limit: int | None = None,
    ) -> list[IssueInfo]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_issues(repo, state=state, limit=limit)

    def add_label(self, repo: str, number: int, label: str) -> None:
        """No-op for adding a label in dry-run mode."""
        pass
