"""No-op wrapper for label operations."""

from trellis.github.labels.abc import GitHubLabels
from trellis.github.labels.types import LabelSpec


class DryRunGitHubLabels(GitHubLabels):
    """No-op wrapper for label operations.

    Read operations are delegated to the wrapped implementation.
    Write operations return without executing (no-op behavior).
    """

    def __init__(self, wrapped: GitHubLabels) -> None:
        self._wrapped = wrapped

    def list_labels(self, repo: str) -> list[str]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_labels(repo)

    def create_label(self, repo: str, label: LabelSpec) -> None:
        """No-op for creating a label in dry-run mode."""
        pass
