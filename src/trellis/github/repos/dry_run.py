"""No-op wrapper for repository operations."""

from pathlib import Path
from typing import Any

from trellis.github.repos.abc import GitHubRepos
from trellis.github.repos.types import RepoFile


class DryRunGitHubRepos(GitHubRepos):
    """No-op wrapper for repository operations.

    Read operations are delegated to the wrapped implementation.
    Write operations return without executing (no-op behavior).
    """

    def __init__(self, wrapped: GitHubRepos) -> None:
        self._wrapped = wrapped

    def get_current_repo(self, cwd: Path) -> str:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.get_current_repo(cwd)

    def get_current_username(self) -> str | None:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.get_current_username()

    def repo_exists(self, repo: str) -> bool:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.repo_exists(repo)

    def create_repo(self, repo: str, *, private: bool) -> None:
        """No-op for creating a repository in dry-run mode."""
        pass

    def update_branch_protection(self, repo: str, branch: str, payload: dict[str, Any]) -> None:
        """No-op for branch protection in dry-run mode."""
        pass

    def get_file(self, repo: str, path: str, ref: str | None = None) -> RepoFile | None:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.get_file(repo, path, ref)

    def put_file(
        self, repo: str, path: str, content: str, message: str, sha: str | None
    ) -> None:
        """No-op for writing a file in dry-run mode."""
        pass
