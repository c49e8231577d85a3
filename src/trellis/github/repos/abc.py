"""Abstract interface for repository-level GitHub operations."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from trellis.github.repos.types import RepoFile


class GitHubRepos(ABC):
    """Abstract interface for repository operations."""

    @abstractmethod
    def get_current_repo(self, cwd: Path) -> str:
        """Resolve the "owner/name" of the repository checked out at cwd.

        Raises:
            RuntimeError: If cwd is not a GitHub repository or gh CLI fails
        """
        ...

    @abstractmethod
    def get_current_username(self) -> str | None:
        """Get the authenticated GitHub username.

        Returns:
            GitHub username if authenticated, None if not authenticated
        """
        ...

    @abstractmethod
    def repo_exists(self, repo: str) -> bool:
        """Check whether a repository exists and is visible to the user."""
        ...

    @abstractmethod
    def create_repo(self, repo: str, *, private: bool) -> None:
        """Create a repository with an initial README commit.

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def update_branch_protection(self, repo: str, branch: str, payload: dict[str, Any]) -> None:
        """Replace the protection rules of a branch.

        Args:
            repo: Repository in "owner/name" form
            branch: Branch name
            payload: Body for PUT /repos/{repo}/branches/{branch}/protection

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def get_file(self, repo: str, path: str, ref: str | None = None) -> RepoFile | None:
        """Read a file from a repository.

        Returns:
            RepoFile, or None if the file does not exist

        Raises:
            RuntimeError: If gh CLI fails for any reason other than not-found
        """
        ...

    @abstractmethod
    def put_file(
        self, repo: str, path: str, content: str, message: str, sha: str | None
    ) -> None:
        """Create or update a file on the default branch with a single commit.

        Args:
            sha: Current blob SHA when updating, None when creating

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...
