"""In-memory fake implementation of repository operations for testing."""

import hashlib
from pathlib import Path
from typing import Any

from trellis.github.repos.abc import GitHubRepos
from trellis.github.repos.types import RepoFile


def _blob_sha(content: str) -> str:
    return hashlib.sha1(content.encode("utf-8")).hexdigest()


class FakeGitHubRepos(GitHubRepos):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        current_repo: str | None = "test-owner/test-repo",
        username: str | None = "testuser",
        existing_repos: set[str] | None = None,
        files: dict[tuple[str, str], str] | None = None,
        protection_error: str | None = None,
    ) -> None:
        """Create FakeGitHubRepos.

        Args:
            current_repo: Repo resolved from cwd (None simulates "not a GitHub repo")
            username: Authenticated username (None means not authenticated)
            existing_repos: Repositories that already exist
            files: Mapping of (repo, path) -> file content
            protection_error: If set, update_branch_protection raises RuntimeError
        """
        self._current_repo = current_repo
        self._username = username
        self._existing_repos = set(existing_repos or set())
        self._files = dict(files or {})
        self._protection_error = protection_error
        self._created_repos: list[tuple[str, bool]] = []
        self._protections: list[tuple[str, str, dict[str, Any]]] = []
        self._written_files: list[tuple[str, str, str]] = []

    @property
    def created_repos(self) -> list[tuple[str, bool]]:
        """Returns list of (repo, private) tuples."""
        return self._created_repos

    @property
    def protections(self) -> list[tuple[str, str, dict[str, Any]]]:
        """Returns list of (repo, branch, payload) tuples."""
        return self._protections

    @property
    def written_files(self) -> list[tuple[str, str, str]]:
        """Returns list of (repo, path, message) tuples."""
        return self._written_files

    def file_content(self, repo: str, path: str) -> str | None:
        """Current content of a file, for test assertions."""
        return self._files.get((repo, path))

    def get_current_repo(self, cwd: Path) -> str:
        if self._current_repo is None:
            msg = f"Failed to execute gh command 'gh repo view': no git remotes found in {cwd}"
            raise RuntimeError(msg)
        return self._current_repo

    def get_current_username(self) -> str | None:
        return self._username

    def repo_exists(self, repo: str) -> bool:
        return repo in self._existing_repos

    def create_repo(self, repo: str, *, private: bool) -> None:
        if repo in self._existing_repos:
            msg = f"Failed to create {repo}: Name already exists on this account"
            raise RuntimeError(msg)
        self._existing_repos.add(repo)
        self._files[(repo, "README.md")] = f"# {repo.split('/')[-1]}\n"
        self._created_repos.append((repo, private))

    def update_branch_protection(self, repo: str, branch: str, payload: dict[str, Any]) -> None:
        if self._protection_error is not None:
            raise RuntimeError(self._protection_error)
        self._protections.append((repo, branch, payload))

    def get_file(self, repo: str, path: str, ref: str | None = None) -> RepoFile | None:
        content = self._files.get((repo, path))
        if content is None:
            return None
        return RepoFile(path=path, content=content, sha=_blob_sha(content))

    def put_file(
        self, repo: str, path: str, content: str, message: str, sha: str | None
    ) -> None:
        existing = self._files.get((repo, path))
        if existing is not None and sha != _blob_sha(existing):
            msg = f"Failed to update {path}: sha does not match (HTTP 409)"
            raise RuntimeError(msg)
        self._files[(repo, path)] = content
        self._written_files.append((repo, path, message))
