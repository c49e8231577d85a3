"""No-op wrapper for project operations."""

from trellis.github.projects.abc import GitHubProjects
from trellis.github.projects.types import FieldSpec, ProjectInfo


class DryRunGitHubProjects(GitHubProjects):
    """No-op wrapper for project operations.

    Read operations are delegated to the wrapped implementation.
    Write operations return without executing (no-op behavior).
    """

    def __init__(self, wrapped: GitHubProjects) -> None:
        self._wrapped = wrapped

    def list_projects(self, owner: str) -> list[ProjectInfo]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_projects(owner)

    def create_project(self, owner: str, title: str) -> ProjectInfo:
        """No-op for creating a project in dry-run mode.

        Returns:
            A placeholder project with sentinel number -1
        """
        return ProjectInfo(number=-1, title=title, url=f"https://github.com/users/{owner}/projects")

    def list_fields(self, owner: str, number: int) -> list[str]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_fields(owner, number)

    def create_field(self, owner: str, number: int, field: FieldSpec) -> None:
        """No-op for creating a field in dry-run mode."""
        pass

    def link_repo(self, owner: str, number: int, repo: str) -> None:
        """No-op for linking a repository in dry-run mode."""
        pass

    def add_item(self, owner: str, number: int, url: str) -> None:
        """No-op for adding an item in dry-run mode."""
        pass
