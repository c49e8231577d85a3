"""Abstract interface for GitHub Projects (v2) operations."""

from abc import ABC, abstractmethod

from trellis.github.projects.types import FieldSpec, ProjectInfo


class GitHubProjects(ABC):
    """Abstract interface for project board operations.

    Projects are addressed by (owner login, project number).
    """

    @abstractmethod
    def list_projects(self, owner: str) -> list[ProjectInfo]:
        """List projects owned by a user or organization.

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def create_project(self, owner: str, title: str) -> ProjectInfo:
        """Create a new project.

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def list_fields(self, owner: str, number: int) -> list[str]:
        """List field names defined on a project (built-in fields included).

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def create_field(self, owner: str, number: int, field: FieldSpec) -> None:
        """Create a custom field on a project.

        Raises:
            RuntimeError: If gh CLI fails (including when the field exists)
        """
        ...

    @abstractmethod
    def link_repo(self, owner: str, number: int, repo: str) -> None:
        """Link a repository to a project.

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def add_item(self, owner: str, number: int, url: str) -> None:
        """Add an issue or pull request to a project by URL.

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...
