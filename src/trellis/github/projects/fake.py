"""In-memory fake implementation of project operations for testing."""

from trellis.github.projects.abc import GitHubProjects
from trellis.github.projects.types import FieldSpec, ProjectInfo

# Fields every Projects v2 board has before any customization
BUILTIN_FIELDS = ["Title", "Assignees", "Status", "Labels", "Repository", "Milestone"]


class FakeGitHubProjects(GitHubProjects):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        projects: list[ProjectInfo] | None = None,
        fields: dict[int, list[str]] | None = None,
        next_project_number: int = 1,
        failing_fields: set[str] | None = None,
        failing_item_urls: set[str] | None = None,
        link_error: str | None = None,
    ) -> None:
        """Create FakeGitHubProjects.

        Args:
            projects: Existing projects
            fields: Mapping of project number -> field names
            next_project_number: Number assigned to the next created project
            failing_fields: Field names whose creation raises RuntimeError
            failing_item_urls: Item URLs whose add_item raises RuntimeError
            link_error: If set, link_repo raises RuntimeError with this message
        """
        self._projects = list(projects or [])
        self._fields = {number: list(names) for number, names in (fields or {}).items()}
        self._next_project_number = next_project_number
        self._failing_fields = failing_fields or set()
        self._failing_item_urls = failing_item_urls or set()
        self._link_error = link_error
        self._created_projects: list[ProjectInfo] = []
        self._created_fields: list[tuple[int, FieldSpec]] = []
        self._linked_repos: list[tuple[int, str]] = []
        self._added_items: list[tuple[int, str]] = []

    @property
    def created_projects(self) -> list[ProjectInfo]:
        return self._created_projects

    @property
    def created_fields(self) -> list[tuple[int, FieldSpec]]:
        """Returns list of (project_number, field) tuples."""
        return self._created_fields

    @property
    def linked_repos(self) -> list[tuple[int, str]]:
        """Returns list of (project_number, repo) tuples."""
        return self._linked_repos

    @property
    def added_items(self) -> list[tuple[int, str]]:
        """Returns list of (project_number, url) tuples."""
        return self._added_items

    def list_projects(self, owner: str) -> list[ProjectInfo]:
        return list(self._projects)

    def create_project(self, owner: str, title: str) -> ProjectInfo:
        number = self._next_project_number
        self._next_project_number += 1
        project = ProjectInfo(
            number=number,
            title=title,
            url=f"https://github.com/users/{owner}/projects/{number}",
        )
        self._projects.append(project)
        self._fields[number] = list(BUILTIN_FIELDS)
        self._created_projects.append(project)
        return project

    def list_fields(self, owner: str, number: int) -> list[str]:
        return list(self._fields.get(number, BUILTIN_FIELDS))

    def create_field(self, owner: str, number: int, field: FieldSpec) -> None:
        existing = self._fields.setdefault(number, list(BUILTIN_FIELDS))
        if field.name in self._failing_fields or field.name in existing:
            msg = f"Failed to create field {field.name}"
            raise RuntimeError(msg)
        existing.append(field.name)
        self._created_fields.append((number, field))

    def link_repo(self, owner: str, number: int, repo: str) -> None:
        if self._link_error is not None:
            raise RuntimeError(self._link_error)
        self._linked_repos.append((number, repo))

    def add_item(self, owner: str, number: int, url: str) -> None:
        if url in self._failing_item_urls:
            msg = f"Failed to add {url} to project {number}"
            raise RuntimeError(msg)
        self._added_items.append((number, url))
