"""Production implementation of project operations using gh CLI."""

import json

from trellis.github.projects.abc import GitHubProjects
from trellis.github.projects.types import FieldSpec, ProjectInfo
from trellis.subprocess_utils import execute_gh_command

PROJECT_LIST_LIMIT = 100


class RealGitHubProjects(GitHubProjects):
    """Production implementation using ``gh project`` subcommands.

    Requires a token with the ``project`` scope (``gh auth refresh -s project``).
    """

    def list_projects(self, owner: str) -> list[ProjectInfo]:
        cmd = [
            "gh",
            "project",
            "list",
            "--owner",
            owner,
            "--limit",
            str(PROJECT_LIST_LIMIT),
            "--format",
            "json",
        ]
        data = json.loads(execute_gh_command(cmd))
        return [
            ProjectInfo(number=project["number"], title=project["title"], url=project["url"])
            for project in data.get("projects", [])
        ]

    def create_project(self, owner: str, title: str) -> ProjectInfo:
        cmd = ["gh", "project", "create", "--owner", owner, "--title", title, "--format", "json"]
        data = json.loads(execute_gh_command(cmd))
        return ProjectInfo(number=data["number"], title=data["title"], url=data["url"])

    def list_fields(self, owner: str, number: int) -> list[str]:
        cmd = ["gh", "project", "field-list", str(number), "--owner", owner, "--format", "json"]
        data = json.loads(execute_gh_command(cmd))
        return [field["name"] for field in data.get("fields", [])]

    def create_field(self, owner: str, number: int, field: FieldSpec) -> None:
        cmd = [
            "gh",
            "project",
            "field-create",
            str(number),
            "--owner",
            owner,
            "--name",
            field.name,
            "--data-type",
            field.data_type,
        ]
        if field.options:
            cmd.extend(["--single-select-options", ",".join(field.options)])
        execute_gh_command(cmd)

    def link_repo(self, owner: str, number: int, repo: str) -> None:
        cmd = ["gh", "project", "link", str(number), "--owner", owner, "--repo", repo]
        execute_gh_command(cmd)

    def add_item(self, owner: str, number: int, url: str) -> None:
        cmd = ["gh", "project", "item-add", str(number), "--owner", owner, "--url", url]
        execute_gh_command(cmd)
