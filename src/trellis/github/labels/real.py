"""Production implementation of label operations using gh CLI."""

import json

from trellis.github.labels.abc import GitHubLabels
from trellis.github.labels.types import LabelSpec
from trellis.subprocess_utils import execute_gh_command

# gh defaults to 30 labels per listing
LABEL_LIST_LIMIT = 200


class RealGitHubLabels(GitHubLabels):
    """Production implementation using gh CLI."""

    def list_labels(self, repo: str) -> list[str]:
        cmd = [
            "gh",
            "label",
            "list",
            "--repo",
            repo,
            "--limit",
            str(LABEL_LIST_LIMIT),
            "--json",
            "name",
        ]
        stdout = execute_gh_command(cmd)
        return [entry["name"] for entry in json.loads(stdout)]

    def create_label(self, repo: str, label: LabelSpec) -> None:
        cmd = [
            "gh",
            "label",
            "create",
            label.name,
            "--repo",
            repo,
            "--color",
            label.color,
            "--description",
            label.description,
        ]
        execute_gh_command(cmd)
