"""Production implementation of GitHub issues using gh CLI."""

import json

from trellis.github.issues.abc import GitHubIssues
from trellis.github.issues.types import IssueInfo
from trellis.subprocess_utils import execute_gh_command


class RealGitHubIssues(GitHubIssues):
    """Production implementation using gh CLI.

    All GitHub issue operations execute actual gh commands via subprocess.
    """

    def list_issues(
        self,
        repo: str,
        state: str | None = None,
        limit: int | None = None,
    ) -> list[IssueInfo]:
        """Query issues using gh CLI.

        Note: Uses gh's native error handling - gh CLI raises RuntimeError
        on failures (not installed, not authenticated).
        """
        cmd = [
            "gh",
            "issue",
            "list",
            "--repo",
            repo,
            "--json",
            "number,title,state,url,labels",
        ]

        if state:
            cmd.extend(["--state", state])

        if limit is not None:
            cmd.extend(["--limit", str(limit)])

        stdout = execute_gh_command(cmd)
        data = json.loads(stdout)

        return [
            IssueInfo(
                number=issue["number"],
                title=issue["title"],
                state=issue["state"],
                url=issue["url"],
                labels=[label["name"] for label in issue.get("labels", [])],
            )
            for issue in data
        ]

    def add_label(self, repo: str, number: int, label: str) -> None:
        """Add label to issue using gh CLI.

        The gh CLI --add-label operation is idempotent.
        """
        cmd = ["gh", "issue", "edit", str(number), "--repo", repo, "--add-label", label]
        execute_gh_command(cmd)
