"""In-memory fake implementation of GitHub issues for testing."""

from dataclasses import replace

from trellis.github.issues.abc import GitHubIssues
from trellis.github.issues.types import IssueInfo


class FakeGitHubIssues(GitHubIssues):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        issues: list[IssueInfo] | None = None,
        failing_label_issues: set[int] | None = None,
        list_error: str | None = None,
    ) -> None:
        """Create FakeGitHubIssues with pre-configured state.

        Args:
            issues: Issues in the order list_issues should report them
            failing_label_issues: Issue numbers whose add_label raises RuntimeError
            list_error: If set, list_issues raises RuntimeError with this message
        """
        self._issues = {issue.number: issue for issue in issues or []}
        self._failing_label_issues = failing_label_issues or set()
        self._list_error = list_error
        self._added_labels: list[tuple[int, str]] = []
        self._list_calls = 0

    @property
    def added_labels(self) -> list[tuple[int, str]]:
        """Read-only access to applied labels for test assertions.

        Returns list of (issue_number, label) tuples.
        """
        return self._added_labels

    @property
    def list_calls(self) -> int:
        """Number of times list_issues was called."""
        return self._list_calls

    def list_issues(
        self,
        repo: str,
        state: str | None = None,
        limit: int | None = None,
    ) -> list[IssueInfo]:
        """Query issues from fake storage, filtered by state."""
        self._list_calls += 1
        if self._list_error is not None:
            raise RuntimeError(self._list_error)

        issues = list(self._issues.values())

        if state and state != "all":
            state_upper = state.upper()
            issues = [issue for issue in issues if issue.state == state_upper]

        if limit is not None:
            issues = issues[:limit]

        return issues

    def add_label(self, repo: str, number: int, label: str) -> None:
        """Add label to issue in fake storage.

        Raises:
            RuntimeError: If issue is missing or configured to fail
        """
        if number not in self._issues:
            msg = f"Issue #{number} not found"
            raise RuntimeError(msg)
        if number in self._failing_label_issues:
            msg = f"Failed to execute gh command 'gh issue edit {number}': HTTP 502"
            raise RuntimeError(msg)

        current = self._issues[number]
        if label not in current.labels:
            self._issues[number] = replace(current, labels=current.labels + [label])
        self._added_labels.append((number, label))
