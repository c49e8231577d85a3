"""Abstract interface for GitHub issue operations."""

from abc import ABC, abstractmethod

from trellis.github.issues.types import IssueInfo


class GitHubIssues(ABC):
    """Abstract interface for GitHub issue operations.

    All implementations (real, fake and dry-run) must implement this interface.
    """

    @abstractmethod
    def list_issues(
        self,
        repo: str,
        state: str | None = None,
        limit: int | None = None,
    ) -> list[IssueInfo]:
        """Query issues in a repository.

        Args:
            repo: Repository in "owner/name" form
            state: Filter by state ("open", "closed", or "all")
            limit: Maximum number of issues to return (None = gh default)

        Returns:
            List of IssueInfo in the order gh reports them

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def add_label(self, repo: str, number: int, label: str) -> None:
        """Append a label to an existing issue.

        Args:
            repo: Repository in "owner/name" form
            number: Issue number
            label: Label name to add

        Raises:
            RuntimeError: If gh CLI fails or issue not found
        """
        ...
