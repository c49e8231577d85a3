"""In-memory fake implementation of label operations for testing."""

from trellis.github.labels.abc import GitHubLabels
from trellis.github.labels.types import LabelSpec


class FakeGitHubLabels(GitHubLabels):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(self, *, labels: list[str] | None = None) -> None:
        """Create FakeGitHubLabels.

        Args:
            labels: Label names that already exist in the repository
        """
        self._labels = list(labels or [])
        self._created_labels: list[LabelSpec] = []
        self._list_calls = 0

    @property
    def created_labels(self) -> list[LabelSpec]:
        """Read-only access to created labels for test assertions."""
        return self._created_labels

    @property
    def list_calls(self) -> int:
        """Number of times list_labels was called."""
        return self._list_calls

    def list_labels(self, repo: str) -> list[str]:
        self._list_calls += 1
        return list(self._labels)

    def create_label(self, repo: str, label: LabelSpec) -> None:
        """Record label creation.

        Raises:
            RuntimeError: If the label already exists (mirrors gh label create)
        """
        if label.name in self._labels:
            msg = f"label with name \"{label.name}\" already exists"
            raise RuntimeError(msg)
        self._labels.append(label.name)
        self._created_labels.append(label)
