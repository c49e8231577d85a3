"""Abstract interface for repository label operations."""

from abc import ABC, abstractmethod

from trellis.github.labels.types import LabelSpec


class GitHubLabels(ABC):
    """Abstract interface for the label registry of a repository."""

    @abstractmethod
    def list_labels(self, repo: str) -> list[str]:
        """List label names defined in a repository.

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def create_label(self, repo: str, label: LabelSpec) -> None:
        """Create a label in a repository.

        Raises:
            RuntimeError: If gh CLI fails (including when the label exists)
        """
        ...
