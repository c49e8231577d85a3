"""Data types for GitHub issues integration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IssueInfo:
    """Information about a GitHub issue."""

    number: int
    title: str
    state: str  # "OPEN" or "CLOSED"
    url: str
    labels: list[str]

    def has_label(self, label: str) -> bool:
        """Exact label-name membership (no substring matching)."""
        return label in self.labels
