from trellis.github.labels.abc import GitHubLabels
from trellis.github.labels.dry_run import DryRunGitHubLabels
from trellis.github.labels.fake import FakeGitHubLabels
from trellis.github.labels.real import RealGitHubLabels
from trellis.github.labels.types import LabelSpec

__all__ = [
    "DryRunGitHubLabels",
    "FakeGitHubLabels",
    "GitHubLabels",
    "LabelSpec",
    "RealGitHubLabels",
]
