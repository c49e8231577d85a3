from trellis.github.issues.abc import GitHubIssues
from trellis.github.issues.dry_run import DryRunGitHubIssues
from trellis.github.issues.fake import FakeGitHubIssues
from trellis.github.issues.real import RealGitHubIssues
from trellis.github.issues.types import IssueInfo

__all__ = [
    "DryRunGitHubIssues",
    "FakeGitHubIssues",
    "GitHubIssues",
    "IssueInfo",
    "RealGitHubIssues",
]
