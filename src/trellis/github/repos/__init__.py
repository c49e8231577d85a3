from trellis.github.repos.abc import GitHubRepos
from trellis.github.repos.dry_run import DryRunGitHubRepos
from trellis.github.repos.fake import FakeGitHubRepos
from trellis.github.repos.real import RealGitHubRepos
from trellis.github.repos.types import RepoFile

__all__ = [
    "DryRunGitHubRepos",
    "FakeGitHubRepos",
    "GitHubRepos",
    "RealGitHubRepos",
    "RepoFile",
]
