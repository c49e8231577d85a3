from trellis.github.projects.abc import GitHubProjects
from trellis.github.projects.dry_run import DryRunGitHubProjects
from trellis.github.projects.fake import FakeGitHubProjects
from trellis.github.projects.real import RealGitHubProjects
from trellis.github.projects.types import FieldSpec, ProjectInfo

__all__ = [
    "DryRunGitHubProjects",
    "FakeGitHubProjects",
    "FieldSpec",
    "GitHubProjects",
    "ProjectInfo",
    "RealGitHubProjects",
]
