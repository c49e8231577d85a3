"""Data types for repository-level operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoFile:
    """A file read through the repository contents API.

    Attributes:
        path: Path relative to the repository root
        content: Decoded text content
        sha: Blob SHA, required by the API when overwriting the file
    """

    path: str
    content: str
    sha: str
