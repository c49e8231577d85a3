"""Data types for repository labels."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LabelSpec:
    """A label definition.

    Attributes:
        name: Label name (e.g., "type:epic")
        color: Hex color without '#' (e.g., "BFD4F2")
        description: Short human-readable description
    """

    name: str
    color: str
    description: str
