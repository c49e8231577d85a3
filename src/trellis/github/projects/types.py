"""Data types for GitHub Projects (v2) integration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectInfo:
    """A Projects v2 board.

    Attributes:
        number: Project number, unique per owner
        title: Project title
        url: Full project URL
    """

    number: int
    title: str
    url: str


@dataclass(frozen=True)
class FieldSpec:
    """A custom project field definition.

    Attributes:
        name: Field name (e.g., "Status")
        data_type: gh data type: "SINGLE_SELECT", "NUMBER", "TEXT" or "DATE"
        options: Option names for SINGLE_SELECT fields, empty otherwise
    """

    name: str
    data_type: str
    options: tuple[str, ...] = ()
