"""
Course data model.

Contains the Course dataclass that represents one line of the course file.
"""

from dataclasses import dataclass, field


@dataclass
class Course:
    """
    Represents a single course from the catalog file.

    Prerequisites are stored as course numbers, not Course objects. They are
    looked up in the catalog only when a course is displayed, so a course may
    name a prerequisite that the file never defines.

    Attributes:
        number: Course number, uppercased (e.g., "CSCI200")
        title: Human-readable course title (e.g., "Data Structures")
        prerequisites: Course numbers in file order, duplicates kept
    """
    number: str
    title: str
    prerequisites: list = field(default_factory=list)

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.prerequisites)
