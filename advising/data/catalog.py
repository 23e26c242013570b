"""
In-memory course catalog.

This module holds the CourseCatalog, the mapping every menu command reads.
"""

from typing import Optional

from ..models import Course
from .text import normalize_case


class CourseCatalog:
    """
    Courses keyed by their uppercased course number.

    KEY NORMALIZATION: Every method that takes a course number uppercases it
    first, so "csci200", "CSCI200" and "CsCi200" all refer to the same entry.

    DUPLICATES: upsert() overwrites. When a file defines the same course
    twice, the later line is the one that survives.

    ORDERING: The mapping itself is unordered for our purposes. Sorted output
    is produced on demand by sorting the keys.

    Usage:
        catalog = CourseCatalog()
        catalog.upsert(Course("CSCI100", "Intro to CS"))
        catalog.get("csci100")      # -> Course(...)
        catalog.sorted_numbers()    # -> ["CSCI100"]
    """

    def __init__(self):
        self._courses = {}  # number -> Course

    def upsert(self, course: Course):
        """Insert the course, replacing any existing entry with the same number."""
        self._courses[normalize_case(course.number)] = course

    def get(self, number: str) -> Optional[Course]:
        """Return the course for this number, or None if it isn't loaded."""
        return self._courses.get(normalize_case(number))

    def contains(self, number: str) -> bool:
        return normalize_case(number) in self._courses

    def sorted_numbers(self) -> list:
        """All course numbers in ascending alphanumeric order."""
        return sorted(self._courses)

    def clear(self):
        self._courses.clear()

    def is_empty(self) -> bool:
        return not self._courses

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, number) -> bool:
        return isinstance(number, str) and self.contains(number)

    def __iter__(self):
        """Iterate over courses in sorted course-number order."""
        for number in self.sorted_numbers():
            yield self._courses[number]
