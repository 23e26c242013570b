"""
Course file parsing.

This module turns the lines of a course file into a brand-new
CourseCatalog.
"""

import logging

from ..config import MIN_FIELDS
from ..errors import ParseError, InvalidDataError
from ..models import Course
from .catalog import CourseCatalog
from .text import trim, normalize_case, split_fields

logger = logging.getLogger(__name__)


class CourseFileParser:
    """
    Parses course lines into a new catalog.

    KEY RESPONSIBILITY: Convert raw "number,title,prereq,..." lines into
    Course objects stored in a CourseCatalog that nobody else holds yet.

    ALL OR NOTHING:
    The first bad line raises and the half-built catalog is simply dropped.
    Callers only ever receive a catalog built from every line of the input.

    LINE RULES:
    - Blank lines (after trimming) are skipped
    - Fewer than two fields -> ParseError
    - Empty course number or title -> InvalidDataError
    - Fields after the title are prerequisites; empty ones are dropped
    - A repeated course number replaces the earlier line (last write wins)
    """

    def parse(self, lines) -> CourseCatalog:
        """
        Parse an iterable of text lines.

        Args:
            lines: Any iterable of strings, e.g. an open text file

        Returns:
            A CourseCatalog populated from every non-blank line

        Raises:
            ParseError: a line had fewer than two fields
            InvalidDataError: a line had an empty course number or title
        """
        catalog = CourseCatalog()

        for line_number, raw_line in enumerate(lines, 1):
            line = trim(raw_line)
            if not line:
                continue

            course = self._parse_line(line, line_number)

            if catalog.contains(course.number):
                logger.debug("Line %d redefines %s; keeping the later entry", line_number, course.number)
            catalog.upsert(course)

        return catalog

    def _parse_line(self, line: str, line_number: int) -> Course:
        fields = split_fields(line)
        if len(fields) < MIN_FIELDS:
            raise ParseError(line_number)

        number = normalize_case(fields[0])
        title = fields[1]
        if not number or not title:
            raise InvalidDataError(line_number)

        prerequisites = [normalize_case(f) for f in fields[MIN_FIELDS:] if f]
        return Course(number=number, title=title, prerequisites=prerequisites)
