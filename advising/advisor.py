"""
Advising Assistant - Main Orchestrator.

This module contains the AdvisingAssistant class that connects the data
layer to the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising
"""

import logging
from typing import Optional

from .data import CourseCatalog, CourseFileParser, load_catalog
from .errors import LoadError
from .models import Course
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class AdvisingAssistant:
    """
    Main interface for the advising assistant.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class owns the live catalog and connects it to the display:

    1. load_data() builds a new catalog from a file and swaps it in
    2. print_course_list() / print_course() read the live catalog
    3. The display does all of the formatting

    LIVE CATALOG:
    -------------
    The live catalog is only ever replaced by assignment after a load has
    finished without errors. A failed load raises before the assignment, so
    the previous catalog (or the initial empty one) stays in place.

    EMPTY VS. NOT LOADED:
    ---------------------
    has_data() only looks at emptiness. A file with no courses loads fine
    but still leaves the menu asking for data to be loaded first.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        assistant = AdvisingAssistant()
        count = assistant.load_data("courses.csv")
        assistant.print_course_list()
        assistant.print_course("csci200")
    """

    def __init__(self, display: TerminalDisplay = None, parser: CourseFileParser = None):
        self.display = display or TerminalDisplay()
        self.parser = parser or CourseFileParser()
        self._catalog = CourseCatalog()

    @property
    def catalog(self) -> CourseCatalog:
        return self._catalog

    def has_data(self) -> bool:
        return not self._catalog.is_empty()

    def load_data(self, path) -> int:
        """
        Load a course file and make it the live catalog.

        Args:
            path: Path to the course file

        Returns:
            Number of courses in the new catalog

        Raises:
            LoadError: the file could not be loaded; the live catalog is unchanged
        """
        try:
            catalog = load_catalog(path, self.parser)
        except LoadError as e:
            logger.warning("Keeping current catalog (%d courses): %s", len(self._catalog), e)
            raise

        self._catalog = catalog
        return len(catalog)

    def find_course(self, number: str) -> Optional[Course]:
        return self._catalog.get(number)

    def print_course_list(self):
        """Print all courses, or ask for a load if nothing is loaded."""
        if not self.has_data():
            self.display.print_load_first()
            return
        self.display.print_course_list(self._catalog)

    def print_course(self, number: str):
        """Print one course's details, or ask for a load if nothing is loaded."""
        if not self.has_data():
            self.display.print_load_first()
            return
        self.display.print_course_details(self._catalog, number)
