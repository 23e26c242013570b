"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the advising package.

To create a different UI, create a new class with the same method
signatures but different output handling.
"""

import sys

from ..config import (
    WELCOME_MESSAGE,
    FAREWELL_MESSAGE,
    MENU_LINES,
    MENU_PROMPT,
    LIST_HEADER,
    LOADED_MESSAGE,
    LOAD_FIRST_MESSAGE,
    NOT_FOUND_MESSAGE,
    ERROR_PREFIX,
    NO_PREREQUISITES,
)
from ..data import CourseCatalog, normalize_case
from ..models import Course


class TerminalDisplay:
    """
    Plain-text terminal output for the advising menu.

    Output goes to `out` (stdout by default) so the whole session can be
    captured in tests. ANSI colors are only used when `out` is a terminal.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"

    def __init__(self, out=None, color: bool = None):
        self.out = out if out is not None else sys.stdout
        if color is None:
            isatty = getattr(self.out, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color

    def _paint(self, text: str, *codes) -> str:
        if not self.color:
            return text
        return f"{''.join(codes)}{text}{self.RESET}"

    def write(self, text: str = ""):
        print(text, file=self.out)

    def prompt(self, text: str):
        """Write a prompt without a trailing newline."""
        print(text, end="", file=self.out, flush=True)

    def message(self, text: str):
        """Print a status line followed by a blank line."""
        self.write(text)
        self.write()

    # -------------------------------------------------------------------------
    # Menu
    # -------------------------------------------------------------------------

    def print_welcome(self):
        self.write(self._paint(WELCOME_MESSAGE, self.BOLD, self.CYAN))
        self.write()

    def print_menu(self):
        for line in MENU_LINES:
            self.write(line)
        self.write()
        self.prompt(MENU_PROMPT)

    def print_farewell(self):
        self.write(FAREWELL_MESSAGE)

    def print_loaded(self, count: int):
        self.message(self._paint(LOADED_MESSAGE.format(count=count), self.GREEN))

    def print_error(self, error):
        self.message(self._paint(f"{ERROR_PREFIX}{error}", self.RED))

    def print_load_first(self):
        self.message(self._paint(LOAD_FIRST_MESSAGE, self.YELLOW))

    # -------------------------------------------------------------------------
    # Courses
    # -------------------------------------------------------------------------

    @staticmethod
    def format_course(course: Course) -> str:
        return f"{course.number}, {course.title}"

    @staticmethod
    def format_prerequisites(course: Course, catalog: CourseCatalog) -> str:
        """
        Build the "Prerequisites: ..." line.

        A prerequisite that is in the catalog is shown by its stored course
        number. One that isn't is shown exactly as the file listed it.
        """
        if not course.has_prerequisites:
            return f"Prerequisites: {NO_PREREQUISITES}"

        names = []
        for number in course.prerequisites:
            resolved = catalog.get(number)
            names.append(resolved.number if resolved else number)
        return f"Prerequisites: {', '.join(names)}"

    def print_course_list(self, catalog: CourseCatalog):
        """Print every course in alphanumeric order."""
        self.write(self._paint(LIST_HEADER, self.BOLD))
        for course in catalog:
            self.write(self.format_course(course))
        self.write()

    def print_course_details(self, catalog: CourseCatalog, number: str):
        """Print one course's title and prerequisites, or a not-found line."""
        number = normalize_case(number)
        course = catalog.get(number)
        if course is None:
            self.message(NOT_FOUND_MESSAGE.format(number=number))
            return

        self.write(self.format_course(course))
        self.message(self.format_prerequisites(course, catalog))
