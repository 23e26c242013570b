"""
Exceptions raised by the advising assistant.

Load failures share the LoadError base so the menu can report any of them
the same way. Their string form is the message shown to the user.
"""


class AdvisingError(Exception):
    """Base class for all advising assistant errors."""


class LoadError(AdvisingError):
    """A course file could not be turned into a catalog."""


class OpenError(LoadError):
    """The course file could not be opened or read."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not open file: {self.path}")


class ParseError(LoadError):
    """A line has fewer fields than a course record needs."""

    def __init__(self, line_number: int, reason: str = "need at least courseNumber and courseTitle."):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Parse error on line {line_number}: {reason}")


class InvalidDataError(LoadError):
    """A line has an empty course number or title."""

    def __init__(self, line_number: int, reason: str = "empty course number or title."):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Invalid data on line {line_number}: {reason}")


class InputCancelled(AdvisingError):
    """The input stream closed while waiting for an answer."""


class InvalidOption(AdvisingError):
    """
    The menu selection was not recognised.

    `option` is what gets echoed back: the parsed number for numeric input,
    the raw text otherwise.
    """

    def __init__(self, option):
        self.option = option
        super().__init__(f"{option} is not a valid option.")
