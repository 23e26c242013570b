"""
Text helpers for reading the course file.
"""

import string

from ..config import FIELD_SEPARATOR

# ASCII-only so results never depend on the locale
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def trim(text: str) -> str:
    """Strip leading/trailing ASCII whitespace, including CR and LF."""
    return text.strip(string.whitespace)


def normalize_case(text: str) -> str:
    """Uppercase a course number so it can be used as a lookup key."""
    return text.translate(_UPPER)


def split_fields(line: str) -> list:
    """
    Split a course line on commas and trim each field.

    There is no quoting: a comma inside a title would start a new field.
    """
    return [trim(part) for part in line.split(FIELD_SEPARATOR)]
