"""
Data loading and parsing module.

This package handles the course file I/O, line parsing and the in-memory
catalog.
"""

from .catalog import CourseCatalog
from .loader import load_catalog
from .parser import CourseFileParser
from .text import trim, normalize_case, split_fields

__all__ = [
    "CourseCatalog",
    "CourseFileParser",
    "load_catalog",
    "trim",
    "normalize_case",
    "split_fields",
]
