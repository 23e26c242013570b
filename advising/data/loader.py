"""
Course file loading.

This module handles the file I/O side of building a catalog. Parsing is
left to CourseFileParser.
"""

import logging

from ..config import FILE_ENCODING, FILE_ERRORS
from ..errors import OpenError
from .catalog import CourseCatalog
from .parser import CourseFileParser

logger = logging.getLogger(__name__)


def load_catalog(path, parser: CourseFileParser = None) -> CourseCatalog:
    """
    Read a course file into a new catalog.

    The caller's live catalog is never touched here. Swapping the result in
    is up to the caller, and only happens when this returns normally.

    Args:
        path: Path to the course file (str or Path)
        parser: Parser to use; a default CourseFileParser if omitted

    Returns:
        A fully populated CourseCatalog

    Raises:
        OpenError: the file could not be opened
        ParseError, InvalidDataError: a line was malformed
    """
    parser = parser or CourseFileParser()
    logger.debug("Opening course file %s", path)

    # Bytes that aren't UTF-8 (e.g. a Latin-1 title) survive as surrogates
    # and are written back out unchanged by the CLI.
    try:
        with open(path, "r", encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
            catalog = parser.parse(f)
    except OSError as e:
        raise OpenError(path, e.strerror or str(e)) from e

    logger.info("Loaded %d courses from %s", len(catalog), path)
    return catalog
