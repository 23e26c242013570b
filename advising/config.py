"""
Configuration constants for the advising assistant.

This module contains the configuration values and user-facing text used
throughout the package. Centralizing these keeps the wording of the menu
in one place.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_DATA_FILE = DATA_DIR / "ABCU_Advising_Program_Input.csv"


# =============================================================================
# FILE FORMAT
# =============================================================================
# One course per line: number, title, prereq, prereq, ...
# No quoting, no header row. Blank lines are ignored.

FIELD_SEPARATOR = ","
MIN_FIELDS = 2

# utf-8-sig drops a leading byte-order mark; other undecodable bytes are
# carried through as lone surrogates
FILE_ENCODING = "utf-8-sig"
FILE_ERRORS = "surrogateescape"


# =============================================================================
# MENU
# =============================================================================

OPTION_LOAD = 1
OPTION_LIST = 2
OPTION_SHOW = 3
OPTION_EXIT = 9

# Longest answer still read as a number; "0009" is just text
MAX_OPTION_LENGTH = 2

MENU_LINES = (
    f"  {OPTION_LOAD}. Load Data Structure.",
    f"  {OPTION_LIST}. Print Course List.",
    f"  {OPTION_SHOW}. Print Course.",
    f"  {OPTION_EXIT}. Exit",
)


# =============================================================================
# MESSAGES
# =============================================================================

WELCOME_MESSAGE = "Welcome to the course planner."
FAREWELL_MESSAGE = "Thank you for using the course planner!"
MENU_PROMPT = "What would you like to do? "
FILE_PROMPT = f"Enter the file name to load (e.g., {DEFAULT_DATA_FILE.name}): "
COURSE_PROMPT = "What course do you want to know about? "

LIST_HEADER = "Here is a sample schedule:"
LOADED_MESSAGE = "Data loaded successfully ({count} courses)."
LOAD_FIRST_MESSAGE = "Please load the data structure first (option 1)."
NOT_FOUND_MESSAGE = "{number} was not found."
INVALID_OPTION_MESSAGE = "{option} is not a valid option."
EMPTY_OPTION_MESSAGE = "Please enter a menu option."
EMPTY_FILE_NAME_MESSAGE = "File name cannot be empty."
EMPTY_COURSE_MESSAGE = "Course number cannot be empty."
INPUT_CANCELLED_MESSAGE = "Input cancelled."
ERROR_PREFIX = "Error: "
NO_PREREQUISITES = "None"


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
