"""
Course Advising Assistant Package
=================================

An interactive lookup tool for a course catalog: load a comma-separated
course file, list every course in order, or look up one course's title
and prerequisites.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                            DATA LAYER                                    │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌──────────────────┐  ┌─────────────────────────────┐ │
│  │ load_catalog│  │ CourseFileParser │  │      CourseCatalog          │ │
│  │   (I/O)     │  │  (line parsing)  │  │  (number -> Course lookup)  │ │
│  └─────────────┘  └──────────────────┘  └─────────────────────────────┘ │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns Course / CourseCatalog
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                                                                         │
│                         TerminalDisplay                                 │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      AdvisingAssistant                                   │
│      (Orchestrator - owns the live catalog, drives the display)         │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m advising
├── config.py            # Paths, menu options and messages
├── errors.py            # LoadError and friends
├── advisor.py           # AdvisingAssistant orchestrator
├── cli.py               # Interactive menu
│
├── models/
│   └── course.py        # Course
│
├── data/
│   ├── text.py          # trim, normalize_case, split_fields
│   ├── catalog.py       # CourseCatalog
│   ├── parser.py        # CourseFileParser
│   └── loader.py        # load_catalog
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from advising import AdvisingAssistant

    assistant = AdvisingAssistant()
    assistant.load_data("data/ABCU_Advising_Program_Input.csv")
    assistant.print_course_list()
    assistant.print_course("csci200")

Running from command line:

    python -m advising [--file PATH] [--verbose]

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import AdvisingAssistant
from .cli import main

# Model exports
from .models import Course

# Data exports
from .data import (
    CourseCatalog,
    CourseFileParser,
    load_catalog,
    trim,
    normalize_case,
    split_fields,
)

# Error exports
from .errors import (
    AdvisingError,
    LoadError,
    OpenError,
    ParseError,
    InvalidDataError,
    InputCancelled,
    InvalidOption,
)

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import DATA_DIR, DEFAULT_DATA_FILE, FIELD_SEPARATOR

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "AdvisingAssistant",
    "main",
    # Models
    "Course",
    # Data
    "CourseCatalog",
    "CourseFileParser",
    "load_catalog",
    "trim",
    "normalize_case",
    "split_fields",
    # Errors
    "AdvisingError",
    "LoadError",
    "OpenError",
    "ParseError",
    "InvalidDataError",
    "InputCancelled",
    "InvalidOption",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "DEFAULT_DATA_FILE",
    "FIELD_SEPARATOR",
]
