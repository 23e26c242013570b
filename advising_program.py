"""
Course Advising Program - LEGACY WRAPPER
========================================

This file is maintained for backwards compatibility.
The code lives in the 'advising' package.

USAGE:
------

Option 1 - Run as module:
    python -m advising

Option 2 - Run this file (legacy):
    python advising_program.py

Option 3 - Import in code:
    from advising import AdvisingAssistant

    assistant = AdvisingAssistant()
    assistant.load_data(...)

For more information, see advising/__init__.py
"""

import sys

from advising.cli import main

if __name__ == "__main__":
    sys.exit(main())
