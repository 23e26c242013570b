"""
Command-Line Interface for the Advising Assistant.

This module provides the interactive menu. It reads one line per
interaction, hands the work to AdvisingAssistant and reports every error
as a single line before showing the menu again.

MENU:
-----
1. Load a course file
2. Print the course list
3. Print one course
9. Exit

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising
"""

import argparse
import logging
import sys

from .advisor import AdvisingAssistant
from .config import (
    OPTION_LOAD,
    OPTION_LIST,
    OPTION_SHOW,
    OPTION_EXIT,
    MAX_OPTION_LENGTH,
    FILE_PROMPT,
    COURSE_PROMPT,
    EMPTY_OPTION_MESSAGE,
    EMPTY_FILE_NAME_MESSAGE,
    EMPTY_COURSE_MESSAGE,
    INPUT_CANCELLED_MESSAGE,
    FILE_ERRORS,
    LOG_FORMAT,
)
from .data import trim
from .errors import InputCancelled, InvalidOption, LoadError
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

VALID_OPTIONS = (OPTION_LOAD, OPTION_LIST, OPTION_SHOW, OPTION_EXIT)


def parse_menu_option(raw: str) -> int:
    """
    Turn a menu answer into an option number.

    Only one or two ASCII digits count as a number. Anything else, such as
    "0009", "+1" or non-ASCII digits, is echoed back as typed.

    Raises:
        InvalidOption: not a menu number, or a number that isn't on the menu
    """
    if len(raw) > MAX_OPTION_LENGTH or not (raw.isascii() and raw.isdigit()):
        raise InvalidOption(raw)
    option = int(raw)
    if option not in VALID_OPTIONS:
        raise InvalidOption(option)
    return option


def _read_line(stream) -> str:
    """Read and trim one line; raise InputCancelled at end of input."""
    line = stream.readline()
    if not line:
        raise InputCancelled()
    return trim(line)


def _ask(display: TerminalDisplay, stream, prompt: str) -> str:
    display.prompt(prompt)
    return _read_line(stream)


def _load(assistant: AdvisingAssistant, path: str):
    """Load a file and report the outcome. The live catalog only changes on success."""
    display = assistant.display
    try:
        count = assistant.load_data(path)
    except LoadError as e:
        display.print_error(e)
        return
    display.print_loaded(count)


def _load_named(assistant: AdvisingAssistant, path: str):
    if not path:
        assistant.display.message(EMPTY_FILE_NAME_MESSAGE)
        return
    _load(assistant, path)


def _handle_load(assistant: AdvisingAssistant, stream):
    _load_named(assistant, _ask(assistant.display, stream, FILE_PROMPT))


def _handle_show(assistant: AdvisingAssistant, stream):
    # Checked before prompting so an empty catalog never asks for a course
    if not assistant.has_data():
        assistant.display.print_load_first()
        return

    number = _ask(assistant.display, stream, COURSE_PROMPT)
    if not number:
        assistant.display.message(EMPTY_COURSE_MESSAGE)
        return
    assistant.print_course(number)


def run_menu(assistant: AdvisingAssistant, stream, preload=None) -> int:
    """
    Run the menu loop until the user exits or input runs out.

    Args:
        assistant: Owns the live catalog and the display
        stream: Text stream the answers are read from (e.g., sys.stdin)
        preload: Optional course file to load before the first menu

    Returns:
        Process exit code (always 0)
    """
    display = assistant.display
    display.print_welcome()
    if preload is not None:
        _load_named(assistant, trim(preload))

    while True:
        display.print_menu()
        try:
            raw = _read_line(stream)
        except InputCancelled:
            logger.debug("End of input at the menu prompt")
            return 0

        if not raw:
            display.message(EMPTY_OPTION_MESSAGE)
            continue

        try:
            option = parse_menu_option(raw)
            if option == OPTION_LOAD:
                _handle_load(assistant, stream)
            elif option == OPTION_LIST:
                assistant.print_course_list()
            elif option == OPTION_SHOW:
                _handle_show(assistant, stream)
            elif option == OPTION_EXIT:
                display.print_farewell()
                return 0
        except InvalidOption as e:
            display.message(str(e))
        except InputCancelled:
            display.message(INPUT_CANCELLED_MESSAGE)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advising",
        description="Look up courses and their prerequisites from a course file.",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="course file to load before the menu is shown",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log debug messages to stderr",
    )
    return parser


def main(argv=None, stdin=None, stdout=None) -> int:
    """
    Command-line interface for the advising assistant.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        stdin: Stream to read menu answers from (defaults to sys.stdin)
        stdout: Stream to write the menu to (defaults to sys.stdout)

    Returns:
        Process exit code
    """
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if stdout is None:
        stdout = sys.stdout
        # Course files may carry non-UTF-8 bytes; write them back as-is
        if hasattr(stdout, "reconfigure"):
            stdout.reconfigure(errors=FILE_ERRORS)

    assistant = AdvisingAssistant(display=TerminalDisplay(stdout))
    return run_menu(assistant, stdin if stdin is not None else sys.stdin, preload=args.file)


if __name__ == "__main__":
    sys.exit(main())
