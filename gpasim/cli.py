"""
Command-Line Interface for the GPA simulator.

This module provides the interactive CLI: open a saved grade page, look at
the transcript, then try "what-if" edits and watch the simulated GPA.

Run from the project directory:
    python -m gpasim [path/to/grade_page.html] [-v]
"""

import argparse
import logging
import sys

from .config import LETTER_GRADES, NO_GRADE, READ_ERROR_MESSAGE, semester_id
from .errors import TranscriptError
from .simulator import GpaSimulator
from .ui import TerminalDisplay


def resolve_semester(simulator: GpaSimulator, ref: str):
    """'2' or 'semester-2' -> semester id, None if there's no such semester."""
    ref = ref.strip()
    candidate = semester_id(int(ref)) if ref.isdecimal() else ref
    if simulator.parsed_data.find_semester(candidate) is None:
        return None
    return candidate


def resolve_course(simulator: GpaSimulator, ref: str):
    """
    '2.3' (semester 2, third row) or a course id -> course id.

    Returns None when the reference doesn't point at a course.
    """
    ref = ref.strip()
    if "." in ref:
        semester_ref, _, position = ref.partition(".")
        sid = resolve_semester(simulator, semester_ref)
        if sid is None or not position.isdecimal():
            return None
        courses = simulator.parsed_data.find_semester(sid).courses
        index = int(position) - 1
        if not 0 <= index < len(courses):
            return None
        return courses[index].id
    if simulator.overlay.original(ref) is None:
        return None
    return ref


def _parse_grade(text: str):
    grade = text.strip().upper()
    if grade in ("-", "NONE"):
        return NO_GRADE
    if grade in LETTER_GRADES:
        return grade
    return None


def _load(simulator: GpaSimulator, path: str) -> bool:
    try:
        simulator.load_file(path)
    except TranscriptError as e:
        TerminalDisplay.print_error(e.user_message)
        return False
    except OSError as e:
        TerminalDisplay.print_error(f"{READ_ERROR_MESSAGE} ({e})")
        return False
    TerminalDisplay.print_diagnostics(simulator.diagnostics)
    simulator.show()
    return True


def _prompt_for_document(simulator: GpaSimulator) -> bool:
    """Ask for a file until one loads. False if the user gives up."""
    while True:
        try:
            path = input(f"\n{TerminalDisplay.BOLD}Path to the saved grade page (.html): {TerminalDisplay.RESET}").strip()
        except EOFError:
            return False
        if not path or path.lower() in ("q", "quit", "exit"):
            return False
        if _load(simulator, path.strip("'\"")):
            return True


def run_command(simulator: GpaSimulator, line: str) -> bool:
    """
    Execute one command line against a loaded simulator.

    Returns False when the session should end.
    """
    parts = line.split()
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]

    if command in ("quit", "exit", "q"):
        return False
    if command in ("help", "?"):
        TerminalDisplay.print_help()
        return True
    if command == "show":
        simulator.show()
        return True
    if command == "edits":
        simulator.show_edits()
        return True
    if command == "load":
        if not args:
            TerminalDisplay.print_error("Usage: load <path>")
        else:
            _load(simulator, " ".join(args).strip("'\""))
        return True
    if command == "reset":
        simulator.reset_all()
        simulator.show()
        return True

    if command == "all":
        if len(args) != 2 or args[1].lower() not in ("on", "off"):
            TerminalDisplay.print_error("Usage: all <semester> on|off")
            return True
        sid = resolve_semester(simulator, args[0])
        if sid is None:
            TerminalDisplay.print_error(f"No semester '{args[0]}'")
            return True
        simulator.select_all_in_semester(sid, args[1].lower() == "on")
        simulator.show()
        return True

    if command in ("grade", "include", "exclude", "undo"):
        if not args:
            TerminalDisplay.print_error(f"Usage: {command} <course>" + (" <A-F|->" if command == "grade" else ""))
            return True
        cid = resolve_course(simulator, args[0])
        if cid is None:
            TerminalDisplay.print_error(f"No course '{args[0]}'")
            return True

        if command == "grade":
            grade = _parse_grade(args[1]) if len(args) > 1 else None
            if grade is None:
                TerminalDisplay.print_error("Grade must be one of A, B, C, D, F or '-'")
                return True
            simulator.set_letter_grade(cid, grade)
        elif command == "include":
            simulator.set_included(cid, True)
        elif command == "exclude":
            simulator.set_included(cid, False)
        else:
            simulator.undo(cid)
        simulator.show()
        return True

    TerminalDisplay.print_error(f"Unknown command '{command}'. Type 'help' for the list.")
    return True


def main(argv=None):
    """
    Command-line interface for the GPA simulator.

    Usage: gpasim [PATH] [-v|--verbose]
    """
    parser = argparse.ArgumentParser(prog="gpasim", description="Simulate GPA changes on a saved VKU grade page")
    parser.add_argument("path", nargs="?", help="Saved grade page (.html); asked for when omitted")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         VKU GPA SIMULATOR                                        ║")
    print("║         Try grade changes before they happen                     ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    simulator = GpaSimulator()

    loaded = _load(simulator, args.path) if args.path else False
    if not loaded and not _prompt_for_document(simulator):
        return 1

    TerminalDisplay.print_info("Type 'help' for commands.")
    while True:
        try:
            line = input(f"\n{TerminalDisplay.BOLD}gpa> {TerminalDisplay.RESET}")
        except EOFError:
            break
        if not run_command(simulator, line):
            break
        if not simulator.is_loaded and not _prompt_for_document(simulator):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
