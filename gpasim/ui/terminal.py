"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gpasim package.

To create a different UI (web, notebook, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import GpaStats, SemesterSummary


class TerminalDisplay:
    """
    Pretty terminal output for the transcript and the simulated GPA.

    The simulator hands over plain dataclasses (GpaStats, SemesterSummary,
    Course, CourseEdit); nothing here computes anything beyond formatting.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    WIDTH = 78

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_info(cls, message: str):
        print(f"  {cls.DIM}{message}{cls.RESET}")

    @classmethod
    def print_diagnostics(cls, diagnostics: list):
        if not diagnostics:
            return
        print(f"\n  {cls.YELLOW}{len(diagnostics)} row(s) could not be read and were skipped:{cls.RESET}")
        for line in diagnostics:
            print(f"  {cls.DIM}  • {line}{cls.RESET}")

    @classmethod
    def delta_color(cls, formatted_delta: str) -> str:
        if formatted_delta.startswith("-"):
            return cls.RED
        if formatted_delta == "+0.00":
            return cls.DIM
        return cls.GREEN

    @classmethod
    def print_gpa_summary(cls, original: GpaStats, effective: GpaStats,
                          has_edits: bool, formatted_delta: str):
        """Print cumulative GPA, total credits and the simulated GPA."""
        cls.print_header("GPA SUMMARY")

        print(f"\n  {cls.BOLD}Cumulative GPA:{cls.RESET} {original.gpa:.2f} / 4.0"
              f"  {cls.DIM}({original.total_courses} courses • {original.total_credits} credits){cls.RESET}")
        print(f"  {cls.BOLD}Total credits:{cls.RESET}  {original.total_credits}")

        if not has_edits:
            print(f"  {cls.BOLD}Simulated GPA:{cls.RESET}  {effective.gpa:.2f} / 4.0"
                  f"  {cls.DIM}(no edits yet){cls.RESET}")
            return

        color = cls.delta_color(formatted_delta)
        print(f"  {cls.BOLD}{cls.MAGENTA}Simulated GPA:{cls.RESET}  "
              f"{cls.BOLD}{effective.gpa:.2f}{cls.RESET} / 4.0  "
              f"{color}{formatted_delta}{cls.RESET}"
              f"  {cls.DIM}({effective.total_courses} courses • {effective.total_credits} credits){cls.RESET}")

    @classmethod
    def _selection_mark(cls, summary: SemesterSummary) -> str:
        if summary.all_selected:
            return f"{cls.GREEN}[■]{cls.RESET}"
        if summary.some_selected:
            return f"{cls.YELLOW}[▪]{cls.RESET}"
        return f"{cls.DIM}[ ]{cls.RESET}"

    @classmethod
    def print_semester(cls, summary: SemesterSummary, rows: list):
        """
        Print one semester card.

        Args:
            summary: Header data (GPA, credits, selection state)
            rows: [{"course": Course, "edit": CourseEdit or None, "retake": bool}]
                  with the course already showing its edited values
        """
        number = summary.semester_id.rsplit("-", 1)[-1]
        edits = f"  {cls.MAGENTA}✎ {summary.edit_count}{cls.RESET}" if summary.edit_count else ""
        print()
        print(f"  {cls._selection_mark(summary)} {cls.BOLD}{number}. {summary.name}{cls.RESET}"
              f"  {cls.DIM}{summary.total_credits} credits{cls.RESET}"
              f"  {cls.CYAN}GPA {summary.stats.gpa:.2f}{cls.RESET}{edits}")

        print(f"  {cls.BOLD}{'#':>4}  {'COURSE':<40} {'CR':>3} {'TRY':>3} {'T10':>5}  {'GRADE':<7} {'GPA':<4}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * (cls.WIDTH - 4)}{cls.RESET}")

        for position, row in enumerate(rows, 1):
            cls._print_course(number, position, row)

    @classmethod
    def _print_course(cls, semester_number: str, position: int, row: dict):
        course = row["course"]
        edit = row["edit"]

        ref = f"{semester_number}.{position}"
        name = course.name if len(course.name) <= 40 else course.name[:39] + "…"
        score = f"{course.numeric_score:.1f}" if course.numeric_score is not None else "-"

        if edit is not None and edit.grade_changed:
            old = edit.old_letter_grade or "–"
            new = edit.new_letter_grade or "–"
            grade = f"{cls.MAGENTA}{old}→{new}{cls.RESET}"
            pad = 7 - len(old) - len(new) - 1
        elif course.has_grade:
            grade = course.letter_grade
            pad = 7 - len(grade)
        else:
            grade = f"{cls.DIM}–{cls.RESET}"
            pad = 6
        grade = grade + " " * max(pad, 0)

        counted = course.included and course.has_grade
        check = f"{cls.GREEN}✓{cls.RESET}" if counted else f"{cls.DIM}·{cls.RESET}"
        if edit is not None and edit.inclusion_changed:
            check = f"{cls.MAGENTA}{'✓' if course.included else '✗'}{cls.RESET}"

        flags = []
        if row.get("retake"):
            flags.append(f"{cls.RED}retake advised{cls.RESET}")
        if not course.has_grade:
            flags.append(f"{cls.DIM}no grade yet{cls.RESET}")
        if course.is_retake:
            flags.append(f"{cls.DIM}attempt {course.attempt_number}{cls.RESET}")

        print(f"  {ref:>4}  {name:<40} {course.credits:>3} {course.attempt_number:>3} {score:>5}  "
              f"{grade} {check}    {'  '.join(flags)}")

    @classmethod
    def print_edits(cls, rows: list):
        """
        Print pending edits as a diff.

        Args:
            rows: [(original Course, CourseEdit)]
        """
        cls.print_subheader("Pending edits")
        if not rows:
            print(f"  {cls.DIM}(none){cls.RESET}")
            return
        for course, edit in rows:
            changes = []
            if edit.grade_changed:
                changes.append(f"grade {edit.old_letter_grade or '–'} → {edit.new_letter_grade or '–'}")
            if edit.inclusion_changed:
                changes.append("included" if edit.new_included else "excluded")
            name = course.name if course is not None else edit.course_id
            print(f"  {cls.MAGENTA}✎{cls.RESET} {name}: {', '.join(changes)}  {cls.DIM}({edit.course_id}){cls.RESET}")

    @classmethod
    def print_help(cls):
        cls.print_subheader("Commands")
        lines = [
            ("grade <course> <A-F|->", "simulate a letter grade ('-' = no grade)"),
            ("include <course>", "count the course toward GPA"),
            ("exclude <course>", "leave the course out of GPA"),
            ("undo <course>", "drop the pending edit of a course"),
            ("all <semester> on|off", "include/exclude a whole semester"),
            ("reset", "drop every pending edit"),
            ("show", "print the transcript again"),
            ("edits", "list pending edits"),
            ("load <path>", "open another transcript (discards edits)"),
            ("quit", "exit"),
        ]
        for command, description in lines:
            print(f"  {cls.CYAN}{command:<26}{cls.RESET} {description}")
        print(f"\n  {cls.DIM}<course> is '2.3' (semester 2, row 3) or a course id;"
              f" <semester> is '2' or a semester id.{cls.RESET}")
