"""
Aggregate result data models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GpaStats:
    """
    Credit-weighted GPA over the courses that count.

    Attributes:
        gpa: Grade point average, rounded to 2 decimals (0.0 if nothing counts)
        total_credits: Sum of credits of the counted courses
        total_courses: Number of counted courses
    """
    gpa: float = 0.0
    total_credits: int = 0
    total_courses: int = 0


@dataclass(frozen=True)
class SemesterSummary:
    """
    Everything the presentation layer shows in a semester card header.

    all_selected / some_selected only look at graded courses: an ungraded
    course can't count, so it never makes a semester "partially selected".
    """
    semester_id: str
    name: str
    stats: GpaStats
    total_credits: int
    all_selected: bool
    some_selected: bool
    edit_count: int = 0
