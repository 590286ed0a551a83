"""
GPA aggregation engine.

This module computes credit-weighted GPA statistics over a course list,
whether the original transcript or the overlay-applied one.
"""

from decimal import Decimal, ROUND_HALF_UP

from ..config import GRADE_POINTS, GPA_DECIMALS, NO_GRADE
from ..models import GpaStats


class GpaCalculator:
    """
    Computes GPA = Σ(credits × points) / Σ(credits) over counted courses.

    COUNTING RULE:
    --------------
    A course counts only if it is included AND has a grade AND its letter
    grade is not empty. The last two say the same thing for well-formed
    courses; both are checked so a course with an inconsistent has_grade
    flag still can't sneak an empty grade into the average.

    Retakes are NOT deduplicated: every included, graded attempt counts.

    ROUNDING:
    ---------
    Arithmetic is done in Decimal and rounded half up (3.125 → 3.13).
    """

    def __init__(self, grade_points: dict = None, decimals: int = GPA_DECIMALS):
        self.grade_points = GRADE_POINTS if grade_points is None else grade_points
        self.quantum = Decimal(1).scaleb(-decimals)

    @staticmethod
    def counts(course) -> bool:
        return bool(course.included and course.has_grade and course.letter_grade != NO_GRADE)

    def calculate(self, courses) -> GpaStats:
        total_points = Decimal(0)
        total_credits = 0
        total_courses = 0

        for course in courses:
            if not self.counts(course):
                continue
            points = Decimal(str(self.grade_points.get(course.letter_grade, 0.0)))
            total_points += course.credits * points
            total_credits += course.credits
            total_courses += 1

        if total_credits > 0:
            gpa = (total_points / total_credits).quantize(self.quantum, rounding=ROUND_HALF_UP)
        else:
            gpa = Decimal(0)

        return GpaStats(
            gpa=float(gpa),
            total_credits=total_credits,
            total_courses=total_courses,
        )

    def semester_gpa(self, semester) -> GpaStats:
        return self.calculate(semester.courses)

    def cumulative_gpa(self, semesters) -> GpaStats:
        """GPA over every semester's courses, in document order."""
        return self.calculate(c for s in semesters for c in s.courses)


def gpa_delta(original: GpaStats, effective: GpaStats) -> float:
    """Signed change of the simulated GPA, rounded like the GPAs themselves."""
    delta = Decimal(str(effective.gpa)) - Decimal(str(original.gpa))
    return float(delta.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_delta(delta: float) -> str:
    """'+0.25', '+0.00', '-2.40'."""
    delta = delta + 0.0  # no "-0.00"
    sign = "+" if delta >= 0 else ""
    return f"{sign}{delta:.2f}"
