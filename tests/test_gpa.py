import pytest

from gpasim.engines import EditOverlay, GpaCalculator, RetakeAdvisor, apply_edits, gpa_delta, format_delta
from gpasim.models import GpaStats

from conftest import make_course


@pytest.fixture
def calculator():
    return GpaCalculator()


def test_empty_list(calculator):
    assert calculator.calculate([]) == GpaStats(gpa=0.0, total_credits=0, total_courses=0)


def test_nothing_counted(calculator):
    courses = [
        make_course("x", 3, "A", included=False),
        make_course("y", 2, ""),
    ]
    assert calculator.calculate(courses) == GpaStats(0.0, 0, 0)


def test_weighted_average(calculator, two_course_data):
    stats = calculator.cumulative_gpa(two_course_data.semesters)
    assert stats.gpa == 3.2
    assert stats.total_credits == 5
    assert stats.total_courses == 2


def test_simulated_f_and_delta(calculator, two_course_data):
    overlay = EditOverlay(two_course_data)
    overlay.set_letter_grade("semester-1-course-0", "F")
    original = calculator.cumulative_gpa(two_course_data.semesters)
    effective = calculator.cumulative_gpa(apply_edits(two_course_data, overlay).semesters)
    assert effective.gpa == 0.8
    assert gpa_delta(original, effective) == -2.4
    assert format_delta(gpa_delta(original, effective)) == "-2.40"


def test_excluded_graded_course_never_counts(calculator):
    stats = calculator.calculate([
        make_course("a", 3, "A", included=False),
        make_course("b", 3, "B"),
    ])
    assert stats == GpaStats(3.0, 3, 1)


def test_inconsistent_has_grade_is_still_filtered(calculator):
    stats = calculator.calculate([
        make_course("a", 3, "", included=True, has_grade=True),
        make_course("b", 3, "A", included=True, has_grade=False),
        make_course("c", 2, "B"),
    ])
    assert stats == GpaStats(3.0, 2, 1)


def test_rounds_half_up(calculator):
    # (3*4 + 1*3 + 4*3 + 0) / 8 would be 3.375 -> 3.38
    stats = calculator.calculate([
        make_course("a", 3, "A"),
        make_course("b", 1, "B"),
        make_course("c", 4, "B"),
        make_course("d", 0, "F"),
    ])
    assert stats.gpa == 3.38
    assert stats.total_courses == 4


def test_repeating_fraction(calculator):
    stats = calculator.calculate([make_course("a", 2, "A"), make_course("b", 1, "B")])
    assert stats.gpa == 3.67


def test_retakes_all_count(calculator):
    stats = calculator.calculate([make_course("first", 3, "F"), make_course("retake", 3, "A")])
    assert stats == GpaStats(2.0, 6, 2)


def test_semester_scope(calculator, parsed):
    first, second = parsed.semesters
    assert calculator.semester_gpa(first) == GpaStats(3.2, 5, 2)
    # D (3 credits) and B (4 credits); the ungraded course doesn't count
    assert calculator.semester_gpa(second) == GpaStats(2.14, 7, 2)
    assert calculator.cumulative_gpa(parsed.semesters) == GpaStats(2.58, 12, 4)


@pytest.mark.parametrize("delta, text", [
    (0.0, "+0.00"),
    (-0.0, "+0.00"),
    (0.15, "+0.15"),
    (-2.4, "-2.40"),
])
def test_format_delta(delta, text):
    assert format_delta(delta) == text


def test_retake_advice_uses_displayed_grade(two_course_data):
    advisor = RetakeAdvisor()
    overlay = EditOverlay(two_course_data)
    assert advisor.advised(two_course_data.courses) == []

    overlay.set_letter_grade("semester-1-course-1", "D")
    effective = apply_edits(two_course_data, overlay)
    assert [c.id for c in advisor.advised(effective.courses)] == ["semester-1-course-1"]
    # still counted toward GPA
    assert effective.semesters[0].courses[1].included is True


@pytest.mark.parametrize("grade, advised", [("A", False), ("C", False), ("D", True), ("F", True), ("", False)])
def test_should_retake(grade, advised):
    assert RetakeAdvisor().should_retake(make_course("x", 3, grade)) is advised


def test_explicit_empty_point_table_is_respected():
    stats = GpaCalculator(grade_points={}).calculate([make_course("a", 3, "A")])
    assert stats == GpaStats(0.0, 3, 1)


def test_custom_point_table():
    stats = GpaCalculator(grade_points={"A": 10.0}).calculate([make_course("a", 2, "A")])
    assert stats.gpa == 10.0
