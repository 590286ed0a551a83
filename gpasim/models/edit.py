"""
Edit overlay data models.

Contains the CourseEdit dataclass, one pending "what-if" change.
"""

from dataclasses import dataclass


@dataclass
class CourseEdit:
    """
    A pending hypothetical change to one course.

    The original values are kept alongside the proposed ones so a front end
    can show the diff, and so the overlay can tell when an edit has become a
    no-op and must be dropped.

    Example: student simulates retaking "Giải tích 1" for an A
        course_id: "semester-1-course-0"
        old_letter_grade: "D"      new_letter_grade: "A"
        old_included: True         new_included: True
    """
    course_id: str
    old_letter_grade: str
    new_letter_grade: str
    old_included: bool
    new_included: bool

    @property
    def grade_changed(self) -> bool:
        return self.new_letter_grade != self.old_letter_grade

    @property
    def inclusion_changed(self) -> bool:
        return self.new_included != self.old_included

    @property
    def is_noop(self) -> bool:
        """True when both fields are back to their original values."""
        return not self.grade_changed and not self.inclusion_changed
