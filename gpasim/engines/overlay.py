"""
Edit overlay engine.

This module keeps the student's hypothetical edits apart from the parsed
transcript and projects them onto it on demand.
"""

import logging
from dataclasses import replace
from typing import Optional

from ..config import LETTER_GRADES, NO_GRADE
from ..models import Course, CourseEdit, ParsedData

logger = logging.getLogger(__name__)


class EditOverlay:
    """
    Sparse map of pending edits, keyed by course id.

    ═══════════════════════════════════════════════════════════════════════════
    INVARIANT: NO NO-OP ENTRIES
    ═══════════════════════════════════════════════════════════════════════════

    Every write checks the touched entry and deletes it if both its grade and
    its inclusion flag are back to the original values. "Does this course
    have a pending edit?" is therefore a plain dict lookup, and the number of
    entries is the number of courses that really differ from the transcript.

    ═══════════════════════════════════════════════════════════════════════════

    The parsed data is only read, to seed a new entry with the course's true
    original values. Edits against an id that isn't in the transcript are
    ignored.

    Usage:
        overlay = EditOverlay(parsed_data)
        overlay.set_letter_grade("semester-1-course-0", "A")
        overlay.set_included("semester-2-course-3", False)
        effective = apply_edits(parsed_data, overlay)
    """

    def __init__(self, parsed_data: ParsedData):
        self.parsed_data = parsed_data
        self._originals = {c.id: c for c in parsed_data.courses}
        self._edits = {}

    def __contains__(self, course_id: str) -> bool:
        return course_id in self._edits

    def __len__(self) -> int:
        return len(self._edits)

    def __iter__(self):
        return iter(list(self._edits.values()))

    @property
    def has_edits(self) -> bool:
        return bool(self._edits)

    @property
    def edits(self) -> dict:
        """Snapshot of the pending edits (course id -> CourseEdit)."""
        return {cid: replace(edit) for cid, edit in self._edits.items()}

    def get(self, course_id: str) -> Optional[CourseEdit]:
        edit = self._edits.get(course_id)
        return replace(edit) if edit is not None else None

    def original(self, course_id: str) -> Optional[Course]:
        return self._originals.get(course_id)

    def set_letter_grade(self, course_id: str, letter_grade: str):
        """
        Propose a new letter grade for a course.

        Args:
            course_id: Course to edit
            letter_grade: "A".."F", or "" to simulate "no grade"

        Raises:
            ValueError: letter_grade is not on the grade scale
        """
        if letter_grade != NO_GRADE and letter_grade not in LETTER_GRADES:
            raise ValueError(f"Unknown letter grade: {letter_grade!r}")
        edit = self._edit_for(course_id)
        if edit is None:
            return
        edit.new_letter_grade = letter_grade
        self._store(edit)

    def set_included(self, course_id: str, included: bool):
        """Propose counting (or not counting) a course toward GPA."""
        edit = self._edit_for(course_id)
        if edit is None:
            return
        edit.new_included = bool(included)
        self._store(edit)

    def undo(self, course_id: str):
        """Drop any pending edit for the course."""
        self._edits.pop(course_id, None)

    def reset_all(self):
        self._edits.clear()

    def select_all_in_semester(self, semester_id: str, selected: bool):
        """
        Include or exclude every course of a semester.

        This is set_included applied course by course in semester order, so
        courses already in the requested state are pruned like any other
        no-op edit.
        """
        semester = self.parsed_data.find_semester(semester_id)
        if semester is None:
            return
        for course in semester.courses:
            self.set_included(course.id, selected)

    def _edit_for(self, course_id: str) -> Optional[CourseEdit]:
        """Working copy of the course's edit, seeded from the original if new."""
        existing = self._edits.get(course_id)
        if existing is not None:
            return replace(existing)

        course = self._originals.get(course_id)
        if course is None:
            logger.debug("Ignoring edit for unknown course %s", course_id)
            return None
        return CourseEdit(
            course_id=course_id,
            old_letter_grade=course.letter_grade,
            new_letter_grade=course.letter_grade,
            old_included=course.included,
            new_included=course.included,
        )

    def _store(self, edit: CourseEdit):
        if edit.is_noop:
            if self._edits.pop(edit.course_id, None) is not None:
                logger.debug("Edit for %s is back to original, removed", edit.course_id)
            return
        self._edits[edit.course_id] = edit


def apply_edit(course: Course, edit: Optional[CourseEdit]) -> Course:
    """
    The course as the student currently sees it.

    has_grade is re-derived from the new letter grade so that giving an
    ungraded course a simulated grade keeps the two fields consistent.
    """
    if edit is None:
        return course
    return replace(
        course,
        letter_grade=edit.new_letter_grade,
        has_grade=edit.new_letter_grade != NO_GRADE,
        included=edit.new_included,
    )


def apply_edits_to_courses(courses, overlay: EditOverlay) -> list:
    return [apply_edit(c, overlay.get(c.id)) for c in courses]


def apply_edits(parsed_data: ParsedData, overlay: EditOverlay) -> ParsedData:
    """
    Project the overlay onto the parsed data.

    Returns new ParsedData; the original is left untouched. Courses without
    a pending edit are passed through as the same objects.
    """
    return replace(
        parsed_data,
        semesters=tuple(
            replace(s, courses=tuple(apply_edits_to_courses(s.courses, overlay)))
            for s in parsed_data.semesters
        ),
    )
