"""
Transcript data models.

Contains the Course, Semester and ParsedData dataclasses that represent
one extraction run over a saved transcript page.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import NO_GRADE


@dataclass(frozen=True)
class Course:
    """
    Represents a single course line on the student's transcript.

    Instances are frozen: the parsed snapshot is never edited in place.
    Hypothetical changes live in an EditOverlay and are applied by producing
    new Course objects (see engines.overlay.apply_edits).

    Attributes:
        id: Stable identity derived from semester id and row position
            (e.g., "semester-1-course-0")
        sequence_number: Row number as printed in the semester (STT)
        name: Course title, whitespace collapsed
        credits: Credit-hour weight
        attempt_number: 1 for the first attempt, >1 for a retake
        component_score: Coursework score, None when not recorded
        midterm_score: Midterm score, None when not recorded
        final_score: Final exam score, None when not recorded
        numeric_score: Overall 10-point score (T10), None when not recorded
        letter_grade: "A".."F", or "" when the course has no grade yet
        has_grade: True iff letter_grade is non-empty
        included: Whether the course counts toward GPA
    """
    id: str
    sequence_number: int
    name: str
    credits: int
    attempt_number: int = 1
    component_score: Optional[float] = None
    midterm_score: Optional[float] = None
    final_score: Optional[float] = None
    numeric_score: Optional[float] = None
    letter_grade: str = NO_GRADE
    has_grade: bool = False
    included: bool = False

    @property
    def is_retake(self) -> bool:
        return self.attempt_number > 1


@dataclass(frozen=True)
class Semester:
    """
    An ordered group of courses under one semester heading.

    Attributes:
        id: "semester-N", N being the position in the document (1-based)
        name: Heading text exactly as it appears on the page
        courses: Courses in document order
    """
    id: str
    name: str
    courses: tuple = field(default_factory=tuple)

    @property
    def total_credits(self) -> int:
        """Credits of every course listed, counted toward GPA or not."""
        return sum(c.credits for c in self.courses)


@dataclass(frozen=True)
class ParsedData:
    """
    Full snapshot produced by one extraction run.

    Produced once per uploaded document and never mutated afterwards.
    """
    semesters: tuple = field(default_factory=tuple)

    @property
    def courses(self) -> list:
        """All courses of all semesters, in document order."""
        return [c for s in self.semesters for c in s.courses]

    def find_semester(self, semester_id: str) -> Optional[Semester]:
        for semester in self.semesters:
            if semester.id == semester_id:
                return semester
        return None
