"""
Retake advisory policy.
"""

from ..config import RETAKE_GRADES


class RetakeAdvisor:
    """
    Flags courses the student should consider retaking.

    Purely advisory: a D or F still counts toward the real GPA, so nothing
    here touches inclusion or the GPA calculation. Always pass the course as
    currently displayed (edits applied), so simulating a better grade clears
    the flag.
    """

    def __init__(self, grades=None):
        self.grades = set(grades or RETAKE_GRADES)

    def should_retake(self, course) -> bool:
        return course.letter_grade in self.grades

    def advised(self, courses) -> list:
        return [c for c in courses if self.should_retake(c)]
