"""
Configuration constants for the GPA simulator.

This module contains all configuration values and constants used throughout
the simulator. Centralizing these makes it easy to adjust behavior if the
training office changes its grading policy or its transcript page layout.
"""

# =============================================================================
# GRADE SCALE
# =============================================================================

# The empty string is the "ungraded" letter: the course is on the transcript
# but has no final grade yet (or was graded pass/recognized).
NO_GRADE = ""

# VKU uses a 5-tier scale with no plus/minus modifiers.
LETTER_GRADES = ("A", "B", "C", "D", "F")

# Letter grade -> grade points on the 4.0 scale
GRADE_POINTS = {
    "A": 4.0,
    "B": 3.0,
    "C": 2.0,
    "D": 1.0,
    "F": 0.0,
    NO_GRADE: 0.0,
}

# Grades for which the student is advised to retake the course
RETAKE_GRADES = {"D", "F"}

# GPA values are reported with this many decimals (round half up)
GPA_DECIMALS = 2


# =============================================================================
# SOURCE DOCUMENT MARKERS
# =============================================================================
# Cheap substring checks run before building the markup tree. A file that has
# none of these is not a saved transcript page.

INSTITUTION_MARKERS = (
    "daotao.vku.udn.vn",
    "Trường Đại học CNTT&TT Việt - Hàn",
)

# Label that starts every semester heading ("Học kỳ 1 - Năm học 2022-2023")
SEMESTER_MARKER = "Học kỳ"

# Headings containing one of these open a block of converted/transferred
# credit ("Học kỳ riêng - Quy đổi"). Courses under it are dropped.
TRANSFER_BLOCK_MARKERS = ("Quy đổi", "riêng")


# =============================================================================
# TRANSCRIPT TABLE LAYOUT
# =============================================================================
# This is the layout of the training office's grade page. It is an external
# contract: if the page changes, extraction should fail instead of guessing.
# Column 5 is present in the source table but carries nothing we use.

HEADER_COLSPAN = 13
MIN_COURSE_CELLS = 10

COL_INDEX = 0
COL_NAME = 1
COL_CREDITS = 2
COL_ATTEMPT = 3
COL_COMPONENT_SCORE = 4
COL_MIDTERM_SCORE = 6
COL_FINAL_SCORE = 7
COL_NUMERIC_SCORE = 8
COL_LETTER_GRADE = 9


# =============================================================================
# USER-FACING MESSAGES
# =============================================================================

FORMAT_ERROR_MESSAGE = (
    "The file is not a VKU transcript page. "
    "Save the grade page from the training office website as HTML and try again."
)
EMPTY_TRANSCRIPT_MESSAGE = (
    "No transcript table was found in the file. Please check the file format."
)
READ_ERROR_MESSAGE = "Could not read the file. Please check the format."


def semester_id(position: int) -> str:
    """Id of the semester at 1-based document position (e.g., 'semester-2')."""
    return f"semester-{position}"


def course_id(semester: str, counter: int) -> str:
    """Id of the course at 0-based position inside a semester."""
    return f"{semester}-course-{counter}"
