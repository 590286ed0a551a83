"""
Transcript parsing.

This module turns a saved VKU grade page into a semester-grouped course list.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from ..config import (
    INSTITUTION_MARKERS,
    SEMESTER_MARKER,
    TRANSFER_BLOCK_MARKERS,
    HEADER_COLSPAN,
    MIN_COURSE_CELLS,
    COL_INDEX,
    COL_NAME,
    COL_CREDITS,
    COL_ATTEMPT,
    COL_COMPONENT_SCORE,
    COL_MIDTERM_SCORE,
    COL_FINAL_SCORE,
    COL_NUMERIC_SCORE,
    COL_LETTER_GRADE,
    LETTER_GRADES,
    NO_GRADE,
    semester_id,
    course_id,
)
from ..errors import TranscriptFormatError, EmptyTranscriptError
from ..models import Course, Semester, ParsedData

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^\d+$")
_LEADING_INT = re.compile(r"^[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)")
_WHITESPACE = re.compile(r"\s+")


def normalize_letter_grade(text: str) -> str:
    """
    Map raw grade cell text to "A".."F" or "" (ungraded).

    Never fails: R (recognized/transferred), P (pass), blanks, dashes and
    anything else unknown all come back as the ungraded value.
    """
    grade = (text or "").strip().upper()
    return grade if grade in LETTER_GRADES else NO_GRADE


def clean_course_name(text: str) -> str:
    """Collapse whitespace runs (icons and badges leave plenty) and trim."""
    return _WHITESPACE.sub(" ", text or "").strip()


def parse_int(text: str, default: int) -> int:
    """Leading integer of the text ("3", "3.0", "3 TC" -> 3), else default."""
    match = _LEADING_INT.match((text or "").strip())
    if not match:
        return default
    try:
        return int(match.group(0))
    except ValueError:
        # past the interpreter's integer string length limit
        return default


def parse_score(text: str) -> Optional[float]:
    """
    Leading real number of a score cell, or None.

    Placeholders ("-", blank, "CT") and a zero value both read as "no score".
    """
    value = (text or "").strip().replace(",", ".")
    match = _LEADING_FLOAT.match(value)
    if not match:
        return None
    score = float(match.group(0))
    return score or None


class TranscriptParser:
    """
    Extracts semesters and courses from the grade page markup.

    HOW THE PAGE IS LAID OUT:
    The page is a 13-column table. Each semester starts with a row holding one
    cell spanning all 13 columns ("Học kỳ 1 - Năm học 2022-2023"), followed
    by one row per course and some divider/summary rows. We walk every <tr>
    in document order with one "current semester" accumulator:

    - heading with a transfer marker ("Học kỳ riêng - Quy đổi"): close the
      current semester; courses until the next real heading are dropped
    - heading with "Học kỳ": flush the current semester, start a new one
    - any other row while a semester is open: a course if it has at least
      10 cells and its first cell is a plain number, otherwise skipped

    Rows that qualify but can't be decoded are logged, recorded in
    `diagnostics` and skipped; one bad line shouldn't cost the whole upload.

    Usage:
        parser = TranscriptParser()
        data = parser.parse(html_text)
    """

    def __init__(self, features: str = "html.parser"):
        self.features = features
        self.diagnostics = []

    def validate(self, text: str) -> bool:
        """
        Quick check that the text is plausibly a VKU grade page.

        Looks for the training office domain or the university name, or at
        least a semester label. Runs before the markup tree is built so that
        images and unrelated pages are rejected cheaply.
        """
        has_institution = any(marker in text for marker in INSTITUTION_MARKERS)
        return has_institution or SEMESTER_MARKER in text

    def parse(self, document) -> ParsedData:
        """
        Parse a grade page and return the semester snapshot.

        Args:
            document: Page markup as str, or raw bytes (decoded as UTF-8)

        Returns:
            ParsedData with semesters in document order

        Raises:
            TranscriptFormatError: no institution or semester marker in the text
            EmptyTranscriptError: markers present but no semester was extracted
        """
        if isinstance(document, bytes):
            document = document.decode("utf-8", errors="replace")
        self.diagnostics = []

        if not self.validate(document):
            raise TranscriptFormatError()

        soup = BeautifulSoup(document, self.features)

        semesters = []
        current = None
        counter = 0

        for row in soup.find_all("tr"):
            header = self._find_header_cell(row)
            if header is not None:
                text = header.get_text().strip()

                if any(marker in text for marker in TRANSFER_BLOCK_MARKERS):
                    logger.debug("Dropping non-countable block: %s", text)
                    if current is not None:
                        semesters.append(self._close(current))
                    current = None
                    continue

                if SEMESTER_MARKER in text:
                    if current is not None:
                        semesters.append(self._close(current))
                    current = {
                        "id": semester_id(len(semesters) + 1),
                        "name": text,
                        "courses": [],
                    }
                    counter = 0
                    logger.debug("Semester %s: %s", current["id"], text)
                continue

            if current is None:
                continue

            cells = row.find_all("td")
            if len(cells) < MIN_COURSE_CELLS:
                continue
            if not _DIGITS.match(cells[COL_INDEX].get_text().strip()):
                continue

            cid = course_id(current["id"], counter)
            counter += 1
            try:
                current["courses"].append(self._parse_course(cells, cid))
            except (ValueError, IndexError, AttributeError, TypeError) as e:
                message = f"Skipped row {cid} in '{current['name']}': {e}"
                logger.warning(message)
                self.diagnostics.append(message)

        if current is not None:
            semesters.append(self._close(current))

        if not semesters:
            raise EmptyTranscriptError()

        logger.info(
            "Parsed %d semesters, %d courses",
            len(semesters), sum(len(s.courses) for s in semesters),
        )
        return ParsedData(semesters=tuple(semesters))

    @staticmethod
    def _find_header_cell(row):
        """The cell spanning the whole table, if this row has one."""
        for cell in row.find_all("td"):
            if parse_int(cell.get("colspan", ""), 0) == HEADER_COLSPAN:
                return cell
        return None

    @staticmethod
    def _close(current: dict) -> Semester:
        return Semester(
            id=current["id"],
            name=current["name"],
            courses=tuple(current["courses"]),
        )

    def _parse_course(self, cells: list, cid: str) -> Course:
        """
        Decode one course row.

        Columns: 0 STT, 1 name, 2 credits, 3 attempt, 4 component score,
        6 midterm, 7 final, 8 T10 score, 9 letter grade. Column 5 is skipped.
        """
        text = [cell.get_text() for cell in cells]

        credits = parse_int(text[COL_CREDITS], 0)
        attempt = parse_int(text[COL_ATTEMPT], 1)
        letter_grade = normalize_letter_grade(text[COL_LETTER_GRADE])
        has_grade = letter_grade != NO_GRADE

        return Course(
            id=cid,
            sequence_number=parse_int(text[COL_INDEX], 0),
            name=clean_course_name(text[COL_NAME]),
            credits=max(credits, 0),
            attempt_number=attempt if attempt >= 1 else 1,
            component_score=parse_score(text[COL_COMPONENT_SCORE]),
            midterm_score=parse_score(text[COL_MIDTERM_SCORE]),
            final_score=parse_score(text[COL_FINAL_SCORE]),
            numeric_score=parse_score(text[COL_NUMERIC_SCORE]),
            letter_grade=letter_grade,
            has_grade=has_grade,
            # Ungraded courses start excluded; afterwards the flag belongs
            # to the student (through the edit overlay)
            included=has_grade,
        )
