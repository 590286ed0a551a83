"""
GPA Simulator - Main Orchestrator.

This module contains the GpaSimulator class that owns one session's state
(the parsed transcript and its edit overlay) and connects the algorithm
layer to the presentation layer.
"""

import logging

from .data import DocumentLoader, TranscriptParser
from .engines import (
    EditOverlay,
    GpaCalculator,
    RetakeAdvisor,
    apply_edits,
    gpa_delta,
    format_delta,
)
from .errors import TranscriptError
from .models import GpaStats, ParsedData, SemesterSummary
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class GpaSimulator:
    """
    Main interface for the GPA simulator.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Receives a document (text, bytes, or a path through load_file)
    2. Keeps the parsed snapshot and a fresh EditOverlay side by side
    3. Answers "original" and "effective" GPA questions for the UI
    4. Forwards the five edit operations to the overlay

    The snapshot and the overlay always travel together: loading a new
    document (successfully or not) or resetting the session discards both.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object; only show() uses it. Everything else
    returns plain dataclasses.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        simulator = GpaSimulator()
        simulator.load_file("Ket_qua_hoc_tap.html")
        simulator.set_letter_grade("semester-1-course-0", "A")
        print(simulator.formatted_delta())
    """

    def __init__(self, display=None):
        self.loader = DocumentLoader()
        self.parser = TranscriptParser()
        self.calculator = GpaCalculator()
        self.advisor = RetakeAdvisor()
        self.display = display or TerminalDisplay()

        self.parsed_data = None
        self.overlay = None

    # =========================================================================
    #  SESSION
    # =========================================================================

    @property
    def is_loaded(self) -> bool:
        return self.parsed_data is not None

    @property
    def diagnostics(self) -> list:
        """Rows skipped during the last parse."""
        return list(self.parser.diagnostics)

    def load_document(self, document) -> ParsedData:
        """
        Parse a transcript and start a new editing session on it.

        Raises:
            TranscriptFormatError, EmptyTranscriptError: the document is
                unusable; the previous session is discarded either way
        """
        self.reset_session()
        try:
            data = self.parser.parse(document)
        except TranscriptError as e:
            logger.info("Rejected document: %s", e)
            raise
        self.parsed_data = data
        self.overlay = EditOverlay(data)
        return data

    def load_file(self, path) -> ParsedData:
        self.reset_session()
        return self.load_document(self.loader.read(path))

    def reset_session(self):
        self.parsed_data = None
        self.overlay = None

    # =========================================================================
    #  EDITS
    # =========================================================================

    @property
    def has_edits(self) -> bool:
        return self.overlay is not None and self.overlay.has_edits

    @property
    def edits(self) -> dict:
        return self.overlay.edits if self.overlay is not None else {}

    def set_letter_grade(self, course_id: str, letter_grade: str):
        if self.overlay is not None:
            self.overlay.set_letter_grade(course_id, letter_grade)

    def set_included(self, course_id: str, included: bool):
        if self.overlay is not None:
            self.overlay.set_included(course_id, included)

    def undo(self, course_id: str):
        if self.overlay is not None:
            self.overlay.undo(course_id)

    def reset_all(self):
        if self.overlay is not None:
            self.overlay.reset_all()

    def select_all_in_semester(self, semester_id: str, selected: bool):
        if self.overlay is not None:
            self.overlay.select_all_in_semester(semester_id, selected)

    # =========================================================================
    #  PROJECTION & STATISTICS
    # =========================================================================

    def effective_data(self) -> ParsedData:
        """The transcript with all pending edits applied."""
        if not self.is_loaded:
            return ParsedData()
        return apply_edits(self.parsed_data, self.overlay)

    def original_stats(self) -> GpaStats:
        if not self.is_loaded:
            return GpaStats()
        return self.calculator.cumulative_gpa(self.parsed_data.semesters)

    def effective_stats(self) -> GpaStats:
        if not self.is_loaded:
            return GpaStats()
        return self.calculator.cumulative_gpa(self.effective_data().semesters)

    def delta(self) -> float:
        return gpa_delta(self.original_stats(), self.effective_stats())

    def formatted_delta(self) -> str:
        return format_delta(self.delta())

    def semester_stats(self, semester_id: str, effective: bool = True) -> GpaStats:
        """
        GPA of one semester.

        Raises:
            KeyError: no semester with this id in the loaded transcript
        """
        data = self.effective_data() if effective else (self.parsed_data or ParsedData())
        semester = data.find_semester(semester_id)
        if semester is None:
            raise KeyError(semester_id)
        return self.calculator.semester_gpa(semester)

    def semester_summaries(self) -> list:
        """Header data for every semester, edits applied."""
        summaries = []
        for semester in self.effective_data().semesters:
            graded = [c for c in semester.courses if c.has_grade]
            selected = sum(1 for c in graded if c.included)
            summaries.append(SemesterSummary(
                semester_id=semester.id,
                name=semester.name,
                stats=self.calculator.semester_gpa(semester),
                total_credits=semester.total_credits,
                all_selected=bool(graded) and selected == len(graded),
                some_selected=0 < selected < len(graded),
                edit_count=sum(1 for c in semester.courses if c.id in self.overlay),
            ))
        return summaries

    def retake_advised(self) -> list:
        """Courses currently showing D or F."""
        return self.advisor.advised(self.effective_data().courses)

    # =========================================================================
    #  PRESENTATION
    # =========================================================================

    def show(self):
        """Display the GPA summary and every semester."""
        if not self.is_loaded:
            self.display.print_error("No transcript loaded.")
            return
        original = self.original_stats()
        effective = self.effective_stats()
        self.display.print_gpa_summary(original, effective, self.has_edits, self.formatted_delta())

        effective_data = self.effective_data()
        for summary in self.semester_summaries():
            semester = effective_data.find_semester(summary.semester_id)
            rows = []
            for course in semester.courses:
                edit = self.overlay.get(course.id)
                rows.append({
                    "course": course,
                    "edit": edit,
                    "retake": self.advisor.should_retake(course),
                })
            self.display.print_semester(summary, rows)

    def show_edits(self):
        rows = []
        for edit in self.overlay or []:
            rows.append((self.overlay.original(edit.course_id), edit))
        self.display.print_edits(rows)
