"""
Overlay, aggregation and advisory engines.

This package contains the engines that perform the core logic of the
simulator once a transcript has been parsed.
"""

from .overlay import EditOverlay, apply_edit, apply_edits, apply_edits_to_courses
from .gpa import GpaCalculator, gpa_delta, format_delta
from .retake import RetakeAdvisor

__all__ = [
    "EditOverlay",
    "apply_edit",
    "apply_edits",
    "apply_edits_to_courses",
    "GpaCalculator",
    "gpa_delta",
    "format_delta",
    "RetakeAdvisor",
]
