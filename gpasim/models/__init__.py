"""
Data models for the GPA simulator.

This package contains all dataclasses used throughout the system.
These serve as "contracts" between the parser, the engines and the UI.
"""

from .course import Course, Semester, ParsedData
from .edit import CourseEdit
from .stats import GpaStats, SemesterSummary

__all__ = [
    # Transcript models
    "Course",
    "Semester",
    "ParsedData",
    # Overlay models
    "CourseEdit",
    # Aggregates
    "GpaStats",
    "SemesterSummary",
]
