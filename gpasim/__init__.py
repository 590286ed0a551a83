"""
VKU GPA Simulator Package
=========================

Parse a saved VKU grade page and try "what-if" grade edits to see the
projected cumulative GPA before anything real changes.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                 │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌─────────────────┐  ┌────────────────────────┐  │
│  │ TranscriptParser │  │   EditOverlay   │  │     GpaCalculator      │  │
│  │ (markup → data)  │  │ (sparse edits)  │  │ (weighted average)     │  │
│  └──────────────────┘  └─────────────────┘  └────────────────────────┘  │
│                                                                         │
│  ┌──────────────────┐  ┌─────────────────────────────────────────────┐  │
│  │  RetakeAdvisor   │  │  apply_edits (original + overlay → view)    │  │
│  └──────────────────┘  └─────────────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│                        TerminalDisplay                                  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          GpaSimulator                                   │
│     (Session owner - parsed snapshot + overlay, connects the layers)    │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gpasim/
├── __init__.py          # This file - main exports
├── config.py            # Grade scale, page markers, table layout
├── errors.py            # TranscriptError and subclasses
├── simulator.py         # GpaSimulator orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Dataclasses
│   ├── course.py        # Course, Semester, ParsedData
│   ├── edit.py          # CourseEdit
│   └── stats.py         # GpaStats, SemesterSummary
│
├── data/                # Reading and parsing
│   ├── loader.py        # DocumentLoader
│   └── parser.py        # TranscriptParser
│
├── engines/
│   ├── overlay.py       # EditOverlay, apply_edits
│   ├── gpa.py           # GpaCalculator
│   └── retake.py        # RetakeAdvisor
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from gpasim import GpaSimulator

    simulator = GpaSimulator()
    simulator.load_file("Ket_qua_hoc_tap.html")

    simulator.set_letter_grade("semester-1-course-0", "A")
    simulator.set_included("semester-2-course-4", False)

    simulator.original_stats()    # GpaStats(gpa=3.2, ...)
    simulator.effective_stats()   # GpaStats(gpa=3.35, ...)
    simulator.formatted_delta()   # '+0.15'

Running from command line:

    python -m gpasim path/to/grade_page.html

"""

# Version
__version__ = "1.0.0"

# Main exports
from .simulator import GpaSimulator
from .cli import main

# Model exports
from .models import (
    Course,
    Semester,
    ParsedData,
    CourseEdit,
    GpaStats,
    SemesterSummary,
)

# Engine exports
from .engines import (
    EditOverlay,
    GpaCalculator,
    RetakeAdvisor,
    apply_edit,
    apply_edits,
    apply_edits_to_courses,
    gpa_delta,
    format_delta,
)

# Data exports
from .data import DocumentLoader, TranscriptParser, normalize_letter_grade

# Errors
from .errors import TranscriptError, TranscriptFormatError, EmptyTranscriptError

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    GRADE_POINTS,
    LETTER_GRADES,
    NO_GRADE,
    RETAKE_GRADES,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GpaSimulator",
    "main",
    # Models
    "Course",
    "Semester",
    "ParsedData",
    "CourseEdit",
    "GpaStats",
    "SemesterSummary",
    # Engines
    "EditOverlay",
    "GpaCalculator",
    "RetakeAdvisor",
    "apply_edit",
    "apply_edits",
    "apply_edits_to_courses",
    "gpa_delta",
    "format_delta",
    # Data
    "DocumentLoader",
    "TranscriptParser",
    "normalize_letter_grade",
    # Errors
    "TranscriptError",
    "TranscriptFormatError",
    "EmptyTranscriptError",
    # UI
    "TerminalDisplay",
    # Config
    "GRADE_POINTS",
    "LETTER_GRADES",
    "NO_GRADE",
    "RETAKE_GRADES",
]
