"""
Data loading and parsing module.

This package handles reading the saved grade page and parsing it.
"""

from .loader import DocumentLoader
from .parser import TranscriptParser, normalize_letter_grade

__all__ = ["DocumentLoader", "TranscriptParser", "normalize_letter_grade"]
