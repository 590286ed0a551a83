"""
Exceptions raised by the extraction engine.

Only document-level failures are exceptions. Row-level problems are recovered
inside the parser and unrecognized grades normalize to "ungraded".
"""

from .config import FORMAT_ERROR_MESSAGE, EMPTY_TRANSCRIPT_MESSAGE


class TranscriptError(Exception):
    """Base class for documents the simulator cannot use."""

    default_message = FORMAT_ERROR_MESSAGE

    def __init__(self, message: str = None):
        self.user_message = message or self.default_message
        super().__init__(self.user_message)


class TranscriptFormatError(TranscriptError):
    """The document has no institution marker and no semester marker."""

    default_message = FORMAT_ERROR_MESSAGE


class EmptyTranscriptError(TranscriptError):
    """The document looked right but no semester could be extracted."""

    default_message = EMPTY_TRANSCRIPT_MESSAGE
