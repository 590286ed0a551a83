"""
Document loading.

This module reads a saved transcript page from disk. It is the only file
I/O in the package; the parser itself only ever sees in-memory text.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DocumentLoader:
    """
    Reads transcript documents from disk as text.

    Browsers save the grade page as UTF-8, sometimes with a byte-order mark.
    Undecodable bytes (a PDF or an image picked by mistake) are replaced
    rather than raising, so that the parser's marker check is what rejects
    the file, with the same message the student would get for any other
    wrong file.

    Usage:
        loader = DocumentLoader()
        text = loader.read("Ket_qua_hoc_tap.html")
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        self.encoding = encoding

    def read(self, path) -> str:
        filepath = Path(path).expanduser()
        if not filepath.is_file():
            raise FileNotFoundError(f"Transcript file not found: {filepath}")
        raw = filepath.read_bytes()
        logger.debug("Read %d bytes from %s", len(raw), filepath)
        return raw.decode(self.encoding, errors="replace")
