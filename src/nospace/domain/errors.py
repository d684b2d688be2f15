from __future__ import annotations

"""
Transcript Error Taxonomy.

Grammar violations and structural problems both abort the parse; no
partial tree is ever returned to the caller.
"""

from typing import Optional


class TranscriptError(Exception):
    """Base class for every failure raised while reading a transcript."""

    def __init__(self, reason: str, line_number: Optional[int] = None):
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            super().__init__(reason)
        else:
            super().__init__(f"line {line_number}: {reason}")


class ParseFailure(TranscriptError):
    """
    A single line violates the listing grammar.

    Attributes:
        line: Raw text of the offending line.
    """

    def __init__(self, reason: str, line_number: Optional[int] = None, line: str = ""):
        self.line = line
        super().__init__(reason, line_number)


class MalformedTranscript(TranscriptError):
    """The transcript is structurally invalid (missing header, unbalanced `cd ..`)."""
