"""
Error types raised by the report pipeline.

Fatal failures share the ReportGenerationError base so callers can catch one
type and branch on `kind`. ImageDecodeFailure never leaves the renderer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class ReportGenerationError(Exception):
    kind = "error"


class SubmissionNotFound(ReportGenerationError):
    kind = "not_found"

    def __init__(self, submission_id: str):
        super().__init__(f"Submission not found: {submission_id}")
        self.submission_id = submission_id


class InvalidSeverityScore(ReportGenerationError):
    kind = "invalid_score"

    def __init__(self, field: str, value: object):
        super().__init__(f"{field} must be between 1 and 6, got {value!r}")
        self.field = field
        self.value = value


class PersistenceFailure(ReportGenerationError):
    kind = "persistence"

    def __init__(self, message: str, written: Iterable[Path] = ()):
        self.written = [Path(p) for p in written]
        if self.written:
            orphans = ", ".join(p.name for p in self.written)
            message = f"{message} (already written: {orphans})"
        super().__init__(message)


class ImageDecodeFailure(Exception):
    """The photo data URI could not be turned into an embeddable image."""
