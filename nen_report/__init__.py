"""NEN2767 inspection report generation (PDF document + CSV table)."""

from .errors import (
    InvalidSeverityScore,
    PersistenceFailure,
    ReportGenerationError,
    SubmissionNotFound,
)
from .models import ReportConfig, ReportFiles, SubmissionRecord
from .pipelines import generate_report

__all__ = [
    "generate_report",
    "ReportConfig",
    "ReportFiles",
    "SubmissionRecord",
    "ReportGenerationError",
    "SubmissionNotFound",
    "InvalidSeverityScore",
    "PersistenceFailure",
]
