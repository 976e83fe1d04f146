"""
Pipeline entrypoint for generating one NEN2767 report.

Callers hand in a session factory they own (opened at startup, disposed at
shutdown); the pipeline opens one session for the fetch and keeps nothing
between calls. Every call renders both artifacts from scratch.
"""

from __future__ import annotations

from typing import Callable

from sqlalchemy.orm import Session

from .data_sources import load_submission
from .layout import compute_layout
from .logging_utils import get_logger
from .models import ReportConfig, ReportFiles
from .renderers import export_table, render_document
from .writer import write_artifacts

logger = get_logger(__name__)


def generate_report(
    submission_id: str,
    session_factory: Callable[[], Session],
    config: ReportConfig | None = None,
) -> ReportFiles:
    """
    Render the PDF and CSV for `submission_id` and write both to the output dir.

    Raises SubmissionNotFound, InvalidSeverityScore (strict mode only) or
    PersistenceFailure; a bad photo only drops the image from the PDF.
    """
    cfg = config or ReportConfig.default()
    logger.info("Generating report for submission %s", submission_id)

    with session_factory() as session:
        submission = load_submission(session, submission_id, strict_scores=cfg.strict_scores)

    geometry = compute_layout(cfg)
    document_bytes = render_document(submission, geometry, cfg)
    table_bytes = export_table(submission, cfg)

    files = write_artifacts(document_bytes, table_bytes, cfg.output_dir, cfg.file_prefix)
    logger.info(
        "Report for submission %s written: %s, %s",
        submission_id,
        files.document_file_name,
        files.table_file_name,
    )
    return files


__all__ = ["generate_report"]
