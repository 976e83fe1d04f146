#!/usr/bin/env python3
"""
CLI wrapper for generating a NEN2767 report.

Usage:
    python -m nen_report.cli SUBMISSION_ID
    python -m nen_report.cli SUBMISSION_ID --output-dir public/reports
    python -m nen_report.cli SUBMISSION_ID --db-url sqlite:///data/submissions.db --strict-scores
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .data_sources import load_report_config
from .database import create_db_engine, create_session_factory
from .errors import ReportGenerationError
from .logging_utils import get_logger, setup_logging
from .pipelines import generate_report
from .settings import get_settings

logger = get_logger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate the NEN2767 PDF and CSV for one submission")
    p.add_argument("submission_id")
    p.add_argument("--db-url", dest="db_url")
    p.add_argument("--output-dir", dest="output_dir", type=Path)
    p.add_argument("--config", dest="config_path", type=Path)
    p.add_argument("--strict-scores", action="store_true", default=None)
    p.add_argument("--log-level", default=None)
    p.add_argument("--log-file")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, log_file=args.log_file)

    cfg = load_report_config(
        args.config_path or settings.report_config_path,
        output_dir=args.output_dir or settings.reports_dir,
        strict_scores=args.strict_scores or settings.strict_scores or None,
    )

    engine = create_db_engine(args.db_url or settings.db_url)
    try:
        files = generate_report(args.submission_id, create_session_factory(engine), cfg)
    except ReportGenerationError as exc:
        logger.error("Report generation failed (%s): %s", exc.kind, exc)
        return 1
    finally:
        engine.dispose()

    print(files.document_file_name)
    print(files.table_file_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
