"""
Single-row CSV export of a submission.

Columns are fixed so every export has the same shape; missing coordinates
print as N/A rather than dropping the columns.
"""

from __future__ import annotations

import pandas as pd

from .. import formatting as fmt
from ..models import ReportConfig, SubmissionRecord

# Column order of the exported table
COLUMNS = [
    "Address",
    "City",
    "Inspection Date",
    "Structural Defects",
    "Decay Magnitude",
    "Defect Intensity",
    "Maintenance Needed",
    "Description",
    "Latitude",
    "Longitude",
]


def build_table_row(submission: SubmissionRecord, config: ReportConfig | None = None) -> dict[str, str]:
    cfg = config or ReportConfig.default()
    # the document drops the whole location block here, so the table drops both values
    located = fmt.has_location(submission.latitude, submission.longitude)
    return {
        "Address": fmt.format_address(submission.street_name, submission.apartment_number),
        "City": submission.city,
        "Inspection Date": fmt.format_date(submission.inspection_date, cfg.date_format),
        "Structural Defects": fmt.format_score(submission.structural_defects),
        "Decay Magnitude": fmt.format_score(submission.decay_magnitude),
        "Defect Intensity": fmt.format_score(submission.defect_intensity),
        "Maintenance Needed": fmt.format_yes_no(fmt.maintenance_needed(submission.scores)),
        "Description": fmt.format_description(submission.description),
        "Latitude": fmt.format_coordinate(submission.latitude) if located else fmt.NOT_AVAILABLE,
        "Longitude": fmt.format_coordinate(submission.longitude) if located else fmt.NOT_AVAILABLE,
    }


def export_table(submission: SubmissionRecord, config: ReportConfig | None = None) -> bytes:
    """Return UTF-8 CSV bytes with one header row and one data row."""
    df = pd.DataFrame([build_table_row(submission, config)], columns=COLUMNS)
    return df.to_csv(index=False, lineterminator="\n").encode("utf-8")


__all__ = ["COLUMNS", "build_table_row", "export_table"]
