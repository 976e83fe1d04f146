from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from sqlalchemy import select
from sqlalchemy.orm import Session

from .database import Submission
from .errors import InvalidSeverityScore, SubmissionNotFound
from .formatting import MAX_SCORE
from .models import ReportConfig, SubmissionRecord

DEFAULTS_CONFIG_PATH = Path(__file__).resolve().parent / "config" / "report.defaults.yml"

SCORE_FIELDS = ("structural_defects", "decay_magnitude", "defect_intensity")


def load_yaml_config(path: Path | None) -> Dict[str, Any]:
    """
    Load a single YAML config. Returns an empty dict if the file is missing.
    """
    if path is None or not Path(path).exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def merge_overrides(target: dict, override: dict):
    """
    Shallow merge of override dict into target; modifies target in place.
    Nested dicts (layout, output) are merged one level deep.
    """
    if not override:
        return
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(target.get(k), dict):
            target[k].update(v)
        else:
            target[k] = v


def load_report_config(path: Path | None = None, **overrides) -> ReportConfig:
    """
    Build a ReportConfig from the baked-in defaults, then the YAML at `path`,
    then keyword overrides whose value is not None.
    - output_dir and strict_scores are the supported keyword overrides
    """
    merged: Dict[str, Any] = {}
    merge_overrides(merged, load_yaml_config(DEFAULTS_CONFIG_PATH))
    merge_overrides(merged, load_yaml_config(path))

    if overrides.get("output_dir") is not None:
        merged.setdefault("output", {})["dir"] = str(overrides["output_dir"])
    if overrides.get("strict_scores") is not None:
        merged["strict_scores"] = bool(overrides["strict_scores"])
    return ReportConfig.from_dict(merged)


# ---------------- Submissions ----------------

def validate_scores(record: SubmissionRecord) -> None:
    for field in SCORE_FIELDS:
        value = getattr(record, field)
        if not isinstance(value, int) or not 1 <= value <= MAX_SCORE:
            raise InvalidSeverityScore(field, value)


def load_submission(session: Session, submission_id: str, *, strict_scores: bool = False) -> SubmissionRecord:
    """
    Fetch one submission and detach it as an immutable record.

    Scores outside 1..6 are passed through untouched unless strict_scores is
    set, in which case they raise InvalidSeverityScore.
    """
    row = session.execute(
        select(Submission).where(Submission.id == str(submission_id))
    ).scalar_one_or_none()
    if row is None:
        raise SubmissionNotFound(str(submission_id))

    record = SubmissionRecord.from_row(row)
    if strict_scores:
        validate_scores(record)
    return record


__all__ = [
    "DEFAULTS_CONFIG_PATH",
    "load_yaml_config",
    "merge_overrides",
    "load_report_config",
    "validate_scores",
    "load_submission",
]
