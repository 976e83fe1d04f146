import csv
from io import BytesIO, StringIO

import pdfplumber
import pytest

from nen_report.data_sources import load_report_config, load_submission
from nen_report.errors import InvalidSeverityScore, PersistenceFailure, SubmissionNotFound
from nen_report.models import SubmissionRecord
from nen_report.pipelines import generate_report


def _csv_row(path):
    rows = list(csv.reader(StringIO(path.read_text(encoding="utf-8"))))
    assert len(rows) == 2
    return dict(zip(rows[0], rows[1]))


def _pdf_text(path):
    with pdfplumber.open(BytesIO(path.read_bytes())) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)


def test_load_submission_returns_immutable_record(session_factory, add_submission):
    submission_id = add_submission()
    with session_factory() as session:
        record = load_submission(session, submission_id)
    assert isinstance(record, SubmissionRecord)
    assert record.id == submission_id
    assert record.scores == (4, 2, 5)
    assert record.submission_type == "tenant"
    with pytest.raises(AttributeError):
        record.city = "Elsewhere"


def test_load_submission_missing(session_factory):
    with session_factory() as session:
        with pytest.raises(SubmissionNotFound) as excinfo:
            load_submission(session, "does-not-exist")
    assert excinfo.value.kind == "not_found"


def test_generate_report_writes_both_files(session_factory, add_submission, report_config):
    submission_id = add_submission()
    files = generate_report(submission_id, session_factory, report_config)

    pdf_path = report_config.output_dir / files.document_file_name
    csv_path = report_config.output_dir / files.table_file_name
    assert pdf_path.exists() and csv_path.exists()

    row = _csv_row(csv_path)
    assert row["Address"] == "Main St 4B"
    assert row["Maintenance Needed"] == "Yes"
    assert row["Latitude"] == "52.1"

    text = _pdf_text(pdf_path)
    assert "Maintenance needed: Yes" in text
    assert "Inspection Date: " + row["Inspection Date"] in text
    assert "Location Data" in text


def test_document_and_table_agree_on_shared_fields(session_factory, add_submission, report_config):
    submission_id = add_submission(
        structural_defects=1, decay_magnitude=2, defect_intensity=1, longitude=None
    )
    files = generate_report(submission_id, session_factory, report_config)
    row = _csv_row(report_config.output_dir / files.table_file_name)
    text = _pdf_text(report_config.output_dir / files.document_file_name)

    assert row["Maintenance Needed"] == "No"
    assert "Maintenance needed: No" in text
    assert "Description" in text and row["Description"] in text
    assert f"Decay Magnitude: {row['Decay Magnitude']}" in text
    assert (row["Latitude"], row["Longitude"]) == ("N/A", "N/A")
    assert "Location Data" not in text


def test_repeat_generation_gives_new_names_same_content(session_factory, add_submission, report_config):
    submission_id = add_submission(description="Loose roof tile")
    first = generate_report(submission_id, session_factory, report_config)
    second = generate_report(submission_id, session_factory, report_config)

    assert first.document_file_name != second.document_file_name
    assert first.table_file_name != second.table_file_name

    out = report_config.output_dir
    assert (out / first.table_file_name).read_bytes() == (out / second.table_file_name).read_bytes()
    assert _pdf_text(out / first.document_file_name) == _pdf_text(out / second.document_file_name)


def test_generate_report_unknown_id_writes_nothing(session_factory, report_config):
    with pytest.raises(SubmissionNotFound):
        generate_report("missing", session_factory, report_config)
    assert not report_config.output_dir.exists()


def test_bad_photo_still_generates(session_factory, add_submission, report_config):
    submission_id = add_submission(photo_url="garbage")
    files = generate_report(submission_id, session_factory, report_config)
    with pdfplumber.open(report_config.output_dir / files.document_file_name) as pdf:
        assert pdf.pages[0].images == []


def test_out_of_range_scores_pass_through_by_default(session_factory, add_submission, report_config):
    submission_id = add_submission(structural_defects=8)
    files = generate_report(submission_id, session_factory, report_config)
    row = _csv_row(report_config.output_dir / files.table_file_name)
    assert row["Structural Defects"] == "8/6"


def test_strict_scores_rejects_out_of_range(session_factory, add_submission, tmp_path):
    submission_id = add_submission(decay_magnitude=0)
    cfg = load_report_config(output_dir=tmp_path / "reports", strict_scores=True)
    with pytest.raises(InvalidSeverityScore) as excinfo:
        generate_report(submission_id, session_factory, cfg)
    assert excinfo.value.field == "decay_magnitude"
    assert not (tmp_path / "reports").exists()


def test_unwritable_output_dir_surfaces_persistence_failure(session_factory, add_submission, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    cfg = load_report_config(output_dir=blocker / "reports")
    with pytest.raises(PersistenceFailure):
        generate_report(add_submission(), session_factory, cfg)
