from datetime import datetime

import pytest

from nen_report.database import Submission, create_db_engine, create_session_factory, init_db
from nen_report.models import ReportConfig, SubmissionRecord

# 1x1 RGBA PNG
PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
PNG_DATA_URI = f"data:image/png;base64,{PNG_BASE64}"

INSPECTION_DATE = datetime(2024, 1, 15, 10, 30)

SAMPLE_FIELDS = dict(
    street_name="Main St",
    apartment_number="4B",
    city="Springfield",
    inspection_date=INSPECTION_DATE,
    structural_defects=4,
    decay_magnitude=2,
    defect_intensity=5,
    description=None,
    photo_url=PNG_DATA_URI,
    latitude=52.1,
    longitude=5.1,
    submission_type="tenant",
)


def make_record(**overrides) -> SubmissionRecord:
    fields = dict(SAMPLE_FIELDS, id="sub-1")
    fields.update(overrides)
    return SubmissionRecord(**fields)


@pytest.fixture
def record():
    return make_record()


@pytest.fixture
def report_config(tmp_path):
    return ReportConfig(output_dir=tmp_path / "reports")


@pytest.fixture
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'submissions.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def add_submission(session_factory):
    """Insert a submission row (sample fields plus overrides) and return its id."""

    def _add(**overrides):
        fields = dict(SAMPLE_FIELDS)
        fields.update(overrides)
        with session_factory() as session:
            row = Submission(**fields)
            session.add(row)
            session.commit()
            return row.id

    return _add
