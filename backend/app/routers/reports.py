from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import sessionmaker

from nen_report.errors import InvalidSeverityScore, PersistenceFailure, SubmissionNotFound
from nen_report.models import ReportConfig
from nen_report.pipelines import generate_report

from .. import schemas
from ..dependencies import get_report_config, get_session_factory

router = APIRouter(prefix="/reports", tags=["reports"])


def _error(status_code: int, exc: Exception) -> HTTPException:
    detail = schemas.ErrorDetail(kind=getattr(exc, "kind", "error"), message=str(exc))
    return HTTPException(status_code=status_code, detail=detail.model_dump())


@router.post(
    "/{submission_id}",
    response_model=schemas.ReportFilesResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate the NEN2767 PDF and CSV for a submission",
)
def create_report(
    submission_id: str,
    session_factory: sessionmaker = Depends(get_session_factory),
    config: ReportConfig = Depends(get_report_config),
) -> schemas.ReportFilesResponse:
    try:
        files = generate_report(submission_id, session_factory, config)
    except SubmissionNotFound as exc:
        raise _error(status.HTTP_404_NOT_FOUND, exc) from exc
    except InvalidSeverityScore as exc:
        raise _error(status.HTTP_422_UNPROCESSABLE_ENTITY, exc) from exc
    except PersistenceFailure as exc:
        raise _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc) from exc
    return schemas.ReportFilesResponse.from_files(submission_id, files)
