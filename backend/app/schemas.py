from __future__ import annotations

from pydantic import BaseModel

from nen_report.models import ReportFiles


class ReportFilesResponse(BaseModel):
    submission_id: str
    document_file_name: str
    table_file_name: str

    @classmethod
    def from_files(cls, submission_id: str, files: ReportFiles) -> "ReportFilesResponse":
        return cls(
            submission_id=submission_id,
            document_file_name=files.document_file_name,
            table_file_name=files.table_file_name,
        )


class ErrorDetail(BaseModel):
    kind: str
    message: str
