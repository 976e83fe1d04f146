from __future__ import annotations

from fastapi import Request
from sqlalchemy.orm import sessionmaker

from nen_report.models import ReportConfig


def get_session_factory(request: Request) -> sessionmaker:
    return request.app.state.session_factory


def get_report_config(request: Request) -> ReportConfig:
    return request.app.state.report_config
