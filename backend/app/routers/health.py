from fastapi import APIRouter, Depends

from nen_report.models import ReportConfig

from ..dependencies import get_report_config

router = APIRouter(tags=["health"])


@router.get("/health", summary="Service health check")
def healthcheck(config: ReportConfig = Depends(get_report_config)) -> dict[str, str]:
    return {"status": "ok", "reports_dir": str(config.output_dir)}
