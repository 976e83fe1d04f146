from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SubmissionRecord:
    """Immutable snapshot of one inspection submission, shared by every renderer."""

    id: str
    street_name: str
    apartment_number: str
    city: str
    inspection_date: datetime
    structural_defects: int
    decay_magnitude: int
    defect_intensity: int
    photo_url: str = ""
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    submission_type: Optional[str] = None

    @property
    def scores(self) -> tuple[int, int, int]:
        return (self.structural_defects, self.decay_magnitude, self.defect_intensity)

    @classmethod
    def from_row(cls, row: Any) -> "SubmissionRecord":
        """Copy the mapped columns off an ORM row so nothing stays bound to the session."""
        return cls(
            id=str(row.id),
            street_name=row.street_name or "",
            apartment_number=row.apartment_number or "",
            city=row.city or "",
            inspection_date=row.inspection_date,
            structural_defects=row.structural_defects,
            decay_magnitude=row.decay_magnitude,
            defect_intensity=row.defect_intensity,
            photo_url=row.photo_url or "",
            description=row.description,
            latitude=row.latitude,
            longitude=row.longitude,
            submission_type=row.submission_type,
        )


@dataclass(frozen=True)
class ReportFiles:
    """Names of the two artifacts produced by one report run."""

    document_file_name: str
    table_file_name: str


@dataclass
class ReportConfig:
    """Layout constants and output options for the NEN2767 report."""

    output_dir: Path
    file_prefix: str = "NEN2767-Report"
    title: str = "NEN2767 Inspection Report"
    date_format: str = "{month}/{day}/{year}"
    page_margin: float = 50.0
    text_ratio: float = 0.6
    gutter: float = 20.0
    content_top: float = 120.0
    image_max_height: float = 300.0
    strict_scores: bool = False

    @classmethod
    def default(cls, root: Path | None = None) -> "ReportConfig":
        root = Path(root) if root else Path(__file__).resolve().parent.parent
        return cls(output_dir=root / "public" / "reports")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], root: Path | None = None) -> "ReportConfig":
        base = cls.default(root)
        layout = data.get("layout", {}) or {}
        output = data.get("output", {}) or {}
        output_dir = output.get("dir")
        return cls(
            output_dir=Path(output_dir) if output_dir else base.output_dir,
            file_prefix=output.get("file_prefix", base.file_prefix),
            title=data.get("title", base.title),
            date_format=data.get("date_format", base.date_format),
            page_margin=float(layout.get("page_margin", base.page_margin)),
            text_ratio=float(layout.get("text_ratio", base.text_ratio)),
            gutter=float(layout.get("gutter", base.gutter)),
            content_top=float(layout.get("content_top", base.content_top)),
            image_max_height=float(layout.get("image_max_height", base.image_max_height)),
            strict_scores=bool(data.get("strict_scores", base.strict_scores)),
        )
