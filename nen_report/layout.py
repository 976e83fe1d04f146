"""
Layout helpers for the NEN2767 report PDF.

Page geometry is computed once per render and shared by the page callbacks
(title, photo box) and the text frames, so the text column and the photo
column stay aligned. Style creation also lives here so the section builders
never hardcode fonts.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet

from .models import ReportConfig


@dataclass(frozen=True)
class PageGeometry:
    page_width: float
    page_height: float
    margin: float
    content_width: float
    text_column_width: float
    image_column_width: float
    left_margin: float
    right_margin: float  # x where the image column starts
    content_top: float
    image_max_height: float


def compute_layout(config: ReportConfig | None = None, pagesize=A4) -> PageGeometry:
    cfg = config or ReportConfig.default()
    page_width, page_height = pagesize
    margin = cfg.page_margin
    content_width = page_width - 2 * margin
    text_column_width = content_width * cfg.text_ratio
    image_column_width = content_width * (1 - cfg.text_ratio)
    left_margin = margin
    return PageGeometry(
        page_width=page_width,
        page_height=page_height,
        margin=margin,
        content_width=content_width,
        text_column_width=text_column_width,
        image_column_width=image_column_width,
        left_margin=left_margin,
        right_margin=left_margin + text_column_width + cfg.gutter,
        content_top=cfg.content_top,
        image_max_height=cfg.image_max_height,
    )


def fit_image(width: float, height: float, box_width: float, box_height: float) -> tuple[float, float]:
    """Scale (width, height) to fit inside the box, keeping the aspect ratio."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    scale = min(box_width / width, box_height / height)
    return width * scale, height * scale


def build_styles():
    """
    Return the stylesheet used by the report: the reportlab sample sheet plus
    the report's title, section heading and body styles.
    """
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        "ReportTitle",
        parent=styles["Title"],
        fontName="Helvetica-Bold",
        fontSize=20,
        leading=24,
        alignment=TA_CENTER,
    ))
    styles.add(ParagraphStyle(
        "SectionHeading",
        parent=styles["BodyText"],
        fontName="Helvetica-Bold",
        fontSize=14,
        leading=18,
    ))
    styles.add(ParagraphStyle(
        "ReportBody",
        parent=styles["BodyText"],
        fontName="Helvetica",
        fontSize=12,
        leading=15,
    ))
    return styles


__all__ = ["PageGeometry", "compute_layout", "fit_image", "build_styles"]
