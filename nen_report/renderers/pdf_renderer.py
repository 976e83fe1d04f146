"""
PDF renderer for the NEN2767 inspection report.

The first page carries the centred title and the photo box, both drawn
straight onto the canvas at fixed positions. The sections flow through a
left-column frame that starts level with the top of the photo, so the text
never reflows around the image. Later pages reuse the same column at full
height.
"""

from __future__ import annotations

import base64
import binascii
from functools import partial
from io import BytesIO

from reportlab.lib.utils import ImageReader
from reportlab.platypus import BaseDocTemplate, Frame, NextPageTemplate, PageTemplate

from ..errors import ImageDecodeFailure
from ..formatting import split_data_uri
from ..layout import PageGeometry, build_styles, compute_layout, fit_image
from ..logging_utils import get_logger
from ..models import ReportConfig, SubmissionRecord
from .sections import build_story

logger = get_logger(__name__)

TITLE_FONT = ("Helvetica-Bold", 20)


def decode_photo(photo_url: str | None) -> ImageReader:
    """
    Decode the base64 payload of a `data:<mime>;base64,<payload>` URI into an
    ImageReader. Raises ImageDecodeFailure for anything that isn't an image.
    """
    payload = split_data_uri(photo_url)
    if payload is None:
        raise ImageDecodeFailure("photo URL has no data payload")
    try:
        data = base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageDecodeFailure(f"invalid base64 payload: {exc}") from exc
    if not data:
        raise ImageDecodeFailure("photo payload is empty")
    try:
        reader = ImageReader(BytesIO(data))
        reader.getSize()
    except Exception as exc:
        # reportlab/Pillow raise a mix of OSError, ValueError and their own types here
        raise ImageDecodeFailure(f"unreadable image data: {exc}") from exc
    return reader


def _draw_first_page(canvas, doc, geometry: PageGeometry, title: str, photo: ImageReader | None):
    canvas.saveState()
    canvas.setFont(*TITLE_FONT)
    canvas.drawCentredString(
        geometry.page_width / 2,
        geometry.page_height - geometry.margin - TITLE_FONT[1],
        title,
    )
    if photo is not None:
        img_w, img_h = photo.getSize()
        draw_w, draw_h = fit_image(img_w, img_h, geometry.image_column_width, geometry.image_max_height)
        canvas.drawImage(
            photo,
            geometry.right_margin,
            geometry.page_height - geometry.content_top - draw_h,
            width=draw_w,
            height=draw_h,
            mask="auto",
        )
    canvas.restoreState()


def _page_templates(geometry: PageGeometry, title: str, photo: ImageReader | None):
    no_padding = dict(leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0)
    first_frame = Frame(
        geometry.left_margin,
        geometry.margin,
        geometry.text_column_width,
        geometry.page_height - geometry.content_top - geometry.margin,
        id="first-text",
        **no_padding,
    )
    later_frame = Frame(
        geometry.left_margin,
        geometry.margin,
        geometry.text_column_width,
        geometry.page_height - 2 * geometry.margin,
        id="text",
        **no_padding,
    )
    return [
        PageTemplate(
            id="first",
            frames=[first_frame],
            onPage=partial(_draw_first_page, geometry=geometry, title=title, photo=photo),
        ),
        PageTemplate(id="later", frames=[later_frame]),
    ]


def render_document(
    submission: SubmissionRecord,
    geometry: PageGeometry | None = None,
    config: ReportConfig | None = None,
) -> bytes:
    """
    Render the report for one submission and return the finished PDF bytes.
    """
    cfg = config or ReportConfig.default()
    geometry = geometry or compute_layout(cfg)

    try:
        photo = decode_photo(submission.photo_url)
    except ImageDecodeFailure as exc:
        logger.warning("Skipping photo for submission %s: %s", submission.id, exc)
        photo = None

    buffer = BytesIO()
    doc = BaseDocTemplate(
        buffer,
        pagesize=(geometry.page_width, geometry.page_height),
        leftMargin=geometry.margin,
        rightMargin=geometry.margin,
        topMargin=geometry.margin,
        bottomMargin=geometry.margin,
        title=cfg.title,
        subject=f"Submission {submission.id}",
    )
    doc.addPageTemplates(_page_templates(geometry, cfg.title, photo))

    story = [NextPageTemplate("later")]
    story.extend(build_story(submission, build_styles(), cfg))
    doc.build(story)
    return buffer.getvalue()


__all__ = ["render_document", "decode_photo"]
