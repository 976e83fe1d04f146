"""
Section-building helpers for the NEN2767 report PDF.

Each builder appends the flowables for one block of the left text column to
`story`. A builder never raises on missing optional data; it renders a
placeholder or skips its block instead.
"""

from xml.sax.saxutils import escape

from reportlab.platypus import Paragraph, Spacer

from .. import formatting as fmt
from ..models import ReportConfig, SubmissionRecord


def _heading(story, styles, text):
    story.append(Paragraph(escape(text), styles["SectionHeading"]))


def _line(story, styles, label, value):
    story.append(Paragraph(f"{escape(label)}: {escape(str(value))}", styles["ReportBody"]))


def _gap(story, styles, lines=1):
    story.append(Spacer(1, styles["ReportBody"].leading * lines))


def build_property_section(submission: SubmissionRecord, story, styles, config: ReportConfig):
    """Address, city and inspection date."""
    _heading(story, styles, "Property Information")
    _line(story, styles, "Address", fmt.format_address(submission.street_name, submission.apartment_number))
    _line(story, styles, "City", submission.city)
    _line(story, styles, "Inspection Date", fmt.format_date(submission.inspection_date, config.date_format))
    _gap(story, styles)


def build_condition_section(submission: SubmissionRecord, story, styles):
    _heading(story, styles, "Condition Assessment")
    _line(story, styles, "Structural Defects", fmt.format_score(submission.structural_defects))
    _line(story, styles, "Decay Magnitude", fmt.format_score(submission.decay_magnitude))
    _line(story, styles, "Defect Intensity", fmt.format_score(submission.defect_intensity))
    _gap(story, styles, 2)


def build_maintenance_section(submission: SubmissionRecord, story, styles):
    """Derived maintenance flag plus the cost line, which is always a placeholder."""
    _heading(story, styles, "Maintenance Assessment")
    needed = fmt.maintenance_needed(submission.scores)
    _line(story, styles, "Maintenance needed", fmt.format_yes_no(needed))
    _line(story, styles, "Costs", fmt.COST_PLACEHOLDER)
    _gap(story, styles)


def build_description_section(submission: SubmissionRecord, story, styles):
    _heading(story, styles, "Description")
    text = escape(fmt.format_description(submission.description)).replace("\n", "<br/>")
    story.append(Paragraph(text, styles["ReportBody"]))
    _gap(story, styles)


def build_location_section(submission: SubmissionRecord, story, styles):
    # Only rendered when both coordinates exist; the table uses N/A instead.
    if not fmt.has_location(submission.latitude, submission.longitude):
        return
    _heading(story, styles, "Location Data")
    _line(story, styles, "Latitude", fmt.format_coordinate(submission.latitude))
    _line(story, styles, "Longitude", fmt.format_coordinate(submission.longitude))


def build_story(submission: SubmissionRecord, styles, config: ReportConfig | None = None):
    """
    Assemble the text-column flowables in report order.
    """
    cfg = config or ReportConfig.default()
    story = []
    build_property_section(submission, story, styles, cfg)
    build_condition_section(submission, story, styles)
    build_maintenance_section(submission, story, styles)
    build_description_section(submission, story, styles)
    build_location_section(submission, story, styles)
    return story


__all__ = [
    "build_story",
    "build_property_section",
    "build_condition_section",
    "build_maintenance_section",
    "build_description_section",
    "build_location_section",
]
