from .pdf_renderer import decode_photo, render_document
from .table_exporter import COLUMNS, build_table_row, export_table

__all__ = ["render_document", "decode_photo", "COLUMNS", "build_table_row", "export_table"]
