from __future__ import annotations

import uuid
from pathlib import Path

from .errors import PersistenceFailure
from .logging_utils import get_logger
from .models import ReportFiles

logger = get_logger(__name__)

DOCUMENT_EXT = "pdf"
TABLE_EXT = "csv"


def unique_base_name(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4()}"


def write_artifacts(
    document_bytes: bytes,
    table_bytes: bytes,
    output_dir: Path,
    prefix: str = "NEN2767-Report",
) -> ReportFiles:
    """
    Write the document and table under one fresh `<prefix>-<uuid>` base name.

    Any OSError aborts the whole write with PersistenceFailure. A document that
    was written before the table failed stays on disk and is listed on the error.
    """
    output_dir = Path(output_dir)
    base = unique_base_name(prefix)
    targets = [
        (output_dir / f"{base}.{DOCUMENT_EXT}", document_bytes),
        (output_dir / f"{base}.{TABLE_EXT}", table_bytes),
    ]

    written: list[Path] = []
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for path, payload in targets:
            path.write_bytes(payload)
            written.append(path)
    except OSError as exc:
        logger.error("Failed to write report artifacts to %s: %s", output_dir, exc)
        raise PersistenceFailure(f"Could not write report artifacts to {output_dir}: {exc}", written) from exc

    return ReportFiles(document_file_name=targets[0][0].name, table_file_name=targets[1][0].name)


__all__ = ["write_artifacts", "unique_base_name"]
