"""CSV and JSON export of an asset collection."""

from __future__ import annotations

import csv
import io
import json
import logging
from typing import Any, Dict, List

from .collection import AssetCollection
from .errors import NoDataError, UnsupportedFormatError
from .models import ExportFormat, ExportResult

logger = logging.getLogger(__name__)

# Export columns, in output order
EXPORT_FIELDS: List[str] = ["name", "size", "width", "height", "url", "type", "extension"]

MEDIA_TYPES: Dict[ExportFormat, str] = {
    ExportFormat.CSV: "text/csv",
    ExportFormat.JSON: "application/json",
}


def to_csv(rows: List[Dict[str, Any]]) -> str:
    """Render rows as CSV with a bare header, quoted fields and no trailing newline."""
    buffer = io.StringIO()
    buffer.write(",".join(EXPORT_FIELDS) + "\n")
    writer = csv.DictWriter(
        buffer,
        fieldnames=EXPORT_FIELDS,
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    writer.writerows(rows)
    return buffer.getvalue()[: -len("\n")]


def to_json(rows: List[Dict[str, Any]]) -> str:
    """Render rows as a pretty-printed JSON array."""
    return json.dumps(rows, indent=2, ensure_ascii=False)


class Exporter:
    """Projects the full record set of a collection to text."""

    def __init__(self, basename: str = "wistia_assets") -> None:
        self.basename = basename

    def export(self, collection: AssetCollection, fmt: ExportFormat | str) -> ExportResult:
        """Export every record of the collection, ignoring search and selection."""
        try:
            fmt = ExportFormat(fmt)
        except ValueError as e:
            raise UnsupportedFormatError(
                f"Unsupported export format: {fmt}",
                hint=f"Choose one of: {', '.join(f.value for f in ExportFormat)}",
            ) from e

        records = collection.records
        if not records:
            raise NoDataError(
                "No data to export",
                hint="Please extract assets first",
            )

        rows = [record.to_export_dict() for record in records]
        content = to_csv(rows) if fmt is ExportFormat.CSV else to_json(rows)

        logger.info(f"Exported {len(rows)} assets as {fmt.value.upper()}")
        return ExportResult(
            content=content,
            filename=f"{self.basename}.{fmt.value}",
            media_type=MEDIA_TYPES[fmt],
        )
