"""
Response body export to JSON or flattened CSV files.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from httpinspector.errors import ExportError

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    """Supported export file formats."""
    JSON = "json"
    CSV = "csv"

    @classmethod
    def parse(cls, value: "str | ExportFormat | None") -> "ExportFormat":
        """Resolve a format selector; None selects JSON."""
        if value is None:
            return cls.JSON
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ExportError(
                f"Unsupported file format '{value}'. Use json or csv."
            ) from None


def flatten_record(obj: dict[str, Any], parent: str = "",
                   result: dict[str, Any] | None = None) -> dict[str, Any]:
    """Flatten nested objects into dot-joined keys.

    Arrays are kept whole as compact JSON strings, e.g. {"a": [1, 2]}
    becomes {"a": "[1,2]"}.
    """
    if result is None:
        result = {}
    for key, value in obj.items():
        name = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, dict):
            flatten_record(value, name, result)
        elif isinstance(value, list):
            result[name] = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        else:
            result[name] = value
    return result


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_csv(body: Any) -> str:
    """Render a list of objects as CSV.

    The header comes from the first record. Values are written as-is, with
    no quoting of embedded commas or newlines.
    """
    if not isinstance(body, list):
        raise ExportError("CSV export requires the response data to be an array of objects.")
    if not body:
        raise ExportError("CSV export requires at least one object in the response data.")
    if not all(isinstance(row, dict) for row in body):
        raise ExportError("CSV export requires every array element to be an object.")

    records = [flatten_record(row) for row in body]
    keys = list(records[0].keys())

    lines = [",".join(keys)]
    for record in records:
        lines.append(",".join(_cell(record.get(key)) for key in keys))
    return "\n".join(lines)


def to_json(body: Any) -> str:
    """Pretty-print the body with a 2-space indent."""
    return json.dumps(body, indent=2, ensure_ascii=False)


def export_response(body: Any, output: str | Path,
                    fmt: "str | ExportFormat | None" = None) -> Path:
    """Write the response body to a file, overwriting it.

    Nothing is written when the format is unsupported or the body cannot be
    rendered in it.

    Returns:
        The resolved path that was written
    """
    export_format = ExportFormat.parse(fmt)
    file_path = Path(output).expanduser().resolve()

    if export_format is ExportFormat.CSV:
        content = to_csv(body)
    else:
        content = to_json(body)

    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Could not write {file_path}: {e}") from e

    logger.debug("Wrote %s export (%d bytes) to %s",
                 export_format.value, len(content), file_path)
    return file_path
