"""
Response export.

Writes response bodies to JSON files verbatim, or to CSV files after
flattening each object into dot-joined columns.
"""

from httpinspector.export.formatter import (
    ExportFormat,
    export_response,
    flatten_record,
    to_csv,
    to_json,
)

__all__ = [
    "ExportFormat",
    "export_response",
    "flatten_record",
    "to_csv",
    "to_json",
]
