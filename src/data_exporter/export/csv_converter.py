"""CSV converter implementation."""

import csv
import io
import json
import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

import structlog

from data_exporter.errors import TabularShapeError
from data_exporter.export.base import BaseConverter, ExportOptions

# Routed through stdlib logging so nothing is printed until logging is configured
logger = structlog.wrap_logger(logging.getLogger(__name__))


class CSVConverter(BaseConverter):
    """CSV converter - RFC 4180 quoting, one row per record."""

    async def convert(self, data: Any, options: ExportOptions) -> str:
        """Convert a sequence of uniform records to CSV text."""
        records = self._select_records(data, options)
        if not records:
            return ""

        if options.flatten_nested:
            rows = [_flatten(record) for record in records]
        else:
            rows = [{str(k): v for k, v in record.items()} for record in records]

        # Header order follows the first record
        column_names = list(rows[0].keys())
        expected = set(column_names)
        for index, row in enumerate(rows[1:], start=1):
            if set(row) != expected:
                missing = sorted(expected - set(row))
                extra = sorted(set(row) - expected)
                raise TabularShapeError(
                    f"Not all records have the same fields: record {index} "
                    f"is missing {missing} and has unexpected {extra}"
                )

        output = io.StringIO()
        writer = csv.DictWriter(
            output,
            fieldnames=column_names,
            delimiter=options.delimiter,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator=options.line_terminator,
        )

        if options.include_headers:
            writer.writeheader()

        for row in rows:
            writer.writerow({k: _format_value(v) for k, v in row.items()})

        return output.getvalue()

    def _select_records(self, data: Any, options: ExportOptions) -> list[Mapping]:
        """Pick the list of records to lay out as rows."""
        if options.csv_field is not None:
            if not isinstance(data, Mapping) or options.csv_field not in data:
                raise TabularShapeError(
                    f'Field "{options.csv_field}" not found in export data'
                )
            payload = data[options.csv_field]
        elif isinstance(data, (list, tuple)):
            payload = data
        elif isinstance(data, Mapping):
            if not data:
                raise TabularShapeError("Cannot export an empty object as CSV")
            key = next(iter(data))
            logger.debug("csv_payload_selected", key=key)
            payload = data[key]
        else:
            raise TabularShapeError(
                f"Cannot export a value of type {type(data).__name__} as CSV"
            )

        if not isinstance(payload, (list, tuple)):
            raise TabularShapeError(
                f"CSV payload must be a list of records, got {type(payload).__name__}"
            )

        for index, record in enumerate(payload):
            if not isinstance(record, Mapping):
                raise TabularShapeError(
                    f"CSV record {index} must be an object, got {type(record).__name__}"
                )

        return list(payload)

    def get_file_extension(self) -> str:
        """Return 'csv'."""
        return "csv"

    def get_mime_type(self) -> str:
        """Return CSV MIME type."""
        return "text/csv"


def _flatten(record: Mapping, prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings into dotted column names.

    Raises:
        TabularShapeError: If two fields flatten to the same column name
    """
    flat: dict[str, Any] = {}
    for key, value in record.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping) and value:
            nested = _flatten(value, f"{name}.")
        else:
            nested = {name: value}
        for column, cell in nested.items():
            if column in flat:
                raise TabularShapeError(
                    f'Column "{column}" occurs more than once after flattening'
                )
            flat[column] = cell
    return flat


def _format_value(value: Any) -> Any:
    """Render a cell value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return value
