"""JSON converter implementation."""

import json
from typing import Any

from data_exporter.export.base import BaseConverter, ExportOptions


class JSONConverter(BaseConverter):
    """JSON converter."""

    async def convert(self, data: Any, options: ExportOptions) -> str:
        """Serialize data to JSON text.

        Cyclic references and non-finite floats (NaN, Infinity) raise
        ValueError, unserializable values raise TypeError; neither is
        caught here.
        """
        if options.pretty_print:
            return json.dumps(
                data, indent=options.indent, ensure_ascii=False, allow_nan=False
            )
        return json.dumps(
            data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )

    def get_file_extension(self) -> str:
        """Return 'json'."""
        return "json"

    def get_mime_type(self) -> str:
        """Return JSON MIME type."""
        return "application/json"
