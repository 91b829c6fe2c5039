"""Base classes and data structures for export conversion."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExportFormat(str, Enum):
    """Supported export formats, keyed by file extension."""

    JSON = "json"
    CSV = "csv"
    XML = "xml"


class ExportOptions(BaseModel):
    """Converter options. Defaults give the standard output of each format."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # JSON
    pretty_print: bool = False
    indent: int = Field(default=2, ge=0)  # JSON pretty print and XML indentation

    # CSV
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    include_headers: bool = True
    line_terminator: str = "\n"
    csv_field: str | None = None  # Key holding the rows; None falls back to first key
    flatten_nested: bool = True

    # XML
    root_element: str = Field(default="data", min_length=1)
    singularize_children: bool = True
    manifest: bool = True  # Emit the <?xml ...?> declaration
    underscore_attributes: bool = True


class BaseConverter(ABC):
    """Abstract base class for all format converters."""

    @abstractmethod
    async def convert(self, data: Any, options: ExportOptions) -> str:
        """
        Convert a structured value into the format's text.

        Args:
            data: Value to convert (mappings, sequences, scalars)
            options: Export options

        Returns:
            str: Converted text
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension, e.g., 'csv'."""
        pass

    @abstractmethod
    def get_mime_type(self) -> str:
        """Get MIME type, e.g., 'text/csv'."""
        pass
