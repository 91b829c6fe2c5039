"""Export format registry - maps filetype endings to converters."""

from collections.abc import Mapping
from types import MappingProxyType

from data_exporter.errors import UnsupportedFormatError
from data_exporter.export.base import BaseConverter, ExportFormat
from data_exporter.export.csv_converter import CSVConverter
from data_exporter.export.json_converter import JSONConverter
from data_exporter.export.xml_converter import XMLConverter


class ConverterRegistry:
    """Export format registry, read-only once built."""

    def __init__(self, converters: Mapping[ExportFormat, BaseConverter]) -> None:
        """
        Build the registry.

        Args:
            converters: Converter instance per export format, in listing order
        """
        self._converters: Mapping[ExportFormat, BaseConverter] = MappingProxyType(
            dict(converters)
        )

    def resolve_format(self, filetype: str | ExportFormat) -> ExportFormat:
        """
        Resolve a filetype ending to a registered format.

        Matching is case-sensitive: "CSV" is not "csv".

        Raises:
            UnsupportedFormatError: If no converter is registered for filetype
        """
        try:
            export_format = ExportFormat(filetype)
        except ValueError:
            export_format = None

        if export_format is None or export_format not in self._converters:
            raise UnsupportedFormatError(
                getattr(filetype, "value", filetype), self.list_formats()
            )
        return export_format

    def get_converter(self, filetype: str | ExportFormat) -> BaseConverter:
        """
        Get converter instance.

        Args:
            filetype: Export format or filetype ending

        Returns:
            BaseConverter: Converter instance

        Raises:
            UnsupportedFormatError: If format is not supported
        """
        return self._converters[self.resolve_format(filetype)]

    def list_formats(self) -> list[str]:
        """List all supported format identifiers."""
        return [fmt.value for fmt in self._converters.keys()]

    def __contains__(self, filetype: object) -> bool:
        try:
            return ExportFormat(filetype) in self._converters
        except ValueError:
            return False


def build_default_registry() -> ConverterRegistry:
    """Create the registry of built-in converters."""
    return ConverterRegistry(
        {
            ExportFormat.JSON: JSONConverter(),
            ExportFormat.CSV: CSVConverter(),
            ExportFormat.XML: XMLConverter(),
        }
    )


# Shared registry instance
default_registry = build_default_registry()
