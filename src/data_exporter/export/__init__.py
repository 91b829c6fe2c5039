"""Format converters for JSON, CSV and XML export."""

from data_exporter.export.base import (
    BaseConverter,
    ExportFormat,
    ExportOptions,
)
from data_exporter.export.registry import (
    ConverterRegistry,
    build_default_registry,
    default_registry,
)

__all__ = [
    "BaseConverter",
    "ExportFormat",
    "ExportOptions",
    "ConverterRegistry",
    "build_default_registry",
    "default_registry",
]
