"""Write structured data to JSON, CSV or XML files, picked by file extension."""

from data_exporter.commands.export_command import ExportCommand
from data_exporter.config import ExportConfig, ExporterSettings, get_settings
from data_exporter.errors import (
    ErrorCode,
    ExporterError,
    FormatDeterminationError,
    InvalidElementNameError,
    TabularShapeError,
    UnsupportedFormatError,
)
from data_exporter.export.base import ExportFormat, ExportOptions
from data_exporter.export.registry import ConverterRegistry, default_registry
from data_exporter.observability import configure_logging
from data_exporter.services.export_service import ExportService, export

__version__ = "0.1.0"

__all__ = [
    "export",
    "ExportService",
    "ExportCommand",
    "ExportConfig",
    "ExportOptions",
    "ExportFormat",
    "ConverterRegistry",
    "default_registry",
    "ExporterSettings",
    "get_settings",
    "configure_logging",
    "ErrorCode",
    "ExporterError",
    "FormatDeterminationError",
    "UnsupportedFormatError",
    "TabularShapeError",
    "InvalidElementNameError",
]
