"""Commands that run the export pipeline."""

from data_exporter.commands.export_command import ExportCommand, parse_filetype

__all__ = ["ExportCommand", "parse_filetype"]
