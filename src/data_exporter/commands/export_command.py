"""Export command - runs one export call through the pipeline."""

import logging
import time
from pathlib import Path, PurePath
from typing import Any

import structlog

from data_exporter.config import ExportConfig
from data_exporter.errors import FormatDeterminationError
from data_exporter.export.registry import ConverterRegistry, default_registry
from data_exporter.models.exchange import Exchange, PipelineState
from data_exporter.services import filesystem

# Routed through stdlib logging so nothing is printed until logging is configured
logger = structlog.wrap_logger(logging.getLogger(__name__))


def parse_filetype(filepath: str) -> str:
    """
    Extract the filetype ending from the final segment of filepath.

    Raises:
        FormatDeterminationError: If the final segment has no non-empty ending
    """
    name = PurePath(filepath).name
    _, dot, extension = name.rpartition(".")
    if not dot or not extension:
        raise FormatDeterminationError(filepath)
    return extension


class ExportCommand:
    """
    Export command - ensures the directory, resolves the format, converts
    and writes, in that order.

    Each stage takes the exchange and returns it. The first exception marks
    the exchange FAILED and is re-raised unchanged; nothing is retried or
    cleaned up.

    Example:
        command = ExportCommand(ExportConfig(cwd="/srv/exports"))
        path = await command.execute("reports/users.csv", {"users": rows})
    """

    def __init__(
        self,
        config: ExportConfig,
        registry: ConverterRegistry = default_registry,
    ) -> None:
        """Initialize command with configuration and converter registry."""
        self.config = config
        self.registry = registry
        self.exchange: Exchange | None = None

    async def execute(self, filepath: str, data: Any) -> str:
        """
        Run the pipeline for one export.

        Args:
            filepath: Destination path, relative to config.cwd or absolute
            data: Value to export

        Returns:
            str: Path of the written file

        Raises:
            FormatDeterminationError: If filepath has no filetype ending
            UnsupportedFormatError: If the ending is not a registered format
            TabularShapeError: If CSV data is not a list of uniform records
            OSError: If the directory or file cannot be written
        """
        start_time = time.perf_counter()
        exchange = Exchange(
            filepath=filepath,
            base_directory=self.config.cwd,
            data=data,
        )
        self.exchange = exchange

        logger.info(
            "export_started",
            filepath=filepath,
            base_directory=exchange.base_directory,
        )

        try:
            exchange = await self.ensure_directory(exchange)
            exchange = self.check_filetype(exchange)
            exchange = await self.convert_data(exchange)
            exchange = await self.write_file(exchange)
        except Exception as e:
            logger.error(
                "export_failed",
                filepath=filepath,
                last_state=exchange.state.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            exchange.state = PipelineState.FAILED
            exchange.error = str(e)
            raise

        exchange.state = PipelineState.DONE
        logger.info(
            "export_completed",
            path=exchange.resolved_path,
            format=exchange.format.value,
            export_time_ms=int((time.perf_counter() - start_time) * 1000),
        )
        return exchange.resolved_path

    async def ensure_directory(self, exchange: Exchange) -> Exchange:
        """Resolve the output path and create its directory if missing."""
        resolved = Path(exchange.base_directory) / exchange.filepath
        exchange.resolved_path = str(resolved)

        directory = resolved.parent
        if not filesystem.directory_exists(directory):
            await filesystem.make_directories(directory)
            logger.debug("directory_created", directory=str(directory))

        exchange.state = PipelineState.DIRECTORY_ENSURED
        return exchange

    def check_filetype(self, exchange: Exchange) -> Exchange:
        """Resolve the export format from the filetype ending."""
        filetype = parse_filetype(exchange.filepath)
        exchange.format = self.registry.resolve_format(filetype)

        logger.debug("format_resolved", format=exchange.format.value)
        exchange.state = PipelineState.FORMAT_VALIDATED
        return exchange

    async def convert_data(self, exchange: Exchange) -> Exchange:
        """Replace exchange.data with its converted text."""
        converter = self.registry.get_converter(exchange.format)
        exchange.data = await converter.convert(exchange.data, self.config.options)

        logger.debug(
            "data_converted",
            format=exchange.format.value,
            length=len(exchange.data),
        )
        exchange.state = PipelineState.DATA_CONVERTED
        return exchange

    async def write_file(self, exchange: Exchange) -> Exchange:
        """Write the converted text to the resolved path."""
        await filesystem.write_text(exchange.resolved_path, exchange.data)

        logger.debug(
            "file_written",
            path=exchange.resolved_path,
            file_size_bytes=len(exchange.data.encode("utf-8")),
        )
        exchange.state = PipelineState.WRITTEN
        return exchange

    def get_state(self) -> PipelineState:
        """Get the state of the current export."""
        if self.exchange is None:
            return PipelineState.START
        return self.exchange.state
