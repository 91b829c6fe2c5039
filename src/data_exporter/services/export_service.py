"""Export service facade."""

from typing import Any

from data_exporter.commands.export_command import ExportCommand
from data_exporter.config import ExportConfig
from data_exporter.export.registry import ConverterRegistry, default_registry


class ExportService:
    """Export service facade - writes structured data to files.

    The format is taken from the destination's filetype ending. Every call
    runs its own ExportCommand, so concurrent exports share no state.

    Example:
        service = ExportService({"cwd": "/srv/exports"})
        path = await service.export("out/data.json", {"x": 1, "y": "z"})
    """

    def __init__(
        self,
        config: ExportConfig | dict[str, Any] | None = None,
        registry: ConverterRegistry = default_registry,
    ) -> None:
        """
        Initialize the service.

        Args:
            config: Export configuration, or a dict of its fields
            registry: Converters available to this service

        Raises:
            pydantic.ValidationError: If config contains unknown or invalid fields
        """
        if config is None:
            config = ExportConfig()
        elif not isinstance(config, ExportConfig):
            config = ExportConfig.model_validate(config)

        self.config = config
        self.registry = registry

    async def export(self, filepath: str, data: Any) -> str:
        """
        Export data to filepath.

        Args:
            filepath: Destination path; its ending selects the format
            data: Value to export

        Returns:
            str: Path of the written file
        """
        command = ExportCommand(self.config, self.registry)
        return await command.execute(filepath, data)

    def list_formats(self) -> list[str]:
        """List the format identifiers this service can write."""
        return self.registry.list_formats()


async def export(
    filepath: str,
    data: Any,
    config: ExportConfig | dict[str, Any] | None = None,
) -> str:
    """Export data to filepath with a one-off ExportService."""
    return await ExportService(config).export(filepath, data)
