"""Call-scoped record threaded through the export pipeline."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from data_exporter.export.base import ExportFormat


class PipelineState(str, Enum):
    """Export pipeline state, advanced strictly in declaration order."""

    START = "start"
    DIRECTORY_ENSURED = "directory_ensured"
    FORMAT_VALIDATED = "format_validated"
    DATA_CONVERTED = "data_converted"
    WRITTEN = "written"
    DONE = "done"
    FAILED = "failed"


class Exchange(BaseModel):
    """State of a single export call.

    ``data`` holds the caller's value until the conversion stage replaces it
    with the converted text.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    filepath: str
    base_directory: str
    data: Any
    resolved_path: str | None = None
    format: ExportFormat | None = None
    state: PipelineState = PipelineState.START
    error: str | None = None
