"""Error types raised by the export pipeline.

Filesystem failures (``OSError``) and JSON serializer failures are not
wrapped; they reach the caller with their original type.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    FORMAT_UNDETERMINED = "format_undetermined"
    UNSUPPORTED_FORMAT = "unsupported_format"
    INVALID_TABULAR_SHAPE = "invalid_tabular_shape"
    INVALID_ELEMENT_NAME = "invalid_element_name"


class ExporterError(Exception):
    """Base exception for export errors.

    Attributes:
        code: Error code identifying the failure.
        message: Human-readable description.
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FormatDeterminationError(ExporterError):
    """Destination path has no usable filetype ending."""

    code = ErrorCode.FORMAT_UNDETERMINED

    def __init__(self, filepath: str) -> None:
        self.filepath = filepath
        super().__init__(
            "Could not determine export type. Please specify a filetype "
            f'ending on the destination path (got "{filepath}").'
        )


class UnsupportedFormatError(ExporterError, ValueError):
    """Filetype ending is not one of the registered formats."""

    code = ErrorCode.UNSUPPORTED_FORMAT

    def __init__(self, filetype: str, supported_formats: list[str]) -> None:
        self.filetype = filetype
        self.supported_formats = list(supported_formats)
        endings = '", "'.join(self.supported_formats)
        super().__init__(
            f'Could not export data. The filetype "{filetype}" is not supported. '
            f'Please specify an ending of: "{endings}"'
        )


class TabularShapeError(ExporterError, ValueError):
    """Value cannot be laid out as CSV rows."""

    code = ErrorCode.INVALID_TABULAR_SHAPE


class InvalidElementNameError(ExporterError, ValueError):
    """Key cannot be written as an XML element or attribute name."""

    code = ErrorCode.INVALID_ELEMENT_NAME

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Cannot export "{name}" as XML: names must start with a letter or '
            'underscore and contain only letters, digits, "_", "-" or "."'
        )
