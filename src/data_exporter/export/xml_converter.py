"""XML converter implementation."""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

import inflection

from data_exporter.errors import InvalidElementNameError
from data_exporter.export.base import BaseConverter, ExportOptions

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Letter or underscore, then letters, digits, "_", "-" or "."
_NAME_PATTERN = re.compile(r"[^\W\d][\w.\-]*\Z")


class XMLConverter(BaseConverter):
    """XML converter - nests the whole value under one root element.

    Lists become a wrapper element holding one child per item, named after
    the singular of the wrapper (``items`` -> ``item``). Keys starting with
    an underscore and holding a scalar are written as attributes.
    """

    async def convert(self, data: Any, options: ExportOptions) -> str:
        """Convert data to an indented XML document."""
        root = ET.Element(_checked_name(options.root_element))
        self._build(root, options.root_element, data, options)

        ET.indent(root, space=" " * options.indent)
        body = ET.tostring(root, encoding="unicode")

        if options.manifest:
            return f"{XML_DECLARATION}\n{body}"
        return body

    def _build(
        self, element: ET.Element, name: str, value: Any, options: ExportOptions
    ) -> None:
        if isinstance(value, Mapping):
            for key, child in value.items():
                key = str(key)
                if (
                    options.underscore_attributes
                    and key.startswith("_")
                    and _is_scalar(child)
                ):
                    element.set(_checked_name(key[1:]), _text(child))
                    continue
                sub = ET.SubElement(element, _checked_name(key))
                self._build(sub, key, child, options)
        elif isinstance(value, (list, tuple)):
            child_name = self._child_name(name, options)
            for item in value:
                sub = ET.SubElement(element, child_name)
                self._build(sub, child_name, item, options)
        elif value is not None:
            element.text = _text(value)

    def _child_name(self, name: str, options: ExportOptions) -> str:
        if options.singularize_children:
            return _checked_name(inflection.singularize(name))
        return name

    def get_file_extension(self) -> str:
        """Return 'xml'."""
        return "xml"

    def get_mime_type(self) -> str:
        """Return XML MIME type."""
        return "application/xml"


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (Mapping, list, tuple))


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _checked_name(name: str) -> str:
    """Return name if it is a well-formed XML name."""
    if not _NAME_PATTERN.match(name):
        raise InvalidElementNameError(name)
    return name
