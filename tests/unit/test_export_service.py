"""Unit tests for export service."""

import asyncio

import pytest
from pydantic import ValidationError

import data_exporter

from data_exporter.config import ExportConfig
from data_exporter.export.base import ExportFormat
from data_exporter.export.json_converter import JSONConverter
from data_exporter.export.registry import ConverterRegistry
from data_exporter.errors import UnsupportedFormatError
from data_exporter.services.export_service import ExportService, export


@pytest.mark.asyncio
async def test_export_service_with_csv_format(tmp_path, sample_export_data):
    """Test export service writes CSV."""
    service = ExportService(ExportConfig(cwd=str(tmp_path)))

    path = await service.export("users.csv", sample_export_data)

    content = (tmp_path / "users.csv").read_text(encoding="utf-8")
    assert path == str(tmp_path / "users.csv")
    assert content.startswith("id,name,email,active\n")
    assert content.count("\n") == 4


@pytest.mark.asyncio
async def test_export_service_accepts_dict_config(tmp_path):
    """Test a plain dict is validated into ExportConfig."""
    service = ExportService({"cwd": str(tmp_path), "options": {"pretty_print": True}})

    assert isinstance(service.config, ExportConfig)
    await service.export("data.json", {"id": 1})

    assert (tmp_path / "data.json").read_text(encoding="utf-8") == '{\n  "id": 1\n}'


def test_export_service_rejects_unknown_config():
    """Test unknown config keys are rejected."""
    with pytest.raises(ValidationError):
        ExportService({"cwd": "/tmp", "dest": "out"})


def test_export_service_defaults_to_working_directory(tmp_path, monkeypatch):
    """Test the base directory defaults to the process working directory."""
    monkeypatch.chdir(tmp_path)

    service = ExportService()

    assert service.config.cwd == str(tmp_path)


def test_export_service_list_formats():
    """Test listing formats."""
    assert ExportService().list_formats() == ["json", "csv", "xml"]


@pytest.mark.asyncio
async def test_export_service_with_custom_registry(tmp_path):
    """Test a service restricted to JSON rejects CSV."""
    registry = ConverterRegistry({ExportFormat.JSON: JSONConverter()})
    service = ExportService({"cwd": str(tmp_path)}, registry=registry)

    with pytest.raises(UnsupportedFormatError, match='ending of: "json"$'):
        await service.export("data.csv", {"rows": [{"a": 1}]})


@pytest.mark.asyncio
async def test_export_function(tmp_path):
    """Test the module-level export helper."""
    path = await export("out/data.xml", {"items": ["a"]}, {"cwd": str(tmp_path)})

    assert path == str(tmp_path / "out" / "data.xml")
    assert "<item>a</item>" in (tmp_path / "out" / "data.xml").read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_export_service_concurrent_exports(tmp_path):
    """Test concurrent exports into one new directory stay independent."""
    service = ExportService({"cwd": str(tmp_path)})

    paths = await asyncio.gather(
        *(service.export(f"shared/dir/file_{i}.json", {"n": i}) for i in range(10))
    )

    assert len(set(paths)) == 10
    for i in range(10):
        content = (tmp_path / "shared" / "dir" / f"file_{i}.json").read_text(encoding="utf-8")
        assert content == f'{{"n":{i}}}'


@pytest.mark.asyncio
async def test_package_exposes_service_and_export_function(tmp_path):
    """Test the top-level names are the service class and the export helper."""
    assert data_exporter.ExportService is ExportService
    assert data_exporter.export is export

    service = data_exporter.ExportService({"cwd": str(tmp_path)})
    path = await service.export("a.json", {"x": 1})

    assert path == str(tmp_path / "a.json")
    assert await data_exporter.export("b.json", [1], {"cwd": str(tmp_path)}) == str(
        tmp_path / "b.json"
    )
    assert not hasattr(service, "export_data")
