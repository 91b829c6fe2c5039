"""
Test configuration and fixtures for export tests.
"""

import pytest

from data_exporter.config import ExportConfig, reset_settings


@pytest.fixture(autouse=True)
def reset_config():
    """Reset cached settings around each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="function")
def export_config(tmp_path):
    """Export configuration rooted at a fresh temporary directory."""
    return ExportConfig(cwd=str(tmp_path))


@pytest.fixture(scope="function")
def sample_export_data():
    """
    Provide sample data for export tests.

    The records sit under a single top-level key, the shape CSV export
    expects by default.
    """
    return {
        "users": [
            {"id": 1, "name": "Alice", "email": "alice@example.com", "active": True},
            {"id": 2, "name": "Bob", "email": "bob@example.com", "active": False},
            {"id": 3, "name": "Charlie", "email": "charlie@example.com", "active": True},
        ]
    }


@pytest.fixture(scope="function")
def special_chars_data():
    """
    Provide data with special characters for edge case testing.
    """
    return {
        "rows": [
            {"id": 1, "text": "Hello, World!"},
            {"id": 2, "text": 'Quote: "test"'},
            {"id": 3, "text": "Newline:\ntest"},
            {"id": 4, "text": "Tab:\ttest"},
            {"id": 5, "text": "中文测试"},
            {"id": 6, "text": "Special: <&>"},
            {"id": 7, "text": "O'Brien"},
            {"id": 8, "text": None},
        ]
    }
