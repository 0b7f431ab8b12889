"""
Pytest configuration and shared fixtures for excel2sql tests.
"""

from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import Workbook

from excel2sql.typing import RawGrid

CONFIG_ENV_VARS = [
    "EXCEL2SQL_DIALECT",
    "EXCEL2SQL_MODE",
    "EXCEL2SQL_BATCH_SIZE",
    "EXCEL2SQL_QUOTE_IDENTIFIERS",
    "EXCEL2SQL_VALIDATE",
]


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep settings, environment and pyproject.toml lookups inside a temp directory."""
    monkeypatch.setenv("EXCEL2SQL_SETTINGS_PATH", str(tmp_path / "settings" / "settings.json"))
    for env_var in CONFIG_ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def settings_path(tmp_path) -> Path:
    """Path of the isolated settings file."""
    return tmp_path / "settings" / "settings.json"


@pytest.fixture
def people_grid() -> RawGrid:
    """Small grid with integer, string and decimal columns."""
    return RawGrid(
        header=["id", "name", "score"],
        rows=[["1", "Alice", "3.5"], ["2", "Bob", "NULL"]],
    )


@pytest.fixture
def people_csv(tmp_path) -> Path:
    """CSV file with a header and three rows."""
    csv_file = tmp_path / "people.csv"
    csv_file.write_text(
        "id,name,joined\n"
        "1,Alice,2024-01-15\n"
        "2,O'Brien,2024-02-01\n"
        "3,Charlie,NULL\n",
        encoding="utf-8",
    )
    return csv_file


@pytest.fixture
def people_xlsx(tmp_path) -> Path:
    """Workbook with a 'People' sheet and an 'Empty' sheet."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "People"
    sheet.append(["id", "name", "score", None, "joined"])
    sheet.append([1, "Alice", 3.5, None, datetime(2024, 1, 15, 10, 30)])
    sheet.append([None, None, None, None, None])
    sheet.append([2, "Bob", None, "ignored", datetime(2024, 2, 1)])
    workbook.create_sheet("Empty")

    xlsx_file = tmp_path / "people.xlsx"
    workbook.save(xlsx_file)
    return xlsx_file


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
