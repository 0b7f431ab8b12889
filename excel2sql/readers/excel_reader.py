"""
Reader for Excel workbooks (.xlsx) using openpyxl.
"""

import zipfile
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from excel2sql.exceptions import ReaderError, SheetNotFoundError
from excel2sql.typing import RawGrid

from .base import TabularReader


def cell_to_text(value: Any) -> str | None:
    """
    Render a worksheet cell value as text.

    Args:
        value: Value returned by openpyxl

    Returns:
        Cell text, or None for empty cells
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.strftime("%Y-%m-%d")
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ExcelReader(TabularReader):
    """Reads one worksheet of an Excel workbook."""

    extensions = (".xlsx", ".xlsm")

    def list_sheets(self, file_path: Path) -> list[str]:
        """
        List worksheet names in workbook order.

        Args:
            file_path: Path to the workbook

        Returns:
            Worksheet names
        """
        workbook = self._open(file_path)
        try:
            return list(workbook.sheetnames)
        finally:
            workbook.close()

    def read(self, file_path: Path, sheet: str | None = None, **options) -> RawGrid:
        """
        Read a worksheet into a raw grid.

        Row 1 is the header. Columns with a blank header and rows without any data
        are skipped.

        Args:
            file_path: Path to the workbook
            sheet: Worksheet name; the first worksheet when None

        Returns:
            Raw grid

        Raises:
            ReaderError: If the workbook cannot be opened
            SheetNotFoundError: If the named worksheet does not exist
        """
        workbook = self._open(file_path)
        try:
            if sheet is None:
                if not workbook.sheetnames:
                    raise SheetNotFoundError(f"Workbook {file_path} has no worksheets")
                sheet = workbook.sheetnames[0]
            elif sheet not in workbook.sheetnames:
                raise SheetNotFoundError(
                    f"Worksheet '{sheet}' not found in {file_path}. "
                    f"Available: {workbook.sheetnames}"
                )

            worksheet = workbook[sheet]
            values = [
                [cell_to_text(value) for value in row]
                for row in worksheet.iter_rows(values_only=True)
            ]
        finally:
            workbook.close()

        if not values:
            return RawGrid(header=[], rows=[])

        header_row = values[0]
        kept = [index for index, name in enumerate(header_row) if name and name.strip()]
        header = [header_row[index].strip() for index in kept]

        rows = []
        for row in values[1:]:
            aligned = self._align_row(row, kept)
            if any(cell is not None and cell.strip() for cell in aligned):
                rows.append(aligned)

        self.logger.info(
            f"Read {len(rows)} row(s) and {len(header)} column(s) from sheet '{sheet}' of {file_path}"
        )
        return RawGrid(header=header, rows=rows)

    def _open(self, file_path: Path):
        file_path = Path(file_path)
        if not file_path.exists():
            raise ReaderError(f"File not found: {file_path}")
        try:
            return load_workbook(file_path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError, ValueError) as e:
            raise ReaderError(f"Could not open workbook {file_path}: {e}") from e
