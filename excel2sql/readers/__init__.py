"""
Tabular readers that turn spreadsheets and delimited text files into raw grids.
"""

from .base import TabularReader
from .csv_reader import CANDIDATE_DELIMITERS, DelimitedTextReader, detect_delimiter
from .excel_reader import ExcelReader, cell_to_text
from .reader_factory import ReaderFactory, get_reader

__all__ = [
    "CANDIDATE_DELIMITERS",
    "DelimitedTextReader",
    "ExcelReader",
    "ReaderFactory",
    "TabularReader",
    "cell_to_text",
    "detect_delimiter",
    "get_reader",
]
