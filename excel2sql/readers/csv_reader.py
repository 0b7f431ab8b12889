"""
Reader for delimited text files (CSV, TSV and similar).
"""

import csv
from pathlib import Path

from excel2sql.exceptions import DelimiterDetectionError, ReaderError
from excel2sql.typing import RawGrid

from .base import TabularReader

# Candidate delimiters for auto-detection, in tie-break order
CANDIDATE_DELIMITERS = [",", ";", "|", "\t"]


def detect_delimiter(first_line: str) -> str | None:
    """
    Detect the delimiter of a delimited text file from its first line.

    The most frequent candidate wins; ties go to the earlier candidate.

    Args:
        first_line: Header line of the file

    Returns:
        The detected delimiter, or None if no candidate occurs in the line
    """
    if not first_line or not first_line.strip():
        return None

    best = None
    best_count = 0
    for delimiter in CANDIDATE_DELIMITERS:
        count = first_line.count(delimiter)
        if count > best_count:
            best, best_count = delimiter, count
    return best


class DelimitedTextReader(TabularReader):
    """Reads delimited text files with an explicit or auto-detected delimiter."""

    extensions = (".csv", ".tsv", ".txt")

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        """
        Initialize the reader.

        Args:
            encoding: Text encoding; the default tolerates a UTF-8 byte order mark
        """
        super().__init__()
        self.encoding = encoding

    def read(self, file_path: Path, delimiter: str | None = None, **options) -> RawGrid:
        """
        Read a delimited text file into a raw grid.

        Args:
            file_path: Path to the file
            delimiter: Field delimiter; auto-detected from the header line when None

        Returns:
            Raw grid; columns with a blank header are skipped

        Raises:
            ReaderError: If the file does not exist or cannot be decoded
            DelimiterDetectionError: If no delimiter is given and none can be detected
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ReaderError(f"File not found: {file_path}")

        try:
            with open(file_path, encoding=self.encoding, newline="") as f:
                if not delimiter:
                    first_line = f.readline()
                    f.seek(0)
                    delimiter = detect_delimiter(first_line)
                    if delimiter is None:
                        raise DelimiterDetectionError(
                            f"Could not detect the delimiter of {file_path}; specify it explicitly"
                        )
                    self.logger.debug(f"Detected delimiter {delimiter!r} in {file_path}")

                records = [row for row in csv.reader(f, delimiter=delimiter) if row]
        except UnicodeDecodeError as e:
            raise ReaderError(f"Could not decode {file_path} as {self.encoding}: {e}") from e
        except csv.Error as e:
            raise ReaderError(f"Malformed delimited file {file_path}: {e}") from e

        if not records:
            return RawGrid(header=[], rows=[])

        header_row = records[0]
        kept = [index for index, name in enumerate(header_row) if name and name.strip()]
        header = [header_row[index].strip() for index in kept]
        rows = [self._align_row(record, kept) for record in records[1:]]

        self.logger.info(f"Read {len(rows)} row(s) and {len(header)} column(s) from {file_path}")
        return RawGrid(header=header, rows=rows)
