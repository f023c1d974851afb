"""
CSV Utilities

Reading and writing offer/alert rows. Alert files are appended to across
runs, so the header is only written when the file is new or empty.
"""

import csv
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional


def read_csv(file_path: str | Path, encoding: str = 'utf-8') -> Iterator[Dict[str, str]]:
    """
    Read CSV file and yield rows as dictionaries.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8)

    Yields:
        Dictionary for each row with column names as keys
    """
    with open(file_path, 'r', encoding=encoding, newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            yield row


def write_csv(
    file_path: str | Path,
    rows: List[Dict[str, Any]],
    fieldnames: Optional[List[str]] = None,
    encoding: str = 'utf-8',
    append: bool = False,
) -> int:
    """
    Write rows to CSV file.

    Args:
        file_path: Path to output CSV file
        rows: List of dictionaries to write
        fieldnames: Column names (if None, uses keys from first row)
        encoding: File encoding (default: utf-8)
        append: Add rows to an existing file instead of replacing it

    Returns:
        Number of rows written
    """
    if not rows:
        return 0

    if fieldnames is None:
        fieldnames = list(rows[0].keys())

    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    write_header = not append or not path.exists() or path.stat().st_size == 0

    with open(path, 'a' if append else 'w', encoding=encoding, newline='') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        if write_header:
            writer.writeheader()
        writer.writerows(rows)

    return len(rows)
