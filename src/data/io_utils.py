"""
Shared I/O utilities for loading shelter directory snapshots.

Directory exports arrive as CSV, Excel, Parquet or JSON (a list of records as
returned by the hosted backend's REST API). Everything is loaded into a
pandas DataFrame with whitespace-stripped column names.

Key Functions:
- detect_file_format: Determine file format from filename or bytes
- load_dataframe: Loader for paths, in-memory buffers and DataFrames
- looks_like_excel_bytes: Quick heuristic to detect Excel file format
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("csv", "xlsx", "parquet", "json")


def looks_like_excel_bytes(buffer: BytesIO) -> bool:
    """Check the first bytes for the ZIP signature that XLSX files start with."""
    try:
        buffer.seek(0)
        head = buffer.read(4)
        buffer.seek(0)
    except (OSError, ValueError):
        return False
    return bool(head) and head.startswith(b"PK")


def detect_file_format(filename: Optional[str] = None, buffer: Optional[BytesIO] = None) -> Optional[str]:
    """Detect file format from filename extension or buffer content.

    Returns:
        One of 'csv', 'xlsx', 'parquet', 'json', or None when unknown
    """
    if filename:
        suffix = Path(filename).suffix.lower().lstrip(".")
        if suffix in SUPPORTED_FORMATS:
            return suffix

    if buffer is not None:
        if looks_like_excel_bytes(buffer):
            return "xlsx"
        buffer.seek(0)
        head = buffer.read(64).lstrip()
        buffer.seek(0)
        if head.startswith((b"[", b"{")):
            return "json"
        if head:
            return "csv"

    return None


def _read(source: Union[Path, BytesIO], format_type: Optional[str]) -> pd.DataFrame:
    if format_type == "csv":
        return pd.read_csv(source)
    if format_type == "xlsx":
        return pd.read_excel(source, engine="openpyxl")
    if format_type == "parquet":
        return pd.read_parquet(source)
    if format_type == "json":
        return pd.read_json(source, orient="records")
    raise ValueError(f"Unsupported file type: {format_type}")


def load_dataframe(
    raw_input: Union[Path, str, BytesIO, bytes, pd.DataFrame, Any],
    *,
    filename: Optional[str] = None,
) -> pd.DataFrame:
    """Load a shelter directory snapshot into a DataFrame.

    Args:
        raw_input: File path, buffer (BytesIO, bytes, memoryview, bytearray) or DataFrame
        filename: Optional filename for logging and format detection of buffers

    Returns:
        pd.DataFrame with whitespace-stripped column names

    Raises:
        FileNotFoundError: If file path doesn't exist
        TypeError: If input type is not supported
        ValueError: If the file format is not supported
    """
    if isinstance(raw_input, pd.DataFrame):
        logger.info("Processing DataFrame with %d rows (source: %s)", len(raw_input), filename or "unknown")
        df = raw_input.copy()

    elif isinstance(raw_input, (Path, str)):
        raw_path = Path(raw_input)
        if not raw_path.exists():
            raise FileNotFoundError(f"File not found: {raw_path}")

        logger.info("Loading data from %s", raw_path)
        suffix = raw_path.suffix.lower().lstrip(".")
        if suffix not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported file type: .{suffix}")
        df = _read(raw_path, suffix)

    else:
        logger.info("Loading data from memory (source: %s)", filename or "uploaded file")
        if isinstance(raw_input, BytesIO):
            buffer = raw_input
        elif isinstance(raw_input, (bytes, bytearray, memoryview)):
            buffer = BytesIO(bytes(raw_input))
        else:
            raise TypeError(f"Cannot load shelter data from {type(raw_input).__name__}")

        format_type = detect_file_format(filename, buffer)
        buffer.seek(0)
        df = _read(buffer, format_type)

    df.columns = [str(col).strip() for col in df.columns]
    return df


__all__ = [
    "looks_like_excel_bytes",
    "detect_file_format",
    "load_dataframe",
]
