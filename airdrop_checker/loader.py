"""
loader.py - Address File Loader
===============================
This module reads wallet addresses from an input file.

Supported Input Formats:
------------------------
- Text files (any other extension): one address per line, or several
  comma-separated addresses on a line. Blank lines and lines starting
  with '#' are skipped.
- CSV files: .csv
- Excel files: .xlsx, .xls

For CSV/Excel, a first row naming an address column (found by normalizing
headers, so "Wallet Address", "wallet_address" and "WALLETADDRESS" all
match) selects that column. Without such a header the file is read as a
plain address list: every cell is an address and '#' lines are skipped.

Tokens are returned as-is (only stripped); validation happens later so that
malformed entries still show up as "error" results instead of vanishing.
"""

import io
import re
from pathlib import Path
from typing import List

import pandas as pd

from .errors import FileReadError


COMMENT_PREFIX = "#"

EXCEL_SUFFIXES = (".xlsx", ".xls")

# Normalized header names that hold addresses
ADDRESS_COLUMNS = ("ADDRESS", "WALLET", "WALLETADDRESS", "WALLETADDRESSES")


# =============================================================================
# COLUMN NAME NORMALIZATION
# =============================================================================

def normalize_header(header: str) -> str:
    """
    Standardize a column name by removing spaces/underscores and converting to uppercase.

    Examples:
        normalize_header("Wallet Address")   -> "WALLETADDRESS"
        normalize_header("wallet_address")   -> "WALLETADDRESS"
        normalize_header(" address ")        -> "ADDRESS"
    """
    return re.sub(r'[\s_]+', '', header).strip().upper()


# =============================================================================
# TEXT PARSING
# =============================================================================

def parse_addresses(content: str) -> List[str]:
    """
    Extract address tokens from text content.

    Example:
        parse_addresses("# team\\n0xabc...\\n0xdef..., 0x123...\\n")
        -> ["0xabc...", "0xdef...", "0x123..."]
    """
    addresses = []

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(COMMENT_PREFIX):
            continue

        if "," in trimmed:
            addresses.extend(part.strip() for part in trimmed.split(","))
        else:
            addresses.append(trimmed)

    return addresses


# =============================================================================
# TABLE PARSING
# =============================================================================

def _is_header_row(cells) -> bool:
    """True if any cell of a row names an address column."""
    return any(
        isinstance(cell, str) and normalize_header(cell) in ADDRESS_COLUMNS
        for cell in cells
    )


def _first_csv_row(text: str) -> List[str]:
    """Cells of the first non-blank, non-comment line of CSV text."""
    for line in text.splitlines():
        trimmed = line.strip()
        if trimmed and not trimmed.startswith(COMMENT_PREFIX):
            return [cell.strip() for cell in trimmed.split(",")]
    return []


def _column_tokens(df: pd.DataFrame, column) -> List[str]:
    addresses = []
    for value in df[column].dropna():
        addresses.extend(parse_addresses(str(value)))
    return addresses


def _read_csv(path: Path) -> List[str]:
    """
    Read a CSV file.

    Only a first row that names an address column (e.g. "Wallet Address")
    is treated as a header; then that column is used. Anything else is the
    plain address-list format, so every cell is kept.
    """
    text = path.read_text(encoding="utf-8")

    if not _is_header_row(_first_csv_row(text)):
        return parse_addresses(text)

    df = pd.read_csv(io.StringIO(text), dtype=str, comment=COMMENT_PREFIX)
    df.dropna(how='all', inplace=True)

    column = next(c for c in df.columns if normalize_header(str(c)) in ADDRESS_COLUMNS)
    return _column_tokens(df, column)


def _read_excel(path: Path) -> List[str]:
    """
    Read an Excel workbook (first sheet).

    Same header rule as CSV: a recognised header row selects its column,
    otherwise every non-empty cell is an address, row by row.
    """
    try:
        df = pd.read_excel(path, header=None, dtype=str)
    except Exception as e:
        # openpyxl/xlrd raise their own types (BadZipFile, XLRDError, ...)
        raise FileReadError(path, f"{type(e).__name__}: {e}") from e

    # Remove rows that are completely empty
    df.dropna(how='all', inplace=True)
    if df.empty:
        return []

    first_row = list(df.iloc[0])
    if _is_header_row(first_row):
        column = next(
            c for c, cell in zip(df.columns, first_row)
            if isinstance(cell, str) and normalize_header(cell) in ADDRESS_COLUMNS
        )
        return _column_tokens(df.iloc[1:], column)

    addresses = []
    for row in df.itertuples(index=False):
        for cell in row:
            if isinstance(cell, str):
                addresses.extend(parse_addresses(cell))
    return addresses


# =============================================================================
# MAIN LOADER
# =============================================================================

def load_addresses(filepath) -> List[str]:
    """
    Load address tokens from a text, CSV or Excel file.

    Args:
        filepath: Path to the input file

    Returns:
        Address strings in file order (not yet validated)

    Raises:
        FileReadError: If the file doesn't exist or can't be read/parsed
    """
    path = Path(filepath)
    if not path.is_file():
        raise FileReadError(path, "file not found")

    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            return _read_csv(path)
        if suffix in EXCEL_SUFFIXES:
            return _read_excel(path)
        return parse_addresses(path.read_text(encoding="utf-8"))
    except pd.errors.EmptyDataError:
        return []
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise FileReadError(path, str(e)) from e
