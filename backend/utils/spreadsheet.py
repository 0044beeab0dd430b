"""
OPS-DESK Spreadsheet Utilities
Header matching and cell coercion for uploaded Excel sheets.

Uploaded sheets come from many hands, so headers are matched loosely
and dates/numbers are coerced from whatever format the cell holds.
"""

import io
import math
import re
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional

import pandas as pd
from dateutil import parser as date_parser

# Excel's 1900 date system counts from here for serials after the
# fictitious 1900-02-29; earlier serials are one day later
EXCEL_EPOCH = datetime(1899, 12, 30)
EXCEL_LEAP_BUG_SERIAL = 60

# pandas names header cells that are blank "Unnamed: <n>"
_PLACEHOLDER_HEADER = re.compile(r"^Unnamed: \d+$")

_SEPARATORS = re.compile(r"[_\-.#*]")
_WHITESPACE = re.compile(r"\s+")
_CURRENCY_SYMBOLS = re.compile(r"[₹$€£¥]")
_DAY_FIRST = re.compile(r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{2,4})$")
_YEAR_FIRST = re.compile(r"^(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})$")
_EXCEL_FILE = re.compile(r"\.(xlsx|xls)$", re.IGNORECASE)


def normalize_column_name(name: str) -> str:
    """Lowercase, strip, turn separators into spaces and collapse runs."""
    name = _SEPARATORS.sub(" ", str(name).lower().strip())
    return _WHITESPACE.sub(" ", name).strip()


def find_matching_column(
    excel_column: str,
    column_mappings: dict[str, list[str]],
    strict: bool = False,
    exclude: Iterable[str] = ()
) -> Optional[str]:
    """
    Find the schema column an Excel header refers to.

    Passes, first hit wins:
    1. exact match
    2. containment either way
    3. starts or ends with a variation
    4. any shared word (equal or containing)

    strict runs passes 1 and 3 only. Columns in exclude are never returned.
    """
    normalized = normalize_column_name(excel_column)
    if not normalized:
        return None

    exclude = set(exclude)
    column_mappings = {
        column: variations for column, variations in column_mappings.items()
        if column not in exclude
    }

    for schema_column, variations in column_mappings.items():
        if normalized in variations:
            return schema_column

    if not strict:
        for schema_column, variations in column_mappings.items():
            for variation in variations:
                if variation in normalized or normalized in variation:
                    return schema_column

    for schema_column, variations in column_mappings.items():
        for variation in variations:
            if normalized.startswith(variation) or normalized.endswith(variation):
                return schema_column

    if strict:
        return None

    normalized_words = normalized.split(" ")
    for schema_column, variations in column_mappings.items():
        for variation in variations:
            variation_words = variation.split(" ")
            for word in normalized_words:
                if any(
                    word == v_word or v_word in word or word in v_word
                    for v_word in variation_words
                ):
                    return schema_column

    return None


def _iso(year: int, month: int, day: int) -> Optional[str]:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def _from_excel_serial(serial: float) -> Optional[str]:
    serial = int(serial)
    # Serial 60 is Excel's 1900-02-29, a day that never existed
    if serial == EXCEL_LEAP_BUG_SERIAL:
        return None
    epoch = EXCEL_EPOCH if serial > EXCEL_LEAP_BUG_SERIAL else EXCEL_EPOCH + timedelta(days=1)
    try:
        return (epoch + timedelta(days=serial)).date().isoformat()
    except OverflowError:
        return None


def parse_date(value: Any) -> Optional[str]:
    """
    Coerce a cell into an ISO date (YYYY-MM-DD).

    Numbers are Excel serial dates. Strings are tried as D/M/Y (Indian
    order), then Y-M-D, then a lenient day-first parse.
    """
    if value is None or value is pd.NaT or value is False:
        return None

    if isinstance(value, datetime):
        return value.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        if value <= 0:
            return None
        return _from_excel_serial(value)

    if not isinstance(value, str):
        return None

    date_str = value.strip()
    if not date_str:
        return None

    match = _DAY_FIRST.match(date_str)
    if match:
        day, month, year = match.groups()
        if len(year) == 2:
            year = f"19{year}" if int(year) > 50 else f"20{year}"
        d, m, y = int(day), int(month), int(year)
        if 1 <= d <= 31 and 1 <= m <= 12 and 1900 <= y <= 2100:
            parsed = _iso(y, m, d)
            if parsed:
                return parsed

    match = _YEAR_FIRST.match(date_str)
    if match:
        year, month, day = (int(part) for part in match.groups())
        parsed = _iso(year, month, day)
        if parsed:
            return parsed

    try:
        parsed = date_parser.parse(date_str, dayfirst=True)
    except (ValueError, OverflowError):
        return None
    if parsed.year > 1900:
        return parsed.date().isoformat()
    return None


def clean_number_string(value: Any) -> str:
    """Strip currency symbols, thousands separators and whitespace."""
    if not isinstance(value, str):
        return str(value) if value else ""
    value = _CURRENCY_SYMBOLS.sub("", value)
    value = value.replace(",", "")
    return _WHITESPACE.sub("", value).strip()


def parse_number(value: Any) -> Optional[float]:
    """Parse a cell as a number; None when it isn't one."""
    if value is None or value == "":
        return None

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        return None if math.isnan(value) else value

    if isinstance(value, str):
        cleaned = clean_number_string(value)
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
        return None if math.isnan(number) else number

    return None


def clean_value(value: Any, column: str, date_columns: Iterable[str] = ()) -> Any:
    """Normalize a cell for storage under the given schema column."""
    if value is None or value == "":
        return None
    if isinstance(value, float) and math.isnan(value):
        return None

    if column in date_columns:
        return parse_date(value)

    if isinstance(value, str):
        return value.strip() or None

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Whole floats come back from pandas for integer cells
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    return value


def read_excel_file(data: bytes) -> list[dict]:
    """
    Read the first sheet; header row becomes keys, blank cells None.

    Columns with a blank header are dropped.
    """
    frame = pd.read_excel(io.BytesIO(data), sheet_name=0, dtype=object)
    frame.columns = [str(column) for column in frame.columns]
    frame = frame[[
        column for column in frame.columns
        if not _PLACEHOLDER_HEADER.match(column)
    ]]
    frame = frame.astype(object).where(pd.notna(frame), None)
    return frame.to_dict(orient="records")


def is_valid_excel_file(filename: str) -> bool:
    """Accept .xlsx and .xls, case-insensitive."""
    return bool(filename) and bool(_EXCEL_FILE.search(filename))
