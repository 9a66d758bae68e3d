"""
Parsing (text line -> Course).

Each line of a catalog file describes exactly one course:

    category:name:dd/mm/yyyy:level

e.g. "bases de datos: sql essential training: 03/12/2019 : principiante "

Important rules:
- Whitespace around every field is allowed and removed
- The category is everything before the FIRST colon
- The level is matched case-insensitively against Level names
- Malformed lines raise; they are never skipped silently
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Tuple

from coursecatalog.model import Course, Level


SEPARATOR = ":"
DATE_FORMAT = "%d/%m/%Y"
# strptime accepts one-digit days and months; the file format does not
DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CatalogError(ValueError):
    """
    Base class for errors raised while reading catalog text.
    """

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.message = message
        self.line_no = line_no
        super().__init__(self._full_message())

    def _full_message(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"

    def at_line(self, line_no: int) -> "CatalogError":
        """
        Return a copy of this error annotated with a 1-based line number.
        """
        return type(self)(self.message, line_no)


class FormatError(CatalogError):
    """The line does not have the colon-delimited structure."""


class ParseError(CatalogError):
    """A field (date or level) could not be converted."""


# ---------------------------------------------------------------------------
# Field parsing
# ---------------------------------------------------------------------------


def _parse_date(text: str) -> date:
    raw = text.strip()
    if not DATE_PATTERN.fullmatch(raw):
        raise ParseError(f"Invalid date (expected dd/mm/yyyy): {raw!r}")
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        raise ParseError(f"Invalid date (expected dd/mm/yyyy): {raw!r}") from None


def _parse_level(text: str) -> Level:
    try:
        return Level.from_text(text)
    except ValueError:
        raise ParseError(f"Unknown level: {text.strip()!r}") from None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_course(text: str) -> Course:
    """
    Build a Course from "name:date:level".

    "sql essential training: 03/12/2019 : principiante "
        -> Course("Sql Essential Training", 2019-12-03, PRINCIPIANTE)
    """
    parts = text.strip().split(SEPARATOR)
    if len(parts) != 3:
        raise FormatError(f"Expected 'name:dd/mm/yyyy:level', got {text.strip()!r}")

    name, date_str, level_str = parts
    return Course(name.strip(), _parse_date(date_str), _parse_level(level_str))


def parse_line(line: str) -> Tuple[str, Course]:
    """
    Split one catalog line into (category, Course).

    The category is returned trimmed but not upper-cased;
    normalizing keys is the catalog's job.
    """
    raw = line.strip()
    category, sep, rest = raw.partition(SEPARATOR)
    if not sep:
        raise FormatError(f"Missing ':' after category in {raw!r}")

    return category.strip(), parse_course(rest)
