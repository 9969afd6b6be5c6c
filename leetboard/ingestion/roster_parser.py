"""
Roster CSV Parser

This module converts an uploaded roster (rollNumber, name, leetcodeUsername)
into immutable RosterRow records.

Only the three required columns are read. Columns may appear in any order and
extra columns are ignored. Fields are split on a bare comma: quoting and
escaping are not supported, so a value cannot contain a comma.

Usage:
    from leetboard.ingestion.roster_parser import parse_roster
    rows = parse_roster(text)
"""

import re
from typing import NamedTuple

from leetboard.config import REQUIRED_COLUMNS
from leetboard.ingestion.errors import FormatError
from leetboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

LINE_SPLIT_RE = re.compile(r"\r?\n")


class RosterRow(NamedTuple):
    """One uploaded student, identified by its 1-based position in the roster."""
    id: int
    roll_number: str
    name: str
    leetcode_username: str


class RosterRowBuilder:
    """
    Collects the recognized column values of one data line.

    build() refuses to produce a RosterRow until every required field was set,
    so a partially populated record never leaves the parser.
    """

    def __init__(self, row_id: int):
        self.row_id = row_id
        self._fields = {}

    def set(self, header: str, value: str) -> "RosterRowBuilder":
        field = REQUIRED_COLUMNS.get(header)
        if field is not None:
            self._fields[field] = value.strip()
        return self

    def build(self) -> RosterRow:
        missing = [h for h, f in REQUIRED_COLUMNS.items() if f not in self._fields]
        if missing:
            raise FormatError(
                f"Row {self.row_id} is missing required fields: {', '.join(missing)}"
            )
        return RosterRow(id=self.row_id, **self._fields)


def split_lines(text: str) -> list[str]:
    """Split on \\n or \\r\\n, dropping blank lines."""
    return [line for line in LINE_SPLIT_RE.split(text.strip()) if line.strip()]


def parse_header(line: str) -> list[str]:
    """
    Parse and validate the header line.

    Raises:
        FormatError: If any required column is missing
    """
    headers = [h.strip() for h in line.split(",")]
    missing = [h for h in REQUIRED_COLUMNS if h not in headers]
    if missing:
        raise FormatError(
            f"CSV must include the following headers: {', '.join(REQUIRED_COLUMNS)} "
            f"(missing: {', '.join(missing)})"
        )
    return headers


def parse_roster(text: str) -> list[RosterRow]:
    """
    Parse raw roster text into RosterRow records.

    Args:
        text: Full text of the uploaded CSV file

    Returns:
        One RosterRow per data line, ids assigned 1..N in line order

    Raises:
        FormatError: If there is no header plus data line, or required headers are missing
    """
    lines = split_lines(text)
    if len(lines) < 2:
        raise FormatError("CSV file is empty or invalid: expected a header line and at least one data row.")

    headers = parse_header(lines[0])

    rows = []
    for row_id, line in enumerate(lines[1:], start=1):
        values = line.split(",")
        if len(values) < len(headers):
            # Ragged row: missing trailing fields read as empty
            logger.debug(f"Row {row_id} has {len(values)} of {len(headers)} fields")
            values += [""] * (len(headers) - len(values))

        builder = RosterRowBuilder(row_id)
        for header, value in zip(headers, values):
            builder.set(header, value)
        rows.append(builder.build())

    logger.info(f"Parsed {len(rows)} roster rows")
    return rows
