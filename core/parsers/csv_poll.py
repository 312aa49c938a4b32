"""Parser for polls stored as CSV."""

import csv
import io
import logging

from core.models import Poll
from core.parsers import register_parser
from core.parsers.base import PollParser, default_poll_name, parse_grade

logger = logging.getLogger(__name__)


@register_parser
class CsvPollParser(PollParser):
    """Parser for CSV poll files.

    One row per candidate: the first cell is the candidate, the remaining
    cells are the grades given by each voter, e.g.

        Candidate,Voter 1,Voter 2,Voter 3
        Pizza,0,2,3
        Pasta,1,1,3

    The header row is optional. A first row in which none of the grade
    cells is a whole number is taken to be a header and skipped; a first
    row with only some bad grades is an error like any other row. Blank
    lines and trailing empty cells are ignored.
    """

    EXTENSIONS = (".csv",)
    FORMAT_NAME = "CSV"

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this looks like comma-separated text.

        Tell-tale sign: every non-blank line has a comma, and the content
        doesn't look like markup or JSON.
        """
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError:
            return False
        lines = [line for line in text.splitlines() if line.strip()]
        if not lines or lines[0].lstrip().startswith(("<", "{", "[")):
            return False
        return all("," in line for line in lines)

    def parse(self, source: str, content: bytes) -> Poll:
        """Parse CSV content into a Poll."""
        text = content.decode("utf-8-sig", errors="replace")
        rows = [self._trim(row) for row in csv.reader(io.StringIO(text))]
        rows = [row for row in rows if row]

        if not rows:
            raise ValueError("CSV file is empty")

        if self._is_header(rows[0]):
            rows = rows[1:]

        grades: dict[str, list[int]] = {}
        for line_number, row in enumerate(rows, start=1):
            candidate = row[0]
            if not candidate:
                raise ValueError(f"Row {line_number} has no candidate name")
            if candidate in grades:
                raise ValueError(f"Candidate {candidate} appears more than once")
            grades[candidate] = [parse_grade(cell, candidate) for cell in row[1:]]

        if not grades:
            raise ValueError("No candidates found in CSV")

        name = default_poll_name(source)
        logger.debug("parsed CSV poll %r with %d candidates", name, len(grades))
        return Poll(name=name, grades=grades)

    @staticmethod
    def _trim(row: list[str]) -> list[str]:
        """Strip cells and drop trailing empty ones."""
        cells = [cell.strip() for cell in row]
        while cells and not cells[-1]:
            cells.pop()
        return cells

    @staticmethod
    def _is_header(row: list[str]) -> bool:
        """A header row has no whole numbers after the first cell."""
        labels = row[1:]
        return bool(labels) and not any(_is_whole_number(cell) for cell in labels)


def _is_whole_number(cell: str) -> bool:
    try:
        int(cell)
    except ValueError:
        return False
    return True
