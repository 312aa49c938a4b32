"""Parser for polls published as HTML tables."""

import logging

from bs4 import BeautifulSoup

from core.models import Poll
from core.parsers import register_parser
from core.parsers.base import PollParser, default_poll_name, parse_grade

logger = logging.getLogger(__name__)


@register_parser
class HtmlTablePollParser(PollParser):
    """Parser for HTML pages containing a poll table.

    The poll table is the first <table> with class "poll", or failing that
    the first <table> on the page. Each row is one candidate:
    - First cell: candidate name (<td> or <th>)
    - Remaining cells: grades given by each voter

    Rows made only of <th> cells are column headers and are skipped.

    The poll name is taken from the table's <caption>, then the page
    <title>, then the filename.
    """

    EXTENSIONS = (".html", ".htm")
    FORMAT_NAME = "HTML table"

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this looks like an HTML page with a table."""
        try:
            html = content.decode("utf-8", errors="replace")
        except Exception:
            return False
        return "<table" in html.lower()

    def parse(self, source: str, content: bytes) -> Poll:
        """Parse HTML content into a Poll."""
        html = content.decode("utf-8", errors="replace")
        soup = BeautifulSoup(html, "lxml")

        table = soup.find("table", class_="poll") or soup.find("table")
        if table is None:
            raise ValueError("No table found in HTML")

        name = self._poll_name(soup, table, source)

        grades: dict[str, list[int]] = {}
        for row in table.find_all("tr"):
            cells = row.find_all(["td", "th"])
            if not cells or not row.find("td"):
                continue

            candidate = cells[0].get_text(strip=True)
            if not candidate:
                raise ValueError("Found a table row with no candidate name")
            if candidate in grades:
                raise ValueError(f"Candidate {candidate} appears more than once")

            texts = [cell.get_text(strip=True) for cell in cells[1:]]
            while texts and not texts[-1]:
                texts.pop()
            grades[candidate] = [parse_grade(text, candidate) for text in texts]

        if not grades:
            raise ValueError("No candidates found in HTML table")

        logger.debug("parsed HTML poll %r with %d candidates", name, len(grades))
        return Poll(name=name, grades=grades)

    @staticmethod
    def _poll_name(soup, table, source: str) -> str:
        caption = table.find("caption")
        if caption and caption.get_text(strip=True):
            return caption.get_text(strip=True)
        title = soup.find("title")
        if title and title.get_text(strip=True):
            return title.get_text(strip=True)
        return default_poll_name(source)
