"""Parser for polls stored as JSON."""

import json
import logging

from core.models import Poll
from core.parsers import register_parser
from core.parsers.base import PollParser, default_poll_name, parse_grade

logger = logging.getLogger(__name__)


def reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict:
    """Build a JSON object, rejecting keys that appear more than once."""
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"Key {key} appears more than once")
        obj[key] = value
    return obj


@register_parser
class JsonPollParser(PollParser):
    """Parser for JSON poll files.

    Two layouts are accepted. The full layout names the poll:

        {"name": "Lunch", "grades": {"Pizza": [0, 2, 3], "Pasta": [1, 1, 3]}}

    The bare layout is just the grades object, and the poll is named
    after the file:

        {"Pizza": [0, 2, 3], "Pasta": [1, 1, 3]}
    """

    EXTENSIONS = (".json",)
    FORMAT_NAME = "JSON"

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this looks like a JSON object."""
        if not content.lstrip().startswith(b"{"):
            return False
        try:
            data = json.loads(content)
        except ValueError:
            return False
        return isinstance(data, dict)

    def parse(self, source: str, content: bytes) -> Poll:
        """Parse JSON content into a Poll."""
        try:
            data = json.loads(content, object_pairs_hook=reject_duplicate_keys)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValueError(f"Invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object at the top level")

        if isinstance(data.get("grades"), dict):
            name = data.get("name") or default_poll_name(source)
            raw_grades = data["grades"]
        else:
            name = default_poll_name(source)
            raw_grades = data

        return self._build_poll(str(name), raw_grades)

    def _build_poll(self, name: str, raw_grades: dict) -> Poll:
        grades: dict[str, list[int]] = {}
        for candidate, values in raw_grades.items():
            if not isinstance(values, list):
                raise ValueError(
                    f"Grades for {candidate} must be a list, got {type(values).__name__}"
                )
            grades[str(candidate)] = [parse_grade(v, candidate) for v in values]

        if not grades:
            raise ValueError("No candidates found in JSON")

        logger.debug("parsed JSON poll %r with %d candidates", name, len(grades))
        return Poll(name=name, grades=grades)
