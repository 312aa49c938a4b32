"""Abstract base class for poll parsers."""

from abc import ABC, abstractmethod
from pathlib import PurePath

from core.models import Poll


def parse_grade(value, candidate: str) -> int:
    """Convert a raw cell or JSON value to a grade.

    Raises:
        ValueError: If the value is not a whole number
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid grade {value!r} for {candidate}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"Invalid grade {value!r} for {candidate}")


def default_poll_name(source: str) -> str:
    """Derive a poll name from a filename, e.g. "lunch-poll.csv" -> "lunch-poll"."""
    stem = PurePath(source).stem
    return stem or "Untitled Poll"


class PollParser(ABC):
    """Abstract base class for parsing poll files.

    Each parser implementation handles one file format. Parsers are
    registered via the @register_parser decorator in core/parsers/__init__.py.

    Parsers only check that the content is well-formed. Whether the poll
    can be ranked (e.g. all candidates have the same number of grades) is
    checked by core.voting.base.validate_poll.
    """

    # Lowercase filename extensions handled by this parser, e.g. (".csv",)
    EXTENSIONS: tuple[str, ...] = ()

    FORMAT_NAME = ""

    def can_parse(self, source: str) -> bool:
        """Check if this parser can handle the given source.

        Args:
            source: Filename to check

        Returns:
            True if the filename has one of this parser's extensions
        """
        return PurePath(source).suffix.lower() in self.EXTENSIONS

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this parser can handle the given file content.

        Used when the filename gives no hint. Subclasses should override
        this to inspect file content for tell-tale signs of their format.

        Args:
            content: Raw bytes of the file
            filename: Original filename (may help with basic filtering)

        Returns:
            True if this parser can likely handle the content, False otherwise
        """
        return False

    @abstractmethod
    def parse(self, source: str, content: bytes) -> Poll:
        """Parse the content into a Poll.

        Args:
            source: Original filename (for context)
            content: Raw bytes of the file content

        Returns:
            Parsed Poll object

        Raises:
            ValueError: If the content cannot be parsed
        """
        pass
