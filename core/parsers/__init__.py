"""Poll parsers for various file formats."""

from .base import PollParser

# Parser registry - import parsers here to register them
_parsers: list[type[PollParser]] = []


def register_parser(parser_class: type[PollParser]) -> type[PollParser]:
    """Decorator to register a parser class."""
    if parser_class not in _parsers:
        _parsers.append(parser_class)
    return parser_class


def get_all_parsers() -> list[type[PollParser]]:
    """Return all registered parser classes."""
    return _parsers.copy()


def detect_parser(source: str) -> PollParser | None:
    """Auto-detect and return an appropriate parser instance for the given filename."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse(source):
            return parser
    return None


def detect_parser_by_content(content: bytes, filename: str) -> PollParser | None:
    """Auto-detect a parser by looking at the file content."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse_content(content, filename):
            return parser
    return None


def get_supported_formats() -> str:
    """Return a user-friendly description of supported file formats."""
    lines = ["We currently support polls in these formats:"]
    for parser_class in _parsers:
        extensions = ", ".join(parser_class.EXTENSIONS)
        lines.append(f"  - {parser_class.FORMAT_NAME} ({extensions})")
    return "\n".join(lines)
