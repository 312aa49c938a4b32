"""Orchestrator: parse a poll and run all voting systems."""

import logging
from dataclasses import dataclass
from typing import Any

# Import parsers and voting systems to register them. Content detection
# tries parsers in this order, so the most permissive format goes last.
from core.parsers import json_poll  # noqa: F401
from core.parsers import html_table  # noqa: F401
from core.parsers import csv_poll  # noqa: F401
from core.voting import majority_judgment  # noqa: F401

from core.models import Poll, VotingResult
from core.parsers import detect_parser, detect_parser_by_content, get_supported_formats
from core.voting import get_all_voting_systems
from core.voting.base import PollError, validate_poll

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Complete analysis result with the poll and all voting outcomes."""
    poll: Poll
    results: list[VotingResult]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "poll_name": self.poll.name,
            "candidates": self.poll.candidates,
            "num_candidates": self.poll.num_candidates,
            "num_voters": self.poll.num_voters,
            "results": [
                {
                    "system_name": r.system_name,
                    "final_ranking": [p.to_dict() for p in r.final_ranking],
                    "details": r.details,
                }
                for r in self.results
            ],
        }


class AnalysisError(Exception):
    """Error during poll analysis."""
    pass


def analyze_poll(source: str, content: bytes, name: str | None = None) -> AnalysisResult:
    """Parse a poll and run all voting systems on it.

    Args:
        source: Filename (used to detect the appropriate parser)
        content: Raw bytes of the poll file
        name: Poll name to use instead of the one found while parsing

    Returns:
        AnalysisResult with the parsed poll and all voting results

    Raises:
        AnalysisError: If no parser is found, parsing fails or the poll
            cannot be ranked
    """
    # Find appropriate parser: try filename matching first, then content detection
    parser = detect_parser(source)
    if parser is None:
        parser = detect_parser_by_content(content, source)
    if parser is None:
        raise AnalysisError(
            f"We couldn't determine the poll format of {source}.\n\n"
            f"{get_supported_formats()}"
        )
    logger.info("parsing %s with %s", source, type(parser).__name__)

    try:
        poll = parser.parse(source, content)
    except ValueError as e:
        raise AnalysisError(f"Failed to parse poll: {e}") from e

    if name:
        poll.name = name

    return analyze(poll)


def analyze(poll: Poll) -> AnalysisResult:
    """Validate an already-built poll and run all voting systems on it.

    Raises:
        AnalysisError: If the poll cannot be ranked
    """
    try:
        validate_poll(poll)
    except PollError as e:
        raise AnalysisError(f"Invalid poll: {e}") from e

    logger.info("analyzing poll %r: %d candidates, %d voters",
                poll.name, poll.num_candidates, poll.num_voters)

    results = []
    for voting_system in get_all_voting_systems():
        result = voting_system.calculate(poll)
        if result.final_ranking:
            logger.info("%s winner: %s", result.system_name, result.final_ranking[0].name)
        logger.debug("%s details: %s", result.system_name, result.details)
        results.append(result)

    return AnalysisResult(poll=poll, results=results)
