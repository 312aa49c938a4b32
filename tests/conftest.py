"""Shared test helpers."""

from core.models import Poll, VotingResult


def make_poll(name: str, grades_table: dict[str, list[int]]) -> Poll:
    """Build a Poll from a compact grades table.

    Args:
        name: Poll name
        grades_table: {candidate_id: [grade per voter]}

    Returns:
        Poll with copies of the grade lists, so tests can't alias each other.
    """
    return Poll(
        name=name,
        grades={candidate: list(grades) for candidate, grades in grades_table.items()},
    )


def ranking_names(result: VotingResult) -> list[str]:
    """Candidate names from a VotingResult, best first."""
    return [p.name for p in result.final_ranking]
