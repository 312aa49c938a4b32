"""Core data models for polls and voting results."""

from dataclasses import dataclass, field
from typing import Any, Self


@dataclass
class Poll:
    """A graded poll: every voter gives every candidate one grade.

    Attributes:
        name: Name of the poll
        grades: Dict mapping candidate_id -> list of grades (one per voter).
            Grades are non-negative integers, higher is better.

    Example:
        >>> poll = Poll(
        ...     name="Lunch",
        ...     grades={
        ...         "Pizza": [0, 2, 3],
        ...         "Pasta": [1, 1, 3],
        ...     }
        ... )
    """
    name: str
    grades: dict[str, list[int]]  # candidate_id -> [grade per voter]

    @property
    def candidates(self) -> list[str]:
        """Candidate identifiers in lexicographic order."""
        return sorted(self.grades)

    @property
    def num_candidates(self) -> int:
        return len(self.grades)

    @property
    def num_voters(self) -> int:
        """Number of grades given to the first candidate (0 for an empty poll)."""
        if not self.grades:
            return 0
        return len(self.grades[self.candidates[0]])

    def get_grades(self, candidate: str) -> list[int]:
        """Get all grades given to a candidate."""
        return self.grades[candidate]

    def items(self) -> list[tuple[str, list[int]]]:
        """(candidate, grades) pairs in candidate order."""
        return [(c, self.grades[c]) for c in self.candidates]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "grades": {c: list(g) for c, g in self.items()},
        }


@dataclass
class Placement:
    """A candidate's placement in a voting result.

    Attributes:
        name: Candidate identifier
        rank: 0-indexed placement (0 = best)
    """
    name: str
    rank: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rank": self.rank}

    def as_pair(self) -> tuple[str, int]:
        return (self.name, self.rank)

    @classmethod
    def build_ranking(cls, ordered: list[str]) -> list[Self]:
        """Build a list of Placements from candidates ordered best to worst.

        Ranks are contiguous and start at 0.
        """
        return [cls(name=name, rank=rank) for rank, name in enumerate(ordered)]


@dataclass
class VotingResult:
    """Result from a voting system.

    Attributes:
        system_name: Human-readable name of the voting system
        final_ranking: Candidates in order from best to worst
        details: System-specific details for transparency/debugging
                 (e.g., tallies, median sequences, tie information)
    """
    system_name: str
    final_ranking: list[Placement]
    details: dict[str, Any] = field(default_factory=dict)

    def get_place(self, candidate: str) -> int | None:
        """Get the 0-indexed placement for a candidate, or None if not found."""
        for p in self.final_ranking:
            if p.name == candidate:
                return p.rank
        return None

    def as_pairs(self) -> list[tuple[str, int]]:
        """The ranking as (candidate, rank) tuples, best first."""
        return [p.as_pair() for p in self.final_ranking]
