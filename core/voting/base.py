"""Abstract base class for voting systems, and poll validation."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from core.models import Poll, VotingResult


class PollError(ValueError):
    """Raised when a poll cannot be ranked because its input is invalid."""
    pass


class EmptyPollError(PollError):
    """Raised when a poll has no candidates."""
    pass


class EmptyBallotSetError(PollError):
    """Raised when a candidate has received no grades.

    A candidate without grades has no median.
    """
    pass


class UnequalBallotLengthsError(PollError):
    """Raised when candidates have received different numbers of grades.

    Every voter grades every candidate, so all ballot sets in a poll must
    have the same length.
    """
    pass


class InvalidGradeError(PollError):
    """Raised when a grade is not a non-negative integer."""
    pass


class MajorityJudgmentInvariantError(RuntimeError):
    """Internal consistency check failed while extracting medians.

    These cannot happen for a validated poll; seeing one means a bug.
    """
    pass


class NegativeCumulativeValueError(MajorityJudgmentInvariantError):
    pass


class MedianIndexOutOfRangeError(MajorityJudgmentInvariantError):
    pass


def validate_poll(poll: Mapping[str, Sequence[int]] | Poll) -> None:
    """Check that a poll can be ranked.

    Args:
        poll: A Poll, or any mapping of candidate_id -> grades

    Raises:
        EmptyPollError: If there are no candidates
        EmptyBallotSetError: If a candidate has no grades
        UnequalBallotLengthsError: If candidates have different numbers of grades
        InvalidGradeError: If a grade is not a non-negative integer
    """
    grades = poll.grades if isinstance(poll, Poll) else poll
    if not grades:
        raise EmptyPollError("The poll has no candidates")

    lengths = {candidate: len(ballots) for candidate, ballots in grades.items()}
    empty = sorted(c for c, n in lengths.items() if n == 0)
    if empty:
        raise EmptyBallotSetError(
            f"No grades were given to: {', '.join(empty)}"
        )

    if len(set(lengths.values())) > 1:
        summary = ", ".join(f"{c}={n}" for c, n in sorted(lengths.items()))
        raise UnequalBallotLengthsError(
            f"All candidates must have the same number of grades, got {summary}"
        )

    for candidate, ballots in grades.items():
        for grade in ballots:
            if isinstance(grade, bool) or not isinstance(grade, int) or grade < 0:
                raise InvalidGradeError(
                    f"Invalid grade {grade!r} for {candidate}: "
                    f"grades must be non-negative integers"
                )


class VotingSystem(ABC):
    """Abstract base class for voting systems.

    Each voting system implementation calculates a final ranking from
    a poll using its own algorithm. Systems are registered via
    the @register_voting_system decorator in core/voting/__init__.py.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this voting system."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this voting system works."""
        return ""

    @abstractmethod
    def calculate(self, poll: Poll) -> VotingResult:
        """Calculate the final ranking using this voting system.

        Args:
            poll: The poll with every candidate's grades

        Returns:
            VotingResult with the final ranking and calculation details

        Raises:
            PollError: If the poll is invalid
        """
        pass
