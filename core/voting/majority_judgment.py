"""Majority Judgment voting system."""

import math
from collections.abc import Mapping, Sequence

from core.models import Placement, Poll, VotingResult
from core.voting import register_voting_system
from core.voting.base import (
    EmptyBallotSetError,
    MedianIndexOutOfRangeError,
    NegativeCumulativeValueError,
    VotingSystem,
    validate_poll,
)

MEDIAN_THRESHOLD = 0.5


def group_runs(grades: Sequence[int]) -> list[list[int]]:
    """Split a sorted sequence into maximal runs of equal values.

    >>> group_runs([0, 0, 1, 3, 3])
    [[0, 0], [1], [3, 3]]
    """
    runs: list[list[int]] = []
    for grade in grades:
        if runs and runs[-1][0] == grade:
            runs[-1].append(grade)
        else:
            runs.append([grade])
    return runs


def compute_frequency_of_grades(grades: Sequence[int]) -> dict[int, int]:
    """Count how many times each grade was given.

    Returns a dict mapping grade -> count, with grades inserted in
    ascending order.
    """
    return {run[0]: len(run) for run in group_runs(sorted(grades))}


def cumulative_profile(counts: Sequence[int]) -> list[float]:
    """Running sum of each count's share of the total.

    The last value is 1.0, give or take floating point drift.
    """
    total = sum(counts)
    profile = []
    running = 0.0
    for count in counts:
        running += count / total
        profile.append(running)
    return profile


def median_index(profile: Sequence[float]) -> int:
    """Find the index of the median grade in a cumulative profile.

    This is the first position where the cumulative share reaches one half.
    For an even number of votes this is the lower of the two middle grades.
    Falls back to the last index if the profile never reaches one half.

    Raises:
        NegativeCumulativeValueError: If the profile contains a negative value
        MedianIndexOutOfRangeError: If the profile is empty
    """
    if not profile:
        raise MedianIndexOutOfRangeError("Cannot find a median in an empty profile")
    if any(value < 0 for value in profile):
        raise NegativeCumulativeValueError(
            f"Cumulative profile contains negative values: {list(profile)}"
        )

    for idx, value in enumerate(profile):
        if value >= MEDIAN_THRESHOLD or math.isclose(value, MEDIAN_THRESHOLD):
            return idx
    return len(profile) - 1


def compute_median_sequence(grades: Sequence[int]) -> list[int]:
    """Compute the successive median grades of a candidate.

    The first element is the candidate's median (majority) grade. Each
    following element is the median after removing one vote at the previous
    median grade, so the result has one element per vote and orders the
    grades from most to least significant for Majority Judgment.

    Raises:
        EmptyBallotSetError: If no grades were given
    """
    if not grades:
        raise EmptyBallotSetError("Cannot compute medians of an empty ballot set")

    tally = compute_frequency_of_grades(grades)
    keys = list(tally.keys())
    counts = list(tally.values())

    medians: list[int] = []
    for _ in range(len(grades)):
        if sum(counts) <= 0:
            raise MedianIndexOutOfRangeError(
                f"No votes left after {len(medians)} of {len(grades)} medians"
            )
        idx = median_index(cumulative_profile(counts))
        if idx >= len(keys):
            raise MedianIndexOutOfRangeError(
                f"Median index {idx} is out of range for {len(keys)} distinct grades"
            )
        medians.append(keys[idx])
        # Remove one vote at the median grade; keys are never pruned
        counts[idx] -= 1

    return medians


def compute_median_sequences(
    poll: Mapping[str, Sequence[int]],
) -> dict[str, list[int]]:
    """Compute the median sequence of every candidate, in candidate order."""
    return {c: compute_median_sequence(poll[c]) for c in sorted(poll)}


def order_candidates(median_sequences: Mapping[str, list[int]]) -> list[str]:
    """Order candidates best to worst by their median sequences.

    Sequences are compared element by element, higher grades first.
    Candidates with identical sequences keep identifier order.
    """
    # sorted() stays stable with reverse=True
    return sorted(sorted(median_sequences), key=lambda c: median_sequences[c], reverse=True)


def rank(poll: Mapping[str, Sequence[int]] | Poll) -> list[tuple[str, int]]:
    """Rank the candidates of a poll by Majority Judgment.

    Args:
        poll: A Poll, or any mapping of candidate_id -> grades

    Returns:
        (candidate, rank) tuples from best to worst, ranks starting at 0

    Raises:
        PollError: If the poll is empty, a candidate has no grades, the
            candidates have different numbers of grades or a grade is invalid
    """
    grades = poll.grades if isinstance(poll, Poll) else poll
    validate_poll(grades)
    ordered = order_candidates(compute_median_sequences(grades))
    return [(candidate, position) for position, candidate in enumerate(ordered)]


def _identical_groups(
    ordered: list[str], median_sequences: Mapping[str, list[int]]
) -> list[list[str]]:
    """Find runs of adjacent candidates with identical median sequences."""
    groups: list[list[str]] = []
    for candidate in ordered:
        if groups and median_sequences[groups[-1][0]] == median_sequences[candidate]:
            groups[-1].append(candidate)
        else:
            groups.append([candidate])
    return [g for g in groups if len(g) > 1]


@register_voting_system
class MajorityJudgmentSystem(VotingSystem):
    """Majority Judgment voting system.

    Each voter grades every candidate. Candidates are compared by their
    median grade. Ties are broken by removing one vote at the median grade
    from each tied candidate and comparing the new medians, repeatedly,
    until the medians differ or all votes are used up.

    Algorithm:
    1. Tally each candidate's grades
    2. Repeatedly take the median and remove one vote at that grade,
       giving the candidate's median sequence
    3. Sort candidates by median sequence, highest first

    Candidates whose median sequences are identical (which means their
    grades are identical) are ordered by identifier.
    """

    @property
    def name(self) -> str:
        return "Majority Judgment"

    @property
    def description(self) -> str:
        return "Median-grade system: highest median wins, ties broken by removing median votes"

    def calculate(self, poll: Poll) -> VotingResult:
        validate_poll(poll)

        median_sequences = compute_median_sequences(poll.grades)
        ordered = order_candidates(median_sequences)

        return VotingResult(
            system_name=self.name,
            final_ranking=Placement.build_ranking(ordered),
            details={
                "tallies": {c: compute_frequency_of_grades(poll.get_grades(c))
                            for c in poll.candidates},
                "majority_grades": {c: seq[0] for c, seq in median_sequences.items()},
                "median_sequences": median_sequences,
                "ties": _identical_groups(ordered, median_sequences),
            },
        )
