"""Rank a poll file by Majority Judgment and print the result.

Reads a poll in any supported format (JSON, CSV or HTML table), ranks the
candidates and prints the ranking as (candidate, rank) tuples, best first.

Usage:
    python scripts/rank_poll.py polls/lunch.csv
    python scripts/rank_poll.py --sample
    python scripts/rank_poll.py polls/lunch.json -v
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.analyze import AnalysisError, analyze, analyze_poll  # noqa: E402
from core.models import Poll  # noqa: E402

SAMPLE_POLL = Poll(
    name="Sample Poll",
    grades={
        "Pizza": [0, 0, 3, 0, 2, 0, 3, 1, 2, 3],
        "Chips": [0, 1, 0, 2, 1, 2, 2, 3, 2, 3],
        "Pasta": [0, 1, 0, 1, 2, 1, 3, 2, 3, 3],
        "Bread": [0, 1, 2, 1, 1, 2, 1, 2, 2, 3],
    },
)


def main():
    parser = argparse.ArgumentParser(
        description="Rank a poll by Majority Judgment")
    parser.add_argument("input", nargs="?",
                        help="Path to the poll file (.json, .csv or .html)")
    parser.add_argument("--sample", action="store_true",
                        help="Rank the built-in sample poll instead of a file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log each step of the analysis")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.sample == bool(args.input):
        parser.error("give exactly one of a poll file or --sample")

    try:
        if args.sample:
            result = analyze(SAMPLE_POLL)
        else:
            path = Path(args.input)
            result = analyze_poll(path.name, path.read_bytes())
    except AnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Poll: {result.poll.name}")
    print(f"Data: {result.poll.to_dict()['grades']}")
    for voting_result in result.results:
        print(f"\n{voting_result.system_name}")
        print(f"Results as (candidate, rank): {voting_result.as_pairs()}")
        sequences = voting_result.details.get("median_sequences", {})
        for placement in voting_result.final_ranking:
            print(f"  {placement.rank}. {placement.name}  {sequences.get(placement.name, '')}")
        for group in voting_result.details.get("ties", []):
            print(f"  Identical grades, ordered by name: {', '.join(group)}")


if __name__ == "__main__":
    main()
