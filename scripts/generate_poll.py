"""Generate a random sample poll.

Candidate names are generated using faker and grades are drawn at random,
both from a fixed seed, so the same arguments always give the same poll.
The poll is written as JSON, CSV or an HTML table.

Usage:
    python scripts/generate_poll.py
    python scripts/generate_poll.py -n 6 --voters 25 --max-grade 5 -f csv -o poll.csv
"""

import argparse
import csv
import html
import io
import json
import math
import random
from pathlib import Path

from faker import Faker

DEFAULT_SEED = 20261019
DEFAULT_CANDIDATES = 4
DEFAULT_VOTERS = 10
DEFAULT_MAX_GRADE = 3
FORMATS = ("json", "csv", "html")


def generate_candidate_names(count: int, seed: int) -> list[str]:
    """Generate distinct candidate names."""
    fake = Faker(["en_US", "en_GB", "de_DE", "fr_FR"])
    Faker.seed(seed)

    names: list[str] = []
    seen: set[str] = set()
    while len(names) < count:
        name = fake.first_name()
        if name.lower() in seen:
            continue
        seen.add(name.lower())
        names.append(name)
    return names


def generate_grades(candidates: list[str], voters: int, max_grade: int,
                    seed: int) -> dict[str, list[int]]:
    """Draw one grade in 0..max_grade per voter per candidate.

    Each candidate gets a random appeal in [-1, 1] which tilts its grades
    towards the bottom (negative) or the top (positive) of the scale.
    """
    rng = random.Random(seed)
    grades: dict[str, list[int]] = {}
    for candidate in candidates:
        appeal = rng.uniform(-1, 1)
        weights = [math.exp(appeal * g) for g in range(max_grade + 1)]
        grades[candidate] = rng.choices(range(max_grade + 1), weights=weights, k=voters)
    return grades


def to_json(name: str, grades: dict[str, list[int]]) -> str:
    return json.dumps({"name": name, "grades": grades}, indent=2) + "\n"


def to_csv(name: str, grades: dict[str, list[int]]) -> str:
    voters = len(next(iter(grades.values()), []))
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(["Candidate"] + [f"Voter {i + 1}" for i in range(voters)])
    for candidate, values in grades.items():
        writer.writerow([candidate] + values)
    return out.getvalue()


def to_html(name: str, grades: dict[str, list[int]]) -> str:
    voters = len(next(iter(grades.values()), []))
    header = "".join(f"<th>Voter {i + 1}</th>" for i in range(voters))
    rows = [f"    <tr><th>Candidate</th>{header}</tr>"]
    for candidate, values in grades.items():
        cells = "".join(f"<td>{v}</td>" for v in values)
        rows.append(f"    <tr><td>{html.escape(candidate)}</td>{cells}</tr>")
    body = "\n".join(rows)
    return (
        "<html>\n<head><title>{title}</title></head>\n<body>\n"
        "  <table class=\"poll\">\n    <caption>{title}</caption>\n{body}\n  </table>\n"
        "</body>\n</html>\n"
    ).format(title=html.escape(name), body=body)


WRITERS = {"json": to_json, "csv": to_csv, "html": to_html}


def main():
    parser = argparse.ArgumentParser(
        description="Generate a random sample poll")
    parser.add_argument("-n", "--candidates", type=int, default=DEFAULT_CANDIDATES,
                        help=f"Number of candidates (default: {DEFAULT_CANDIDATES})")
    parser.add_argument("--voters", type=int, default=DEFAULT_VOTERS,
                        help=f"Number of voters (default: {DEFAULT_VOTERS})")
    parser.add_argument("--max-grade", type=int, default=DEFAULT_MAX_GRADE,
                        help=f"Highest grade (default: {DEFAULT_MAX_GRADE})")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help=f"Random seed (default: {DEFAULT_SEED})")
    parser.add_argument("--name", default="Generated Poll", help="Poll name")
    parser.add_argument("-f", "--format", choices=FORMATS, default="json",
                        help="Output format (default: json)")
    parser.add_argument("-o", "--output",
                        help="Output path (default: print to stdout)")
    args = parser.parse_args()

    if args.candidates < 1 or args.voters < 1 or args.max_grade < 0:
        parser.error("need at least one candidate, one voter and a max grade of 0 or more")

    candidates = generate_candidate_names(args.candidates, args.seed)
    grades = generate_grades(candidates, args.voters, args.max_grade, args.seed)
    text = WRITERS[args.format](args.name, grades)

    if args.output is None:
        print(text, end="")
        return

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    print(f"Written to {output_path}")


if __name__ == "__main__":
    main()
