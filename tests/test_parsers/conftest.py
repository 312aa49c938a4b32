"""Shared fixtures for parser tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

LUNCH_GRADES = {
    "Pizza": [0, 0, 3, 0, 2, 0, 3, 1, 2, 3],
    "Chips": [0, 1, 0, 2, 1, 2, 2, 3, 2, 3],
    "Pasta": [0, 1, 0, 1, 2, 1, 3, 2, 3, 3],
    "Bread": [0, 1, 2, 1, 1, 2, 1, 2, 2, 3],
}


@pytest.fixture
def lunch_grades():
    return {c: list(g) for c, g in LUNCH_GRADES.items()}


@pytest.fixture
def lunch_json():
    return (FIXTURES_DIR / "lunch.json").read_bytes()


@pytest.fixture
def lunch_csv():
    return (FIXTURES_DIR / "lunch.csv").read_bytes()


@pytest.fixture
def lunch_html():
    return (FIXTURES_DIR / "lunch.html").read_bytes()
