"""Shared fixtures for voting system tests."""

import pytest
from tests.conftest import make_poll


@pytest.fixture
def lunch_poll():
    """Dataset 1: Four dishes, 10 voters, grades 0-3.

                0  1  2  3   (number of voters giving each grade)
    Pizza       4  1  2  3
    Chips       2  2  4  2
    Pasta       2  3  2  3
    Bread       1  4  4  1

    Chips has the only median of 2. Pizza, Pasta and Bread all have a
    median of 1 and are separated by removing median votes:
    Chips, Pasta, Bread, Pizza.
    """
    return make_poll("Lunch", {
        "Pizza": [0, 0, 3, 0, 2, 0, 3, 1, 2, 3],
        "Chips": [0, 1, 0, 2, 1, 2, 2, 3, 2, 3],
        "Pasta": [0, 1, 0, 1, 2, 1, 3, 2, 3, 3],
        "Bread": [0, 1, 2, 1, 1, 2, 1, 2, 2, 3],
    })


@pytest.fixture
def clear_medians():
    """Dataset 2: Distinct medians, 5 voters.

    A median 4, B median 3, C median 1. Order: A, B, C.
    """
    return make_poll("Clear Medians", {
        "A": [4, 4, 5, 3, 4],
        "B": [3, 2, 3, 5, 3],
        "C": [0, 1, 1, 2, 5],
    })


@pytest.fixture
def identical_grades():
    """Dataset 3: B and C got the same grades in a different order.

    Their median sequences are identical, so they are ordered by name.
    A has a lower median and is last.
    """
    return make_poll("Identical Grades", {
        "C": [2, 1, 3, 2],
        "A": [0, 1, 1, 2],
        "B": [1, 2, 2, 3],
    })


@pytest.fixture
def single_voter():
    """Dataset 4: One voter. The ranking follows that voter's grades."""
    return make_poll("Single Voter", {
        "A": [1],
        "B": [3],
        "C": [2],
    })
