"""Shared fixtures for makewords tests."""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from makewords import PseudowordGenerator


# Small vocabulary over {A, B, D, E} with plenty of unseen recombinations
VOCABULARY = [
    'BAD', 'BED', 'DAB', 'BEAD', 'DEAD', 'ABED', 'BADE',
    'DEED', 'EBB', 'ADD', 'DAD', 'BEADED',
]


class FixedDraws:
    """Random source replaying a fixed sequence of uniform draws."""

    def __init__(self, draws):
        self._draws = iter(draws)

    def random(self):
        return next(self._draws)


@pytest.fixture
def fixed_draws():
    return FixedDraws


@pytest.fixture
def vocabulary():
    return list(VOCABULARY)


@pytest.fixture
def trained(vocabulary):
    """Compiled order-2 generator over ABDE."""
    gen = PseudowordGenerator("ABDE", context_order=2, seed=1234)
    gen.train_all(vocabulary)
    gen.compile()
    return gen
