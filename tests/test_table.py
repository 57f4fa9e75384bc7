"""
Tests for the Transition Table
==============================
Count recording, compilation and sampling in makewords/table.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from makewords import TransitionTable, DeadStateError


@pytest.fixture
def table():
    """Two rows, five columns; row 0 counts [1, 0, 2, 0, 1], row 1 dead."""
    t = TransitionTable(2, 5)
    t.record([(0, 0), (0, 2), (0, 2), (0, 4)])
    return t


class TestRecord:
    """Tests for count recording."""

    def test_counts(self, table):
        assert table.row_counts(0) == [1, 0, 2, 0, 1]
        assert table.row_counts(1) == [0] * 5
        assert table.count(0, 2) == 2
        assert table.total_observations == 4

    def test_bad_pair_changes_nothing(self, table):
        before = table.counts()
        with pytest.raises(IndexError):
            table.record([(0, 1), (2, 0)])
        assert table.counts() == before
        assert table.total_observations == 4

    def test_record_invalidates_compile(self, table):
        table.compile()
        assert table.compiled
        table.record([(1, 1)])
        assert not table.compiled


class TestCompile:
    """Tests for compile()."""

    def test_cumulative_values(self, table):
        table.compile()
        assert table.row(0) == pytest.approx([0.25, 0.25, 0.75, 0.75, 1.0])

    def test_last_column_is_one(self):
        t = TransitionTable(1, 4)
        t.record([(0, 0)] * 3 + [(0, 1)] * 7 + [(0, 3)] * 11)
        t.compile()
        assert abs(t.row(0)[-1] - 1.0) < 1e-7
        row = t.row(0)
        assert all(a <= b for a, b in zip(row, row[1:]))

    def test_prefix_sums(self):
        counts = [5, 0, 3, 9, 1]
        t = TransitionTable(1, 5)
        t.record([(0, c) for c, n in enumerate(counts) for _ in range(n)])
        t.compile()
        total = sum(counts)
        expected = [sum(counts[:j + 1]) / total for j in range(5)]
        assert t.row(0) == pytest.approx(expected)

    def test_dead_row_stays_zero(self, table):
        table.compile()
        assert table.row(1) == [0.0] * 5
        assert table.is_dead(1)
        assert not table.is_dead(0)
        assert table.dead_rows() == 1

    def test_idempotent(self, table):
        table.compile()
        once = table.probabilities()
        table.compile()
        assert table.probabilities() == once

    def test_counts_survive_compile(self, table):
        table.compile()
        assert table.row_counts(0) == [1, 0, 2, 0, 1]


class TestSample:
    """Tests for sample()."""

    @pytest.fixture
    def compiled(self, table):
        table.compile()
        return table

    @pytest.mark.parametrize("u,column", [
        (0.0, 0),
        (0.1, 0),
        (0.25, 0),
        (0.26, 2),
        (0.75, 2),
        (0.76, 4),
        (0.999, 4),
    ])
    def test_first_column_at_or_above(self, compiled, u, column):
        assert compiled.sample(0, u) == column

    def test_clamps_above_last_value(self, compiled):
        assert compiled.sample(0, 1.5) == 4

    def test_clamp_skips_unobserved_end(self):
        t = TransitionTable(1, 5)
        t.record([(0, 2), (0, 2)])
        t.compile()
        assert t.row(0) == pytest.approx([0.0, 0.0, 1.0, 1.0, 1.0])
        assert t.sample(0, 1.5) == 2

    def test_zero_draw_skips_unobserved_columns(self):
        t = TransitionTable(1, 5)
        t.record([(0, 2), (0, 3)])
        t.compile()
        assert t.row(0) == pytest.approx([0.0, 0.0, 0.5, 1.0, 1.0])
        assert t.sample(0, 0.0) == 2

    def test_dead_row_raises(self, compiled):
        with pytest.raises(DeadStateError) as exc_info:
            compiled.sample(1, 0.5)
        assert exc_info.value.row == 1

    def test_uncompiled_table_is_dead(self, table):
        with pytest.raises(DeadStateError):
            table.sample(0, 0.5)

    def test_row_out_of_range(self, compiled):
        with pytest.raises(IndexError):
            compiled.sample(5, 0.5)
