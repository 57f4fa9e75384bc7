#!/usr/bin/env python3
"""
Transition Table
================
Dense rows x columns matrix stored as one flat list.

While training it holds integer transition counts. compile() turns every
row into a cumulative distribution: column j holds P(next <= j | row).
Rows that were never observed stay all zero ("dead") and cannot be
sampled.
"""

import logging
from bisect import bisect_left
from typing import Iterable

from .errors import DeadStateError

logger = logging.getLogger(__name__)


class TransitionTable:
    """Transition counts and their compiled cumulative probabilities"""

    def __init__(self, num_rows: int, num_columns: int):
        self.num_rows = num_rows
        self.num_columns = num_columns
        size = num_rows * num_columns
        self._counts = [0] * size
        self._cumulative = [0.0] * size
        self._compiled = False
        self.total_observations = 0

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def _offset(self, row: int, column: int) -> int:
        if not 0 <= row < self.num_rows:
            raise IndexError(f"Row {row} out of range [0, {self.num_rows})")
        if not 0 <= column < self.num_columns:
            raise IndexError(f"Column {column} out of range [0, {self.num_columns})")
        return row * self.num_columns + column

    def record(self, observations: Iterable[tuple[int, int]]):
        """
        Add one count per (row, column) pair.

        All offsets are resolved before any count changes, so a bad pair
        leaves the table untouched.
        """
        offsets = [self._offset(row, column) for row, column in observations]
        for offset in offsets:
            self._counts[offset] += 1
        self.total_observations += len(offsets)
        if offsets:
            self._compiled = False

    def count(self, row: int, column: int) -> int:
        return self._counts[self._offset(row, column)]

    def counts(self) -> list[int]:
        """Copy of the flat count matrix."""
        return list(self._counts)

    def row_counts(self, row: int) -> list[int]:
        start = self._offset(row, 0)
        return self._counts[start:start + self.num_columns]

    # -------------------------------------------------------------------------
    # Compilation
    # -------------------------------------------------------------------------

    def compile(self):
        """Rewrite every row as a cumulative distribution. Idempotent."""
        columns = self.num_columns
        dead = 0
        for start in range(0, len(self._counts), columns):
            row = self._counts[start:start + columns]
            total = sum(row)
            if total == 0:
                self._cumulative[start:start + columns] = [0.0] * columns
                dead += 1
                continue

            # Integer prefix sums keep the last column exactly 1.0
            running = 0
            for column, count in enumerate(row):
                running += count
                self._cumulative[start + column] = running / total

        self._compiled = True
        logger.info(
            f"Compiled transition table: {self.num_rows - dead} live rows, "
            f"{dead} dead rows, {self.total_observations} observations"
        )

    @property
    def compiled(self) -> bool:
        return self._compiled

    def probabilities(self) -> list[float]:
        """Copy of the flat cumulative matrix."""
        return list(self._cumulative)

    def row(self, row: int) -> list[float]:
        start = self._offset(row, 0)
        return self._cumulative[start:start + self.num_columns]

    def is_dead(self, row: int) -> bool:
        return self._cumulative[self._offset(row, self.num_columns - 1)] <= 0.0

    def dead_rows(self) -> int:
        return sum(1 for row in range(self.num_rows) if self.is_dead(row))

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def sample(self, row: int, u: float) -> int:
        """
        Pick the first column whose cumulative value is >= u.

        Draws above every tabulated value clamp to the last column with
        nonzero width.
        Columns with zero width at the front of the row are skipped, so
        u == 0.0 never selects an unobserved symbol.

        Raises:
            DeadStateError: the row has no observed transitions
        """
        start = self._offset(row, 0)
        last = self.num_columns - 1
        cumulative = self._cumulative
        if cumulative[start + last] <= 0.0:
            raise DeadStateError(row)

        column = bisect_left(cumulative, u, start, start + self.num_columns) - start
        if column > last:
            column = last
            while column > 0 and cumulative[start + column] == cumulative[start + column - 1]:
                column -= 1
        while column < last and cumulative[start + column] <= 0.0:
            column += 1
        return column
