#!/usr/bin/env python3
"""
Context Encoder
===============
Tracks the K most recently emitted symbols of a word and maps them to a
row of the transition table.

Each slot is a base-(A+1) digit: letters are 0..A-1 and the START
sentinel is A. The oldest slot is the most significant digit, so

    row = sum(digit[i] * (A+1) ** (K-1-i))

which ranges over [0, (A+1)**K). A freshly reset encoder sits on the
all-START row, (A+1)**K - 1.

The next symbol is addressed by column: letters 0..A-1, END is A.
"""

from typing import Optional, Sequence


class ContextEncoder:
    """Sliding window of order K over symbol codes"""

    def __init__(self, alphabet_size: int, order: int):
        if alphabet_size < 1:
            raise ValueError("alphabet_size must be positive")
        if order < 1:
            raise ValueError("order must be positive")

        self.alphabet_size = alphabet_size
        self.order = order
        self.base = alphabet_size + 1
        self.num_rows = self.base ** order
        self.num_columns = self.base

        # START and END share the last digit / column value
        self.start_digit = alphabet_size
        self.end_column = alphabet_size
        self.start_row = self.num_rows - 1

        self._slots = [self.start_digit] * order
        self._row = self.start_row
        self._ended = False

    def reset(self):
        """Fill every slot with START."""
        self._slots = [self.start_digit] * self.order
        self._row = self.start_row
        self._ended = False

    def advance(self, code: int):
        """Push a letter code as the newest slot, dropping the oldest."""
        if not 0 <= code < self.alphabet_size:
            raise ValueError(f"Symbol code {code} outside alphabet of size {self.alphabet_size}")
        if self._ended:
            raise ValueError("Cannot advance past the end of a word")
        self._shift(code)

    def advance_to_end(self):
        """Push the END sentinel as the newest slot."""
        if self._ended:
            raise ValueError("Word already ended")
        self._shift(self.end_column)
        self._ended = True

    def _shift(self, digit: int):
        del self._slots[0]
        self._slots.append(digit)
        self._row = (self._row * self.base + digit) % self.num_rows

    def row_index(self) -> int:
        return self._row

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def slots(self) -> tuple:
        """Current digits, oldest first."""
        return tuple(self._slots)

    def row_for(self, context: Sequence[Optional[int]]) -> int:
        """
        Row index of an explicit context.

        Args:
            context: K letter codes, oldest first; None stands for START
        """
        if len(context) != self.order:
            raise ValueError(f"Context must have exactly {self.order} slots")
        row = 0
        for code in context:
            if code is None:
                digit = self.start_digit
            elif 0 <= code < self.alphabet_size:
                digit = code
            else:
                raise ValueError(f"Symbol code {code} outside alphabet of size {self.alphabet_size}")
            row = row * self.base + digit
        return row

    def context_for(self, row: int) -> tuple:
        """Inverse of row_for: letter codes oldest first, None for START."""
        if not 0 <= row < self.num_rows:
            raise ValueError(f"Row {row} out of range")
        digits = []
        for _ in range(self.order):
            row, digit = divmod(row, self.base)
            digits.append(None if digit == self.start_digit else digit)
        return tuple(reversed(digits))
