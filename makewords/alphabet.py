#!/usr/bin/env python3
"""
Alphabet & Symbol Codec
=======================
Maps the permitted letters to dense column indices 0..A-1.

The two sentinels never belong to an alphabet:
    START ('^') pads the context at the beginning of a word
    END   ('$') marks the end of a word
"""

from typing import Iterable, Iterator, Union

from .errors import ConfigurationError, IllegalCharacterError


START = '^'
END = '$'
RESERVED = (START, END)


class Alphabet:
    """Ordered, immutable set of single-character symbols"""

    def __init__(self, symbols: Union[str, Iterable[str]]):
        symbols = tuple(symbols)
        if not symbols:
            raise ConfigurationError("Alphabet must contain at least one symbol")

        index = {}
        for position, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ConfigurationError(
                    f"Alphabet symbols must be single characters, got {symbol!r}"
                )
            if symbol in RESERVED:
                raise ConfigurationError(
                    f"Alphabet may not contain the reserved symbol {symbol!r}"
                )
            if symbol in index:
                raise ConfigurationError(f"Duplicate alphabet symbol {symbol!r}")
            index[symbol] = position

        self._symbols = symbols
        self._index = index

    @property
    def symbols(self) -> str:
        return ''.join(self._symbols)

    @property
    def size(self) -> int:
        return len(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._index

    def __eq__(self, other) -> bool:
        return isinstance(other, Alphabet) and self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({self.symbols!r})"

    def index(self, symbol: str) -> int:
        """Column index of a symbol. Raises KeyError outside the alphabet."""
        return self._index[symbol]

    def symbol(self, index: int) -> str:
        return self._symbols[index]

    def encode(self, word: str) -> list[int]:
        """
        Encode every character of a word.

        Raises:
            IllegalCharacterError: on the first character outside the alphabet
        """
        codes = []
        for position, char in enumerate(word):
            code = self._index.get(char)
            if code is None:
                raise IllegalCharacterError(word, char, position)
            codes.append(code)
        return codes

    def decode(self, codes: Iterable[int]) -> str:
        return ''.join(self._symbols[c] for c in codes)
