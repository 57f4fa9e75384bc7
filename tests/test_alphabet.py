"""
Tests for the Alphabet
======================
Symbol codec and construction checks in makewords/alphabet.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from makewords import Alphabet, ConfigurationError, IllegalCharacterError


class TestAlphabetInit:
    """Tests for Alphabet construction."""

    def test_from_string(self):
        alphabet = Alphabet("ABDE")
        assert alphabet.size == 4
        assert len(alphabet) == 4
        assert alphabet.symbols == "ABDE"

    def test_from_list(self):
        assert Alphabet(['x', 'y']).symbols == "xy"

    def test_empty_rejected(self):
        with pytest.raises(ConfigurationError):
            Alphabet("")

    def test_duplicate_rejected(self):
        with pytest.raises(ConfigurationError, match="Duplicate"):
            Alphabet("ABA")

    @pytest.mark.parametrize("symbol", ['^', '$'])
    def test_sentinel_rejected(self, symbol):
        with pytest.raises(ConfigurationError, match="reserved"):
            Alphabet("AB" + symbol)

    def test_multichar_symbol_rejected(self):
        with pytest.raises(ConfigurationError):
            Alphabet(['A', 'BC'])


class TestAlphabetCodec:
    """Tests for encode/decode."""

    @pytest.fixture
    def alphabet(self):
        return Alphabet("ABDE")

    def test_index_follows_order(self, alphabet):
        assert [alphabet.index(c) for c in "ABDE"] == [0, 1, 2, 3]

    def test_index_unknown_raises(self, alphabet):
        with pytest.raises(KeyError):
            alphabet.index('C')

    def test_encode(self, alphabet):
        assert alphabet.encode("BEAD") == [1, 3, 0, 2]

    def test_decode(self, alphabet):
        assert alphabet.decode([2, 0, 1]) == "DAB"

    def test_encode_reports_first_bad_character(self, alphabet):
        with pytest.raises(IllegalCharacterError) as exc_info:
            alphabet.encode("ABCDC")
        assert exc_info.value.character == 'C'
        assert exc_info.value.position == 2
        assert exc_info.value.word == "ABCDC"

    def test_case_sensitive(self, alphabet):
        assert 'a' not in alphabet
        assert 'A' in alphabet
