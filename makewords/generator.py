#!/usr/bin/env python3
"""
Pseudoword Generator
====================
Character-level Markov chain that learns letter transitions from a
vocabulary and samples new words that are not in it.

Lifecycle:
    gen = PseudowordGenerator("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    for word in words:
        gen.train(word)
    gen.compile()
    gen.generate()                                   # any non-vocabulary word
    gen.generate_matching(lambda w: len(w) == 5)     # plus a caller predicate

Training must finish (through compile) before sampling starts. After
that the generator is read-only: the candidate and its context live in
the sampling call, so several threads may sample at once as long as each
passes its own random source via rng=.
"""

import logging
import random
from typing import Callable, Iterable, Optional, Union

from .alphabet import Alphabet
from .config import GeneratorConfig, DEFAULT_ALPHABET, DEFAULT_CONTEXT_ORDER, DEFAULT_SLOW_ATTEMPTS_WARNING
from .context import ContextEncoder
from .errors import AttemptsExhaustedError, ConfigurationError, EmptyWordError
from .table import TransitionTable

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


class PseudowordGenerator:
    """Trains on real words, then samples plausible fake ones"""

    def __init__(self,
                 alphabet: Union[str, Alphabet] = DEFAULT_ALPHABET,
                 context_order: int = DEFAULT_CONTEXT_ORDER,
                 seed: Optional[int] = None,
                 slow_attempts_warning: int = DEFAULT_SLOW_ATTEMPTS_WARNING):
        """
        Args:
            alphabet: Permitted letters, in column order
            context_order: Number of preceding letters conditioning the next
            seed: Seed for the generator's own random source
            slow_attempts_warning: Warn when one word needs more attempts

        Raises:
            ConfigurationError: empty/invalid alphabet or non-positive order
        """
        if (isinstance(context_order, bool) or not isinstance(context_order, int)
                or context_order < 1):
            raise ConfigurationError(
                f"Context order must be a positive integer, got {context_order!r}"
            )

        self.alphabet = alphabet if isinstance(alphabet, Alphabet) else Alphabet(alphabet)
        self.context_order = context_order
        self.slow_attempts_warning = slow_attempts_warning

        self._encoder = ContextEncoder(self.alphabet.size, context_order)
        self.table = TransitionTable(self._encoder.num_rows, self._encoder.num_columns)
        self._vocabulary = set()
        self._rng = random.Random(seed)

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> 'PseudowordGenerator':
        return cls(
            alphabet=config.alphabet,
            context_order=config.context_order,
            seed=config.seed,
            slow_attempts_warning=config.slow_attempts_warning,
        )

    @property
    def num_rows(self) -> int:
        return self.table.num_rows

    @property
    def num_columns(self) -> int:
        return self.table.num_columns

    def new_encoder(self) -> ContextEncoder:
        return ContextEncoder(self.alphabet.size, self.context_order)

    # =========================================================================
    # Training
    # =========================================================================

    def train(self, word: str):
        """
        Add a vocabulary word and its N+1 transitions.

        Raises:
            EmptyWordError: word is empty
            IllegalCharacterError: word has a letter outside the alphabet
        """
        if not word:
            raise EmptyWordError()
        codes = self.alphabet.encode(word)

        encoder = self._encoder
        encoder.reset()
        observations = []
        for code in codes:
            observations.append((encoder.row_index(), code))
            encoder.advance(code)
        observations.append((encoder.row_index(), encoder.end_column))

        self.table.record(observations)
        self._vocabulary.add(word)

    def train_all(self, words: Iterable[str]) -> int:
        """Train on every word; stops at the first failure. Returns the count."""
        trained = 0
        for word in words:
            self.train(word)
            trained += 1
        logger.debug(f"Trained on {trained} words, vocabulary size {len(self._vocabulary)}")
        return trained

    def compile(self):
        """Turn transition counts into cumulative probabilities."""
        self.table.compile()

    def is_trained_word(self, word: str) -> bool:
        return word in self._vocabulary

    def __contains__(self, word) -> bool:
        return word in self._vocabulary

    @property
    def vocabulary_size(self) -> int:
        return len(self._vocabulary)

    # =========================================================================
    # Generation
    # =========================================================================

    def _sample_candidate(self, rng) -> str:
        """Walk the chain from the word start until END is drawn."""
        table = self.table
        encoder = self.new_encoder()
        end = encoder.end_column
        codes = []

        while True:
            column = table.sample(encoder.row_index(), rng.random())
            if column == end:
                encoder.advance_to_end()
                return self.alphabet.decode(codes)
            codes.append(column)
            encoder.advance(column)

    def _generate(self,
                  predicate: Optional[Predicate],
                  rng,
                  max_attempts: Optional[int]) -> str:
        if rng is None:
            rng = self._rng
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be positive")

        attempts = 0
        while True:
            if max_attempts is not None and attempts >= max_attempts:
                raise AttemptsExhaustedError(attempts)
            attempts += 1

            word = self._sample_candidate(rng)
            if word in self._vocabulary:
                continue
            if predicate is not None and not predicate(word):
                continue

            if attempts > self.slow_attempts_warning:
                logger.warning(f"Generated {word!r} only after {attempts} attempts")
            else:
                logger.debug(f"Generated {word!r} after {attempts} attempts")
            return word

    def generate(self, rng=None, max_attempts: Optional[int] = None) -> str:
        """
        Generate a word that is not in the vocabulary.

        Args:
            rng: Random source with a random() method (default: own source)
            max_attempts: Optional cap on candidates tried

        Raises:
            DeadStateError: sampling reached an unobserved context
            AttemptsExhaustedError: max_attempts candidates were all rejected
        """
        return self._generate(None, rng, max_attempts)

    def generate_matching(self,
                          predicate: Predicate,
                          rng=None,
                          max_attempts: Optional[int] = None) -> str:
        """
        Generate a non-vocabulary word for which predicate(word) is true.

        The predicate only ever sees complete candidates.
        """
        return self._generate(predicate, rng, max_attempts)
