#!/usr/bin/env python3
"""
makewords - Markov Chain Pseudoword Generator
=============================================

Learns letter-transition statistics from a vocabulary and generates
word-like strings that are not in it, for games that mix real and fake
words.

Quick Start
-----------
    from makewords import PseudowordGenerator, pattern

    gen = PseudowordGenerator("ABCDEFGHIJKLMNOPQRSTUVWXYZ", context_order=2)
    for word in ["BREAD", "BRED", "BOARD"]:
        gen.train(word)
    gen.compile()

    gen.generate()
    gen.generate_matching(pattern(r"B.*D"))

Modules
-------
    makewords.alphabet   - Symbol codec and sentinels
    makewords.context    - Order-K context to row index encoding
    makewords.table      - Transition counts and cumulative probabilities
    makewords.generator  - Training and rejection sampling
    makewords.vocabulary - Dictionary file loading
    makewords.criteria   - Predicates for generate_matching()

CLI Usage
---------
    python -m makewords generate 10 dict.txt
    python -m makewords generate 10 dict.txt '^B.*D$'
"""

__version__ = "0.1.0"

from .alphabet import Alphabet, START, END
from .config import GeneratorConfig
from .context import ContextEncoder
from .criteria import pattern, length_between, all_of
from .errors import (
    MakewordsError,
    ConfigurationError,
    TrainError,
    EmptyWordError,
    IllegalCharacterError,
    DeadStateError,
    AttemptsExhaustedError,
    VocabularyLoadError,
)
from .generator import PseudowordGenerator
from .table import TransitionTable
from .vocabulary import (
    VocabularyEntry,
    parse_line,
    read_vocabulary,
    load_vocabulary,
    train_from_lines,
    train_from_file,
)

__all__ = [
    "__version__",
    "Alphabet",
    "START",
    "END",
    "GeneratorConfig",
    "ContextEncoder",
    "TransitionTable",
    "PseudowordGenerator",
    "pattern",
    "length_between",
    "all_of",
    "VocabularyEntry",
    "parse_line",
    "read_vocabulary",
    "load_vocabulary",
    "train_from_lines",
    "train_from_file",
    "MakewordsError",
    "ConfigurationError",
    "TrainError",
    "EmptyWordError",
    "IllegalCharacterError",
    "DeadStateError",
    "AttemptsExhaustedError",
    "VocabularyLoadError",
]
