#!/usr/bin/env python3
"""Ready-made predicates for PseudowordGenerator.generate_matching()."""

import re
from typing import Callable, Union

Predicate = Callable[[str], bool]


def pattern(regex: Union[str, 're.Pattern']) -> Predicate:
    """
    Predicate that is true when the regex matches the whole word.

    Raises:
        re.error: regex does not compile
    """
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def matches(word: str) -> bool:
        return compiled.fullmatch(word) is not None

    matches.pattern = compiled.pattern
    return matches


def length_between(shortest: int, longest: int) -> Predicate:
    """Predicate that is true for words of shortest..longest letters."""
    if shortest > longest:
        raise ValueError(f"Empty length range {shortest}..{longest}")

    def matches(word: str) -> bool:
        return shortest <= len(word) <= longest

    return matches


def all_of(*predicates: Predicate) -> Predicate:
    def matches(word: str) -> bool:
        return all(p(word) for p in predicates)

    return matches
