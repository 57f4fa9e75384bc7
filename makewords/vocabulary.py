#!/usr/bin/env python3
"""
Vocabulary Loader
=================
Reads dictionary files with one word per line, optionally followed by a
space and free-form metadata (e.g. a definition):

    AARDVARK a burrowing African mammal
    ABACUS

Blank lines are skipped.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .errors import TrainError, VocabularyLoadError

logger = logging.getLogger(__name__)


@dataclass
class VocabularyEntry:
    """One dictionary line"""
    line_number: int
    word: str
    metadata: Optional[str] = None


def parse_line(line: str) -> Optional[tuple[str, Optional[str]]]:
    """Split a line into (word, metadata). Returns None for blank lines."""
    line = line.rstrip('\r\n').strip()
    if not line:
        return None
    word, _, metadata = line.partition(' ')
    metadata = metadata.strip()
    return word, (metadata or None)


def _decode(line: bytes, line_number: int) -> str:
    try:
        return line.decode('utf-8')
    except UnicodeDecodeError as e:
        shown = line.decode('utf-8', errors='replace').strip()
        raise VocabularyLoadError(line_number, shown, f"not valid UTF-8: {e.reason}") from e


def read_vocabulary(lines: Iterable[Union[str, bytes]],
                    uppercase: bool = False) -> Iterator[VocabularyEntry]:
    """
    Yield an entry per non-blank line, numbering lines from 1.

    Byte lines are decoded as UTF-8.

    Raises:
        VocabularyLoadError: a byte line is not valid UTF-8
    """
    for line_number, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            line = _decode(line, line_number)
        parsed = parse_line(line)
        if parsed is None:
            continue
        word, metadata = parsed
        if uppercase:
            word = word.upper()
        yield VocabularyEntry(line_number=line_number, word=word, metadata=metadata)


def load_vocabulary(path: Union[str, Path], uppercase: bool = False) -> list[VocabularyEntry]:
    """Read every entry of a dictionary file."""
    path = Path(path)
    with path.open('rb') as f:
        entries = list(read_vocabulary(f, uppercase=uppercase))
    logger.debug(f"Loaded {len(entries)} entries from {path}")
    return entries


def train_from_lines(generator, lines: Iterable[str], uppercase: bool = False) -> int:
    """
    Train a generator on dictionary lines and return the number of words.

    Raises:
        VocabularyLoadError: a word was empty or had letters outside the
            alphabet, or a line was not valid UTF-8; identifies the line and word
    """
    trained = 0
    for entry in read_vocabulary(lines, uppercase=uppercase):
        try:
            generator.train(entry.word)
        except TrainError as e:
            raise VocabularyLoadError(entry.line_number, entry.word, str(e)) from e
        trained += 1
    logger.info(f"Trained on {trained} dictionary words")
    return trained


def train_from_file(generator, path: Union[str, Path], uppercase: bool = False) -> int:
    path = Path(path)
    with path.open('rb') as f:
        return train_from_lines(generator, f, uppercase=uppercase)
