#!/usr/bin/env python3
"""
makewords CLI
=============
Command-line interface for pseudoword generation.

Usage:
    makewords generate 10 dict.txt
    makewords generate 10 dict.txt '^B.*D$' --seed 42
    makewords stats dict.txt
"""

import argparse
import logging
import re
import sys

from . import __version__
from .config import GeneratorConfig, uppercase_vocabulary
from .criteria import pattern
from .errors import MakewordsError
from .generator import PseudowordGenerator
from .settings import resolve_path
from .vocabulary import train_from_file

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, *args, **kwargs):
        """Command results are printed even in quiet mode."""
        print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                          for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def build_generator(args) -> PseudowordGenerator:
    """Construct, train and compile a generator from CLI arguments."""
    config = GeneratorConfig.from_settings(
        alphabet=args.alphabet,
        context_order=args.order,
        seed=args.seed,
    )
    generator = PseudowordGenerator.from_config(config)
    train_from_file(generator, resolve_path(args.dictionary), uppercase=uppercase_vocabulary())
    generator.compile()
    return generator


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output) -> int:
    if args.count < 0:
        out.error(f"count must not be negative, got {args.count}")
        return 1
    if args.max_attempts is not None and args.max_attempts < 1:
        out.error(f"--max-attempts must be positive, got {args.max_attempts}")
        return 1

    criteria = None
    if args.criteria:
        try:
            criteria = pattern(args.criteria)
        except re.error as e:
            out.error(f"Invalid criteria argument: {args.criteria} ({e})")
            return 1

    try:
        generator = build_generator(args)
    except OSError as e:
        out.error(f"Cannot open file {args.dictionary}: {e.strerror or e}")
        return 1

    for _ in range(args.count):
        if criteria is not None:
            word = generator.generate_matching(criteria, max_attempts=args.max_attempts)
        else:
            word = generator.generate(max_attempts=args.max_attempts)
        out.result(word)
    return 0


def cmd_stats(args, out: Output) -> int:
    try:
        generator = build_generator(args)
    except OSError as e:
        out.error(f"Cannot open file {args.dictionary}: {e.strerror or e}")
        return 1

    table = generator.table
    rows = [
        ('alphabet', generator.alphabet.symbols),
        ('alphabet size', generator.alphabet.size),
        ('context order', generator.context_order),
        ('rows', table.num_rows),
        ('columns', table.num_columns),
        ('vocabulary', generator.vocabulary_size),
        ('observations', table.total_observations),
        ('dead rows', table.dead_rows()),
    ]
    if out.quiet:
        for key, value in rows:
            out.result(f"{key}: {value}")
    else:
        out.print(f"Model trained on {args.dictionary}\n")
        out.table(['Statistic', 'Value'], rows)
    return 0


def _add_model_arguments(p):
    p.add_argument('dictionary', help='Dictionary file, one word per line')
    p.add_argument('--alphabet', help='Permitted letters (default: from app.yaml)')
    p.add_argument('--order', '-k', type=int, help='Context order (default: from app.yaml)')
    p.add_argument('--seed', type=int, help='Random seed for reproducible output')


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='makewords',
        description='makewords - Markov chain pseudoword generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate 10 dict.txt
  %(prog)s generate 20 dict.txt '^B.*D$' --seed 7
  %(prog)s stats dict.txt --order 3
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate pseudowords')
    p.add_argument('count', type=int, help='Number of words to generate')
    _add_model_arguments(p)
    p.add_argument('criteria', nargs='?', help='Regex each word must match in full')
    p.add_argument('--max-attempts', type=int, help='Give up on a word after this many candidates')

    # --- stats ---
    p = subparsers.add_parser('stats', help='Show model statistics')
    _add_model_arguments(p)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'gen': 'generate', 'g': 'generate'}
    command = cmd_map.get(args.command, args.command)
    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'stats': cmd_stats,
    }

    try:
        return commands[command](args, out)
    except MakewordsError as e:
        out.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
