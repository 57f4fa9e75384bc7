#!/usr/bin/env python3
"""
Configuration
=============
One explicit configuration value for building a generator, with
defaults read from configs/app.yaml.
"""

from dataclasses import dataclass
from typing import Optional

from .settings import get_setting


DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_CONTEXT_ORDER = 2
DEFAULT_SLOW_ATTEMPTS_WARNING = 1000


@dataclass(frozen=True)
class GeneratorConfig:
    """Construction parameters for PseudowordGenerator"""
    alphabet: str = DEFAULT_ALPHABET
    context_order: int = DEFAULT_CONTEXT_ORDER
    seed: Optional[int] = None
    slow_attempts_warning: int = DEFAULT_SLOW_ATTEMPTS_WARNING

    @classmethod
    def from_settings(cls, **overrides) -> 'GeneratorConfig':
        """
        Build a config from app.yaml, letting keyword overrides win.

        Overrides set to None are ignored so CLI arguments can be passed
        straight through.
        """
        values = {
            'alphabet': get_setting('generator.alphabet', DEFAULT_ALPHABET),
            'context_order': get_setting('generator.context_order', DEFAULT_CONTEXT_ORDER),
            'seed': get_setting('generator.seed'),
            'slow_attempts_warning': get_setting(
                'generator.slow_attempts_warning', DEFAULT_SLOW_ATTEMPTS_WARNING
            ),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def uppercase_vocabulary() -> bool:
    """Whether dictionary words are upper-cased before training."""
    return bool(get_setting('vocabulary.uppercase', True))
