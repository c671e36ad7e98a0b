"""
Text module - tokenization and rule-based stemming.
"""

from medibot.text.normalizer import (
    STOP_WORDS,
    SUFFIXES,
    normalize,
    stem_word,
    tokenize,
)

__all__ = [
    "STOP_WORDS",
    "SUFFIXES",
    "normalize",
    "stem_word",
    "tokenize",
]
