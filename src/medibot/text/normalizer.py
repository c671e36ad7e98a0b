"""
Text normalizer - turns raw text into the canonical token sequence.

Every other component (vector space, ranker) sees text only through
normalize(), so the index and the queries always agree on vocabulary.

Pipeline:
1. Lowercase
2. Replace non-word characters with spaces
3. Split on whitespace
4. Drop short tokens (<= 2 chars) and stop words
5. Strip one suffix per token (rule-based, not a real stemmer)
6. Drop stems that collapsed onto a stop word ("notion" -> "not")
"""

from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)

MIN_TOKEN_LENGTH = 3

STOP_WORDS = frozenset({
    "the", "is", "at", "which", "on", "and", "a", "to", "are", "as",
    "was", "with", "for", "by", "an", "be", "or", "in", "that", "have",
    "it", "not", "of", "you", "he", "she", "they", "we", "i", "me",
    "my", "your", "his", "her", "their", "our",
})

# Checked in this order, first match wins.
SUFFIXES = ("ing", "ed", "er", "est", "ly", "ion", "tion", "ness", "ment")


def stem_word(word: str) -> str:
    """
    Strip the first matching suffix from a word.

    The suffix is only removed when more than two characters remain,
    so "bed" and "red" are left alone while "coughing" becomes "cough".
    """
    for suffix in SUFFIXES:
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            return word[: -len(suffix)]
    return word


def tokenize(text: str) -> list[str]:
    """Lowercase and split text, without filtering or stemming."""
    return _NON_WORD_RE.sub(" ", text.lower()).split()


def normalize(text: str) -> list[str]:
    """Return the filtered, stemmed token sequence for a piece of text."""
    stems = (
        stem_word(token)
        for token in tokenize(text)
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    )
    return [stem for stem in stems if stem not in STOP_WORDS]
