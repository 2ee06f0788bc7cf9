"""
Tokenizers feeding the stemmer.

Python's ``re`` has no notion of extended grapheme clusters, so this module
uses the ``regex`` package:

1. ``graphemes`` splits a word into grapheme clusters (``\\X``), the unit the
   stemmer operates on. "café" written with a combining accent stays four
   graphemes, not five code points.
2. ``words`` splits running text into word tokens for the demo/CLI.
"""

import regex

_GRAPHEME = regex.compile(r"\X")

# Letters/digits/marks, allowing inner apostrophes ("don't", "o'clock")
_WORD = regex.compile(r"[\p{L}\p{M}\p{N}_]+(?:['’][\p{L}\p{M}\p{N}_]+)*")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def words(text: str) -> list[str]:
    """Split running text into Unicode word tokens, dropping punctuation."""
    return _WORD.findall(text)


def tokenize_for_stemming(text: str, lowercase: bool = False) -> list[str]:
    """
    Word tokens ready for ``stem``.

    The algorithm assumes lowercase input; pass ``lowercase=True`` when the
    text has not been normalized yet.
    """
    tokens = words(text)
    if lowercase:
        tokens = [t.lower() for t in tokens]
    return tokens
