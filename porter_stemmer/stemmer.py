"""
Porter stemmer public API.

Usage:
    from porter_stemmer import stem, stem_tokenized

    stem("surveillance")                        # "surveil"
    stem_tokenized(["s", "t", "e", "m", "m", "i", "n", "g"])  # ["s", "t", "e", "m"]

    stemmer = PorterStemmer(StemmerConfig.search_index())
    stemmer.stem_text("Connected connections are CONNECTING")
    # "connect connect ar connect"
"""

import logging
from typing import Iterable, Optional, Sequence

from porter_stemmer.config import StemmerConfig
from porter_stemmer.phases import PHASES
from porter_stemmer.tokenizers import graphemes, tokenize_for_stemming

logger = logging.getLogger(__name__)


def stem_tokenized(word: Sequence[str]) -> list[str]:
    """
    Stem a word given as a sequence of grapheme clusters.

    Words of two graphemes or fewer come back unchanged. The result is always
    a new list; ``word`` itself is left untouched.
    """
    if len(word) <= 2:
        return list(word)

    debug = logger.isEnabledFor(logging.DEBUG)
    current = list(word)
    for name, phase in PHASES:
        result = phase(current)
        if debug and result != current:
            logger.debug(f"phase {name}: {''.join(current)} -> {''.join(result)}")
        current = result
    return current


def stem(word: str) -> str:
    """Stem a single word given as text."""
    if not isinstance(word, str):
        raise TypeError(f"stem() expects str, got {type(word).__name__}")
    return "".join(stem_tokenized(graphemes(word)))


class PorterStemmer:
    """
    Stemmer object for pipelines that want one thing to pass around.

    Holds only its configuration, so a single instance can be shared between
    threads.
    """

    def __init__(self, config: Optional[StemmerConfig] = None):
        self.config = config or StemmerConfig.default()

    def stem(self, word: str) -> str:
        if isinstance(word, str) and self.config.lowercase:
            word = word.lower()
        return stem(word)

    def stem_tokenized(self, word: Sequence[str]) -> list[str]:
        return stem_tokenized(word)

    def stem_words(self, words: Iterable[str]) -> list[str]:
        """Stem each word independently, preserving order."""
        return [self.stem(w) for w in words]

    def stem_text(self, text: str) -> str:
        """
        Tokenize running text into words, stem each one and join the stems
        with single spaces. Punctuation is dropped.
        """
        tokens = tokenize_for_stemming(text, lowercase=self.config.lowercase)
        return " ".join(stem(t) for t in tokens)
