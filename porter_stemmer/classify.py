"""
Grapheme classification for the Porter stemmer.

Porter's vowels are a, e, i, o, u, plus "y" when it follows a consonant
(so the y in "toy" is a consonant, the y in "syzygy" alternates).

All predicates take a word as a sequence of grapheme clusters (strings),
never a plain string, so combining marks stay attached to their base letter.
"""

from typing import Sequence

VOWELS = frozenset("aeiou")

# Final letters that rule out the *o pattern
STAR_O_EXCLUDED = frozenset("wxy")


def real_vowel(grapheme: str) -> bool:
    """True iff the grapheme is one of a, e, i, o, u."""
    return grapheme in VOWELS


def real_consonant(grapheme: str) -> bool:
    return not real_vowel(grapheme)


def porter_vowel(word: Sequence[str], index: int) -> bool:
    """
    Porter vowel test at a position.

    A "y" counts as a vowel only when it is preceded by a (real) consonant.
    ``index`` must lie within ``[0, len(word))``.
    """
    grapheme = word[index]
    if real_vowel(grapheme):
        return True
    if index == 0 or grapheme != "y":
        return False
    return real_consonant(word[index - 1])


def porter_consonant(word: Sequence[str], index: int) -> bool:
    return not porter_vowel(word, index)


def contains_vowel(word: Sequence[str]) -> bool:
    """*v*: the word contains a Porter vowel somewhere."""
    return any(porter_vowel(word, i) for i in range(len(word)))


def ends_doubled_consonant(word: Sequence[str]) -> bool:
    """
    *d: the word ends with two identical consonants (e.g. "sell").

    Words of length 2 or less never qualify.
    """
    n = len(word)
    if n <= 2:
        return False
    return word[n - 1] == word[n - 2] and porter_consonant(word, n - 1)


def ends_star_o(word: Sequence[str]) -> bool:
    """
    *o: the word ends consonant-vowel-consonant, where the final
    consonant is not w, x or y (e.g. "hop", "fil", but not "dew").
    """
    n = len(word)
    if n <= 2:
        return False
    if word[n - 1] in STAR_O_EXCLUDED:
        return False
    return (porter_consonant(word, n - 1) and
            porter_vowel(word, n - 2) and
            porter_consonant(word, n - 3))
