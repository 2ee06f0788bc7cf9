"""
The Porter *measure*.

Any word or word fragment can be written as

    [C](VC){m}[V]

where C is a run of consonants and V a run of vowels. The measure ``m`` is
the number of VC pairs, i.e. the number of vowel-run to consonant-run
transitions:

    m=0   tr, ee, tree, y, by
    m=1   trouble, oats, trees, ivy
    m=2   troubles, private, oaten, orrery

Position 0 is seeded with the plain vowel test; every later position uses
the y-sensitive test from ``classify.porter_vowel``. The two agree at
position 0, where a "y" has no preceding consonant.
"""

from typing import Sequence

from porter_stemmer.classify import porter_vowel, real_vowel


def measure(word: Sequence[str]) -> int:
    """Count the VC sequences in ``word``. Empty input has measure 0."""
    if not word:
        return 0

    m = 0
    in_vowels = real_vowel(word[0])
    for i in range(1, len(word)):
        is_vowel = porter_vowel(word, i)
        if is_vowel and not in_vowels:
            in_vowels = True
        elif in_vowels and not is_vowel:
            in_vowels = False
            m += 1
    return m
