"""
Tests for the grapheme classifier, the measure and the pattern predicates.

Categories:
1. Plain vowel/consonant tests
2. Porter vowel test (y after a consonant)
3. Measure, including the position-0 seeding
4. Pattern predicates (*v*, *d, *o) and their length guards
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from porter_stemmer.classify import (
    contains_vowel,
    ends_doubled_consonant,
    ends_star_o,
    porter_consonant,
    porter_vowel,
    real_consonant,
    real_vowel,
)
from porter_stemmer.measure import measure
from porter_stemmer.tokenizers import graphemes


class TestRealVowel:
    """The plain aeiou test."""

    @pytest.mark.parametrize("g", ["a", "e", "i", "o", "u"])
    def test_vowels(self, g):
        assert real_vowel(g)
        assert not real_consonant(g)

    @pytest.mark.parametrize("g", ["b", "y", "w", "z", "é", "A"])
    def test_consonants(self, g):
        """Anything outside lowercase aeiou is a consonant, y included."""
        assert not real_vowel(g)
        assert real_consonant(g)


class TestPorterVowel:
    """Positional classification."""

    def test_toy(self):
        word = graphemes("toy")
        assert [porter_vowel(word, i) for i in range(3)] == [False, True, False]
        assert [porter_consonant(word, i) for i in range(3)] == [True, False, True]

    def test_syzygy(self):
        word = graphemes("syzygy")
        assert [porter_vowel(word, i) for i in range(6)] == [
            False, True, False, True, False, True,
        ]

    def test_leading_y_is_consonant(self):
        word = graphemes("yes")
        assert porter_consonant(word, 0)

    def test_y_after_y(self):
        """The second y of "greyy" follows a y, which is a real consonant."""
        word = graphemes("greyy")
        assert porter_consonant(word, 3)
        assert porter_vowel(word, 4)


class TestMeasure:
    """m = number of VC sequences."""

    @pytest.mark.parametrize("word,expected", [
        ("", 0),
        ("tr", 0),
        ("tree", 0),
        ("by", 0),
        ("trouble", 1),
        ("oats", 1),
        ("trees", 1),
        ("bacon", 2),
        ("abacus", 3),
        ("crepuscular", 4),
        ("paackkeeer", 2),
        ("syzygy", 2),
        ("private", 2),
    ])
    def test_measure(self, word, expected):
        assert measure(graphemes(word)) == expected

    def test_empty_sequence(self):
        assert measure([]) == 0

    def test_position_zero_ignores_y_rule(self):
        """Position 0 is seeded with the plain vowel test."""
        # "yat": y at 0 is a consonant either way, a opens a vowel run, t closes it
        assert measure(["y", "a", "t"]) == 1
        # "ivy": i seeds a vowel run, v closes it, y after v is a vowel again
        assert measure(graphemes("ivy")) == 1

    def test_accepts_tuples(self):
        assert measure(tuple("bacon")) == 2


class TestContainsVowel:
    def test_with_vowels(self):
        assert contains_vowel(graphemes("toy"))
        assert contains_vowel(graphemes("syzygy"))

    def test_without_vowels(self):
        assert not contains_vowel(graphemes("trjk"))
        assert not contains_vowel([])

    def test_y_after_consonant_counts(self):
        assert contains_vowel(graphemes("sky"))


class TestEndsDoubledConsonant:
    def test_sell(self):
        assert ends_doubled_consonant(graphemes("sell"))

    def test_doubled_vowel(self):
        assert not ends_doubled_consonant(graphemes("see"))

    def test_doubled_y_vowel(self):
        assert not ends_doubled_consonant(graphemes("greyy"))

    @pytest.mark.parametrize("word", ["", "l", "ll"])
    def test_too_short(self, word):
        """Length two or less never qualifies, even "ll"."""
        assert not ends_doubled_consonant(graphemes(word))


class TestEndsStarO:
    def test_awhil(self):
        assert ends_star_o(graphemes("awhil"))

    @pytest.mark.parametrize("word", ["mix", "dew", "day"])
    def test_excluded_final(self, word):
        assert not ends_star_o(graphemes(word))

    def test_hop(self):
        assert ends_star_o(graphemes("hop"))

    def test_not_cvc(self):
        assert not ends_star_o(graphemes("fail"))
        assert not ends_star_o(graphemes("agr"))

    @pytest.mark.parametrize("word", ["", "h", "op"])
    def test_too_short(self, word):
        assert not ends_star_o(graphemes(word))
