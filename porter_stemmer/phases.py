"""
The eight phases of the Porter algorithm.

Each phase is a pure function ``list[str] -> list[str]`` over grapheme
sequences. Phases never modify their argument; they return a new list.

    1a  plurals                 caresses -> caress, ponies -> poni
    1b  -eed / -ed / -ing       agreed -> agree, motoring -> motor
    1b' cleanup after 1b        conflat -> conflate, hopp -> hop, fil -> file
    1c  y -> i                  happy -> happi
    2   double suffixes, m>0    relational -> relate
    3   -ic-, -full, -ness, m>0 triplicate -> triplic
    4   single suffixes, m>1    revival -> reviv
    5a  final e                 probate -> probat
    5b  -ll, m>1                controll -> control
"""

from typing import Sequence

from porter_stemmer.classify import contains_vowel, ends_doubled_consonant, ends_star_o
from porter_stemmer.measure import measure
from porter_stemmer.rules import (
    Rule,
    apply_rules,
    ends_with,
    final_e_guard,
    ion_guard,
    measure_above,
)

_M_GT_0 = measure_above(0)
_M_GT_1 = measure_above(1)

# Final graphemes a doubled consonant keeps in 1b'
_KEEP_DOUBLED = frozenset("lsz")


def phase_one_b_substep(word: Sequence[str]) -> list[str]:
    """
    Cleanup after 1b removed -ed or -ing.

    AT -> ATE, BL -> BLE, IZ -> IZE
    (*d and not (*L or *S or *Z)) -> single letter
    (m=1 and *o) -> E
    """
    word = list(word)
    if ends_with(word, ("a", "t")) or ends_with(word, ("b", "l")) or ends_with(word, ("i", "z")):
        return word + ["e"]
    if ends_doubled_consonant(word) and word[-1] not in _KEEP_DOUBLED:
        return word[:-1]
    if measure(word) == 1 and ends_star_o(word):
        return word + ["e"]
    return word


PHASE_1A_RULES = (
    Rule.of("sses", "ss"),
    Rule.of("ies", "i"),
    Rule.of("ss", "ss"),
    Rule.of("s", ""),
)

PHASE_1B_RULES = (
    Rule.of("eed", "ee", _M_GT_0),
    Rule.of("ed", "", contains_vowel, then=phase_one_b_substep),
    Rule.of("ing", "", contains_vowel, then=phase_one_b_substep),
)

PHASE_2_RULES = (
    Rule.of("ational", "ate", _M_GT_0),
    Rule.of("tional", "tion", _M_GT_0),
    Rule.of("enci", "ence", _M_GT_0),
    Rule.of("anci", "ance", _M_GT_0),
    Rule.of("izer", "ize", _M_GT_0),
    Rule.of("abli", "able", _M_GT_0),
    Rule.of("alli", "al", _M_GT_0),
    Rule.of("entli", "ent", _M_GT_0),
    Rule.of("eli", "e", _M_GT_0),
    Rule.of("ousli", "ous", _M_GT_0),
    Rule.of("ization", "ize", _M_GT_0),
    Rule.of("ation", "ate", _M_GT_0),
    Rule.of("ator", "ate", _M_GT_0),
    Rule.of("alism", "al", _M_GT_0),
    Rule.of("iveness", "ive", _M_GT_0),
    Rule.of("fulness", "ful", _M_GT_0),
    Rule.of("ousness", "ous", _M_GT_0),
    Rule.of("aliti", "al", _M_GT_0),
    Rule.of("iviti", "ive", _M_GT_0),
    Rule.of("biliti", "ble", _M_GT_0),
)

PHASE_3_RULES = (
    Rule.of("icate", "ic", _M_GT_0),
    Rule.of("ative", "", _M_GT_0),
    Rule.of("alize", "al", _M_GT_0),
    Rule.of("iciti", "ic", _M_GT_0),
    Rule.of("ical", "ic", _M_GT_0),
    Rule.of("ful", "", _M_GT_0),
    Rule.of("ness", "", _M_GT_0),
)

PHASE_4_RULES = tuple(
    Rule.of(suffix, "", ion_guard if suffix == "ion" else _M_GT_1)
    for suffix in (
        "al", "ance", "ence", "er", "ic", "able", "ible", "ant", "ement",
        "ment", "ent", "ion", "ou", "ism", "ate", "iti", "ous", "ive", "ize",
    )
)

PHASE_5A_RULES = (
    Rule.of("e", "", final_e_guard),
)


def phase_one_a(word: Sequence[str]) -> list[str]:
    return apply_rules(word, PHASE_1A_RULES, stop_at_suffix=True)


def phase_one_b(word: Sequence[str]) -> list[str]:
    # (m>0) EED -> EE; a failing EED guard leaves the word alone
    return apply_rules(word, PHASE_1B_RULES, stop_at_suffix=True)


def phase_one_c(word: Sequence[str]) -> list[str]:
    """
    (*v*) Y -> I

    The vowel test covers the whole word, including the final y, so "sky"
    becomes "ski".
    """
    word = list(word)
    if word and word[-1] == "y" and contains_vowel(word):
        word[-1] = "i"
    return word


# TODO: phases 2-4 scan every rule; a trie over reversed suffixes would let
# them branch on the final grapheme instead.
def phase_two(word: Sequence[str]) -> list[str]:
    return apply_rules(word, PHASE_2_RULES)


def phase_three(word: Sequence[str]) -> list[str]:
    return apply_rules(word, PHASE_3_RULES)


def phase_four(word: Sequence[str]) -> list[str]:
    return apply_rules(word, PHASE_4_RULES)


def phase_five_a(word: Sequence[str]) -> list[str]:
    return apply_rules(word, PHASE_5A_RULES)


def phase_five_b(word: Sequence[str]) -> list[str]:
    """(m>1 and *d and *L) -> single letter"""
    word = list(word)
    if word and word[-1] == "l" and measure(word) > 1 and ends_doubled_consonant(word):
        return word[:-1]
    return word


PHASES = (
    ("1a", phase_one_a),
    ("1b", phase_one_b),
    ("1c", phase_one_c),
    ("2", phase_two),
    ("3", phase_three),
    ("4", phase_four),
    ("5a", phase_five_a),
    ("5b", phase_five_b),
)
