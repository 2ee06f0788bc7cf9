"""
Suffix rules and the first-match-wins evaluator behind every phase.

A rule is (suffix, replacement, guard[, then]). The guard is evaluated on the
*stem*, i.e. the word with the suffix removed. When a rule applies, the word
becomes ``stem + replacement`` and the optional ``then`` transform runs on
the result (phase 1b uses this to chain into its cleanup substep).
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from porter_stemmer.classify import ends_star_o
from porter_stemmer.measure import measure

Guard = Callable[[Sequence[str]], bool]
Transform = Callable[[list[str]], list[str]]


def always(stem: Sequence[str]) -> bool:
    return True


def measure_above(threshold: int) -> Guard:
    """Guard: ``measure(stem) > threshold``."""
    def guard(stem: Sequence[str]) -> bool:
        return measure(stem) > threshold
    return guard


def ion_guard(stem: Sequence[str]) -> bool:
    """(m>1 and (*S or *T)) ION ->"""
    return measure(stem) > 1 and len(stem) > 0 and stem[-1] in ("s", "t")


def final_e_guard(stem: Sequence[str]) -> bool:
    """(m>1) E -> , (m=1 and not *o) E -> """
    m = measure(stem)
    return m > 1 or (m == 1 and not ends_star_o(stem))


@dataclass(frozen=True)
class Rule:
    """One suffix rule. Suffix and replacement are grapheme tuples."""
    suffix: tuple[str, ...]
    replacement: tuple[str, ...] = ()
    guard: Guard = always
    then: Optional[Transform] = None

    @classmethod
    def of(cls, suffix: str, replacement: str = "", guard: Guard = always,
           then: Optional[Transform] = None) -> "Rule":
        """Build a rule from ASCII strings (one grapheme per character)."""
        return cls(tuple(suffix), tuple(replacement), guard, then)

    def matches(self, word: Sequence[str]) -> bool:
        return ends_with(word, self.suffix)

    def apply(self, word: Sequence[str]) -> Optional[list[str]]:
        """Return the rewritten word, or None if the suffix or guard fails."""
        if not self.matches(word):
            return None
        stem = list(word[:len(word) - len(self.suffix)])
        if not self.guard(stem):
            return None
        result = stem + list(self.replacement)
        if self.then is not None:
            result = self.then(result)
        return result


def ends_with(word: Sequence[str], suffix: Sequence[str]) -> bool:
    n = len(suffix)
    if n > len(word):
        return False
    return tuple(word[len(word) - n:]) == tuple(suffix)


def apply_rules(word: Sequence[str], rules: Sequence[Rule],
                stop_at_suffix: bool = False) -> list[str]:
    """
    Apply the first rule in ``rules`` whose suffix and guard both hold.

    With ``stop_at_suffix`` the first rule whose *suffix* matches decides the
    outcome on its own: if its guard fails the word is returned unchanged and
    later rules are not tried.

    Always returns a new list; the input is never modified.
    """
    for rule in rules:
        result = rule.apply(word)
        if result is not None:
            return result
        if stop_at_suffix and rule.matches(word):
            break
    return list(word)
