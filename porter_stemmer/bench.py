"""
Fixture replay benchmark.

A fixture is a pair of text files: the input words and, in the same order,
the stems they must produce. Words are whitespace separated, so the classic
one-word-per-line voc.txt/output.txt pair works as is.

Usage:
    result = run_fixture("voc.txt", "output.txt", rounds=5)
    print(f"{result.words_per_second:.0f} words/sec, {len(result.mismatches)} mismatches")
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from porter_stemmer.errors import FixtureError
from porter_stemmer.stemmer import stem_tokenized
from porter_stemmer.tokenizers import graphemes

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class BenchResult:
    words: int
    rounds: int
    seconds: float
    mismatches: list[tuple[str, str, str]] = field(default_factory=list)  # (input, expected, got)

    @property
    def ok(self) -> bool:
        return not self.mismatches

    @property
    def words_per_second(self) -> float:
        if self.seconds <= 0:
            return 0.0
        return self.words * self.rounds / self.seconds


def load_fixture(path: PathLike, encoding: str = "utf-8") -> list[str]:
    """Read a fixture file into a list of words."""
    try:
        text = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FixtureError(f"Cannot read fixture {path}: {e}") from e
    return text.split()


def replay(input_words: list[str], expected_words: list[str], rounds: int = 1) -> BenchResult:
    """
    Stem ``input_words`` ``rounds`` times and compare with ``expected_words``.

    Segmentation happens once up front so only the stemmer is timed.
    """
    if len(input_words) != len(expected_words):
        raise FixtureError(
            f"Fixture size mismatch: {len(input_words)} input words, "
            f"{len(expected_words)} expected stems"
        )
    if rounds < 1:
        raise ValueError(f"rounds must be >= 1, got {rounds}")

    tokenized = [graphemes(w) for w in input_words]

    stems = []
    start = time.perf_counter()
    for _ in range(rounds):
        stems = [stem_tokenized(t) for t in tokenized]
    elapsed = time.perf_counter() - start

    result = BenchResult(words=len(input_words), rounds=rounds, seconds=elapsed)
    for word, expected, got in zip(input_words, expected_words, stems):
        got = "".join(got)
        if got != expected:
            result.mismatches.append((word, expected, got))

    logger.info(f"Replayed {result.words} words x {rounds} in {elapsed:.3f}s "
                f"({len(result.mismatches)} mismatches)")
    return result


def run_fixture(input_path: PathLike, expected_path: PathLike, rounds: int = 1,
                encoding: str = "utf-8") -> BenchResult:
    """Load an input/expected fixture pair and replay it."""
    return replay(
        load_fixture(input_path, encoding),
        load_fixture(expected_path, encoding),
        rounds=rounds,
    )
