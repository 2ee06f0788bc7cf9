"""Tests for the fixture replay benchmark."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from porter_stemmer.bench import BenchResult, load_fixture, replay, run_fixture
from porter_stemmer.errors import FixtureError, StemmerError


@pytest.fixture
def fixture_pair(tmp_path):
    input_path = tmp_path / "voc.txt"
    expected_path = tmp_path / "output.txt"
    input_path.write_text("caresses\nmotoring\nhopping\nsurveillance\n", encoding="utf-8")
    expected_path.write_text("caress\nmotor\nhop\nsurveil\n", encoding="utf-8")
    return input_path, expected_path


class TestLoadFixture:
    def test_whitespace_separated(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("one two\nthree\n\n  four ", encoding="utf-8")
        assert load_fixture(path) == ["one", "two", "three", "four"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FixtureError):
            load_fixture(tmp_path / "nope.txt")

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cats", encoding="utf-8")
        with pytest.raises(FixtureError):
            load_fixture(path, encoding="no-such-encoding")


class TestReplay:
    def test_all_match(self):
        result = replay(["caresses", "ponies"], ["caress", "poni"], rounds=3)
        assert result.ok
        assert result.words == 2
        assert result.rounds == 3
        assert result.seconds >= 0

    def test_mismatch_reported(self):
        result = replay(["caresses", "ponies"], ["caress", "pony"])
        assert not result.ok
        assert result.mismatches == [("ponies", "pony", "poni")]

    def test_size_mismatch(self):
        with pytest.raises(FixtureError):
            replay(["caresses"], [])

    def test_fixture_error_hierarchy(self):
        with pytest.raises(StemmerError):
            replay(["a"], ["a", "b"])
        with pytest.raises(ValueError):
            replay(["a"], ["a", "b"])

    def test_rounds_must_be_positive(self):
        with pytest.raises(ValueError):
            replay(["cat"], ["cat"], rounds=0)

    def test_empty_fixture(self):
        result = replay([], [])
        assert result.ok
        assert result.words == 0


class TestRunFixture:
    def test_run(self, fixture_pair):
        result = run_fixture(*fixture_pair, rounds=2)
        assert result.ok
        assert result.words == 4


class TestBenchResult:
    def test_words_per_second(self):
        result = BenchResult(words=100, rounds=2, seconds=0.5)
        assert result.words_per_second == 400

    def test_zero_time(self):
        assert BenchResult(words=10, rounds=1, seconds=0.0).words_per_second == 0.0
