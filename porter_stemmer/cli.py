#!/usr/bin/env python3
"""
porter-stem CLI

Usage:
    porter-stem stem WORD [WORD...] [--quiet]
    porter-stem text "sentence to stem"
    porter-stem bench INPUT EXPECTED [--rounds N]

Global options:
    --lowercase          fold case before stemming
    --log-level LEVEL    DEBUG shows every phase that changed a word
"""

import argparse
import logging
import sys

from porter_stemmer import __version__
from porter_stemmer.bench import run_fixture
from porter_stemmer.config import LOG_LEVELS, StemmerConfig
from porter_stemmer.errors import StemmerError
from porter_stemmer.stemmer import PorterStemmer

logger = logging.getLogger(__name__)

# Mismatches printed by `bench` before truncating
MAX_MISMATCHES_SHOWN = 20


def cmd_stem(args, config: StemmerConfig):
    """Stem individual words."""
    stemmer = PorterStemmer(config)
    for word in args.words:
        stemmed = stemmer.stem(word)
        if args.quiet:
            print(stemmed)
        else:
            print(f"{word} -> {stemmed}")


def cmd_text(args, config: StemmerConfig):
    """Tokenize a sentence and stem every word."""
    stemmer = PorterStemmer(config)
    print(f"Original:\n{args.text}")
    print(f"Stemmed:\n{stemmer.stem_text(args.text)}")


def cmd_bench(args, config: StemmerConfig):
    """Replay a fixture pair and report timing."""
    result = run_fixture(args.input, args.expected, rounds=args.rounds, encoding=config.encoding)

    print(f"Words: {result.words:,} x {result.rounds} round(s)")
    print(f"Time: {result.seconds:.3f}s ({result.words_per_second:,.0f} words/sec)")

    if result.ok:
        print("✓ All stems match")
        return 0

    print(f"✗ {len(result.mismatches)} mismatches:")
    for word, expected, got in result.mismatches[:MAX_MISMATCHES_SHOWN]:
        print(f"  {word}: expected {expected}, got {got}")
    if len(result.mismatches) > MAX_MISMATCHES_SHOWN:
        print(f"  ... and {len(result.mismatches) - MAX_MISMATCHES_SHOWN} more")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="porter-stem",
        description="Porter stemmer over Unicode grapheme clusters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--lowercase", action="store_true", default=None,
                        help="Lowercase input before stemming")
    parser.add_argument("--log-level", choices=LOG_LEVELS,
                        help="Logging level (default: $PORTER_STEMMER_LOG_LEVEL or WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # stem
    stem_parser = subparsers.add_parser("stem", help="Stem words")
    stem_parser.add_argument("words", nargs="+", help="Words to stem")
    stem_parser.add_argument("--quiet", "-q", action="store_true", help="Print stems only")

    # text
    text_parser = subparsers.add_parser("text", help="Stem every word of a sentence")
    text_parser.add_argument("text", help="Text to tokenize and stem")

    # bench
    bench_parser = subparsers.add_parser("bench", help="Replay a fixture pair")
    bench_parser.add_argument("input", help="File of input words")
    bench_parser.add_argument("expected", help="File of expected stems, same order")
    bench_parser.add_argument("--rounds", "-r", type=int, default=1)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = StemmerConfig.from_env()
    if args.lowercase is not None:
        config.lowercase = args.lowercase
    if args.log_level:
        config.log_level = args.log_level

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    commands = {
        "stem": cmd_stem,
        "text": cmd_text,
        "bench": cmd_bench,
    }

    try:
        return commands[args.command](args, config) or 0
    except (StemmerError, ValueError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"✗ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
