"""Exceptions raised around the stemmer (the algorithm itself never raises)."""


class StemmerError(Exception):
    """Base class for porter_stemmer errors."""


class FixtureError(StemmerError, ValueError):
    """A benchmark fixture could not be read or paired with its expectations."""
