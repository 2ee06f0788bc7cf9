"""
Stemmer configuration.

The algorithm itself has no knobs; this only configures the code around it.

Usage:
    config = StemmerConfig.default()
    config = StemmerConfig.search_index()   # lowercases raw text first
    config = StemmerConfig.from_env()       # PORTER_STEMMER_* variables
"""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class StemmerConfig:
    lowercase: bool = False     # fold case before stemming (text helpers only)
    log_level: str = "WARNING"  # CLI logging level
    encoding: str = "utf-8"     # benchmark fixture encoding

    @classmethod
    def default(cls) -> "StemmerConfig":
        """Input is assumed to be normalized already."""
        return cls()

    @classmethod
    def search_index(cls) -> "StemmerConfig":
        """For raw document/query text on its way into an index."""
        return cls(lowercase=True)

    @classmethod
    def from_env(cls) -> "StemmerConfig":
        """Read overrides from PORTER_STEMMER_LOWERCASE/_LOG_LEVEL/_ENCODING."""
        config = cls.default()
        lowercase = os.environ.get("PORTER_STEMMER_LOWERCASE")
        if lowercase is not None:
            config.lowercase = lowercase.strip().lower() in _TRUTHY
        log_level = os.environ.get("PORTER_STEMMER_LOG_LEVEL", config.log_level).strip().upper()
        if log_level in LOG_LEVELS:
            config.log_level = log_level
        config.encoding = os.environ.get("PORTER_STEMMER_ENCODING", config.encoding)
        return config
