"""
porter_stemmer: Porter's suffix-stripping stemmer over grapheme clusters.

Usage:
    from porter_stemmer import stem, stem_tokenized

    stem("caresses")                     # "caress"
    stem("motoring")                     # "motor"

    # Pre-tokenized input skips grapheme segmentation on every call
    stem_tokenized(["h", "o", "p", "p", "i", "n", "g"])   # ["h", "o", "p"]

    # Object form, with configuration
    from porter_stemmer import PorterStemmer, StemmerConfig

    stemmer = PorterStemmer(StemmerConfig.search_index())
    stemmer.stem_text("Generalizations of oscillators")  # "gener of oscil"
"""

__version__ = "0.1.0"

from porter_stemmer.config import StemmerConfig
from porter_stemmer.errors import FixtureError, StemmerError
from porter_stemmer.measure import measure
from porter_stemmer.stemmer import PorterStemmer, stem, stem_tokenized

__all__ = [
    "stem",
    "stem_tokenized",
    "measure",
    "PorterStemmer",
    "StemmerConfig",
    "StemmerError",
    "FixtureError",
]
