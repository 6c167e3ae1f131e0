"""Text normalization for locale-insensitive stop matching."""

import re
import unicodedata

_SEPARATORS = re.compile(r"[\s-]+")


def strip_diacritics(text: str) -> str:
    """Remove accents/diacritics from text via NFKD decomposition."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_text(text: str) -> str:
    """Normalize text for matching.

    Diacritics are stripped, the result is lowercased and every run of
    whitespace or hyphens is removed entirely, so "Café-Nord" and "cafenord"
    normalize to the same string. Normalizing twice is a no-op.
    """
    return _SEPARATORS.sub("", strip_diacritics(text).lower())
