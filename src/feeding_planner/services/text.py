"""Text normalization for fuzzy keyword matching."""

import re
import unicodedata

_WHITESPACE = re.compile(r"[\s　]")
_DASHES = re.compile(r"[ー−\-]")


def normalize_text(text: str) -> str:
    """Fold width, lowercase, and strip whitespace and dash marks."""
    folded = unicodedata.normalize("NFKC", text).lower()
    return _DASHES.sub("", _WHITESPACE.sub("", folded))


def contains_any(text: str, keywords: tuple[str, ...] | list[str]) -> bool:
    """Return True if any keyword occurs in text after normalization."""
    normalized = normalize_text(text)
    for keyword in keywords:
        needle = normalize_text(keyword)
        if needle and needle in normalized:
            return True
    return False
