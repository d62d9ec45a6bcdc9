"""Fuzzy comparison of free-text capital answers."""

from __future__ import annotations

import re

# Applied in order: umlauts first, then the ASCII digraphs people type
# instead of them, so "München", "Munchen" and "Muenchen" all fold together.
UMLAUT_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("ü", "u"),
    ("ö", "o"),
    ("ä", "a"),
    ("ß", "ss"),
)
DIGRAPH_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("ue", "u"),
    ("oe", "o"),
    ("ae", "a"),
)

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Normalize a place name for comparison.

    Lowercases and trims the input, folds German umlauts and their ASCII
    spellings, turns hyphens into spaces, drops any other punctuation and
    collapses whitespace. The result carries no leading or trailing spaces.

    Args:
        text: Raw user input or catalog name

    Returns:
        Normalized text
    """
    normalized = text.lower().strip()
    for source, target in UMLAUT_REPLACEMENTS:
        normalized = normalized.replace(source, target)
    for source, target in DIGRAPH_REPLACEMENTS:
        normalized = normalized.replace(source, target)
    normalized = normalized.replace("-", " ")
    normalized = _DISALLOWED_CHARS.sub("", normalized)
    return _WHITESPACE_RUN.sub(" ", normalized).strip()


def compare_text(text1: str, text2: str) -> bool:
    """Check whether two strings are equal after normalization."""
    return normalize_text(text1) == normalize_text(text2)
