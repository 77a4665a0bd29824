"""Fuzzy string similarity for location queries.

Scores two strings on a 0-100 scale. Cheap exact/prefix/substring
checks run first so that a strong match is never masked by the
edit-distance path; rapidfuzz provides the Levenshtein distance.

All case folding for matching lives in ``normalize_text``. Callers
pass raw strings and never lower-case on their own.

Example
-------
    >>> similarity("Antalya", "antalya")
    100
    >>> similarity("ant", "Antalya Havalimanı")
    90
    >>> similarity("Istambul", "İstanbul")
    87
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

from rapidfuzz.distance import Levenshtein

EXACT_SCORE = 100
PREFIX_SCORE = 90
SUBSTRING_SCORE = 75

# Letters with no canonical decomposition that users routinely type
# as their ASCII base letter.
_FOLD_TABLE = str.maketrans({"ı": "i"})


@lru_cache(maxsize=4096)
def normalize_text(text: str) -> str:
    """Fold a string for comparison.

    NFKD decomposition, combining marks dropped, ``str.casefold`` and
    the Turkish dotless i mapped to ``i``. 'İstanbul', 'ıstanbul' and
    'ISTANBUL' all become 'istanbul'; 'Çeşme' becomes 'cesme'.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return stripped.casefold().translate(_FOLD_TABLE)


def similarity(a: str, b: str) -> int:
    """Return how similar two strings are, from 0 to 100.

    Rules, first match wins:

    1. equal after normalization: 100
    2. one is a prefix of the other: 90
    3. one contains the other: 75
    4. ``100 * (max_len - levenshtein) // max_len``

    Every rule checks both directions, so the score is symmetric.
    Two empty strings are equal; an empty string is a prefix of any
    other string.
    """
    s1 = normalize_text(a)
    s2 = normalize_text(b)

    if s1 == s2:
        return EXACT_SCORE
    if s1.startswith(s2) or s2.startswith(s1):
        return PREFIX_SCORE
    if s1 in s2 or s2 in s1:
        return SUBSTRING_SCORE

    # Both non-empty here: an empty string would have hit the prefix rule
    max_len = max(len(s1), len(s2))
    distance = Levenshtein.distance(s1, s2)
    return max(0, 100 * (max_len - distance) // max_len)
