"""strsim.distance.Jaro"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from strsim._common import conv_sequences


def _jaro(s1: Any, s2: Any) -> float:
    if s1 == s2:
        return 1.0
    len1 = len(s1)
    len2 = len(s2)
    if not len1 or not len2:
        return 0.0

    search_range = max(0, max(len1, len2) // 2 - 1)
    consumed = [False] * len2
    matches = 0
    transpositions = 0
    last_match = 0

    for i, ch1 in enumerate(s1):
        lo = max(0, i - search_range)
        hi = min(len2 - 1, i + search_range)
        for j in range(lo, hi + 1):
            if not consumed[j] and s2[j] == ch1:
                consumed[j] = True
                matches += 1
                # counts matches that land behind the previous one
                if j < last_match:
                    transpositions += 1
                last_match = j
                break

    if not matches:
        return 0.0
    return (
        matches / len1 + matches / len2 + (matches - transpositions) / matches
    ) / 3.0


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the Jaro similarity between two sequences.

    Returns a score in [0.0, 1.0]: 1.0 for identical sequences (including two
    empty ones), 0.0 when exactly one of them is empty or nothing matches.
    The score is not guaranteed to be symmetric in its arguments.
    """
    s1, s2 = conv_sequences(s1, s2, processor)
    return _jaro(s1, s2)


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the Jaro distance, ``1 - similarity``.
    """
    return 1.0 - similarity(s1, s2, processor=processor)


normalized_similarity = similarity
normalized_distance = distance


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
