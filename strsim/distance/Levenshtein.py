"""strsim.distance.Levenshtein"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from strsim._common import conv_sequences


def _check_weights(weights: tuple[int, int, int]) -> tuple[int, int, int]:
    if len(weights) != 3:
        raise ValueError(
            f"weights must be (insertion, deletion, substitution), got {weights!r}."
        )
    if not all(isinstance(w, int) and w >= 0 for w in weights):
        raise ValueError(f"weights must be non-negative integers, got {weights!r}.")
    insertion, deletion, substitution = weights
    return insertion, deletion, substitution


def _levenshtein(s1: Any, s2: Any, weights: tuple[int, int, int]) -> int:
    insertion, deletion, substitution = weights
    if s1 == s2:
        return 0
    if not s1:
        return len(s2) * insertion
    if not s2:
        return len(s1) * deletion

    # two rolling rows of len(s2) + 1 instead of the full matrix
    prev = [j * insertion for j in range(len(s2) + 1)]
    curr = [0] * (len(s2) + 1)

    for i, ch1 in enumerate(s1):
        curr[0] = (i + 1) * deletion
        for j, ch2 in enumerate(s2):
            cost = 0 if ch1 == ch2 else substitution
            curr[j + 1] = min(
                curr[j] + insertion,
                prev[j + 1] + deletion,
                prev[j] + cost,
            )
        prev[:] = curr

    return curr[len(s2)]


def _maximum(len1: int, len2: int, weights: tuple[int, int, int]) -> int:
    insertion, deletion, substitution = weights
    max_dist = len2 * insertion + len1 * deletion
    if len1 >= len2:
        return min(max_dist, len2 * substitution + (len1 - len2) * deletion)
    return min(max_dist, len1 * substitution + (len2 - len1) * insertion)


def distance(
    s1: Any,
    s2: Any,
    *,
    weights: tuple[int, int, int] = (1, 1, 1),
    processor: Callable[..., Any] | None = None,
) -> int:
    """
    Calculates the Levenshtein distance between two sequences.

    The minimum total cost of insertions, deletions and substitutions needed
    to turn ``s1`` into ``s2``. With the default unit ``weights`` this is the
    classic edit distance.

    Parameters
    ----------
    s1, s2 : str | bytes | Sequence[Hashable]
        Sequences to compare. ``bytes`` are decoded as UTF-8.
    weights : tuple[int, int, int]
        Costs of ``(insertion, deletion, substitution)``.
    processor : Callable, optional
        Applied to both inputs before comparing.

    Returns
    -------
    int
        The edit distance, never negative.
    """
    weights = _check_weights(weights)
    s1, s2 = conv_sequences(s1, s2, processor)
    return _levenshtein(s1, s2, weights)


def similarity(
    s1: Any,
    s2: Any,
    *,
    weights: tuple[int, int, int] = (1, 1, 1),
    processor: Callable[..., Any] | None = None,
) -> int:
    """
    Calculates the Levenshtein similarity, ``maximum - distance``.
    """
    weights = _check_weights(weights)
    s1, s2 = conv_sequences(s1, s2, processor)
    return _maximum(len(s1), len(s2), weights) - _levenshtein(s1, s2, weights)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    weights: tuple[int, int, int] = (1, 1, 1),
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the normalized Levenshtein distance in the range [0.0, 1.0].
    """
    weights = _check_weights(weights)
    s1, s2 = conv_sequences(s1, s2, processor)
    maximum = _maximum(len(s1), len(s2), weights)
    if not maximum:
        return 0.0
    return _levenshtein(s1, s2, weights) / maximum


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    weights: tuple[int, int, int] = (1, 1, 1),
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the normalized Levenshtein similarity in the range [0.0, 1.0].
    """
    return 1.0 - normalized_distance(s1, s2, weights=weights, processor=processor)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
