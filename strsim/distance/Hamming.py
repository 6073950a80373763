"""strsim.distance.Hamming"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from strsim._common import DifferentLengthArgs, conv_sequences


def _hamming(s1: Any, s2: Any) -> int:
    return sum(1 for ch1, ch2 in zip(s1, s2) if ch1 != ch2)


def _checked_pair(
    s1: Any, s2: Any, processor: Callable[..., Any] | None
) -> tuple[Any, Any]:
    s1, s2 = conv_sequences(s1, s2, processor)
    if len(s1) != len(s2):
        raise DifferentLengthArgs(len(s1), len(s2))
    return s1, s2


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
) -> int:
    """
    Calculates the Hamming distance between two sequences.

    The Hamming distance is the number of positions at which the two
    sequences differ. Both must contain the same number of characters.

    Raises
    ------
    DifferentLengthArgs
        If the sequences differ in length.
    """
    s1, s2 = _checked_pair(s1, s2, processor)
    return _hamming(s1, s2)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
) -> int:
    """
    Calculates the Hamming similarity, the number of positions that match.
    """
    s1, s2 = _checked_pair(s1, s2, processor)
    return len(s1) - _hamming(s1, s2)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the normalized Hamming distance in the range [0.0, 1.0].
    """
    s1, s2 = _checked_pair(s1, s2, processor)
    if not s1:
        return 0.0
    return _hamming(s1, s2) / len(s1)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the normalized Hamming similarity in the range [0.0, 1.0].
    """
    return 1.0 - normalized_distance(s1, s2, processor=processor)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
