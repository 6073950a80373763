"""strsim.distance.JaroWinkler"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from strsim._common import conv_sequences
from strsim.distance.Jaro import _jaro


def _common_prefix(s1: Any, s2: Any) -> int:
    prefix = 0
    for ch1, ch2 in zip(s1, s2):
        if ch1 != ch2:
            break
        prefix += 1
    return prefix


def similarity(
    s1: Any,
    s2: Any,
    *,
    prefix_weight: float = 0.1,
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the Jaro-Winkler similarity between two sequences.

    The Jaro score is boosted by ``prefix_weight`` for every character of the
    common prefix. The prefix length is not capped at four characters, so
    sequences sharing a long prefix can score above 1.0; the result is
    returned unclamped.
    """
    if prefix_weight < 0:
        raise ValueError(f"prefix_weight must be non-negative, got {prefix_weight}.")

    s1, s2 = conv_sequences(s1, s2, processor)
    sim = _jaro(s1, s2)
    prefix = _common_prefix(s1, s2)
    return sim + prefix_weight * prefix * (1.0 - sim)


def distance(
    s1: Any,
    s2: Any,
    *,
    prefix_weight: float = 0.1,
    processor: Callable[..., Any] | None = None,
) -> float:
    """
    Calculates the Jaro-Winkler distance, ``1 - similarity``.

    Negative when the boosted similarity exceeds 1.0.
    """
    return 1.0 - similarity(s1, s2, prefix_weight=prefix_weight, processor=processor)


__all__ = ["distance", "similarity"]
