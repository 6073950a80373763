"""
strsim — string similarity metrics over Unicode character sequences.

Hamming, Jaro, Jaro-Winkler and Levenshtein, each a pure function of its two
inputs. Lengths and positions are counted in code points; ``bytes`` input is
decoded as UTF-8 first.
"""

from __future__ import annotations

from typing import Any

from . import distance
from ._common import DifferentLengthArgs, StrSimError
from .distance import Hamming, Jaro, JaroWinkler, Levenshtein

__version__: str = "0.2.0"


def hamming(a: Any, b: Any) -> int:
    """Number of positions at which ``a`` and ``b`` differ.

    Raises :class:`DifferentLengthArgs` if they differ in length.
    """
    return Hamming.distance(a, b)


def jaro(a: Any, b: Any) -> float:
    """Jaro similarity of ``a`` and ``b`` in [0.0, 1.0]."""
    return Jaro.similarity(a, b)


def jaro_winkler(a: Any, b: Any) -> float:
    """Jaro-Winkler similarity with an uncapped common-prefix boost."""
    return JaroWinkler.similarity(a, b)


def levenshtein(a: Any, b: Any) -> int:
    """Minimum number of single-character edits turning ``a`` into ``b``."""
    return Levenshtein.distance(a, b)


__all__ = [
    "distance",
    "hamming",
    "jaro",
    "jaro_winkler",
    "levenshtein",
    "StrSimError",
    "DifferentLengthArgs",
    "__version__",
]
