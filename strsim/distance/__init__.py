"""
strsim.distance — character-level distance and similarity metrics.
"""

from __future__ import annotations

from . import (  # noqa: F401
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
)

__all__ = [
    "Hamming",
    "Jaro",
    "JaroWinkler",
    "Levenshtein",
]
