"""
strsim._common — shared error types and input conversion.

Every scorer runs its inputs through :func:`conv_sequences` so that lengths
and indices are always counted in characters (code points), never bytes.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any


class StrSimError(Exception):
    """Base class for errors raised by strsim."""


class DifferentLengthArgs(StrSimError, ValueError):
    """Raised when a metric that needs equal-length inputs gets unequal ones."""

    def __init__(self, len1: int, len2: int) -> None:
        self.len1 = len1
        self.len2 = len2
        super().__init__(
            f"Sequences must have the same length, got {len1} and {len2} characters."
        )


def _conv_sequence(s: Any) -> Sequence[Hashable]:
    if isinstance(s, str):
        return s
    if isinstance(s, (bytes, bytearray)):
        return bytes(s).decode("utf-8")
    if isinstance(s, Sequence):
        return s
    raise TypeError(
        f"Expected str, bytes or a sequence of hashable items, got {type(s).__name__}."
    )


def conv_sequences(
    s1: Any,
    s2: Any,
    processor: Callable[..., Any] | None = None,
) -> tuple[Sequence[Hashable], Sequence[Hashable]]:
    """
    Prepare a pair of inputs for scoring.

    ``processor`` (if any) is applied to both raw inputs first. ``bytes`` are
    decoded as UTF-8. Two strings are returned unchanged; any other
    combination is materialised as two lists so that equality checks compare
    like with like.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    seq1 = _conv_sequence(s1)
    seq2 = _conv_sequence(s2)
    if isinstance(seq1, str) and isinstance(seq2, str):
        return seq1, seq2
    return list(seq1), list(seq2)


__all__ = ["StrSimError", "DifferentLengthArgs", "conv_sequences"]
