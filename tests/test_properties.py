"""Property-based tests for strsim using Hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

import strsim
from strsim import DifferentLengthArgs
from strsim.distance import Hamming, Jaro, JaroWinkler, Levenshtein


@st.composite
def equal_length_pair(draw: st.DrawFn) -> tuple[str, str]:
    s1 = draw(st.text())
    s2 = draw(st.text(min_size=len(s1), max_size=len(s1)))
    return s1, s2


# ---------------------------------------------------------------------------
# Hamming Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_hamming_identity(s: str) -> None:
    """Hamming distance of a string to itself should be 0."""
    assert strsim.hamming(s, s) == 0
    assert Hamming.normalized_similarity(s, s) == 1.0


@given(equal_length_pair())
def test_hamming_symmetry(pair: tuple[str, str]) -> None:
    s1, s2 = pair
    assert strsim.hamming(s1, s2) == strsim.hamming(s2, s1)


@given(equal_length_pair())
def test_hamming_bounds(pair: tuple[str, str]) -> None:
    s1, s2 = pair
    dist = strsim.hamming(s1, s2)
    assert 0 <= dist <= len(s1)
    assert 0.0 <= Hamming.normalized_distance(s1, s2) <= 1.0


@given(st.text(), st.text())
def test_hamming_unequal_length_raises(s1: str, s2: str) -> None:
    """Unequal lengths always raise, regardless of content."""
    assume(len(s1) != len(s2))
    with pytest.raises(DifferentLengthArgs):
        strsim.hamming(s1, s2)


@given(equal_length_pair())
def test_hamming_utf8_bytes(pair: tuple[str, str]) -> None:
    """Encoded input scores the same as the decoded text."""
    s1, s2 = pair
    assert strsim.hamming(s1.encode(), s2.encode()) == strsim.hamming(s1, s2)


# ---------------------------------------------------------------------------
# Jaro / JaroWinkler Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_jaro_identity(s: str) -> None:
    """Jaro metrics for identical strings should be 1.0, empty ones included."""
    assert strsim.jaro(s, s) == 1.0
    assert strsim.jaro_winkler(s, s) == 1.0


@given(st.text(min_size=1))
def test_jaro_one_empty(s: str) -> None:
    assert strsim.jaro("", s) == 0.0
    assert strsim.jaro(s, "") == 0.0
    assert strsim.jaro_winkler("", s) == 0.0
    assert strsim.jaro_winkler(s, "") == 0.0


@given(st.text(), st.text())
def test_jaro_bounds(s1: str, s2: str) -> None:
    """Jaro similarity should be bounded between 0.0 and 1.0."""
    assert 0.0 <= strsim.jaro(s1, s2) <= 1.0
    assert Jaro.distance(s1, s2) == pytest.approx(1.0 - strsim.jaro(s1, s2))


@given(st.text(), st.text())
def test_jaro_winkler_boost(s1: str, s2: str) -> None:
    """A shared prefix never lowers the Jaro score."""
    jaro = strsim.jaro(s1, s2)
    jaro_winkler = strsim.jaro_winkler(s1, s2)
    if s1[:1] == s2[:1] and s1 and s2 and jaro < 1.0:
        assert jaro_winkler >= jaro
    assert jaro_winkler >= 0.0


@given(st.text(), st.text())
def test_jaro_winkler_without_prefix_is_jaro(s1: str, s2: str) -> None:
    assume(not s1 or not s2 or s1[0] != s2[0])
    assert strsim.jaro_winkler(s1, s2) == strsim.jaro(s1, s2)


@given(st.text(), st.text())
def test_jaro_utf8_bytes(s1: str, s2: str) -> None:
    assert strsim.jaro(s1.encode(), s2.encode()) == strsim.jaro(s1, s2)
    assert JaroWinkler.similarity(s1.encode(), s2) == strsim.jaro_winkler(s1, s2)


# ---------------------------------------------------------------------------
# Levenshtein Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_levenshtein_identity(s: str) -> None:
    assert strsim.levenshtein(s, s) == 0
    assert Levenshtein.normalized_distance(s, s) == 0.0
    assert Levenshtein.normalized_similarity(s, s) == 1.0


@given(st.text())
def test_levenshtein_from_empty(s: str) -> None:
    assert strsim.levenshtein("", s) == len(s)
    assert strsim.levenshtein(s, "") == len(s)


@given(st.text(), st.text())
def test_levenshtein_bounds(s1: str, s2: str) -> None:
    """Distance lies between the length difference and the longer length."""
    dist = strsim.levenshtein(s1, s2)
    assert abs(len(s1) - len(s2)) <= dist <= max(len(s1), len(s2))
    assert 0.0 <= Levenshtein.normalized_distance(s1, s2) <= 1.0
    assert 0.0 <= Levenshtein.normalized_similarity(s1, s2) <= 1.0


@given(st.text(), st.text())
def test_levenshtein_symmetry(s1: str, s2: str) -> None:
    """Unit-weight Levenshtein distance should be symmetric."""
    assert strsim.levenshtein(s1, s2) == strsim.levenshtein(s2, s1)


@given(st.text(), st.text(), st.text())
def test_levenshtein_triangle_inequality(s1: str, s2: str, s3: str) -> None:
    """Levenshtein distance should satisfy the triangle inequality."""
    d12 = strsim.levenshtein(s1, s2)
    d23 = strsim.levenshtein(s2, s3)
    d13 = strsim.levenshtein(s1, s3)
    assert d13 <= d12 + d23


@given(equal_length_pair())
def test_levenshtein_at_most_hamming(pair: tuple[str, str]) -> None:
    s1, s2 = pair
    assert strsim.levenshtein(s1, s2) <= strsim.hamming(s1, s2)


@given(st.text(), st.text())
def test_levenshtein_utf8_bytes(s1: str, s2: str) -> None:
    assert strsim.levenshtein(s1.encode(), s2.encode()) == strsim.levenshtein(s1, s2)
