import pytest
from hypothesis import given, strategies as st

from bytefind.rabinkarp_rev import FinderRev


def rfind(haystack: bytes, needle: bytes):
    return FinderRev(needle).rfind(haystack, needle)


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        (b"", b"", 0),
        (b"abc", b"", 3),
        (b"", b"a", None),
        (b"a", b"a", 0),
        (b"abcabc", b"abc", 3),
        (b"abcabc", b"bca", 1),
        (b"abcabc", b"abd", None),
        (b"ab", b"abc", None),
        (b"ababaz", b"abab", 0),
        (b"xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxy", b"xy", 39),
        (b"aaaaaaaa", b"aa", 6),
    ],
)
def test_rfind_cases(haystack, needle, expected):
    assert rfind(haystack, needle) == expected


def test_long_needle_wraps_hash_factor():
    needle = bytes(range(40))
    haystack = needle * 3 + b"tail"
    assert rfind(haystack, needle) == 80


def test_hash_2pow_for_empty_and_single():
    assert FinderRev(b"").hash_2pow == 1
    assert FinderRev(b"z").hash_2pow == 1
    assert FinderRev(b"abc").hash_2pow == 4


@given(st.binary(max_size=60), st.binary(max_size=6))
def test_matches_builtin_rfind(haystack, needle):
    expected = haystack.rfind(needle)
    assert rfind(haystack, needle) == (None if expected < 0 else expected)


@given(st.binary(max_size=40), st.integers(0, 40), st.integers(0, 8))
def test_embedded_needle_is_found(haystack, start, length):
    needle = haystack[start:start + length]
    found = rfind(haystack, needle)
    assert found is not None
    assert haystack[found:found + len(needle)] == needle
    assert found >= min(start, len(haystack))