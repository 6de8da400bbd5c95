import pytest
from hypothesis import given
from hypothesis import strategies as st

from bytefind.twoway import Finder, FinderRev


def find(haystack: bytes, needle: bytes):
    return Finder(needle).find(haystack, needle)


def rfind(haystack: bytes, needle: bytes):
    return FinderRev(needle).rfind(haystack, needle)


def _expected(result: int):
    return None if result < 0 else result


small_bytes = st.lists(st.sampled_from(b"abz"), max_size=24).map(bytes)


def test_regression_rev_small_period():
    assert rfind(b"ababaz", b"abab") == 0


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        (b"", b"", 0),
        (b"abc", b"", 0),
        (b"", b"a", None),
        (b"a", b"a", 0),
        (b"foobar", b"bar", 3),
        (b"foobarbar", b"bar", 3),
        (b"foobar", b"baz", None),
        (b"ab", b"abc", None),
        (b"xxababab", b"abab", 2),
        (b"aaaaab", b"aab", 3),
        (b"zzabczzabc", b"zzabc", 0),
    ],
)
def test_forward_cases(haystack, needle, expected):
    assert find(haystack, needle) == expected


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        (b"", b"", 0),
        (b"abc", b"", 3),
        (b"", b"a", None),
        (b"a", b"a", 0),
        (b"foobarbar", b"bar", 6),
        (b"foobar", b"baz", None),
        (b"ab", b"abc", None),
        (b"ababab", b"abab", 2),
        (b"baaaaa", b"baa", 0),
        (b"zzabczzabc", b"zzabc", 5),
    ],
)
def test_reverse_cases(haystack, needle, expected):
    assert rfind(haystack, needle) == expected


def test_finder_reusable_across_haystacks():
    needle = b"needle"
    finder = Finder(needle)
    assert finder.find(b"a needle here", needle) == 2
    assert finder.find(b"no match", needle) is None
    assert finder.find(bytearray(b"needleneedle"), needle) == 0


def test_rev_finder_reusable_across_haystacks():
    needle = b"needle"
    finder = FinderRev(needle)
    assert finder.rfind(b"needle and needle", needle) == 11
    assert finder.rfind(b"nothing", needle) is None


@given(small_bytes, small_bytes)
def test_forward_agrees_with_bytes_find(haystack, needle):
    assert find(haystack, needle) == _expected(haystack.find(needle))


@given(small_bytes, small_bytes)
def test_reverse_agrees_with_bytes_rfind(haystack, needle):
    assert rfind(haystack, needle) == _expected(haystack.rfind(needle))


@given(small_bytes, small_bytes.filter(bool), small_bytes)
def test_embedded_needle_is_found(prefix, needle, suffix):
    haystack = prefix + needle + suffix
    found = find(haystack, needle)
    assert found is not None
    assert found <= len(prefix)
    assert haystack[found : found + len(needle)] == needle
    back = rfind(haystack, needle)
    assert back is not None
    assert back >= len(prefix)
    assert haystack[back : back + len(needle)] == needle