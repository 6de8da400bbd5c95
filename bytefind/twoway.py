"""Substring search with the Two-Way algorithm, forward and reverse.

Building a finder takes time linear in the needle and constant space.
A search takes time linear in the haystack, whatever the needle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from bytefind.suffix import ApproximateByteSet, SuffixKind, suffix_forward, suffix_reverse


@dataclass(frozen=True)
class _SmallPeriod:
    """The period lower bound is the needle's exact period."""

    period: int


@dataclass(frozen=True)
class _LargePeriod:
    """The needle's period is at least half its length; shift by this much."""

    shift: int


_Shift = Union[_SmallPeriod, _LargePeriod]


def _shift_forward(needle: bytes, period_lower_bound: int, critical_pos: int) -> _Shift:
    large = max(critical_pos, len(needle) - critical_pos)
    if critical_pos * 2 >= len(needle):
        return _LargePeriod(large)
    u, v = needle[:critical_pos], needle[critical_pos:]
    if not v[:period_lower_bound].endswith(u):
        return _LargePeriod(large)
    return _SmallPeriod(period_lower_bound)


def _shift_reverse(needle: bytes, period_lower_bound: int, critical_pos: int) -> _Shift:
    large = max(critical_pos, len(needle) - critical_pos)
    if (len(needle) - critical_pos) * 2 >= len(needle):
        return _LargePeriod(large)
    v, u = needle[:critical_pos], needle[critical_pos:]
    if not v[len(v) - period_lower_bound :].startswith(u):
        return _LargePeriod(large)
    return _SmallPeriod(period_lower_bound)


class Finder:
    """A forward Two-Way searcher.

    The same needle given at construction must be passed to every search.
    An empty needle matches at every offset, including ``len(haystack)``.
    """

    __slots__ = ("byteset", "critical_pos", "_shift")

    def __init__(self, needle: bytes) -> None:
        needle = bytes(needle)
        self.byteset = ApproximateByteSet(needle)
        min_suffix = suffix_forward(needle, SuffixKind.MINIMAL)
        max_suffix = suffix_forward(needle, SuffixKind.MAXIMAL)
        chosen = min_suffix if min_suffix.pos > max_suffix.pos else max_suffix
        self.critical_pos = chosen.pos
        self._shift = _shift_forward(needle, chosen.period, chosen.pos)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(critical_pos={self.critical_pos}, "
            f"shift={self._shift!r})"
        )

    def find(self, haystack: bytes, needle: bytes) -> int | None:
        """Return the offset of the first occurrence of needle, or None."""
        haystack = bytes(haystack)
        needle = bytes(needle)
        if isinstance(self._shift, _SmallPeriod):
            return self._find_small(haystack, needle, self._shift.period)
        return self._find_large(haystack, needle, self._shift.shift)

    def _find_small(self, haystack: bytes, needle: bytes, period: int) -> int | None:
        nlen = len(needle)
        if nlen == 0:
            return 0
        last = nlen - 1
        critical = self.critical_pos
        pos = 0
        shift = 0
        while pos + nlen <= len(haystack):
            i = max(critical, shift)
            if haystack[pos + last] not in self.byteset:
                pos += nlen
                shift = 0
                continue
            while i < nlen and needle[i] == haystack[pos + i]:
                i += 1
            if i < nlen:
                pos += i - critical + 1
                shift = 0
            else:
                j = critical
                while j > shift and needle[j] == haystack[pos + j]:
                    j -= 1
                if j <= shift and needle[shift] == haystack[pos + shift]:
                    return pos
                pos += period
                shift = nlen - period
        return None

    def _find_large(self, haystack: bytes, needle: bytes, shift: int) -> int | None:
        nlen = len(needle)
        if nlen == 0:
            return 0
        last = nlen - 1
        critical = self.critical_pos
        pos = 0
        while pos + nlen <= len(haystack):
            if haystack[pos + last] not in self.byteset:
                pos += nlen
                continue
            i = critical
            while i < nlen and needle[i] == haystack[pos + i]:
                i += 1
            if i < nlen:
                pos += i - critical + 1
                continue
            for j in reversed(range(critical)):
                if needle[j] != haystack[pos + j]:
                    pos += shift
                    break
            else:
                return pos
        return None


class FinderRev:
    """A reverse Two-Way searcher.

    The same needle given at construction must be passed to every search.
    An empty needle matches at every offset, including ``len(haystack)``.
    """

    __slots__ = ("byteset", "critical_pos", "_shift")

    def __init__(self, needle: bytes) -> None:
        needle = bytes(needle)
        self.byteset = ApproximateByteSet(needle)
        min_suffix = suffix_reverse(needle, SuffixKind.MINIMAL)
        max_suffix = suffix_reverse(needle, SuffixKind.MAXIMAL)
        chosen = min_suffix if min_suffix.pos < max_suffix.pos else max_suffix
        self.critical_pos = chosen.pos
        self._shift = _shift_reverse(needle, chosen.period, chosen.pos)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(critical_pos={self.critical_pos}, "
            f"shift={self._shift!r})"
        )

    def rfind(self, haystack: bytes, needle: bytes) -> int | None:
        """Return the offset of the last occurrence of needle, or None."""
        haystack = bytes(haystack)
        needle = bytes(needle)
        if isinstance(self._shift, _SmallPeriod):
            return self._rfind_small(haystack, needle, self._shift.period)
        return self._rfind_large(haystack, needle, self._shift.shift)

    def _rfind_small(self, haystack: bytes, needle: bytes, period: int) -> int | None:
        nlen = len(needle)
        pos = len(haystack)
        if nlen == 0:
            return pos
        first = needle[0]
        critical = self.critical_pos
        shift = nlen
        while pos >= nlen:
            start = pos - nlen
            if haystack[start] not in self.byteset:
                pos -= nlen
                shift = nlen
                continue
            i = min(critical, shift)
            while i > 0 and needle[i - 1] == haystack[start + i - 1]:
                i -= 1
            if i > 0 or first != haystack[start]:
                pos -= critical - i + 1
                shift = nlen
            else:
                j = critical
                while j < shift and needle[j] == haystack[start + j]:
                    j += 1
                if j >= shift:
                    return start
                pos -= period
                shift = period
        return None

    def _rfind_large(self, haystack: bytes, needle: bytes, shift: int) -> int | None:
        nlen = len(needle)
        pos = len(haystack)
        if nlen == 0:
            return pos
        first = needle[0]
        critical = self.critical_pos
        while pos >= nlen:
            start = pos - nlen
            if haystack[start] not in self.byteset:
                pos -= nlen
                continue
            i = critical
            while i > 0 and needle[i - 1] == haystack[start + i - 1]:
                i -= 1
            if i > 0 or first != haystack[start]:
                pos -= critical - i + 1
            else:
                j = critical
                while j < nlen and needle[j] == haystack[start + j]:
                    j += 1
                if j == nlen:
                    return start
                pos -= shift
        return None