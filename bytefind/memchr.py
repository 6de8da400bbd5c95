"""Searching for occurrences of a single byte in a haystack."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

RangeFind = Callable[[bytes, int, int], Optional[int]]
RangeCount = Callable[[bytes, int, int], int]


def _as_bytes(haystack: BytesLike) -> bytes | bytearray:
    """Return a searchable byte string for any bytes-like haystack."""
    if isinstance(haystack, (bytes, bytearray)):
        return haystack
    return bytes(memoryview(haystack))


def _check_byte(value: int) -> int:
    """Validate that value is a byte (an int in 0..=255)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"needle must be an int byte value, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"byte value out of range: {value}")
    return value


class MatchIter(Iterator[int]):
    """A double-ended iterator over match offsets in a haystack.

    ``find`` and ``rfind`` take ``(haystack, start, end)`` and return the
    absolute offset of the first or last match within ``haystack[start:end]``,
    or None.  ``count`` takes the same arguments and returns the number of
    matches in that window; when it is None, remaining matches are counted by
    iterating.
    """

    __slots__ = ("_haystack", "_find", "_rfind", "_count", "_start", "_end")

    def __init__(
        self,
        haystack: BytesLike,
        find: RangeFind,
        rfind: RangeFind,
        count: RangeCount | None,
    ) -> None:
        self._haystack = _as_bytes(haystack)
        self._find = find
        self._rfind = rfind
        self._count = count
        self._start = 0
        self._end = len(self._haystack)

    def __iter__(self) -> MatchIter:
        return self

    def __next__(self) -> int:
        if self._start >= self._end:
            raise StopIteration
        found = self._find(self._haystack, self._start, self._end)
        if found is None:
            self._start = self._end
            raise StopIteration
        self._start = found + 1
        return found

    def next_back(self) -> int | None:
        """Return the last remaining match offset, or None when exhausted."""
        if self._start >= self._end:
            return None
        found = self._rfind(self._haystack, self._start, self._end)
        if found is None:
            self._end = self._start
            return None
        self._end = found
        return found

    def __reversed__(self) -> Iterator[int]:
        while (found := self.next_back()) is not None:
            yield found

    def count(self) -> int:
        """Count and consume all remaining matches."""
        if self._count is None:
            total = sum(1 for _ in self)
        else:
            total = self._count(self._haystack, self._start, self._end)
        self._start = self._end
        return total

    def __length_hint__(self) -> int:
        return 0


class One:
    """Finds all occurrences of a single byte in a haystack."""

    __slots__ = ("needle",)

    def __init__(self, needle: int) -> None:
        self.needle = _check_byte(needle)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.needle:#04x})"

    def _find_range(self, haystack: bytes, start: int, end: int) -> int | None:
        found = haystack.find(self.needle, start, end)
        return None if found < 0 else found

    def _rfind_range(self, haystack: bytes, start: int, end: int) -> int | None:
        found = haystack.rfind(self.needle, start, end)
        return None if found < 0 else found

    def _count_range(self, haystack: bytes, start: int, end: int) -> int:
        if start >= end:
            return 0
        return haystack.count(self.needle, start, end)

    def find(self, haystack: BytesLike) -> int | None:
        """Return the offset of the first occurrence of the byte, or None."""
        data = _as_bytes(haystack)
        return self._find_range(data, 0, len(data))

    def rfind(self, haystack: BytesLike) -> int | None:
        """Return the offset of the last occurrence of the byte, or None."""
        data = _as_bytes(haystack)
        return self._rfind_range(data, 0, len(data))

    def count(self, haystack: BytesLike) -> int:
        """Count all occurrences of the byte in the haystack."""
        data = _as_bytes(haystack)
        return self._count_range(data, 0, len(data))

    def iter(self, haystack: BytesLike) -> MatchIter:
        """Return a double-ended iterator over all match offsets."""
        return MatchIter(
            haystack, self._find_range, self._rfind_range, self._count_range
        )