"""Critical factorization helpers: maximal/minimal suffixes and a byte set."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SuffixKind(enum.Enum):
    """The kind of suffix to extract from a needle."""

    # Picks the smallest lexicographic suffix, preferring the longer one
    # when one candidate is a prefix of the other (e.g. "aa" over "a").
    MINIMAL = "minimal"
    # Picks the largest lexicographic suffix (e.g. "zz" over "z").
    MAXIMAL = "maximal"

    def _compare(self, current: int, candidate: int) -> _Ordering:
        """Decide what a pair of corresponding bytes means for the candidate."""
        if candidate == current:
            return _Ordering.PUSH
        better = candidate < current if self is SuffixKind.MINIMAL else candidate > current
        return _Ordering.ACCEPT if better else _Ordering.SKIP


class _Ordering(enum.Enum):
    """Outcome of comparing a candidate suffix with the current one."""

    ACCEPT = enum.auto()
    SKIP = enum.auto()
    PUSH = enum.auto()


@dataclass
class Suffix:
    """A suffix of a needle together with its period.

    For forward suffixes ``pos`` is the inclusive start (``needle[pos:]``);
    for reverse suffixes it is the exclusive end (``needle[:pos]``). The
    period is that of the suffix, a lower bound on the needle's period.
    """

    pos: int
    period: int


def suffix_forward(needle: bytes, kind: SuffixKind) -> Suffix:
    """Find the maximal or minimal suffix of ``needle`` and its period."""
    suffix = Suffix(pos=0, period=1)
    candidate_start = 1
    offset = 0
    while candidate_start + offset < len(needle):
        current = needle[suffix.pos + offset]
        candidate = needle[candidate_start + offset]
        ordering = kind._compare(current, candidate)
        if ordering is _Ordering.ACCEPT:
            suffix = Suffix(pos=candidate_start, period=1)
            candidate_start += 1
            offset = 0
        elif ordering is _Ordering.SKIP:
            candidate_start += offset + 1
            offset = 0
            suffix.period = candidate_start - suffix.pos
        elif offset + 1 == suffix.period:
            candidate_start += suffix.period
            offset = 0
        else:
            offset += 1
    return suffix


def suffix_reverse(needle: bytes, kind: SuffixKind) -> Suffix:
    """Find the maximal or minimal suffix of the reversed ``needle``.

    The result's ``pos`` is an exclusive end position into ``needle``.
    """
    suffix = Suffix(pos=len(needle), period=1)
    if len(needle) <= 1:
        return suffix
    candidate_start = len(needle) - 1
    offset = 0
    while offset < candidate_start:
        current = needle[suffix.pos - offset - 1]
        candidate = needle[candidate_start - offset - 1]
        ordering = kind._compare(current, candidate)
        if ordering is _Ordering.ACCEPT:
            suffix = Suffix(pos=candidate_start, period=1)
            candidate_start -= 1
            offset = 0
        elif ordering is _Ordering.SKIP:
            candidate_start -= offset + 1
            offset = 0
            suffix.period = suffix.pos - candidate_start
        elif offset + 1 == suffix.period:
            candidate_start -= suffix.period
            offset = 0
        else:
            offset += 1
    return suffix


class ApproximateByteSet:
    """An approximate set of the bytes in a needle.

    Bit ``b % 64`` is set for every byte ``b`` of the needle, so membership
    may give false positives but never false negatives.
    """

    __slots__ = ("bits",)

    def __init__(self, needle: bytes) -> None:
        bits = 0
        for byte in needle:
            bits |= 1 << (byte % 64)
        self.bits = bits

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bits={self.bits:#018x})"

    def __contains__(self, byte: int) -> bool:
        if not 0 <= byte <= 255:
            raise ValueError(f"byte value out of range: {byte}")
        return bool(self.bits & (1 << (byte % 64)))