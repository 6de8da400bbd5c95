"""A "packed pair" prefilter that looks for two rare bytes of a needle.

The pair of needle offsets is chosen from a background frequency rank of
bytes; a candidate position is reported where both bytes line up.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass

from bytefind.rank import rank as _default_rank

_MAX_INDEX = 255


class HeuristicFrequencyRank(abc.ABC):
    """A background frequency distribution of bytes.

    A lower rank means a byte is believed to occur less often in haystacks.
    """

    @abc.abstractmethod
    def rank(self, byte: int) -> int:
        """Return the rank (0-255) of the given byte."""


class DefaultFrequencyRank(HeuristicFrequencyRank):
    """The default byte frequency heuristic, good for most haystacks."""

    def rank(self, byte: int) -> int:
        return _default_rank(byte)


def _check_index(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"index must be an int, not {type(value).__name__}")
    if not 0 <= value <= _MAX_INDEX:
        raise ValueError(f"index out of range 0..={_MAX_INDEX}: {value}")
    return value


@dataclass(frozen=True)
class Pair:
    """Two distinct offsets into a needle used as a match predicate.

    By convention ``index1`` is the offset of the byte believed to be the
    most predictive. Offsets are at most 255.
    """

    index1: int
    index2: int

    @classmethod
    def from_needle(
        cls, needle: bytes, ranker: HeuristicFrequencyRank | None = None
    ) -> Pair | None:
        """Choose the pair of rarest bytes in needle, or None if too short."""
        needle = bytes(needle)
        if len(needle) <= 1:
            return None
        if ranker is None:
            ranker = DefaultFrequencyRank()
        rare1, index1 = needle[0], 0
        rare2, index2 = needle[1], 1
        if ranker.rank(rare2) < ranker.rank(rare1):
            rare1, rare2 = rare2, rare1
            index1, index2 = index2, index1
        for i, byte in enumerate(needle[2:_MAX_INDEX], start=2):
            if ranker.rank(byte) < ranker.rank(rare1):
                rare2, index2 = rare1, index1
                rare1, index1 = byte, i
            elif byte != rare1 and ranker.rank(byte) < ranker.rank(rare2):
                rare2, index2 = byte, i
        if index1 == index2:
            raise AssertionError("pair indices must differ")
        return cls(index1, index2)

    @classmethod
    def with_indices(cls, needle: bytes, index1: int, index2: int) -> Pair | None:
        """Build a pair from explicit offsets, or None if they are invalid."""
        index1 = _check_index(index1)
        index2 = _check_index(index2)
        if index1 == index2:
            return None
        if index1 >= len(needle) or index2 >= len(needle):
            return None
        return cls(index1, index2)


class Finder:
    """A prefilter reporting offsets where a needle could begin."""

    __slots__ = ("pair", "byte1", "byte2")

    def __init__(self, needle: bytes, pair: Pair | None = None) -> None:
        needle = bytes(needle)
        if pair is None:
            pair = Pair.from_needle(needle)
            if pair is None:
                raise ValueError("a packed pair needs a needle of at least 2 bytes")
        if pair.index1 >= len(needle) or pair.index2 >= len(needle):
            raise ValueError(f"{pair!r} is out of range for a needle of length {len(needle)}")
        self.pair = pair
        self.byte1 = needle[pair.index1]
        self.byte2 = needle[pair.index2]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pair={self.pair!r}, "
            f"byte1={self.byte1:#04x}, byte2={self.byte2:#04x})"
        )

    def find_prefilter(self, haystack: bytes) -> int | None:
        """Return the first offset where the needle could match, or None."""
        haystack = bytes(haystack)
        index1 = self.pair.index1
        index2 = self.pair.index2
        pos = 0
        while (found := haystack.find(self.byte1, pos)) >= 0:
            pos = found + 1
            aligned1 = found - index1
            if aligned1 < 0:
                continue
            aligned2 = aligned1 + index2
            if aligned2 >= len(haystack) or haystack[aligned2] != self.byte2:
                continue
            return aligned1
        return None