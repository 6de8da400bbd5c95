"""Forward substring search with the Shift-Or (bitap) algorithm."""

from __future__ import annotations

_MASK_BITS = 16
_MASK_ALL = (1 << _MASK_BITS) - 1


class NeedleTooLong(ValueError):
    """Raised when a needle is longer than Shift-Or supports."""


class Finder:
    """A forward Shift-Or searcher for needles of at most 15 bytes.

    The needle is encoded at construction, so searches need only the
    haystack. An empty needle matches at offset 0.
    """

    MAX_NEEDLE_LEN = _MASK_BITS - 1

    __slots__ = ("_masks", "needle_len")

    def __init__(self, needle: bytes) -> None:
        needle = bytes(needle)
        if len(needle) > self.MAX_NEEDLE_LEN:
            raise NeedleTooLong(
                f"needle of length {len(needle)} exceeds the maximum of "
                f"{self.MAX_NEEDLE_LEN}"
            )
        masks = [_MASK_ALL] * 256
        for i, byte in enumerate(needle):
            masks[byte] &= ~(1 << i) & _MASK_ALL
        self._masks = tuple(masks)
        self.needle_len = len(needle)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(needle_len={self.needle_len})"

    def find(self, haystack: bytes) -> int | None:
        """Return the offset of the first occurrence of the needle, or None."""
        nlen = self.needle_len
        if nlen == 0:
            return 0
        match_bit = 1 << nlen
        result = ~1 & _MASK_ALL
        for i, byte in enumerate(bytes(haystack)):
            result = ((result | self._masks[byte]) << 1) & _MASK_ALL
            if not result & match_bit:
                return i + 1 - nlen
        return None