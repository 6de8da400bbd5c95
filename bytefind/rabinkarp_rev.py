"""Reverse substring search using the Rabin-Karp rolling hash."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def _hash_add(value: int, byte: int) -> int:
    """Add one byte to a 32-bit rolling hash."""
    return ((value << 1) + byte) & _MASK


def _hash_del(value: int, byte: int, factor: int) -> int:
    """Remove one byte from a 32-bit rolling hash."""
    return (value - byte * factor) & _MASK


def _hash_reversed(data: bytes) -> int:
    """Hash a window of bytes, last byte first."""
    value = 0
    for byte in reversed(data):
        value = _hash_add(value, byte)
    return value


class FinderRev:
    """A reverse Rabin-Karp searcher.

    The same needle given at construction must be passed to every search.
    An empty needle matches at every offset, including ``len(haystack)``.
    """

    __slots__ = ("needle_hash", "hash_2pow")

    def __init__(self, needle: bytes) -> None:
        needle = bytes(needle)
        self.needle_hash = _hash_reversed(needle)
        # 2^(n-1) with 32-bit wrapping; used to drop the byte leaving the window.
        self.hash_2pow = (1 << (len(needle) - 1)) & _MASK if needle else 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(needle_hash={self.needle_hash:#x}, "
            f"hash_2pow={self.hash_2pow:#x})"
        )

    def rfind(self, haystack: bytes, needle: bytes) -> int | None:
        """Return the offset of the last occurrence of needle, or None."""
        haystack = bytes(haystack)
        needle = bytes(needle)
        nlen = len(needle)
        hlen = len(haystack)
        if nlen > hlen:
            return None
        cur = hlen - nlen
        window = _hash_reversed(haystack[cur:cur + nlen])
        while True:
            if window == self.needle_hash and haystack[cur:cur + nlen] == needle:
                return cur
            if cur <= 0:
                return None
            cur -= 1
            window = _hash_add(
                _hash_del(window, haystack[cur + nlen], self.hash_2pow),
                haystack[cur],
            )