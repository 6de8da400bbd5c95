"""Byte and substring search routines for byte strings."""

__version__ = "0.1.0"

__all__ = [
    "memchr",
    "packedpair",
    "rabinkarp_rev",
    "rank",
    "shiftor",
    "suffix",
    "twoway",
]