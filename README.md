# bytefind

Search routines for byte strings, written in plain Python with no
dependencies.

## What is in it

- `bytefind.memchr.One`: find, rfind and count one byte value, and iterate
  over its positions in either direction through `MatchIter` (`next()`,
  `next_back()`, `reversed()` and `count()`).
- `bytefind.twoway.Finder` / `FinderRev`: Two-Way substring search, forward
  and reverse, in linear time and constant space.
- `bytefind.rabinkarp_rev.FinderRev`: reverse substring search with a
  Rabin-Karp rolling hash; cheap to build.
- `bytefind.shiftor.Finder`: forward Shift-Or search for needles of up to 15
  bytes; longer needles raise `NeedleTooLong` (a `ValueError`).
- `bytefind.packedpair`: `Pair` picks two rare bytes of a needle by a
  background frequency rank (`DefaultFrequencyRank`, or your own
  `HeuristicFrequencyRank`), or takes explicit offsets with
  `Pair.with_indices`; `Finder.find_prefilter` reports the first position
  where the needle could begin.
- `bytefind.rank.rank`: the default frequency rank of a byte (lower means
  rarer).
- `bytefind.suffix`: the critical-factorization helpers behind Two-Way:
  `suffix_forward`, `suffix_reverse`, `SuffixKind`, `Suffix` and
  `ApproximateByteSet`.

Searches return an offset into the haystack, or `None` when there is no match.
An empty needle matches at offset 0 (forward) or at the end of the haystack
(reverse).

## Examples

```python
from bytefind.memchr import One
from bytefind.twoway import Finder, FinderRev

one = One(ord("\n"))
one.count(b"a\nb\nc")             # 2
list(one.iter(b"a\nb\nc"))        # [1, 3]
one.iter(b"a\nb\nc").next_back()  # 3

needle = b"abab"
Finder(needle).find(b"xxababyy", needle)     # 2
FinderRev(needle).rfind(b"ababaz", needle)   # 0
```

Two-Way and Rabin-Karp finders take the needle again at search time; it must
be the one they were built with.

```python
from bytefind.rabinkarp_rev import FinderRev as RabinKarpRev
from bytefind.shiftor import Finder as ShiftOr
from bytefind.packedpair import Finder as PairFinder, Pair

RabinKarpRev(b"ab").rfind(b"abab", b"ab")   # 2
ShiftOr(b"bar").find(b"foobar")             # 3

pair = Pair.with_indices(b"needle", 0, 5)
PairFinder(b"needle", pair).find_prefilter(b"a needle here")  # 2
```

## What it does not do

- There is no single entry point that picks an algorithm for you; each
  searcher is used directly.
- Byte scanning covers one byte value at a time (`One`); there is no scanner
  for any of several bytes.
- Rabin-Karp search is provided in reverse only, and Shift-Or in forward only.
- There is no command-line tool.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```