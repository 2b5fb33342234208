from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import math


class CombinationCursor:
    """
    Position inside the enumeration of the k-subsets of {0, ..., n-1}.

    The cursor only exposes offsets (strictly increasing tuple of length k),
    never elements of a subject container. Cursors compare equal when
    n, k, offsets and the end flag match, which is what terminates a
    begin/end loop:

        cur, end = seq.initial_cursor(), seq.end_cursor()
        while cur != end:
            use(cur.indices)
            cur.advance()
    """

    __slots__ = ("_number_elements", "_subset_size", "_indices", "_end")

    def __init__(self, number_elements: int = 0, subset_size: int = 0, end: bool = False):
        self._number_elements: int = number_elements
        self._subset_size: int = subset_size

        if subset_size > number_elements:
            # nothing to choose: begin and end collapse onto the same state
            self._indices: List[int] = [0] * subset_size
            self._end: bool = True
            return

        offset = number_elements - subset_size if end else 0
        self._indices = list(range(offset, offset + subset_size))
        self._end = end

    @property
    def number_elements(self) -> int:
        return self._number_elements

    @property
    def subset_size(self) -> int:
        return self._subset_size

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(self._indices)

    @property
    def is_end(self) -> bool:
        return self._end

    def advance(self) -> CombinationCursor:
        """Move to the lexicographically next subset (pre-increment)."""
        assert not self._end, "advance past the end of the combination sequence"

        k = self._subset_size
        r = self._indices
        top = self._number_elements - k

        i = k - 1
        while i >= 0 and r[i] == i + top:
            i -= 1
        if i < 0:
            # last subset reached, r already holds [n-k, ..., n-1]
            self._end = True
            return self

        r[i] += 1
        for j in range(i + 1, k):
            r[j] = r[j - 1] + 1
        return self

    def advance_post(self) -> CombinationCursor:
        """Advance and return a copy of the state before advancing (post-increment)."""
        previous = self.copy()
        self.advance()
        return previous

    def copy(self) -> CombinationCursor:
        other = CombinationCursor.__new__(CombinationCursor)
        other._number_elements = self._number_elements
        other._subset_size = self._subset_size
        other._indices = list(self._indices)
        other._end = self._end
        return other

    __copy__ = copy

    def __deepcopy__(self, memo) -> CombinationCursor:
        return self.copy()

    def swap(self, other: CombinationCursor) -> None:
        self._number_elements, other._number_elements = other._number_elements, self._number_elements
        self._subset_size, other._subset_size = other._subset_size, self._subset_size
        self._indices, other._indices = other._indices, self._indices
        self._end, other._end = other._end, self._end

    def __eq__(self, other) -> bool:
        if not isinstance(other, CombinationCursor):
            return NotImplemented
        return (self._number_elements == other._number_elements
                and self._subset_size == other._subset_size
                and self._indices == other._indices
                and self._end == other._end)

    # mutable -> not hashable
    __hash__ = None

    def __len__(self) -> int:
        return self._subset_size

    def __getitem__(self, pos: int) -> int:
        return self._indices[pos]

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._indices))

    def __repr__(self) -> str:
        tag = " end" if self._end else ""
        return (f"CombinationCursor(n={self._number_elements}, k={self._subset_size}, "
                f"indices={self.indices}{tag})")


@dataclass(frozen=True)
class CombinationSequence:
    """
    All k-subsets of n offsets in lexicographic order of the offset tuple.

    No validation happens on construction: k > n (and n == 0 with k > 0) is the
    empty sequence, k == 0 holds exactly the empty tuple.

        chars = "abcdefg"
        for subset in CombinationSequence(len(chars), 4):
            print("".join(chars[i] for i in subset))
    """
    number_elements: int = 0
    subset_size: int = 0

    def initial_cursor(self) -> CombinationCursor:
        return CombinationCursor(self.number_elements, self.subset_size, end=False)

    def end_cursor(self) -> CombinationCursor:
        return CombinationCursor(self.number_elements, self.subset_size, end=True)

    # begin/end aliases for range-style consumption
    begin = initial_cursor
    end = end_cursor

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        cur = self.initial_cursor()
        stop = self.end_cursor()
        while cur != stop:
            yield cur.indices
            cur.advance()

    def count(self) -> int:
        """Number of subsets C(n, k), unbounded int (0 for k > n)."""
        return math.comb(self.number_elements, self.subset_size)

    def __len__(self) -> int:
        # len() is limited to sys.maxsize, use count() for large n
        return self.count()
