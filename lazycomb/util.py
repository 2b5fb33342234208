from __future__ import annotations
from itertools import islice
from typing import Iterator, Optional, Tuple
import numpy as np
from tqdm.auto import tqdm

from lazycomb.lazy_combinations import CombinationSequence


def _pbar(iterable, **kwargs):
    return tqdm(iterable, **kwargs)


def _bounded_count(seq: CombinationSequence, limit: Optional[int]) -> int:
    total = seq.count()
    if limit is not None:
        total = min(total, limit)
    return total


def iter_offsets(
        seq: CombinationSequence,
        limit: Optional[int] = None,
        progress: bool = False,
) -> Iterator[Tuple[int, ...]]:
    """
    Offset tuples of seq in lexicographic order.
    - limit: stop after that many tuples (None -> all).
    - progress: wrap the enumeration in a tqdm bar with the exact total.
    """
    it = iter(seq) if limit is None else islice(seq, limit)
    if progress:
        it = _pbar(it, total=_bounded_count(seq, limit), desc="Enumerate subsets", unit="subset")
    yield from it


def offsets_matrix(seq: CombinationSequence, limit: Optional[int] = None) -> np.ndarray:
    """
    Produced tuples as int64 array of shape (count, k), one subset per row.
    k == 0 gives shape (1, 0), an empty sequence gives shape (0, k).
    """
    rows = _bounded_count(seq, limit)
    out = np.empty((rows, seq.subset_size), dtype=np.int64)
    for r, subset in enumerate(iter_offsets(seq, limit)):
        out[r, :] = subset
    return out
