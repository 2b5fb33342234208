"""
Enumerate the k-subsets of n offsets from the command line.

Usage:
    lazycomb-enumerate N K [--limit L] [--array] [--progress] [--quiet]
"""
from __future__ import annotations
import argparse
import sys
from typing import List, Optional
import numpy as np

from lazycomb.enumeration_config import EnumerationConfig
from lazycomb.util import iter_offsets, offsets_matrix


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazycomb-enumerate",
        description="Print all k-element subsets of {0..n-1} as offset tuples.",
    )
    parser.add_argument("number_elements", type=int, help="n, size of the universe")
    parser.add_argument("subset_size", type=int, help="k, size of each subset")
    parser.add_argument("--limit", type=int, default=None, help="stop after that many subsets")
    parser.add_argument("--array", action="store_true", help="print the offsets as numpy matrix")
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    parser.add_argument("--quiet", action="store_true", help="no [Comb] status lines")
    return parser


def run(cfg: EnumerationConfig) -> int:
    cfg.validate()
    seq = cfg.to_sequence()
    if cfg.verbose:
        print(f"[Comb] n={seq.number_elements} k={seq.subset_size} -> {seq.count()} subsets")

    if cfg.as_array:
        mat = offsets_matrix(seq, cfg.limit)
        with np.printoptions(threshold=sys.maxsize):
            print(mat)
        produced = mat.shape[0]
    else:
        produced = 0
        for subset in iter_offsets(seq, cfg.limit, cfg.progress):
            print(" ".join(str(i) for i in subset))
            produced += 1

    if cfg.verbose:
        if cfg.limit is not None and produced < seq.count():
            print(f"[Comb] stopped after limit={cfg.limit}")
        print(f"[Comb] printed {produced} subsets")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = EnumerationConfig(
        number_elements=args.number_elements,
        subset_size=args.subset_size,
        limit=args.limit,
        as_array=args.array,
        progress=args.progress,
        verbose=not args.quiet,
    )
    try:
        return run(cfg)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
