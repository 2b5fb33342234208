from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from lazycomb.lazy_combinations import CombinationSequence


@dataclass
class EnumerationConfig:
    number_elements: int
    subset_size: int
    limit: Optional[int] = None  # None -> all subsets

    # output
    as_array: bool = False
    progress: bool = False
    verbose: bool = True

    def validate(self) -> None:
        if self.number_elements < 0:
            raise ValueError(f"number_elements must be >= 0, got {self.number_elements}.")
        if self.subset_size < 0:
            raise ValueError(f"subset_size must be >= 0, got {self.subset_size}.")
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be >= 0 or None, got {self.limit}.")

    def to_sequence(self) -> CombinationSequence:
        return CombinationSequence(self.number_elements, self.subset_size)
