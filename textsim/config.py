"""
textsim.config — fixed limits and run configuration.
"""

from __future__ import annotations

import dataclasses

# Closest reference matches kept per test string.
TOP_K: int = 3

# Sizing hint for loaded record lists and scratch tables.
INIT_INPUT_SIZE: int = 64


@dataclasses.dataclass(frozen=True)
class SimilarityConfig:
    """
    Configuration for a comparison run.

    Parameters
    ----------
    top_k : int
        Reference matches retained per test string.
    initial_size : int
        Rows and columns preallocated in the scratch table.
    encoding : str
        Text encoding of the input files.
    log_level : str
        Level name passed to :mod:`logging`.

    Examples
    --------
    >>> cfg = SimilarityConfig(top_k=5)
    >>> cfg.validate().top_k
    5
    """

    top_k: int = TOP_K
    initial_size: int = INIT_INPUT_SIZE
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def validate(self) -> SimilarityConfig:
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")
        if self.initial_size < 1:
            raise ValueError(f"initial_size must be >= 1, got {self.initial_size}")
        return self


__all__ = ["TOP_K", "INIT_INPUT_SIZE", "SimilarityConfig"]
