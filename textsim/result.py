"""
textsim.result — Comparison results and their line format.
"""

from __future__ import annotations

import dataclasses

from .record import Record

# Block terminator written after each test string in reference mode.
BLOCK_MARKER = "----"


def normalized_score(distance: int, len_a: int, len_b: int) -> float:
    """``distance / (len_a + len_b)``, with two empty strings scoring ``0.0``."""
    total = len_a + len_b
    if total == 0:
        return 0.0
    return distance / total


@dataclasses.dataclass(frozen=True)
class DistanceResult:
    """
    The distance between two records.

    Parameters
    ----------
    distance : int
        OSA edit distance.
    score : float
        ``distance`` over the combined length of both strings.
    record_a : Record
        Left-hand record (the test string in reference mode).
    record_b : Record
        Right-hand record (the matched reference in reference mode).
    """

    distance: int
    score: float
    record_a: Record
    record_b: Record

    @classmethod
    def between(cls, record_a: Record, record_b: Record, distance: int) -> DistanceResult:
        return cls(
            distance=distance,
            score=normalized_score(distance, len(record_a), len(record_b)),
            record_a=record_a,
            record_b=record_b,
        )

    def format(self) -> str:
        """
        Render as ``score distance position_a position_b text_a text_b``,
        tab-separated, with the score to 4 significant digits.
        """
        return "%.4g\t%d\t%d\t%d\t%s\t%s" % (
            self.score,
            self.distance,
            self.record_a.position,
            self.record_b.position,
            self.record_a.text,
            self.record_b.text,
        )


__all__ = ["BLOCK_MARKER", "DistanceResult", "normalized_score"]
