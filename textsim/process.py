"""
textsim.process — batch comparison and extraction utilities.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, NamedTuple

from .config import INIT_INPUT_SIZE, TOP_K
from .distance import OSA, Workspace
from .minima import BoundedMinimaSet
from .record import Record
from .result import DistanceResult

logger = logging.getLogger(__name__)


class ReferenceBlock(NamedTuple):
    """The closest references of one test record, ascending by distance."""

    test: Record
    results: list[DistanceResult]


def pairwise(
    records: Sequence[Record],
    *,
    workspace: Workspace | None = None,
) -> Iterator[DistanceResult]:
    """
    Compare every unordered pair of *records*.

    Pairs come out as ``(1, 2), (1, 3), …, (1, n), (2, 3), …``: first
    position ascending, then second position ascending.
    """
    ws = workspace if workspace is not None else Workspace(INIT_INPUT_SIZE)
    n = len(records)
    logger.debug("pairwise comparison of %d records (%d pairs)", n, n * (n - 1) // 2)
    for i in range(n - 1):
        a = records[i]
        for j in range(i + 1, n):
            b = records[j]
            d = OSA.distance(a.text, b.text, workspace=ws)
            yield DistanceResult.between(a, b, d)


def reference(
    references: Sequence[Record],
    tests: Iterable[Record],
    *,
    limit: int = TOP_K,
    workspace: Workspace | None = None,
) -> Iterator[ReferenceBlock]:
    """
    Find the ``limit`` closest *references* for each of *tests*.

    One block is yielded per test record, in input order.  Each block holds
    at most ``limit`` results; ties keep the reference that comes first.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    ws = workspace if workspace is not None else Workspace(INIT_INPUT_SIZE)
    logger.debug("reference comparison against %d references, top %d", len(references), limit)
    for test in tests:
        best = BoundedMinimaSet(limit)
        for ref in references:
            best.insert(OSA.distance(test.text, ref.text, workspace=ws), ref, ref.position)
        results = [DistanceResult.between(test, ref, d) for d, ref, _ in best.drain()]
        yield ReferenceBlock(test, results)


def extract_iter(
    query: Any,
    choices: Iterable[Any],
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> Iterator[tuple[Any, int, int]]:
    """
    Yield ``(choice, distance, index)`` for every choice, in input order.

    Choices farther than ``score_cutoff`` are skipped.
    """
    ws = Workspace(INIT_INPUT_SIZE)
    processed_query = processor(query) if processor is not None else query
    for index, choice in enumerate(choices):
        processed = processor(choice) if processor is not None else choice
        d = OSA.distance(processed_query, processed, workspace=ws)
        if score_cutoff is None or d <= score_cutoff:
            yield choice, d, index


def extract(
    query: Any,
    choices: Iterable[Any],
    *,
    processor: Callable[..., Any] | None = None,
    limit: int | None = TOP_K,
    score_cutoff: int | None = None,
) -> list[tuple[Any, int, int]]:
    """
    Return the closest matches from *choices* for *query*, ascending by distance.

    ``limit=None`` returns every match.  Equal distances keep input order.
    """
    if limit is None:
        matches = extract_iter(query, choices, processor=processor, score_cutoff=score_cutoff)
        return sorted(matches, key=lambda m: m[1])
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    best = BoundedMinimaSet(limit)
    for choice, d, index in extract_iter(
        query, choices, processor=processor, score_cutoff=score_cutoff
    ):
        best.insert(d, choice, index)
    return [(choice, d, index) for d, choice, index in best.drain()]


def extractOne(
    query: Any,
    choices: Iterable[Any],
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> tuple[Any, int, int] | None:
    matches = extract(
        query, choices, processor=processor, limit=1, score_cutoff=score_cutoff
    )
    return matches[0] if matches else None


def cdist(
    queries: Iterable[Any],
    choices: Iterable[Any],
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
    dtype: Any = None,
) -> Any:
    """Compute a pairwise distance matrix. Requires numpy."""
    try:
        import numpy as np
    except ImportError as e:
        msg = "cdist requires numpy: pip install textsim[all]"
        raise ImportError(msg) from e

    ws = Workspace(INIT_INPUT_SIZE)
    if processor is not None:
        queries = [processor(q) for q in queries]
        choices = [processor(c) for c in choices]
    else:
        queries = list(queries)
        choices = list(choices)

    flat = [
        OSA.distance(q, c, score_cutoff=score_cutoff, workspace=ws)
        for q in queries
        for c in choices
    ]
    matrix = np.array(flat, dtype=dtype if dtype is not None else np.int32)
    return matrix.reshape((len(queries), len(choices)))


__all__ = [
    "ReferenceBlock",
    "pairwise",
    "reference",
    "extract",
    "extractOne",
    "extract_iter",
    "cdist",
]
