"""
textsim.distance.OSA — restricted Damerau-Levenshtein distance.

Insertions, deletions, substitutions and swaps of two *adjacent* symbols each
cost one unit.  A swapped pair is only recognised where it sits; symbols that
repeat elsewhere in either string are not tracked, so this is the optimal
string alignment variant rather than the unrestricted Damerau-Levenshtein
distance, and it does not satisfy the triangle inequality in general.

Symbols are the elements of the inputs: code points for ``str``, octets for
``bytes``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import nullcontext
from typing import Any

from ._workspace import Workspace


def _fill(tab: list[list[int]], s1: Sequence[Any], s2: Sequence[Any]) -> int:
    l1 = len(s1)
    l2 = len(s2)

    # Row 0 and column 0 hold the sentinel; row 1 and column 1 the prefix
    # lengths, shifted by one to make room for it.
    limit = l1 + l2
    tab[0][0] = limit
    for i in range(l1 + 1):
        tab[i + 1][0] = limit
        tab[i + 1][1] = i
    head = tab[0]
    first = tab[1]
    for j in range(l2 + 1):
        head[j + 1] = limit
        first[j + 1] = j

    for i in range(1, l1 + 1):
        c1 = s1[i - 1]
        above = tab[i]
        row = tab[i + 1]
        for j in range(1, l2 + 1):
            cost = 0 if c1 == s2[j - 1] else 1

            best = min(
                above[j + 1] + 1,  # deletion
                row[j] + 1,  # insertion
                above[j] + cost,  # substitution
            )
            if i > 1 and j > 1 and c1 == s2[j - 2] and s1[i - 2] == s2[j - 1]:
                best = min(best, tab[i - 1][j - 1] + cost)  # transposition
            row[j + 1] = best

    return tab[l1 + 1][l2 + 1]


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
    workspace: Workspace | None = None,
) -> int:
    """
    Calculates the OSA distance between two sequences.

    Parameters
    ----------
    s1, s2 : Sequence
        Strings, bytes or any indexable sequence of comparable symbols.
    processor : Callable | None, default None
        Applied to both inputs before comparing.
    score_cutoff : int | None, default None
        When the distance is larger, ``score_cutoff + 1`` is returned.
    workspace : Workspace | None, default None
        Scratch table to reuse instead of allocating one for this call.

    Examples
    --------
    >>> distance("ab", "ba")
    1
    >>> distance("kitten", "sitting")
    3
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    l1 = len(s1)
    l2 = len(s2)
    if l1 == 0:
        dist = l2
    elif l2 == 0:
        dist = l1
    else:
        if workspace is None:
            scope: Any = nullcontext([[0] * (l2 + 2) for _ in range(l1 + 2)])
        else:
            scope = workspace.acquire(l1 + 2, l2 + 2)
        with scope as tab:
            dist = _fill(tab, s1, s2)

    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
    workspace: Workspace | None = None,
) -> float:
    """
    Calculates the OSA distance divided by the combined length of both inputs.

    Two empty inputs score ``0.0``.  With ``score_cutoff``, scores above it
    are reported as ``1.0``.
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    total = len(s1) + len(s2)
    if total == 0:
        return 0.0
    norm = distance(s1, s2, workspace=workspace) / total
    return norm if score_cutoff is None or norm <= score_cutoff else 1.0


__all__ = ["distance", "normalized_distance"]
