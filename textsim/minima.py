"""
textsim.minima — Bounded retention of the K smallest distances of a scan.

Usage::

    from textsim.minima import BoundedMinimaSet

    best = BoundedMinimaSet(3)
    for pos, ref in enumerate(references, 1):
        best.insert(OSA.distance(query, ref), ref, pos)
    for d, ref, pos in best.drain():
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, NamedTuple

from .config import TOP_K


class Minimum(NamedTuple):
    distance: int
    item: Any
    position: int


class BoundedMinimaSet:
    """
    Keeps the ``capacity`` smallest distances inserted so far, ascending.

    A new entry goes in front of the first retained entry with a strictly
    greater distance.  Among equal distances the one inserted first therefore
    stays when the set is full.

    Parameters
    ----------
    capacity : int, default TOP_K
        Maximum number of retained entries.
    """

    __slots__ = ("_capacity", "_entries")

    def __init__(self, capacity: int = TOP_K) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._entries: list[Minimum] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, distance: int, item: Any, position: int) -> None:
        entries = self._entries
        entry = Minimum(distance, item, position)
        if not entries:
            entries.append(entry)
            return

        for i, kept in enumerate(entries):
            if kept.distance > distance:
                entries.insert(i, entry)
                if len(entries) > self._capacity:
                    entries.pop()
                return

        if len(entries) < self._capacity:
            entries.append(entry)

    def distances(self) -> list[int]:
        return [entry.distance for entry in self._entries]

    def drain(self) -> list[Minimum]:
        """Return the retained entries in ascending order and empty the set."""
        entries, self._entries = self._entries, []
        return entries

    def __iter__(self) -> Iterator[Minimum]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"BoundedMinimaSet(capacity={self._capacity}, distances={self.distances()})"


__all__ = ["Minimum", "BoundedMinimaSet"]
