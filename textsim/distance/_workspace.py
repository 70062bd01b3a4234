"""
textsim.distance._workspace — reusable scratch table for the DP metrics.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from ..config import INIT_INPUT_SIZE


class Workspace:
    """
    A growable dense 2-D ``int`` table shared across distance calls.

    One workspace serves every call of a comparison run.  The table only grows.

    Parameters
    ----------
    initial_size : int, default INIT_INPUT_SIZE
        Rows and columns allocated up front.

    Examples
    --------
    >>> from textsim.distance import OSA
    >>> ws = Workspace()
    >>> OSA.distance("kitten", "sitting", workspace=ws)
    3
    """

    __slots__ = ("_rows", "_cols", "_table", "_busy")

    def __init__(self, initial_size: int = INIT_INPUT_SIZE) -> None:
        if initial_size < 1:
            raise ValueError(f"initial_size must be >= 1, got {initial_size}")
        self._rows = initial_size
        self._cols = initial_size
        self._table: list[list[int]] = [[0] * initial_size for _ in range(initial_size)]
        self._busy = False

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def _grow(self, rows: int, cols: int) -> None:
        if cols > self._cols:
            extra = cols - self._cols
            for row in self._table:
                row.extend([0] * extra)
            self._cols = cols
        if rows > self._rows:
            self._table.extend([0] * self._cols for _ in range(rows - self._rows))
            self._rows = rows

    @contextmanager
    def acquire(self, rows: int, cols: int) -> Iterator[list[list[int]]]:
        """
        Borrow a table of at least ``rows`` x ``cols``.

        The caller must overwrite every cell of the region it reads.  Nested
        acquisition of the same workspace raises ``RuntimeError``.
        """
        if self._busy:
            raise RuntimeError("Workspace is already in use")
        self._grow(rows, cols)
        self._busy = True
        try:
            yield self._table
        finally:
            self._busy = False

    def __repr__(self) -> str:
        return f"Workspace(shape={self._rows}x{self._cols})"


__all__ = ["Workspace"]
