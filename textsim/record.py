"""
textsim.record — Input records and the line loader.

A record is one trimmed, non-blank input string together with its 1-based
position among the kept strings of its source.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from .compat import _coerce_to_strings, _extract_column

logger = logging.getLogger(__name__)

# Only spaces and horizontal tabs are trimmed; everything else is kept.
_BLANKS = " \t"


class Record:
    """
    One comparison input.

    Parameters
    ----------
    text : str
        The trimmed string.
    position : int
        1-based position in its sequence, counted after blank lines are dropped.

    Examples
    --------
    >>> r = Record("care", 4)
    >>> r.text, r.position
    ('care', 4)
    """

    __slots__ = ("_text", "_position")

    def __init__(self, text: str, position: int) -> None:
        self._text = text
        self._position = position

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._position

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        text = self._text[:60] + "..." if len(self._text) > 60 else self._text
        return f"Record({text!r}, {self._position})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._text == other._text and self._position == other._position

    def __hash__(self) -> int:
        return hash((self._text, self._position))


def trim(text: str) -> str:
    """Strip leading and trailing spaces and tabs."""
    return text.strip(_BLANKS)


def records_from(data: Any) -> list[Record]:
    """
    Build records from in-memory strings.

    Accepts whatever :func:`textsim.compat._coerce_to_strings` accepts: a
    list, a Pandas / Polars Series, a PyArrow array or any iterable of str.
    Blank entries are dropped before positions are assigned.
    """
    records: list[Record] = []
    for value in _coerce_to_strings(data):
        text = trim(value)
        if text:
            records.append(Record(text, len(records) + 1))
    return records


def records_from_column(df: Any, column: str) -> list[Record]:
    """Build records from one column of a Pandas or Polars DataFrame."""
    return records_from(_extract_column(df, column))


def load_records(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
    errors: str = "surrogateescape",
) -> list[Record]:
    r"""
    Read one record per line from *path*.

    Lines end at ``\n`` only; a ``\r`` directly before it is dropped and any
    other ``\r`` stays in the record.  Undecodable bytes are kept as lone
    surrogates under the default ``errors="surrogateescape"``, so encoding
    them back with the same handler restores the input bytes.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    """
    records: list[Record] = []
    with open(path, encoding=encoding, errors=errors, newline="\n") as fh:
        for line in fh:
            text = trim(line.removesuffix("\n").removesuffix("\r"))
            if text:
                records.append(Record(text, len(records) + 1))
    logger.debug("loaded %d records from %s", len(records), path)
    return records


__all__ = ["Record", "trim", "records_from", "records_from_column", "load_records"]
