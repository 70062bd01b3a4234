"""
textsim.compat — Column coercion for comparison inputs.

Turns a Python list, a Pandas / Polars Series or a PyArrow array into
``list[str]`` so any of them can feed the comparators.  The frameworks are
probed lazily; none of them is a hard dependency.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _is_polars_series(data: Any) -> bool:
    try:
        import polars as pl

        return isinstance(data, pl.Series)
    except ImportError:
        return False


def _is_pandas_series(data: Any) -> bool:
    try:
        import pandas as pd

        return isinstance(data, pd.Series)
    except ImportError:
        return False


def _is_pyarrow_array(data: Any) -> bool:
    try:
        import pyarrow as pa

        return isinstance(data, (pa.Array, pa.ChunkedArray))
    except ImportError:
        return False


def _check_strings(values: list[Any]) -> list[str]:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(
                f"Expected Iterable[str], got an element of type {type(value).__name__}. "
                "All comparison inputs must be strings."
            )
    return values


def _coerce_to_strings(data: Any) -> list[str]:
    """
    Convert *data* to a ``list[str]``.

    Supported input types
    ---------------------
    * ``list[str]`` — returned as-is (no copy).
    * ``polars.Series`` — ``.to_list()``; nulls become ``""``.
    * ``pandas.Series`` — ``.tolist()``; ``None`` and NaN become ``""``.
    * ``pyarrow.Array`` / ``pyarrow.ChunkedArray`` — ``.to_pylist()``; nulls become ``""``.
    * Any other ``Iterable[str]`` — ``list(data)``.

    Raises
    ------
    TypeError
        If *data* is not iterable, or an element is not a string.
    """
    if isinstance(data, list):
        return _check_strings(data)

    if isinstance(data, (str, bytes)):
        raise TypeError(
            f"Expected a collection of strings, got a single {type(data).__name__}."
        )

    if _is_polars_series(data):
        import polars as pl

        s: pl.Series = data
        return _check_strings([x if x is not None else "" for x in s.to_list()])

    if _is_pandas_series(data):
        values = data.tolist()  # type: ignore[union-attr]
        return _check_strings(
            ["" if x is None or (isinstance(x, float) and x != x) else x for x in values]
        )

    if _is_pyarrow_array(data):
        result = data.to_pylist()  # type: ignore[union-attr]
        return _check_strings([x if x is not None else "" for x in result])

    if isinstance(data, Iterable):
        return _check_strings(list(data))

    raise TypeError(
        f"Cannot coerce {type(data).__name__} to list[str]. "
        "Pass a list, Polars Series, Pandas Series or PyArrow Array."
    )


def _extract_column(df: Any, column: str) -> list[str]:
    """
    Extract a named column from a Polars or Pandas DataFrame as ``list[str]``.
    """
    try:
        col_data = df[column]
    except (KeyError, TypeError) as e:
        raise TypeError(
            f"Cannot extract column '{column}' from {type(df).__name__}."
        ) from e

    return _coerce_to_strings(col_data)


__all__ = ["_coerce_to_strings", "_extract_column"]
