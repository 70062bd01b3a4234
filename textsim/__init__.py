"""
textsim — pairwise string similarity by restricted Damerau-Levenshtein distance.
"""

from __future__ import annotations

from . import (
    compat,
    config,
    distance,
    minima,
    process,
    record,
    result,
)
from .config import SimilarityConfig
from .distance import OSA, Workspace
from .minima import BoundedMinimaSet, Minimum
from .record import Record, load_records, records_from
from .result import DistanceResult

__version__: str = "0.2.0"

__all__ = [
    "compat",
    "config",
    "distance",
    "minima",
    "process",
    "record",
    "result",
    "OSA",
    "Workspace",
    "BoundedMinimaSet",
    "Minimum",
    "Record",
    "DistanceResult",
    "SimilarityConfig",
    "load_records",
    "records_from",
    "__version__",
]
