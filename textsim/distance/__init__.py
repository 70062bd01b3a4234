"""
textsim.distance — edit distance metrics.
"""

from __future__ import annotations

from . import OSA  # noqa: F401
from ._workspace import Workspace

__all__ = [
    "OSA",
    "Workspace",
]
