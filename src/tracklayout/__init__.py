"""Toy train track layout search and diagnosis."""

from tracklayout.search.diagnose import DiagnosisResult, diagnose_sequence
from tracklayout.search.explorer import find_layouts
from tracklayout.track.catalog import DEFAULT_CATALOG, PieceCatalog, PieceKind

__all__ = [
    "DEFAULT_CATALOG",
    "DiagnosisResult",
    "PieceCatalog",
    "PieceKind",
    "diagnose_sequence",
    "find_layouts",
]
