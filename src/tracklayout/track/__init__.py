"""Piece catalog, layout geometry, and input loading."""

from tracklayout.track.catalog import DEFAULT_CATALOG, PieceCatalog, PieceKind, flip_label
from tracklayout.track.geometry import (
    angular_difference,
    append_section,
    build_path,
    distance,
    is_closed_c1,
    normalize_angle,
)
from tracklayout.track.io import load_inventory_yaml, load_sequence_yaml
from tracklayout.track.models import Path, Pose, Section

__all__ = [
    "DEFAULT_CATALOG",
    "Path",
    "PieceCatalog",
    "PieceKind",
    "Pose",
    "Section",
    "angular_difference",
    "append_section",
    "build_path",
    "distance",
    "flip_label",
    "is_closed_c1",
    "load_inventory_yaml",
    "load_sequence_yaml",
    "normalize_angle",
]
