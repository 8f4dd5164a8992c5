"""Piece inventory and sequence loading from YAML files.

An inventory file maps piece labels to counts::

    ---
    s1: 2   # 2 straights of length 1
    aR: 12  # 12 right-hand arcs

A sequence file lists piece labels in layout order::

    ---
    - s2
    - aR
    - aL
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from tracklayout.utils.exceptions import LayoutInputError


def _load_yaml(path: str | Path) -> Any:
    """Read one YAML document.

    Args:
        path: YAML file path.

    Returns:
        Parsed document.

    Raises:
        tracklayout.utils.exceptions.LayoutInputError: If the file does not
            exist or is not valid YAML.
    """
    file_path = Path(path)
    if not file_path.exists():
        msg = f"Input file not found: {file_path}"
        raise LayoutInputError(msg)

    with file_path.open("r", encoding="utf-8") as handle:
        try:
            return yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in {file_path}: {exc}"
            raise LayoutInputError(msg) from exc


def load_inventory_yaml(path: str | Path) -> dict[str, int]:
    """Load a piece inventory.

    Labels are not checked against a catalog here; that happens when the
    inventory is built for a search.

    Args:
        path: YAML file holding a mapping of piece label to count.

    Returns:
        Mapping of piece label to non-negative count, in file order.

    Raises:
        tracklayout.utils.exceptions.LayoutInputError: If the file is missing,
            is not a mapping, or holds a count that is not a non-negative
            integer.
    """
    document = _load_yaml(path)
    if not isinstance(document, dict):
        msg = f"Inventory file must contain a mapping of piece label to count: {path}"
        raise LayoutInputError(msg)

    counts: dict[str, int] = {}
    for label, count in document.items():
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            msg = f"Count for piece {label!r} must be a non-negative integer, got: {count!r}"
            raise LayoutInputError(msg)
        counts[str(label)] = count
    return counts


def load_sequence_yaml(path: str | Path) -> list[str]:
    """Load an ordered piece sequence.

    Args:
        path: YAML file holding a list of piece labels.

    Returns:
        Piece labels in layout order.

    Raises:
        tracklayout.utils.exceptions.LayoutInputError: If the file is missing,
            is not a list, or is empty.
    """
    document = _load_yaml(path)
    if not isinstance(document, list):
        msg = f"Sequence file must contain a list of piece labels: {path}"
        raise LayoutInputError(msg)
    if not document:
        msg = f"Sequence file contains no pieces: {path}"
        raise LayoutInputError(msg)
    return [str(label) for label in document]
