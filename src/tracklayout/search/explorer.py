"""Exhaustive search for closed C1 layouts from a piece inventory.

The search is a depth-first backtracking walk over every sequence the
inventory allows. Each time a path closes, its rotations and their flipped
variants are marked as seen so that only one representative is reported.
Marking does not prune the walk itself.

Sequences that only differ by replacing straights with other straights of the
same total length (two ``s1`` versus one ``s2``) are still reported
separately.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from tracklayout.search.config import DEFAULT_TOLERANCE, ClosureTolerance
from tracklayout.search.inventory import Inventory
from tracklayout.track.catalog import DEFAULT_CATALOG, PieceCatalog
from tracklayout.track.geometry import append_section, is_closed_c1
from tracklayout.track.models import Path

logger = logging.getLogger(__name__)

Labels = tuple[str, ...]


@dataclass
class SearchContext:
    """Mutable state threaded through one search.

    Args:
        inventory: Remaining piece supply, restored on every backtrack.
        catalog: Catalog providing piece geometry and flips.
        tolerance: Closure tolerance used to accept layouts.
        path: Current partial path.
        seen: Label sequences already reported or equivalent to a reported one.
        layouts: Reported layouts in discovery order.
        visited: Number of partial paths examined.
    """

    inventory: Inventory
    catalog: PieceCatalog = DEFAULT_CATALOG
    tolerance: ClosureTolerance = DEFAULT_TOLERANCE
    path: Path = field(default_factory=Path)
    seen: set[Labels] = field(default_factory=set)
    layouts: list[Labels] = field(default_factory=list)
    visited: int = 0


def equivalent_sequences(labels: Labels, catalog: PieceCatalog = DEFAULT_CATALOG) -> set[Labels]:
    """All trivial restatements of a closed layout.

    Args:
        labels: Label sequence of a closed layout.
        catalog: Catalog providing flip partners.

    Returns:
        Every cyclic rotation of ``labels`` and the piece-wise flip of each
        rotation, ``labels`` itself included.
    """
    variants: set[Labels] = set()
    for shift in range(len(labels)):
        rotation = labels[shift:] + labels[:shift]
        variants.add(rotation)
        variants.add(tuple(catalog.flip(label) for label in rotation))
    return variants


def _record_if_closed(context: SearchContext) -> None:
    """Report the current path when it closes and is not a known variant.

    Args:
        context: Search state holding the current path.
    """
    if not is_closed_c1(context.path, context.tolerance):
        return
    labels = context.path.labels
    if labels in context.seen:
        return
    context.layouts.append(labels)
    context.seen.update(equivalent_sequences(labels, context.catalog))
    logger.debug("Closed layout found: %s", " ".join(labels))


def explore(context: SearchContext) -> None:
    """Extend the current path with every available piece, recursively.

    On return the inventory and path hold exactly the state they had on entry.

    Args:
        context: Search state; ``layouts`` and ``seen`` accumulate results.
    """
    context.visited += 1
    _record_if_closed(context)

    inventory = context.inventory
    if inventory.total == 0:
        return

    path = context.path
    for label in inventory.available():
        inventory.take(label)
        path.push(append_section(path.last, label, context.catalog))
        explore(context)
        path.pop()
        inventory.put_back(label)


def find_layouts(
    counts: Mapping[str, int],
    catalog: PieceCatalog = DEFAULT_CATALOG,
    tolerance: ClosureTolerance = DEFAULT_TOLERANCE,
) -> list[Labels]:
    """Enumerate distinct closed C1 layouts for a piece inventory.

    Args:
        counts: Mapping of piece label to available count. A flip partner
            that is not listed shares the supply of its listed kind.
        catalog: Catalog providing piece geometry and flips.
        tolerance: Closure tolerance used to accept layouts.

    Returns:
        Label sequences of the reported layouts, in discovery order.

    Raises:
        tracklayout.utils.exceptions.UnknownPieceError: If ``counts`` names a
            label missing from ``catalog``.
        tracklayout.utils.exceptions.LayoutInputError: If a count is invalid.
        tracklayout.utils.exceptions.ConfigurationError: If ``tolerance`` is
            invalid.
    """
    tolerance.validate()
    inventory = Inventory.from_counts(counts, catalog)
    context = SearchContext(inventory=inventory, catalog=catalog, tolerance=tolerance)
    logger.info("Exploring layouts for %d pieces (%s)", inventory.total, ", ".join(inventory.kinds))
    explore(context)
    logger.info(
        "Found %d distinct closed layouts after %d partial paths",
        len(context.layouts),
        context.visited,
    )
    return context.layouts
