"""Layout chaining and closure analysis for track paths.

Three frames are involved when placing section ``i``:

* ``XY0``: origin at the first section's initial end, X along its direction.
* ``XY1``: origin at the initial end of section ``i``, axes parallel to ``XY0``.
* ``XY2``: origin as ``XY1``, axes rotated by the initial direction ``Di`` of
  section ``i``. Piece geometry from the catalog is expressed here.

The catalog displacement has polar angle ``t2`` in ``XY2`` and therefore
``t1 = Di + t2`` in ``XY1``; the final position in ``XY0`` follows by adding
its ``XY1`` components to the initial position.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np

from tracklayout.search.config import DEFAULT_TOLERANCE, ClosureTolerance
from tracklayout.track.catalog import DEFAULT_CATALOG, PieceCatalog
from tracklayout.track.models import ANCHOR_POSE, Path, Pose, Section
from tracklayout.utils.constants import FULL_TURN

logger = logging.getLogger(__name__)

MIN_CLOSED_SECTION_COUNT = 2


def append_section(
    prior: Section | None,
    kind: str,
    catalog: PieceCatalog = DEFAULT_CATALOG,
) -> Section:
    """Place a piece after ``prior``.

    Args:
        prior: Section the new piece attaches to, or ``None`` to anchor the
            piece at the origin facing direction ``0``.
        kind: Label of the piece to place.
        catalog: Catalog providing piece geometry.

    Returns:
        New section with both end poses resolved in the layout frame.

    Raises:
        tracklayout.utils.exceptions.UnknownPieceError: If ``kind`` is not in
            ``catalog``.
    """
    piece = catalog.get(kind)
    start = ANCHOR_POSE if prior is None else prior.end

    # A zero displacement gives heading 0 and length 0, i.e. end == start.
    t1 = start.direction + piece.heading
    x_start, y_start = start.position
    end = Pose(
        position=(
            x_start + piece.length * math.cos(t1),
            y_start + piece.length * math.sin(t1),
        ),
        direction=start.direction + piece.turn,
    )
    return Section(kind=kind, start=start, end=end)


def build_path(labels: Iterable[str], catalog: PieceCatalog = DEFAULT_CATALOG) -> Path:
    """Lay out a fixed sequence of pieces.

    Args:
        labels: Piece labels in layout order.
        catalog: Catalog providing piece geometry.

    Returns:
        Chained path anchored at the origin.
    """
    path = Path()
    for label in labels:
        path.push(append_section(path.last, label, catalog))
    logger.debug("Built path of %d sections", len(path))
    return path


def distance(p1: tuple[float, float], p2: tuple[float, float]) -> float:
    """Euclidean distance between two points.

    Args:
        p1: First point ``(x, y)``.
        p2: Second point ``(x, y)``.

    Returns:
        Norm of ``p2 - p1``.
    """
    return float(np.hypot(p2[0] - p1[0], p2[1] - p1[1]))


def normalize_angle(angle: float) -> float:
    """Reduce angles larger than one full turn in magnitude.

    Whole turns are removed by truncating ``angle / 2pi`` toward zero, so
    negative inputs stay negative and positive inputs stay positive. Angles
    with ``|angle| <= 2pi`` are returned unchanged.

    Args:
        angle: Angle [rad].

    Returns:
        Angle with whole turns removed.
    """
    if abs(angle) > FULL_TURN:
        return angle - int(angle / FULL_TURN) * FULL_TURN
    return angle


def angular_difference(a1: float, a2: float) -> float:
    """Smaller of the direct difference and its complement to a full turn.

    Args:
        a1: First angle [rad].
        a2: Second angle [rad].

    Returns:
        Non-negative angular mismatch [rad].
    """
    diff = abs(a2 - a1)
    return min(diff, abs(FULL_TURN - diff))


def is_closed_c1(path: Path, tolerance: ClosureTolerance = DEFAULT_TOLERANCE) -> bool:
    """Check whether a path closes with tangent continuity.

    Args:
        path: Path to test.
        tolerance: Joint play allowed in position and direction.

    Returns:
        ``True`` if the last end meets the first start in both position and
        direction. Paths with fewer than two sections are never closed.
    """
    if len(path) < MIN_CLOSED_SECTION_COUNT:
        return False
    start = path[0].start
    end = path[-1].end
    if distance(start.position, end.position) >= tolerance.position:
        return False
    mismatch = angular_difference(
        normalize_angle(start.direction),
        normalize_angle(end.direction),
    )
    return mismatch < tolerance.angle
