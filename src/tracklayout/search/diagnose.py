"""Diagnosis of a fixed piece sequence."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tracklayout.search.config import DEFAULT_TOLERANCE, ClosureTolerance
from tracklayout.track.catalog import DEFAULT_CATALOG, PieceCatalog
from tracklayout.track.geometry import angular_difference, build_path, distance, is_closed_c1
from tracklayout.utils.exceptions import LayoutInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagnosisResult:
    """How far a piece sequence is from a closed C1 loop.

    Args:
        labels: Diagnosed piece labels in layout order.
        closed: Whether the sequence closes with tangent continuity.
        distance: Distance between the first start and the last end.
        angle: Smallest angle between the first start and last end
            directions [rad].
    """

    labels: tuple[str, ...]
    closed: bool
    distance: float
    angle: float


def diagnose_sequence(
    labels: Sequence[str],
    catalog: PieceCatalog = DEFAULT_CATALOG,
    tolerance: ClosureTolerance = DEFAULT_TOLERANCE,
) -> DiagnosisResult:
    """Lay out a piece sequence and measure its closure gap.

    Args:
        labels: Piece labels in layout order.
        catalog: Catalog providing piece geometry.
        tolerance: Closure tolerance used for the verdict.

    Returns:
        Closure verdict with first-to-last distance and angle.

    Raises:
        tracklayout.utils.exceptions.LayoutInputError: If ``labels`` is empty.
        tracklayout.utils.exceptions.UnknownPieceError: If a label is missing
            from ``catalog``.
    """
    if not labels:
        msg = "Cannot diagnose an empty piece sequence"
        raise LayoutInputError(msg)
    tolerance.validate()

    path = build_path(labels, catalog)
    start = path[0].start
    end = path[-1].end
    result = DiagnosisResult(
        labels=path.labels,
        closed=is_closed_c1(path, tolerance),
        distance=distance(start.position, end.position),
        angle=angular_difference(start.direction, end.direction),
    )
    logger.debug("Diagnosed %d pieces: closed=%s", len(path), result.closed)
    return result
