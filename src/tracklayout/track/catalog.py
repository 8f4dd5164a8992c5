"""Catalog of rigid track piece kinds and their local geometry.

Piece geometry is given in the piece's own frame: origin at the initial end,
positive X axis pointing along the initial end's direction. ``displacement``
is the position of the final end in that frame and ``turn`` is the direction
of the final end relative to the initial one.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tracklayout.utils.constants import QUARTER_PI, SQRT2
from tracklayout.utils.exceptions import ConfigurationError, UnknownPieceError

MIRROR_GEOMETRY_TOLERANCE = 1e-12


@dataclass(frozen=True)
class PieceKind:
    """Geometry of one track piece kind.

    Args:
        label: Piece identifier used in inventories and sequences.
        displacement: Final-end position ``(Xd, Yd)`` in the piece frame.
        turn: Final-end direction relative to the initial end [rad].
        flip: Label of the mirror-image kind made from the same stock.
    """

    label: str
    displacement: tuple[float, float]
    turn: float
    flip: str

    @property
    def heading(self) -> float:
        """Angle of the displacement vector in the piece frame.

        Returns:
            ``atan2(Yd, Xd)`` in radians, ``0.0`` for a zero displacement.
        """
        x_delta, y_delta = self.displacement
        return math.atan2(y_delta, x_delta)

    @property
    def length(self) -> float:
        """Straight-line distance between both ends of the piece.

        Returns:
            Magnitude of ``displacement``.
        """
        x_delta, y_delta = self.displacement
        return math.hypot(x_delta, y_delta)


class PieceCatalog:
    """Immutable lookup table of piece kinds keyed by label."""

    def __init__(self, kinds: Iterable[PieceKind]) -> None:
        """Build and validate a catalog.

        Args:
            kinds: Piece kinds in declaration order.

        Raises:
            tracklayout.utils.exceptions.ConfigurationError: If labels repeat,
                a flip partner is missing or flipping is not a mirror
                involution.
        """
        table: dict[str, PieceKind] = {}
        for kind in kinds:
            if kind.label in table:
                msg = f"Duplicate piece label in catalog: {kind.label!r}"
                raise ConfigurationError(msg)
            table[kind.label] = kind
        self._kinds = table
        self._validate_flips()

    def _validate_flips(self) -> None:
        """Check that every kind has a mirror partner with mirrored geometry.

        Raises:
            tracklayout.utils.exceptions.ConfigurationError: If any flip
                relation is broken.
        """
        for kind in self._kinds.values():
            partner = self._kinds.get(kind.flip)
            if partner is None:
                msg = f"Flip partner {kind.flip!r} of {kind.label!r} is not in the catalog"
                raise ConfigurationError(msg)
            if partner.flip != kind.label:
                msg = f"Flip of {kind.label!r} is not involutive"
                raise ConfigurationError(msg)
            mirrored = (
                abs(partner.displacement[0] - kind.displacement[0]),
                abs(partner.displacement[1] + kind.displacement[1]),
                abs(partner.turn + kind.turn),
            )
            if max(mirrored) > MIRROR_GEOMETRY_TOLERANCE:
                msg = f"Geometry of {kind.label!r} and {kind.flip!r} is not mirrored"
                raise ConfigurationError(msg)

    def __contains__(self, label: object) -> bool:
        """Check whether a label is part of the catalog.

        Args:
            label: Candidate piece label.

        Returns:
            ``True`` for known labels.
        """
        return label in self._kinds

    def __iter__(self) -> Iterator[PieceKind]:
        """Iterate over piece kinds in declaration order.

        Returns:
            Iterator over catalog entries.
        """
        return iter(self._kinds.values())

    def __len__(self) -> int:
        """Number of piece kinds.

        Returns:
            Catalog size.
        """
        return len(self._kinds)

    @property
    def labels(self) -> tuple[str, ...]:
        """Known piece labels.

        Returns:
            Labels in declaration order.
        """
        return tuple(self._kinds)

    def get(self, label: str) -> PieceKind:
        """Look up one piece kind.

        Args:
            label: Piece label.

        Returns:
            Matching piece kind.

        Raises:
            tracklayout.utils.exceptions.UnknownPieceError: If ``label`` is
                not in the catalog.
        """
        try:
            return self._kinds[label]
        except KeyError:
            msg = f"Unknown piece label {label!r}; expected one of {list(self._kinds)}"
            raise UnknownPieceError(msg) from None

    def geometry(self, label: str) -> tuple[tuple[float, float], float]:
        """Return local displacement and turn of a piece kind.

        Args:
            label: Piece label.

        Returns:
            ``((Xd, Yd), Dd)`` in the piece frame.
        """
        kind = self.get(label)
        return kind.displacement, kind.turn

    def flip(self, label: str) -> str:
        """Return the label of the mirror-image kind.

        Args:
            label: Piece label.

        Returns:
            Label of the flip partner.
        """
        return self.get(label).flip


DEFAULT_CATALOG = PieceCatalog(
    [
        # Straight of length 1.
        PieceKind(label="s1", displacement=(1.0, 0.0), turn=0.0, flip="s1"),
        # Straight of length 2.
        PieceKind(label="s2", displacement=(2.0, 0.0), turn=0.0, flip="s2"),
        # Left-handed arc, radius 1, subtending pi/4.
        PieceKind(
            label="aL",
            displacement=(SQRT2 / 2.0, 1.0 - SQRT2 / 2.0),
            turn=QUARTER_PI,
            flip="aR",
        ),
        # Right-handed arc, radius 1, subtending pi/4.
        PieceKind(
            label="aR",
            displacement=(SQRT2 / 2.0, -1.0 + SQRT2 / 2.0),
            turn=-QUARTER_PI,
            flip="aL",
        ),
    ]
)


def geometry(label: str) -> tuple[tuple[float, float], float]:
    """Return local geometry of a default-catalog piece.

    Args:
        label: Piece label.

    Returns:
        ``((Xd, Yd), Dd)`` in the piece frame.
    """
    return DEFAULT_CATALOG.geometry(label)


def flip_label(label: str) -> str:
    """Return the mirror partner of a default-catalog piece.

    Args:
        label: Piece label.

    Returns:
        Label of the flip partner.
    """
    return DEFAULT_CATALOG.flip(label)
