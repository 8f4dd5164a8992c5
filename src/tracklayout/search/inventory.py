"""Piece inventory with shared supply for flip-linked kinds."""

from __future__ import annotations

from collections.abc import Mapping

from tracklayout.track.catalog import DEFAULT_CATALOG, PieceCatalog
from tracklayout.utils.exceptions import LayoutInputError


class Inventory:
    """Remaining piece counts resolved through supply groups.

    Every supplied label owns one supply group named after it. When the flip
    partner of a supplied kind is not supplied itself, the partner resolves to
    the same group: a reversible piece can be laid in either orientation but
    is only consumed once.
    """

    def __init__(self, groups: Mapping[str, int], kind_to_group: Mapping[str, str]) -> None:
        """Create an inventory from resolved supply groups.

        Args:
            groups: Remaining count per supply group.
            kind_to_group: Supply group of every usable piece label, in
                exploration order.
        """
        self._groups = dict(groups)
        self._kind_to_group = dict(kind_to_group)
        self._total = sum(self._groups.values())

    @classmethod
    def from_counts(
        cls,
        counts: Mapping[str, int],
        catalog: PieceCatalog = DEFAULT_CATALOG,
    ) -> Inventory:
        """Build an inventory from per-label piece counts.

        Args:
            counts: Mapping of piece label to available count.
            catalog: Catalog used to validate labels and resolve flips.

        Returns:
            Inventory with flip partners linked to their supplied kind.

        Raises:
            tracklayout.utils.exceptions.UnknownPieceError: If a label is not
                in ``catalog``.
            tracklayout.utils.exceptions.LayoutInputError: If a count is not a
                non-negative integer.
        """
        groups: dict[str, int] = {}
        kind_to_group: dict[str, str] = {}
        for label, count in counts.items():
            kind = catalog.get(label)
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                msg = f"Count for piece {label!r} must be a non-negative integer, got: {count!r}"
                raise LayoutInputError(msg)
            groups[label] = count
            kind_to_group[label] = label
            if kind.flip not in counts:
                kind_to_group[kind.flip] = label
        return cls(groups, kind_to_group)

    @property
    def total(self) -> int:
        """Total number of physical pieces left.

        Returns:
            Sum of remaining counts over distinct supply groups.
        """
        return self._total

    @property
    def kinds(self) -> tuple[str, ...]:
        """Piece labels usable with this inventory.

        Returns:
            Labels in exploration order.
        """
        return tuple(self._kind_to_group)

    def group_of(self, label: str) -> str:
        """Supply group a piece label draws from.

        Args:
            label: Piece label.

        Returns:
            Supply group identifier.

        Raises:
            tracklayout.utils.exceptions.LayoutInputError: If ``label`` is not
                usable with this inventory.
        """
        try:
            return self._kind_to_group[label]
        except KeyError:
            msg = f"Piece {label!r} is not part of this inventory"
            raise LayoutInputError(msg) from None

    def remaining(self, label: str) -> int:
        """Pieces left for one label.

        Args:
            label: Piece label.

        Returns:
            Remaining count of the label's supply group.
        """
        return self._groups[self.group_of(label)]

    def available(self) -> list[str]:
        """Labels that still have supply.

        Returns:
            Labels with a positive remaining count, in exploration order.
        """
        return [label for label, group in self._kind_to_group.items() if self._groups[group] > 0]

    def take(self, label: str) -> None:
        """Consume one piece.

        Args:
            label: Piece label to consume.

        Raises:
            tracklayout.utils.exceptions.LayoutInputError: If no piece of the
                label's supply group is left.
        """
        group = self.group_of(label)
        if self._groups[group] <= 0:
            msg = f"No {label!r} pieces left"
            raise LayoutInputError(msg)
        self._groups[group] -= 1
        self._total -= 1

    def put_back(self, label: str) -> None:
        """Return one previously taken piece.

        Args:
            label: Piece label to return.
        """
        self._groups[self.group_of(label)] += 1
        self._total += 1

    def snapshot(self) -> dict[str, int]:
        """Copy of the remaining counts.

        Returns:
            Mapping of supply group to remaining count.
        """
        return dict(self._groups)
