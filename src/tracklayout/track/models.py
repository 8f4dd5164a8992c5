"""Track layout data models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

ORIGIN: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class Pose:
    """Position and absolute direction of one piece end.

    Args:
        position: Point ``(x, y)`` in the layout frame.
        direction: Absolute direction the end faces [rad].
    """

    position: tuple[float, float] = ORIGIN
    direction: float = 0.0


ANCHOR_POSE = Pose()


@dataclass(frozen=True)
class Section:
    """One placed piece.

    Args:
        kind: Piece label.
        start: Pose of the initial end.
        end: Pose of the final end.
    """

    kind: str
    start: Pose
    end: Pose


class Path:
    """Ordered stack of placed sections.

    Each section starts where the previous one ends. The first section is
    anchored at :data:`ANCHOR_POSE`, so only quantities relative to the first
    section are meaningful.
    """

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        """Create a path from already chained sections.

        Args:
            sections: Sections in layout order.
        """
        self._sections: list[Section] = list(sections)

    def __len__(self) -> int:
        """Number of placed sections.

        Returns:
            Path length in pieces.
        """
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        """Iterate over sections in layout order.

        Returns:
            Section iterator.
        """
        return iter(self._sections)

    def __getitem__(self, index: int) -> Section:
        """Access one section.

        Args:
            index: Section index, negative values count from the end.

        Returns:
            Section at ``index``.
        """
        return self._sections[index]

    @property
    def first(self) -> Section | None:
        """First section, or ``None`` for an empty path.

        Returns:
            Anchored section.
        """
        return self._sections[0] if self._sections else None

    @property
    def last(self) -> Section | None:
        """Last section, or ``None`` for an empty path.

        Returns:
            Most recently pushed section.
        """
        return self._sections[-1] if self._sections else None

    @property
    def labels(self) -> tuple[str, ...]:
        """Canonical label sequence of the path.

        Returns:
            Piece labels in layout order.
        """
        return tuple(section.kind for section in self._sections)

    def push(self, section: Section) -> None:
        """Append a section at the end of the path.

        Args:
            section: Section whose start pose is the current last end pose.
        """
        self._sections.append(section)

    def pop(self) -> Section:
        """Remove and return the last section.

        Returns:
            Removed section.
        """
        return self._sections.pop()

    def vertices(self) -> np.ndarray:
        """Joint positions along the path.

        Returns:
            Array of shape ``(len(path) + 1, 2)`` holding the first start
            position followed by every end position. Empty paths yield
            shape ``(0, 2)``.
        """
        if not self._sections:
            return np.zeros((0, 2), dtype=np.float64)
        points = [self._sections[0].start.position]
        points.extend(section.end.position for section in self._sections)
        return np.asarray(points, dtype=np.float64)
