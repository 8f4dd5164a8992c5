"""Unit tests for section chaining and closure analysis."""

from __future__ import annotations

import math
import unittest

import numpy as np

from tracklayout.search.config import ClosureTolerance
from tracklayout.track.catalog import PieceCatalog, PieceKind
from tracklayout.track.geometry import (
    angular_difference,
    append_section,
    build_path,
    distance,
    is_closed_c1,
    normalize_angle,
)
from tracklayout.track.models import Path
from tracklayout.utils.exceptions import UnknownPieceError


class AppendSectionTests(unittest.TestCase):
    """Check absolute poses of appended sections."""

    def test_first_section_is_anchored_at_origin(self) -> None:
        """Anchor a section without predecessor at the origin facing 0."""
        section = append_section(None, "s2")

        self.assertEqual(section.kind, "s2")
        self.assertEqual(section.start.position, (0.0, 0.0))
        self.assertEqual(section.start.direction, 0.0)
        self.assertAlmostEqual(section.end.position[0], 2.0, places=12)
        self.assertAlmostEqual(section.end.position[1], 0.0, places=12)
        self.assertEqual(section.end.direction, 0.0)

    def test_section_starts_at_prior_end(self) -> None:
        """Chain a section onto the final pose of its predecessor."""
        first = append_section(None, "aL")
        second = append_section(first, "s1")

        self.assertEqual(second.start, first.end)
        self.assertAlmostEqual(second.end.direction, math.pi / 4.0, places=12)
        self.assertAlmostEqual(second.end.position[0], first.end.position[0] + math.cos(math.pi / 4.0), places=12)
        self.assertAlmostEqual(second.end.position[1], first.end.position[1] + math.sin(math.pi / 4.0), places=12)

    def test_two_right_arcs_make_a_quarter_circle(self) -> None:
        """Two right-hand eighth arcs end one radius forward and one to the right."""
        path = build_path(["aR", "aR"])

        x_end, y_end = path.last.end.position
        self.assertAlmostEqual(x_end, 1.0, places=12)
        self.assertAlmostEqual(y_end, -1.0, places=12)
        self.assertAlmostEqual(path.last.end.direction, -math.pi / 2.0, places=12)

    def test_zero_length_piece_keeps_position(self) -> None:
        """Place a pure rotation piece without moving the end point."""
        catalog = PieceCatalog(
            [
                PieceKind(label="twist", displacement=(0.0, 0.0), turn=0.0, flip="twist"),
                PieceKind(label="s1", displacement=(1.0, 0.0), turn=0.0, flip="s1"),
            ]
        )
        path = build_path(["s1", "twist"], catalog)

        self.assertEqual(path[1].end.position, path[0].end.position)

    def test_unknown_piece_is_rejected(self) -> None:
        """Reject labels missing from the catalog instead of guessing."""
        with self.assertRaises(UnknownPieceError):
            append_section(None, "x9")

    def test_vertices_follow_the_path(self) -> None:
        """Expose start and all end positions as one coordinate array."""
        path = build_path(["s1", "s2"])
        vertices = path.vertices()

        self.assertEqual(vertices.shape, (3, 2))
        np.testing.assert_allclose(vertices[:, 0], [0.0, 1.0, 3.0], atol=1e-12)
        self.assertEqual(Path().vertices().shape, (0, 2))


class ClosureAnalysisTests(unittest.TestCase):
    """Check distance, angle and closure predicates."""

    def test_distance_is_euclidean(self) -> None:
        """Measure the 3-4-5 triangle hypotenuse."""
        self.assertAlmostEqual(distance((1.0, 1.0), (4.0, 5.0)), 5.0, places=12)

    def test_angular_difference_is_zero_for_equal_angles(self) -> None:
        """Return zero mismatch for identical directions."""
        for angle in (-7.0, -math.pi, 0.0, 1.0, 2.0 * math.pi, 13.0):
            self.assertEqual(angular_difference(angle, angle), 0.0)

    def test_angular_difference_is_symmetric(self) -> None:
        """Return the same mismatch regardless of argument order."""
        pairs = ((0.0, 1.0), (-2.0, 3.5), (0.1, 2.0 * math.pi - 0.1), (5.0, -1.0))
        for a1, a2 in pairs:
            self.assertEqual(angular_difference(a1, a2), angular_difference(a2, a1))
            self.assertGreaterEqual(angular_difference(a1, a2), 0.0)

    def test_angular_difference_uses_full_turn_complement(self) -> None:
        """Treat directions one full turn apart as equal."""
        self.assertAlmostEqual(angular_difference(0.0, -2.0 * math.pi), 0.0, places=15)
        self.assertAlmostEqual(angular_difference(0.1, 2.0 * math.pi - 0.1), 0.2, places=12)

    def test_normalize_angle_removes_whole_turns(self) -> None:
        """Leave small angles unchanged and strip whole turns from large ones."""
        self.assertEqual(normalize_angle(1.0), 1.0)
        self.assertEqual(normalize_angle(2.0 * math.pi), 2.0 * math.pi)
        self.assertAlmostEqual(normalize_angle(4.0 * math.pi + 0.5), 0.5, places=12)

    def test_normalize_angle_keeps_sign_of_negative_angles(self) -> None:
        """Truncate toward zero so negative angles stay negative."""
        reduced = normalize_angle(-7.0)
        self.assertAlmostEqual(reduced, -7.0 + 2.0 * math.pi, places=12)
        self.assertLess(reduced, 0.0)

    def test_short_paths_are_never_closed(self) -> None:
        """Report empty and single-section paths as open."""
        self.assertFalse(is_closed_c1(Path()))
        self.assertFalse(is_closed_c1(build_path(["s1"])))

    def test_eight_right_arcs_close(self) -> None:
        """Close a full circle made of eight eighth-turn arcs."""
        path = build_path(["aR"] * 8)

        self.assertTrue(is_closed_c1(path))
        self.assertAlmostEqual(path.last.end.direction, -2.0 * math.pi, places=12)

    def test_open_paths_are_rejected(self) -> None:
        """Reject paths missing either the position or the direction match."""
        self.assertFalse(is_closed_c1(build_path(["aR"] * 7)))
        self.assertFalse(is_closed_c1(build_path(["s1", "s1"])))
        self.assertFalse(is_closed_c1(build_path(["aR"] * 8 + ["s1"])))

    def test_tolerance_controls_joint_play(self) -> None:
        """Accept a near miss once the tolerance covers the gap."""
        path = build_path(["aR"] * 4 + ["s1"] + ["aR"] * 4)
        self.assertFalse(is_closed_c1(path))
        self.assertTrue(is_closed_c1(path, ClosureTolerance(position=1.01, angle=0.001)))


if __name__ == "__main__":
    unittest.main()
