################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import math
import unittest
from typing import List

from ahrs_fusion.math_utils.euler import regularize
from ahrs_fusion.math_utils.euler import wrap_angle
from ahrs_fusion.math_utils.quat import euler_to_quat_wxyz


class TestWrapAngle(unittest.TestCase):
    """Tests for wrap_angle."""

    def test_range_ends(self) -> None:
        """pi stays pi and -pi maps to pi."""
        self.assertEqual(wrap_angle(math.pi), math.pi)
        self.assertAlmostEqual(wrap_angle(-math.pi), math.pi, places=12)

    def test_inside_range_is_unchanged(self) -> None:
        """Angles already in range are returned exactly."""
        for angle in (0.0, 0.5, -0.5, 3.0, -3.0):
            self.assertEqual(wrap_angle(angle), angle)

    def test_wraps_multiple_turns(self) -> None:
        """Angles several turns out are brought back into range."""
        self.assertAlmostEqual(wrap_angle(1.5 * math.pi), -0.5 * math.pi, places=12)
        self.assertAlmostEqual(
            wrap_angle(-7.0 * math.pi + 0.25), -math.pi + 0.25, places=12
        )
        self.assertAlmostEqual(wrap_angle(10.0 * math.pi + 0.1), 0.1, places=12)

    def test_heading_difference_across_south(self) -> None:
        """179 deg minus -179 deg is 2 deg, not 358 deg."""
        diff: float = wrap_angle(math.radians(179.0) - math.radians(-179.0))
        self.assertAlmostEqual(abs(diff), math.radians(2.0), places=12)
        self.assertLess(diff, 0.0)


class TestRegularize(unittest.TestCase):
    """Tests for regularize."""

    def test_canonical_angles_unchanged(self) -> None:
        """Angles in canonical ranges pass through exactly."""
        self.assertEqual(regularize(0.1, -0.2, 3.0), (0.1, -0.2, 3.0))

    def test_wraps_roll_and_heading(self) -> None:
        """Roll and heading are wrapped into (-pi, pi]."""
        roll, pitch, heading = regularize(math.pi + 0.1, 0.0, -math.pi - 0.1)
        self.assertAlmostEqual(roll, -math.pi + 0.1, places=12)
        self.assertEqual(pitch, 0.0)
        self.assertAlmostEqual(heading, math.pi - 0.1, places=12)

    def test_pitch_over_vertical_is_same_attitude(self) -> None:
        """Reflecting pitch past vertical keeps the attitude."""
        angles: tuple[float, float, float] = (0.1, 0.5 * math.pi + 0.1, 0.2)
        roll, pitch, heading = regularize(*angles)
        self.assertAlmostEqual(pitch, 0.5 * math.pi - 0.1, places=12)
        self.assertAlmostEqual(roll, 0.1 - math.pi, places=12)
        self.assertAlmostEqual(heading, 0.2 - math.pi, places=12)

        q_in: List[float] = euler_to_quat_wxyz(*angles)
        q_out: List[float] = euler_to_quat_wxyz(roll, pitch, heading)
        dot: float = sum(a * b for a, b in zip(q_in, q_out))
        self.assertAlmostEqual(abs(dot), 1.0, places=12)

    def test_pitch_under_vertical(self) -> None:
        """Pitch below -90 deg is reflected the same way."""
        roll, pitch, heading = regularize(0.0, -0.5 * math.pi - 0.2, 0.0)
        self.assertAlmostEqual(pitch, -0.5 * math.pi + 0.2, places=12)
        self.assertAlmostEqual(roll, math.pi, places=12)
        self.assertAlmostEqual(heading, math.pi, places=12)

    def test_large_pitch_lands_in_range(self) -> None:
        """Pitch several radians out still ends in [-pi/2, pi/2]."""
        _, pitch, _ = regularize(0.0, 10.0, 0.0)
        self.assertLessEqual(abs(pitch), 0.5 * math.pi)


if __name__ == "__main__":
    unittest.main()
