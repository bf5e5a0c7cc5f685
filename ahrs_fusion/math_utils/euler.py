################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Euler angle range helpers

Canonical ranges:
    * roll and heading in (-pi, pi]
    * pitch in [-pi/2, pi/2]
"""

from __future__ import annotations

import math


TWO_PI: float = 2.0 * math.pi
HALF_PI: float = 0.5 * math.pi


def wrap_angle(angle: float) -> float:
    """
    Wrap an angle in radians into (-pi, pi]
    """

    return angle - TWO_PI * math.ceil((angle - math.pi) / TWO_PI)


def regularize(roll: float, pitch: float, heading: float) -> tuple[float, float, float]:
    """
    Bring (roll, pitch, heading) into canonical ranges

    A pitch past vertical is reflected back with roll and heading advanced
    by pi, which describes the same attitude. This keeps successive small
    corrections continuous instead of jumping at the ends of the pitch
    range. Roll and heading are then wrapped into (-pi, pi].
    """

    pitch = wrap_angle(pitch)
    if pitch > HALF_PI:
        pitch = math.pi - pitch
        roll += math.pi
        heading += math.pi
    elif pitch < -HALF_PI:
        pitch = -math.pi - pitch
        roll += math.pi
        heading += math.pi

    return wrap_angle(roll), pitch, wrap_angle(heading)
