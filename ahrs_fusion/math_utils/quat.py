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
Quaternion helpers for the attitude estimator math layer

Conventions:
    * Quaternions are stored in wxyz order as [q0, q1, q2, q3]
    * Attitude follows the aerospace Z-Y-X Tait-Bryan sequence: heading
      about the down axis, then pitch about the new right-wing axis, then
      roll about the nose
    * The quaternion rotates body vectors into the local level frame
      (north, east, down)
    * Heading is clockwise from north, pitch is positive nose-up and roll
      is positive right-wing-down
    * Body-frame increments compose on the right: q_new = q ⊗ dq

Extraction formulas, shared with the linearized update step:

    roll    = atan2(2 (q0 q1 + q2 q3), q0² - q1² - q2² + q3²)
    pitch   = asin(2 (q0 q2 - q1 q3) / |q|²)
    heading = atan2(2 (q0 q3 + q1 q2), q0² + q1² - q2² - q3²)
"""

from __future__ import annotations

import math
from typing import Sequence


def quat_mul_wxyz(q_left: Sequence[float], q_right: Sequence[float]) -> list[float]:
    """
    Multiply two quaternions in wxyz order
    """

    w1: float = q_left[0]
    x1: float = q_left[1]
    y1: float = q_left[2]
    z1: float = q_left[3]

    w2: float = q_right[0]
    x2: float = q_right[1]
    y2: float = q_right[2]
    z2: float = q_right[3]

    return [
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
        w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
    ]


def quat_normalize_wxyz(q_wxyz: Sequence[float]) -> list[float]:
    """
    Normalize a quaternion in wxyz order
    """

    norm: float = math.sqrt(
        q_wxyz[0] * q_wxyz[0]
        + q_wxyz[1] * q_wxyz[1]
        + q_wxyz[2] * q_wxyz[2]
        + q_wxyz[3] * q_wxyz[3]
    )
    if norm <= 0.0:
        raise ValueError("Quaternion norm must be positive")
    inv: float = 1.0 / norm
    return [
        q_wxyz[0] * inv,
        q_wxyz[1] * inv,
        q_wxyz[2] * inv,
        q_wxyz[3] * inv,
    ]


def euler_to_quat_wxyz(roll: float, pitch: float, heading: float) -> list[float]:
    """
    Build the unit quaternion for roll, pitch and heading in radians
    """

    half_roll: float = 0.5 * roll
    half_pitch: float = 0.5 * pitch
    half_heading: float = 0.5 * heading

    cr: float = math.cos(half_roll)
    sr: float = math.sin(half_roll)
    cp: float = math.cos(half_pitch)
    sp: float = math.sin(half_pitch)
    ch: float = math.cos(half_heading)
    sh: float = math.sin(half_heading)

    return [
        cr * cp * ch + sr * sp * sh,
        sr * cp * ch - cr * sp * sh,
        cr * sp * ch + sr * cp * sh,
        cr * cp * sh - sr * sp * ch,
    ]


def quat_to_euler_wxyz(q_wxyz: Sequence[float]) -> tuple[float, float, float]:
    """
    Extract (roll, pitch, heading) in radians from a quaternion in wxyz order

    The quaternion need not be exactly unit length; pitch divides by the
    squared norm and the asin argument is clamped to [-1, 1].
    """

    q0: float = q_wxyz[0]
    q1: float = q_wxyz[1]
    q2: float = q_wxyz[2]
    q3: float = q_wxyz[3]

    rx: float = 2.0 * (q0 * q1 + q2 * q3)
    ry: float = q0 * q0 - q1 * q1 - q2 * q2 + q3 * q3

    px: float = 2.0 * (q0 * q2 - q1 * q3)
    py: float = q0 * q0 + q1 * q1 + q2 * q2 + q3 * q3

    hx: float = 2.0 * (q0 * q3 + q1 * q2)
    hy: float = q0 * q0 + q1 * q1 - q2 * q2 - q3 * q3

    sin_pitch: float = max(-1.0, min(1.0, px / py))

    return math.atan2(rx, ry), math.asin(sin_pitch), math.atan2(hx, hy)


def rotate_quat_wxyz(
    q_wxyz: Sequence[float], d_roll: float, d_pitch: float, d_heading: float
) -> list[float]:
    """
    Compose a quaternion with a small body-frame rotation

    The increment is expressed in the same roll/pitch/heading convention as
    euler_to_quat_wxyz(). For increments of a few milliradians the half-angle
    cosines and sines are well conditioned, so no series branch is needed.
    """

    dq_wxyz: list[float] = euler_to_quat_wxyz(d_roll, d_pitch, d_heading)
    return quat_normalize_wxyz(quat_mul_wxyz(q_wxyz, dq_wxyz))
