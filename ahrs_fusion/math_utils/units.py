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
from typing import Dict


# Units: rad/deg. Meaning: converts gyro rates from deg/s to rad/s
DEG_TO_RAD: float = math.pi / 180.0

# Units: kt/s. Meaning: standard gravity, 32.1740 ft/s^2 expressed in
# knots per second (6076.12 ft per nautical mile, 3600 s per hour)
GRAVITY_KT_PER_SEC: float = 32.1740 / 6076.12 * 3600.0


class Units:
    """Unit conventions for the gyro/GPS attitude estimator.

    Responsibility:
        Declare the canonical units for every measurement, state element
        and parameter so that all modules use the same scaling.

    Data contract:
        Measurements:
        - Time t_sec: seconds, monotonic.
        - Gyro rates b1, b2, b3: degrees per second about the body axes
          (nose, right wing, down).
        - GPS velocity w1, w2, w3: knots, east, north and up.

        State:
        - Attitude angles (fused and GPS): radians.
        - Quaternion q_wxyz: unitless.
        - Groundspeed: knots.
        - Turn rate: radians per second.

    Equations:
        Coordinated-turn bank angle:

            roll = atan(v * omega / g)

        with v in kt, omega in rad/s and g in kt/s, so the argument is
        dimensionless. GRAVITY_KT_PER_SEC is g in those units.
    """

    @staticmethod
    def measurement_units() -> Dict[str, str]:
        return {
            "t_sec": "s",
            "gyro_dps": "deg/s",
            "velocity_kt": "kt",
            "velocity_valid": "unitless",
        }

    @staticmethod
    def state_units() -> Dict[str, str]:
        return {
            "t_sec": "s",
            "q_wxyz": "unitless",
            "roll_rad": "rad",
            "pitch_rad": "rad",
            "heading_rad": "rad",
            "roll_gps_rad": "rad",
            "pitch_gps_rad": "rad",
            "heading_gps_rad": "rad",
            "last_velocity_kt": "kt",
            "groundspeed_kt": "kt",
            "turn_rate_rps": "rad/s",
        }

    @staticmethod
    def param_units() -> Dict[str, str]:
        return {
            "min_dt_sec": "s",
            "max_dt_sec": "s",
            "min_groundspeed_kt": "kt",
            "reversion_gain": "unitless",
            "turn_rate_memory": "unitless",
            "gravity_kt_per_sec": "kt/s",
            "default_heading_rad": "rad",
            "min_denominator": "unitless",
        }
