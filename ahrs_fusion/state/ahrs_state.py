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

from dataclasses import dataclass
from dataclasses import field

from ahrs_fusion.math_utils.quat import euler_to_quat_wxyz


Attitude = tuple[float, float, float]


@dataclass(slots=True)
class AhrsState:
    """Fused-attitude state of the gyro/GPS estimator.

    Purpose:
        Hold everything the estimator carries from one measurement to the
        next. One instance per tracked vehicle, created from the first
        measurement and mutated in place afterwards.

    Data contract:
        - t_sec: timestamp of the last processed measurement (s).
        - q_wxyz: unit quaternion of the fused attitude, see quat.py for the
          convention.
        - roll_rad, pitch_rad, heading_rad: fused attitude, the primary
          output.
        - roll_gps_rad, pitch_gps_rad, heading_gps_rad: last GPS-derived
          attitude, held at the fused attitude while GPS is unusable.
        - last_velocity_kt: GPS velocity used by the last GPS refresh,
          zeros after an unusable sample.
        - groundspeed_kt: horizontal speed from the GPS velocity.
        - turn_rate_rps: smoothed heading rate from consecutive velocities.

    Determinism and edge cases:
        - The fused attitude is only written through set_fused_attitude(),
          which rebuilds q_wxyz, so the quaternion and the Euler output
          never drift apart.
        - Single writer: concurrent updates of one instance are not
          supported; callers serialize access.
    """

    t_sec: float = 0.0
    q_wxyz: list[float] = field(default_factory=lambda: [1.0, 0.0, 0.0, 0.0])
    roll_rad: float = 0.0
    pitch_rad: float = 0.0
    heading_rad: float = 0.0
    roll_gps_rad: float = 0.0
    pitch_gps_rad: float = 0.0
    heading_gps_rad: float = 0.0
    last_velocity_kt: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    groundspeed_kt: float = 0.0
    turn_rate_rps: float = 0.0

    def set_fused_attitude(self, roll: float, pitch: float, heading: float) -> None:
        """Set the fused attitude and rebuild the quaternion from it."""
        self.roll_rad = roll
        self.pitch_rad = pitch
        self.heading_rad = heading
        self.q_wxyz = euler_to_quat_wxyz(roll, pitch, heading)

    def set_gps_attitude(self, roll: float, pitch: float, heading: float) -> None:
        self.roll_gps_rad = roll
        self.pitch_gps_rad = pitch
        self.heading_gps_rad = heading

    def hold_gps_attitude(self) -> None:
        """Make the fused attitude the GPS reference."""
        self.set_gps_attitude(self.roll_rad, self.pitch_rad, self.heading_rad)

    def fused_attitude(self) -> Attitude:
        return self.roll_rad, self.pitch_rad, self.heading_rad

    def gps_attitude(self) -> Attitude:
        return self.roll_gps_rad, self.pitch_gps_rad, self.heading_gps_rad

    def copy(self) -> AhrsState:
        """Return a deep copy of the state."""
        return AhrsState(
            t_sec=self.t_sec,
            q_wxyz=list(self.q_wxyz),
            roll_rad=self.roll_rad,
            pitch_rad=self.pitch_rad,
            heading_rad=self.heading_rad,
            roll_gps_rad=self.roll_gps_rad,
            pitch_gps_rad=self.pitch_gps_rad,
            heading_gps_rad=self.heading_gps_rad,
            last_velocity_kt=list(self.last_velocity_kt),
            groundspeed_kt=self.groundspeed_kt,
            turn_rate_rps=self.turn_rate_rps,
        )

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "t_sec": self.t_sec,
            "q_wxyz": list(self.q_wxyz),
            "roll_rad": self.roll_rad,
            "pitch_rad": self.pitch_rad,
            "heading_rad": self.heading_rad,
            "roll_gps_rad": self.roll_gps_rad,
            "pitch_gps_rad": self.pitch_gps_rad,
            "heading_gps_rad": self.heading_gps_rad,
            "last_velocity_kt": list(self.last_velocity_kt),
            "groundspeed_kt": self.groundspeed_kt,
            "turn_rate_rps": self.turn_rate_rps,
        }
