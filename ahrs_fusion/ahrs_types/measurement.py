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
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class AhrsMeasurement:
    """Gyro and GPS velocity sample consumed by the attitude estimator.

    Data contract:
        t_sec:
            Monotonic timestamp in seconds. Successive samples fed to one
            estimator must increase; the estimator skips samples that do not
            advance time
        gyro_dps:
            Body angular rates (b1, b2, b3) in deg/s about the nose, right
            wing and down axes
        velocity_kt:
            GPS velocity (w1, w2, w3) in knots, east, north and up
        velocity_valid:
            True when this sample carries a usable GPS velocity. When False
            velocity_kt is ignored and treated as zero

    Determinism and edge cases:
        - Vectors are copied on construction so later caller mutation does
          not leak into the sample
        - A missing GPS fix is a data-quality state, not an error; only
          malformed packets raise ValueError
        - Gyro rates must be finite. Velocity must be finite only when
          velocity_valid is True
    """

    t_sec: float
    gyro_dps: list[float]
    velocity_kt: list[float]
    velocity_valid: bool

    def __post_init__(self) -> None:
        """Copy vectors and validate the packet"""
        object.__setattr__(self, "t_sec", float(self.t_sec))
        object.__setattr__(self, "gyro_dps", [float(v) for v in self.gyro_dps])
        object.__setattr__(self, "velocity_kt", [float(v) for v in self.velocity_kt])
        object.__setattr__(self, "velocity_valid", bool(self.velocity_valid))
        self.validate()

    def validate(self) -> None:
        """Validate packet fields and raise ValueError on failure."""
        if not math.isfinite(self.t_sec):
            raise ValueError("t_sec must be finite")
        self._validate_vector("gyro_dps", self.gyro_dps, 3)
        self._validate_vector("velocity_kt", self.velocity_kt, 3)
        self._validate_finite("gyro_dps", self.gyro_dps)
        # An unusable fix may carry placeholder values
        if self.velocity_valid:
            self._validate_finite("velocity_kt", self.velocity_kt)

    def velocity_or_zero(self) -> list[float]:
        """Return the GPS velocity, or zeros when it is not valid."""
        if not self.velocity_valid:
            return [0.0, 0.0, 0.0]
        return list(self.velocity_kt)

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "t_sec": self.t_sec,
            "gyro_dps": list(self.gyro_dps),
            "velocity_kt": list(self.velocity_kt),
            "velocity_valid": self.velocity_valid,
        }

    @staticmethod
    def _validate_vector(name: str, vector: Sequence[float], length: int) -> None:
        if len(vector) != length:
            raise ValueError(f"{name} must have length {length}")

    @staticmethod
    def _validate_finite(name: str, vector: Sequence[float]) -> None:
        for value in vector:
            if not math.isfinite(value):
                raise ValueError(f"{name} contains non-finite value")
