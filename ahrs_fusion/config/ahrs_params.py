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
from typing import Mapping

from ahrs_fusion.math_utils.units import GRAVITY_KT_PER_SEC


@dataclass(frozen=True, slots=True)
class AhrsParams:
    """Configuration parameter definitions for the attitude estimator.

    Responsibility:
        Hold the thresholds and gains used by the gyro/GPS estimator with
        their units and valid ranges.

    Data contract:
        Timing:
        - min_dt_sec: intervals below this are ignored (s).
        - max_dt_sec: stale threshold; larger gaps reinitialize (s).

        GPS gating:
        - min_groundspeed_kt: GPS attitude is only trusted above this
          groundspeed (kt).
        - default_heading_rad: GPS heading used when groundspeed is too low
          for atan2(w1, w2) to mean anything (rad).

        Blending:
        - reversion_gain: K applied to an increment that moves the fused
          attitude away from the GPS attitude, in (0, 1].
        - turn_rate_memory: weight on turn-rate history in the exponential
          filter, in [0, 1). New samples get 1 - turn_rate_memory.
        - gravity_kt_per_sec: g for the coordinated-turn bank angle (kt/s).

        Numerics:
        - min_denominator: floor applied to the Euler-derivative
          denominators and the pitch radicand (unitless).

    Determinism and edge cases:
        - Parameters are explicit inputs; no environment lookups.
        - validate() rejects non-finite or out-of-range values with
          ValueError.

    Suggested unit tests:
        - defaults() validates.
        - from_dict() rejects unknown keys and non-numeric values.
    """

    min_dt_sec: float
    max_dt_sec: float
    min_groundspeed_kt: float
    reversion_gain: float
    turn_rate_memory: float
    gravity_kt_per_sec: float
    default_heading_rad: float
    min_denominator: float

    @staticmethod
    def defaults() -> AhrsParams:
        """Return a stable default parameter set."""
        params: AhrsParams = AhrsParams(
            min_dt_sec=1e-6,
            max_dt_sec=10.0,
            min_groundspeed_kt=10.0,
            reversion_gain=0.9,
            turn_rate_memory=0.9,
            gravity_kt_per_sec=GRAVITY_KT_PER_SEC,
            default_heading_rad=0.5 * math.pi,
            min_denominator=1e-12,
        )
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> AhrsParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise ValueError(f"unknown parameter: {unknown_keys[0]}")
        defaults: AhrsParams = cls.defaults()
        merged: dict[str, float] = {}
        for name in cls._field_order():
            merged[name] = cls._as_float(
                name, params.get(name, getattr(defaults, name))
            )
        result: AhrsParams = cls(**merged)
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameters and raise ValueError on failure."""
        for name in self._field_order():
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if self.min_dt_sec <= 0.0:
            raise ValueError("min_dt_sec must be > 0")
        if self.max_dt_sec <= self.min_dt_sec:
            raise ValueError("max_dt_sec must be > min_dt_sec")
        if self.min_groundspeed_kt < 0.0:
            raise ValueError("min_groundspeed_kt must be >= 0")
        if not (0.0 < self.reversion_gain <= 1.0):
            raise ValueError("reversion_gain must be in (0, 1]")
        if not (0.0 <= self.turn_rate_memory < 1.0):
            raise ValueError("turn_rate_memory must be in [0, 1)")
        if self.gravity_kt_per_sec <= 0.0:
            raise ValueError("gravity_kt_per_sec must be > 0")
        if self.min_denominator <= 0.0:
            raise ValueError("min_denominator must be > 0")

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {name: getattr(self, name) for name in self._field_order()}

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a float")
        return float(value)

    @staticmethod
    def _field_order() -> list[str]:
        return [
            "min_dt_sec",
            "max_dt_sec",
            "min_groundspeed_kt",
            "reversion_gain",
            "turn_rate_memory",
            "gravity_kt_per_sec",
            "default_heading_rad",
            "min_denominator",
        ]
