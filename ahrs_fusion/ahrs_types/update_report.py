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

import enum
import math
from dataclasses import dataclass


class UpdateOutcome(enum.Enum):
    """
    Enumerates what the estimator did with a measurement

    Attributes:
        SKIPPED: Interval below the minimum, state left untouched
        REINITIALIZED: First sample or stale gap, state rebuilt from GPS
        INTEGRATED: Gyro increment blended against the GPS attitude
    """

    SKIPPED = "skipped"
    REINITIALIZED = "reinitialized"
    INTEGRATED = "integrated"


@dataclass(frozen=True, slots=True)
class UpdateReport:
    """Report of a single estimator update.

    Data contract:
        t_sec:
            Measurement timestamp in seconds
        outcome:
            UpdateOutcome for the measurement
        gps_used:
            True when the sample refreshed the GPS attitude
        raw_increment_rad:
            Linearized gyro increment (roll, pitch, heading) before damping
        applied_increment_rad:
            Increment (roll, pitch, heading) actually added to the attitude
        damped:
            Per-axis flags (roll, pitch, heading), True when the reversion
            gain was applied

    Determinism and edge cases:
        - SKIPPED and REINITIALIZED reports carry zero increments and no
          damping flags
        - Increments are finite for finite input
    """

    t_sec: float
    outcome: UpdateOutcome
    gps_used: bool
    raw_increment_rad: list[float]
    applied_increment_rad: list[float]
    damped: list[bool]

    @classmethod
    def without_increment(
        cls, t_sec: float, outcome: UpdateOutcome, gps_used: bool
    ) -> UpdateReport:
        """Return a report for an update that did not integrate the gyro."""
        return cls(
            t_sec=t_sec,
            outcome=outcome,
            gps_used=gps_used,
            raw_increment_rad=[0.0, 0.0, 0.0],
            applied_increment_rad=[0.0, 0.0, 0.0],
            damped=[False, False, False],
        )

    def validate(self) -> None:
        """Validate report fields and raise ValueError on failure."""
        if not isinstance(self.outcome, UpdateOutcome):
            raise ValueError("outcome must be an UpdateOutcome")
        for name, vector in (
            ("raw_increment_rad", self.raw_increment_rad),
            ("applied_increment_rad", self.applied_increment_rad),
            ("damped", self.damped),
        ):
            if len(vector) != 3:
                raise ValueError(f"{name} must have length 3")
        for value in self.raw_increment_rad + self.applied_increment_rad:
            if not math.isfinite(value):
                raise ValueError("increment contains non-finite value")
        if self.outcome != UpdateOutcome.INTEGRATED and any(self.damped):
            raise ValueError("only integrated updates can be damped")

    def summarize(self) -> str:
        """Return a deterministic summary string for logs."""
        summary: str = f"{self.outcome.value} t={self.t_sec} gps_used={self.gps_used}"
        if self.outcome == UpdateOutcome.INTEGRATED:
            roll, pitch, heading = self.applied_increment_rad
            summary = (
                f"{summary} d_roll={roll:.6g} d_pitch={pitch:.6g} "
                f"d_heading={heading:.6g} damped={self.damped}"
            )
        return summary

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "t_sec": self.t_sec,
            "outcome": self.outcome.value,
            "gps_used": self.gps_used,
            "raw_increment_rad": list(self.raw_increment_rad),
            "applied_increment_rad": list(self.applied_increment_rad),
            "damped": list(self.damped),
        }
