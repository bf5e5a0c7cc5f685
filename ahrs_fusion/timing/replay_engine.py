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

import logging
from dataclasses import dataclass
from typing import Optional
from typing import Sequence

import numpy as np

from ahrs_fusion.ahrs_types.measurement import AhrsMeasurement
from ahrs_fusion.ahrs_types.update_report import UpdateOutcome
from ahrs_fusion.config.ahrs_params import AhrsParams
from ahrs_fusion.filter.ahrs_provider import AhrsProvider
from ahrs_fusion.filter.ahrs_provider import create_ahrs


_LOG: logging.Logger = logging.getLogger(__name__)


def measurements_from_arrays(
    t_sec: np.ndarray,
    gyro_dps: np.ndarray,
    velocity_kt: np.ndarray,
    velocity_valid: Optional[np.ndarray] = None,
) -> list[AhrsMeasurement]:
    """
    Build measurements from column arrays

    Args:
        t_sec: Timestamps in seconds, shape (N,)
        gyro_dps: Body rates in deg/s, shape (N, 3)
        velocity_kt: GPS velocity (east, north, up) in knots, shape (N, 3)
        velocity_valid: GPS validity flags, shape (N,). All valid when None
    """

    t: np.ndarray = np.asarray(t_sec, dtype=np.float64)
    gyro: np.ndarray = np.asarray(gyro_dps, dtype=np.float64)
    velocity: np.ndarray = np.asarray(velocity_kt, dtype=np.float64)

    if t.ndim != 1:
        raise ValueError("t_sec must have shape (N,)")
    count: int = int(t.shape[0])
    if gyro.shape != (count, 3):
        raise ValueError(f"gyro_dps must have shape ({count}, 3)")
    if velocity.shape != (count, 3):
        raise ValueError(f"velocity_kt must have shape ({count}, 3)")

    valid: np.ndarray
    if velocity_valid is None:
        valid = np.ones(count, dtype=bool)
    else:
        valid = np.asarray(velocity_valid, dtype=bool)
        if valid.shape != (count,):
            raise ValueError(f"velocity_valid must have shape ({count},)")

    return [
        AhrsMeasurement(
            t_sec=float(t[i]),
            gyro_dps=gyro[i].tolist(),
            velocity_kt=velocity[i].tolist(),
            velocity_valid=bool(valid[i]),
        )
        for i in range(count)
    ]


@dataclass(frozen=True)
class ReplayResult:
    """
    Attitude history produced by a replay

    Fields:
        t_sec: Measurement timestamps in seconds, shape (N,)
        fused_rph: Fused (roll, pitch, heading) in radians, shape (N, 3)
        gps_rph: GPS (roll, pitch, heading) in radians, shape (N, 3)
        outcomes: What the estimator did with each measurement
    """

    t_sec: np.ndarray
    fused_rph: np.ndarray
    gps_rph: np.ndarray
    outcomes: list[UpdateOutcome]


class ReplayEngine:
    """Feed a recorded measurement sequence through an estimator variant.

    Measurements are applied in the order given, one at a time. The first
    one constructs the estimator; out-of-order samples later in the
    sequence are handled by the estimator itself (skipped).
    """

    def __init__(
        self, variant: str = "simple", params: Optional[AhrsParams] = None
    ) -> None:
        self._variant: str = variant
        self._params: Optional[AhrsParams] = params

    def run(self, measurements: Sequence[AhrsMeasurement]) -> ReplayResult:
        if len(measurements) == 0:
            raise ValueError("measurements must be non-empty")

        count: int = len(measurements)
        t_sec: np.ndarray = np.zeros(count, dtype=np.float64)
        fused_rph: np.ndarray = np.zeros((count, 3), dtype=np.float64)
        gps_rph: np.ndarray = np.zeros((count, 3), dtype=np.float64)
        outcomes: list[UpdateOutcome] = []

        ahrs: AhrsProvider = create_ahrs(
            self._variant, measurements[0], self._params
        )
        for i, measurement in enumerate(measurements):
            if i == 0:
                outcomes.append(UpdateOutcome.REINITIALIZED)
            else:
                ahrs.compute(measurement)
                outcomes.append(self._last_outcome(ahrs))
            t_sec[i] = measurement.t_sec
            fused_rph[i, :] = ahrs.fused_attitude()
            gps_rph[i, :] = ahrs.gps_attitude()

        _LOG.debug(
            "Replayed %d measurements, %d skipped, %d reinitialized",
            count,
            outcomes.count(UpdateOutcome.SKIPPED),
            outcomes.count(UpdateOutcome.REINITIALIZED),
        )

        return ReplayResult(
            t_sec=t_sec,
            fused_rph=fused_rph,
            gps_rph=gps_rph,
            outcomes=outcomes,
        )

    @staticmethod
    def _last_outcome(ahrs: AhrsProvider) -> UpdateOutcome:
        if ahrs.last_report is None:
            raise RuntimeError("estimator did not report an update outcome")
        return ahrs.last_report.outcome
