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
import math
from typing import Optional

from ahrs_fusion.ahrs_types.measurement import AhrsMeasurement
from ahrs_fusion.ahrs_types.update_report import UpdateOutcome
from ahrs_fusion.ahrs_types.update_report import UpdateReport
from ahrs_fusion.config.ahrs_params import AhrsParams
from ahrs_fusion.math_utils.euler import regularize
from ahrs_fusion.math_utils.euler import wrap_angle
from ahrs_fusion.math_utils.quat import rotate_quat_wxyz
from ahrs_fusion.math_utils.units import DEG_TO_RAD
from ahrs_fusion.state.ahrs_state import AhrsState
from ahrs_fusion.state.ahrs_state import Attitude


_LOG: logging.Logger = logging.getLogger(__name__)


class SimpleAhrs:
    """Gyro/GPS attitude estimator with asymmetric reversion damping.

    Responsibility:
        Fuse quaternion-integrated gyro rates, accurate short-term but
        drifting, with GPS-derived attitude, drift-free but noisy and
        undefined at low groundspeed.

    Block diagram:

        gyro (b1, b2, b3) deg/s
             |
             v
        [rotate q by b * DEG * dt] -> q'
             |
             v
        [linearize Euler extraction at q] -> dr, dp, dh
             |
             |          GPS velocity (w1, w2, w3) kt
             |                  |
             |                  v
             |          [gs > min? -> heading, pitch, bank from turn rate]
             |          [else hold GPS attitude at fused attitude]
             |                  |
             v                  v
        [damp increments that point away from GPS by K]
             |
             v
        [add, regularize, rebuild q]

    Determinism and edge cases:
        - dt below min_dt_sec: no-op, state untouched.
        - dt above max_dt_sec: reinitialize from the measurement.
        - Invalid or slow GPS: the GPS attitude is held at the fused value
          so only the gyro drives the estimate.
        - Euler-derivative denominators are floored at min_denominator so
          the update stays finite near pitch +/-90 deg. The damping rule
          itself is still ill-conditioned there.
        - The damping sign test has no dead band. Rounding can flip the
          decision when a discrepancy or increment is near zero.

    Concurrency:
        Synchronous and single-writer. Each call does a fixed number of
        trigonometric operations. Callers serialize access per instance.
    """

    def __init__(
        self, measurement: AhrsMeasurement, params: Optional[AhrsParams] = None
    ) -> None:
        self._params: AhrsParams = (
            params if params is not None else AhrsParams.defaults()
        )
        self._params.validate()
        self._state: AhrsState = AhrsState()
        self.last_report: Optional[UpdateReport] = None
        self._initialize(measurement, reason="first measurement")

    @property
    def state(self) -> AhrsState:
        """Return the live estimator state."""
        return self._state

    @property
    def params(self) -> AhrsParams:
        return self._params

    def compute(self, measurement: AhrsMeasurement) -> None:
        """Predict to the measurement time, then update with it."""
        self.predict(measurement.t_sec)
        self.update(measurement)

    def predict(self, t_sec: float) -> None:
        """Propagation step, reserved. Propagation happens inside update()."""
        return

    def update(self, measurement: AhrsMeasurement) -> None:
        """Blend one measurement into the fused attitude."""
        state: AhrsState = self._state
        params: AhrsParams = self._params

        dt: float = measurement.t_sec - state.t_sec
        if dt < params.min_dt_sec:
            _LOG.debug(
                "Skipping measurement at t=%s, dt=%s below %s",
                measurement.t_sec,
                dt,
                params.min_dt_sec,
            )
            self.last_report = UpdateReport.without_increment(
                measurement.t_sec, UpdateOutcome.SKIPPED, gps_used=False
            )
            return
        if dt > params.max_dt_sec:
            self._initialize(measurement, reason=f"stale gap of {dt:.3f} sec")
            return

        gps_used: bool = self._refresh_gps_attitude(measurement, dt)

        # Gyro-only increment over this step
        d_angle: list[float] = [rate * DEG_TO_RAD * dt for rate in measurement.gyro_dps]
        q: list[float] = state.q_wxyz
        q_next: list[float] = rotate_quat_wxyz(q, d_angle[0], d_angle[1], d_angle[2])
        dq: list[float] = [q_next[i] - q[i] for i in range(4)]
        raw: list[float] = list(self._euler_increment(q, dq))

        discrepancy: list[float] = [
            state.roll_rad - state.roll_gps_rad,
            state.pitch_rad - state.pitch_gps_rad,
            wrap_angle(state.heading_rad - state.heading_gps_rad),
        ]

        # Brake increments that push the fused attitude away from GPS
        applied: list[float] = list(raw)
        damped: list[bool] = [False, False, False]
        for axis in range(3):
            if discrepancy[axis] * raw[axis] > 0.0:
                applied[axis] = raw[axis] * params.reversion_gain
                damped[axis] = True

        roll, pitch, heading = regularize(
            state.roll_rad + applied[0],
            state.pitch_rad + applied[1],
            state.heading_rad + applied[2],
        )
        state.set_fused_attitude(roll, pitch, heading)
        state.t_sec = measurement.t_sec

        self.last_report = UpdateReport(
            t_sec=measurement.t_sec,
            outcome=UpdateOutcome.INTEGRATED,
            gps_used=gps_used,
            raw_increment_rad=raw,
            applied_increment_rad=applied,
            damped=damped,
        )
        _LOG.debug("Update %s", self.last_report.summarize())

    def fused_attitude(self) -> Attitude:
        """Return the fused (roll, pitch, heading) in radians."""
        return self._state.fused_attitude()

    def gps_attitude(self) -> Attitude:
        """Return the last GPS-derived or held (roll, pitch, heading)."""
        return self._state.gps_attitude()

    def attitude_uncertainty(self) -> Attitude:
        """Return zeros.

        This variant does not track covariance. The zeros mean "not
        computed" and are not an uncertainty bound.
        """
        return 0.0, 0.0, 0.0

    def is_valid(self) -> bool:
        """Return True. This variant has no health check; staleness is
        handled by reinitializing on the next measurement.
        """
        return True

    def _initialize(self, measurement: AhrsMeasurement, reason: str) -> None:
        state: AhrsState = self._state
        params: AhrsParams = self._params

        state.t_sec = measurement.t_sec
        w1, w2, w3 = measurement.velocity_or_zero()
        state.groundspeed_kt = math.hypot(w1, w2)
        state.last_velocity_kt = [w1, w2, w3]
        state.turn_rate_rps = 0.0

        if state.groundspeed_kt > params.min_groundspeed_kt:
            state.set_gps_attitude(
                0.0, math.atan2(w3, state.groundspeed_kt), math.atan2(w1, w2)
            )
        else:
            state.set_gps_attitude(0.0, 0.0, params.default_heading_rad)

        state.set_fused_attitude(*state.gps_attitude())

        self.last_report = UpdateReport.without_increment(
            measurement.t_sec,
            UpdateOutcome.REINITIALIZED,
            gps_used=state.groundspeed_kt > params.min_groundspeed_kt,
        )
        _LOG.info(
            "Initialized attitude at t=%s (%s): roll=%.4f pitch=%.4f heading=%.4f",
            measurement.t_sec,
            reason,
            state.roll_rad,
            state.pitch_rad,
            state.heading_rad,
        )

    def _refresh_gps_attitude(self, measurement: AhrsMeasurement, dt: float) -> bool:
        """Update the GPS attitude, or hold it at the fused attitude."""
        state: AhrsState = self._state
        params: AhrsParams = self._params

        w1, w2, w3 = measurement.velocity_kt
        if measurement.velocity_valid:
            state.groundspeed_kt = math.hypot(w1, w2)

        usable: bool = (
            measurement.velocity_valid
            and state.groundspeed_kt > params.min_groundspeed_kt
        )
        if not usable:
            state.turn_rate_rps = 0.0
            state.hold_gps_attitude()
            state.last_velocity_kt = [0.0, 0.0, 0.0]
            return False

        gs: float = state.groundspeed_kt
        last_w1: float = state.last_velocity_kt[0]
        last_w2: float = state.last_velocity_kt[1]

        # Cross-track change of the velocity vector, i.e. d(heading)/dt
        turn_rate_sample: float = (
            (w2 * (w1 - last_w1) - w1 * (w2 - last_w2)) / (gs * gs) / dt
        )
        state.turn_rate_rps = (
            params.turn_rate_memory * state.turn_rate_rps
            + (1.0 - params.turn_rate_memory) * turn_rate_sample
        )

        # Coordinated-turn bank angle
        state.set_gps_attitude(
            math.atan(gs * state.turn_rate_rps / params.gravity_kt_per_sec),
            math.atan2(w3, gs),
            math.atan2(w1, w2),
        )
        state.last_velocity_kt = [w1, w2, w3]
        return True

    def _euler_increment(
        self, q: list[float], dq: list[float]
    ) -> tuple[float, float, float]:
        """Linearize the Euler extraction at q and return (dr, dp, dh).

        Each angle is atan2(x, y) (asin(x / y) for pitch) of quaternion
        polynomials. Their first-order change under dq is

            d atan2(x, y) = (y dx - x dy) / (x² + y²)
            d asin(x / y) = (y dx - x dy) / (y sqrt(y² - x²))
        """
        floor: float = self._params.min_denominator
        q0, q1, q2, q3 = q
        dq0, dq1, dq2, dq3 = dq

        rx: float = 2.0 * (q0 * q1 + q2 * q3)
        ry: float = q0 * q0 - q1 * q1 - q2 * q2 + q3 * q3
        drx: float = 2.0 * (q1 * dq0 + q0 * dq1 + q3 * dq2 + q2 * dq3)
        dry: float = 2.0 * (q0 * dq0 - q1 * dq1 - q2 * dq2 + q3 * dq3)
        dr: float = (ry * drx - rx * dry) / max(rx * rx + ry * ry, floor)

        px: float = 2.0 * (q0 * q2 - q1 * q3)
        py: float = q0 * q0 + q1 * q1 + q2 * q2 + q3 * q3
        dpx: float = 2.0 * (q2 * dq0 - q3 * dq1 + q0 * dq2 - q1 * dq3)
        dpy: float = 2.0 * (q0 * dq0 + q1 * dq1 + q2 * dq2 + q3 * dq3)
        # The radicand goes to zero (or slightly negative) at pitch +/-90 deg
        radicand: float = max(py * py - px * px, floor)
        dp: float = (py * dpx - px * dpy) / max(py * math.sqrt(radicand), floor)

        hx: float = 2.0 * (q0 * q3 + q1 * q2)
        hy: float = q0 * q0 + q1 * q1 - q2 * q2 - q3 * q3
        dhx: float = 2.0 * (q3 * dq0 + q2 * dq1 + q1 * dq2 + q0 * dq3)
        dhy: float = 2.0 * (q0 * dq0 + q1 * dq1 - q2 * dq2 - q3 * dq3)
        dh: float = (hy * dhx - hx * dhy) / max(hx * hx + hy * hy, floor)

        return dr, dp, dh
