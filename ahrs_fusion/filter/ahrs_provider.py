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

from typing import Callable
from typing import Optional
from typing import Protocol

from ahrs_fusion.ahrs_types.measurement import AhrsMeasurement
from ahrs_fusion.ahrs_types.update_report import UpdateReport
from ahrs_fusion.config.ahrs_params import AhrsParams
from ahrs_fusion.filter.simple_ahrs import SimpleAhrs
from ahrs_fusion.state.ahrs_state import Attitude


class AhrsProvider(Protocol):
    """Output contract shared by attitude estimator variants.

    last_report holds the report of the most recent measurement.
    """

    last_report: Optional[UpdateReport]

    def compute(self, measurement: AhrsMeasurement) -> None: ...

    def fused_attitude(self) -> Attitude: ...

    def gps_attitude(self) -> Attitude: ...

    def attitude_uncertainty(self) -> Attitude: ...

    def is_valid(self) -> bool: ...


AhrsFactory = Callable[[AhrsMeasurement, Optional[AhrsParams]], AhrsProvider]


_VARIANTS: dict[str, AhrsFactory] = {
    "simple": SimpleAhrs,
}


def available_variants() -> list[str]:
    """Return the registered variant names in sorted order."""
    return sorted(_VARIANTS)


def create_ahrs(
    variant: str,
    measurement: AhrsMeasurement,
    params: Optional[AhrsParams] = None,
) -> AhrsProvider:
    """Construct the named estimator variant from its first measurement."""
    factory: Optional[AhrsFactory] = _VARIANTS.get(variant)
    if factory is None:
        raise ValueError(f"unknown AHRS variant: {variant}")
    return factory(measurement, params)
