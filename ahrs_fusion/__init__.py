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
Gyro/GPS attitude estimation

Fuses integrated gyro rates with GPS-derived attitude to estimate roll,
pitch and heading of an aircraft.
"""

from ahrs_fusion.ahrs_types.measurement import AhrsMeasurement
from ahrs_fusion.ahrs_types.update_report import UpdateOutcome
from ahrs_fusion.ahrs_types.update_report import UpdateReport
from ahrs_fusion.config.ahrs_params import AhrsParams
from ahrs_fusion.filter.ahrs_provider import AhrsProvider
from ahrs_fusion.filter.ahrs_provider import available_variants
from ahrs_fusion.filter.ahrs_provider import create_ahrs
from ahrs_fusion.filter.simple_ahrs import SimpleAhrs
from ahrs_fusion.state.ahrs_state import AhrsState


__all__ = [
    "AhrsMeasurement",
    "AhrsParams",
    "AhrsProvider",
    "AhrsState",
    "SimpleAhrs",
    "UpdateOutcome",
    "UpdateReport",
    "available_variants",
    "create_ahrs",
]
