################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from ahrs_fusion.filter.ahrs_provider import AhrsProvider
from ahrs_fusion.filter.ahrs_provider import available_variants
from ahrs_fusion.filter.ahrs_provider import create_ahrs
from ahrs_fusion.filter.simple_ahrs import SimpleAhrs


__all__ = [
    "AhrsProvider",
    "SimpleAhrs",
    "available_variants",
    "create_ahrs",
]
