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

import pytest

import ahrs_fusion
from ahrs_fusion.ahrs_types.measurement import AhrsMeasurement
from ahrs_fusion.config.ahrs_params import AhrsParams
from ahrs_fusion.filter.ahrs_provider import AhrsProvider
from ahrs_fusion.filter.ahrs_provider import available_variants
from ahrs_fusion.filter.ahrs_provider import create_ahrs
from ahrs_fusion.filter.simple_ahrs import SimpleAhrs


def _first_measurement() -> AhrsMeasurement:
    return AhrsMeasurement(0.0, [0.0, 0.0, 0.0], [0.0, 20.0, 0.0], True)


def test_available_variants() -> None:
    assert available_variants() == ["simple"]


def test_create_simple_variant() -> None:
    params: AhrsParams = AhrsParams.from_dict({"reversion_gain": 0.5})
    ahrs: AhrsProvider = create_ahrs("simple", _first_measurement(), params)

    assert isinstance(ahrs, SimpleAhrs)
    assert ahrs.params is params
    assert ahrs.fused_attitude() == (0.0, 0.0, 0.0)
    assert ahrs.last_report is not None


def test_create_with_default_params() -> None:
    ahrs: AhrsProvider = create_ahrs("simple", _first_measurement())

    assert isinstance(ahrs, SimpleAhrs)
    assert ahrs.params == AhrsParams.defaults()


def test_create_unknown_variant() -> None:
    with pytest.raises(ValueError, match="unknown AHRS variant: kalman"):
        create_ahrs("kalman", _first_measurement())


def test_package_exports() -> None:
    for name in ahrs_fusion.__all__:
        assert hasattr(ahrs_fusion, name)
    assert ahrs_fusion.create_ahrs is create_ahrs
