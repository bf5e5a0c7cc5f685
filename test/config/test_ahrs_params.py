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

import dataclasses
import math
import unittest

from ahrs_fusion.config.ahrs_params import AhrsParams
from ahrs_fusion.math_utils.units import GRAVITY_KT_PER_SEC


class TestAhrsParams(unittest.TestCase):
    """Tests for AhrsParams."""

    def test_defaults(self) -> None:
        params: AhrsParams = AhrsParams.defaults()
        self.assertEqual(params.min_dt_sec, 1e-6)
        self.assertEqual(params.max_dt_sec, 10.0)
        self.assertEqual(params.min_groundspeed_kt, 10.0)
        self.assertEqual(params.reversion_gain, 0.9)
        self.assertEqual(params.turn_rate_memory, 0.9)
        self.assertEqual(params.gravity_kt_per_sec, GRAVITY_KT_PER_SEC)
        self.assertEqual(params.default_heading_rad, 0.5 * math.pi)
        self.assertEqual(params.min_denominator, 1e-12)

    def test_params_are_frozen(self) -> None:
        params: AhrsParams = AhrsParams.defaults()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            params.reversion_gain = 0.5  # type: ignore[misc]

    def test_from_dict_overrides(self) -> None:
        params: AhrsParams = AhrsParams.from_dict(
            {"reversion_gain": 0.5, "min_groundspeed_kt": 5}
        )
        self.assertEqual(params.reversion_gain, 0.5)
        self.assertEqual(params.min_groundspeed_kt, 5.0)
        self.assertIsInstance(params.min_groundspeed_kt, float)
        self.assertEqual(params.max_dt_sec, 10.0)

    def test_from_dict_round_trip(self) -> None:
        params: AhrsParams = AhrsParams.defaults()
        self.assertEqual(AhrsParams.from_dict(params.as_dict()), params)

    def test_from_dict_rejects_unknown_key(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown parameter: bogus"):
            AhrsParams.from_dict({"bogus": 1.0})

    def test_from_dict_rejects_non_numeric(self) -> None:
        with self.assertRaisesRegex(ValueError, "reversion_gain must be a float"):
            AhrsParams.from_dict({"reversion_gain": "0.9"})
        with self.assertRaisesRegex(ValueError, "max_dt_sec must be a float"):
            AhrsParams.from_dict({"max_dt_sec": True})

    def test_from_dict_rejects_non_mapping(self) -> None:
        with self.assertRaisesRegex(ValueError, "params must be a mapping"):
            AhrsParams.from_dict([("reversion_gain", 0.9)])  # type: ignore[arg-type]

    def test_validate_ranges(self) -> None:
        cases: list[tuple[dict[str, float], str]] = [
            ({"min_dt_sec": 0.0}, "min_dt_sec must be > 0"),
            ({"max_dt_sec": 1e-6}, "max_dt_sec must be > min_dt_sec"),
            ({"min_groundspeed_kt": -1.0}, "min_groundspeed_kt must be >= 0"),
            ({"reversion_gain": 0.0}, r"reversion_gain must be in \(0, 1\]"),
            ({"reversion_gain": 1.5}, r"reversion_gain must be in \(0, 1\]"),
            ({"turn_rate_memory": 1.0}, r"turn_rate_memory must be in \[0, 1\)"),
            ({"gravity_kt_per_sec": 0.0}, "gravity_kt_per_sec must be > 0"),
            ({"default_heading_rad": math.inf}, "default_heading_rad must be finite"),
            ({"min_denominator": 0.0}, "min_denominator must be > 0"),
        ]
        for overrides, message in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaisesRegex(ValueError, message):
                    AhrsParams.from_dict(overrides)

    def test_validate_rejects_nan(self) -> None:
        params: AhrsParams = AhrsParams.defaults()
        for name in params.as_dict():
            with self.subTest(name=name):
                with self.assertRaisesRegex(ValueError, f"{name} must be finite"):
                    AhrsParams.from_dict({name: math.nan})

    def test_reversion_gain_of_one_is_allowed(self) -> None:
        params: AhrsParams = AhrsParams.from_dict({"reversion_gain": 1.0})
        self.assertEqual(params.reversion_gain, 1.0)


if __name__ == "__main__":
    unittest.main()
