#!/usr/bin/env python3
"""Test suite for angular constants and tolerances"""

import math
import unittest

from pyorient.core.constants import (
    ANGLE_TOLERANCE, DCM_EQUALITY_TOLERANCE, DCM_ORTHONORMAL_TOLERANCE,
    DEG2RAD, GIMBAL_LOCK_TOLERANCE_ZXZ, GIMBAL_LOCK_TOLERANCE_ZYX,
    HALF_PI, PERIGON, QUAT_TOLERANCE, RAD2DEG
)


class TestAngularConstants(unittest.TestCase):
    """Test unit conversion constants"""

    def test_unit_factors(self):
        self.assertAlmostEqual(DEG2RAD * 180.0, math.pi, places=15)
        self.assertAlmostEqual(RAD2DEG * math.pi, 180.0, places=12)
        self.assertAlmostEqual(DEG2RAD * RAD2DEG, 1.0, places=15)

    def test_turns(self):
        self.assertEqual(PERIGON, 2.0 * math.pi)
        self.assertEqual(HALF_PI, math.pi / 2)
        self.assertEqual(4 * HALF_PI, PERIGON)


class TestTolerances(unittest.TestCase):
    """Test numerical tolerances are positive and ordered"""

    def test_positive(self):
        for tol in (ANGLE_TOLERANCE, QUAT_TOLERANCE, DCM_ORTHONORMAL_TOLERANCE,
                    DCM_EQUALITY_TOLERANCE, GIMBAL_LOCK_TOLERANCE_ZYX, GIMBAL_LOCK_TOLERANCE_ZXZ):
            self.assertGreater(tol, 0.0)
            self.assertLess(tol, 1e-5)

    def test_repair_threshold_looser_than_equality(self):
        self.assertGreater(DCM_ORTHONORMAL_TOLERANCE, DCM_EQUALITY_TOLERANCE)


if __name__ == '__main__':
    unittest.main()
