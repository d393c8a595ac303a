#!/usr/bin/env python3
"""Test suite for trigonometric helpers on Angle"""

import math
import unittest

from pyorient.core import mathangle
from pyorient.core.angle import Angle


class TestMathAngle(unittest.TestCase):
    """Test sin/cos/tan/sincos"""

    def test_known_values(self):
        self.assertAlmostEqual(mathangle.sin(Angle.from_deg(30.0)), 0.5, places=12)
        self.assertAlmostEqual(mathangle.cos(Angle.from_deg(60.0)), 0.5, places=12)
        self.assertAlmostEqual(mathangle.tan(Angle.from_deg(45.0)), 1.0, places=12)

    def test_sincos_matches_individual_functions(self):
        a = Angle.from_rad(0.7)
        s, c = mathangle.sincos(a)
        self.assertEqual(s, mathangle.sin(a))
        self.assertEqual(c, mathangle.cos(a))

    def test_float_taken_as_radians(self):
        self.assertAlmostEqual(mathangle.sin(math.pi / 2), 1.0, places=12)

    def test_special_values_give_nan(self):
        self.assertTrue(math.isnan(mathangle.sin(Angle.POSITIVE_INFINITY)))
        self.assertTrue(math.isnan(mathangle.cos(Angle.NAN)))
        s, c = mathangle.sincos(Angle.NEGATIVE_INFINITY)
        self.assertTrue(math.isnan(s) and math.isnan(c))


if __name__ == '__main__':
    unittest.main()
