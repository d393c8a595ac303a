#!/usr/bin/env python3
"""Test suite for the Angle value type"""

import dataclasses
import math
import unittest

import numpy as np

from pyorient.core.angle import Angle
from pyorient.core.constants import PERIGON


class TestAngleCreation(unittest.TestCase):
    """Test unit conversions"""

    def test_from_deg_matches_radians(self):
        for d in [-720.0, -90.0, 0.0, 1e-8, 30.0, 45.0, 180.0, 359.999, 1234.5]:
            self.assertAlmostEqual(Angle.from_deg(d).rad, d * math.pi / 180.0, places=10)

    def test_from_rad_inverts_deg(self):
        for d in [-45.0, 0.0, 12.5, 90.0, 270.0]:
            a = Angle.from_deg(d)
            self.assertEqual(Angle.from_rad(a.rad).deg, a.deg)
            self.assertAlmostEqual(a.deg, d, places=10)

    def test_creators_accept_special_values(self):
        self.assertTrue(Angle.is_nan(Angle.from_deg(math.nan)))
        self.assertTrue(Angle.is_infinity(Angle.from_rad(math.inf)))
        self.assertTrue(Angle.is_infinity(Angle.from_deg(-math.inf)))

    def test_unit_helpers(self):
        self.assertAlmostEqual(Angle.deg_to_rad(180.0), math.pi, places=12)
        self.assertAlmostEqual(Angle.rad_to_deg(math.pi / 2), 90.0, places=12)

    def test_special_values(self):
        self.assertEqual(Angle.ZERO.rad, 0.0)
        self.assertEqual(Angle.PERIGON.rad, 2 * math.pi)
        self.assertEqual(Angle.DEG0, Angle.ZERO)
        self.assertAlmostEqual(Angle.DEG90.deg, 90.0, places=10)
        self.assertAlmostEqual(Angle.DEG180.deg, 180.0, places=10)
        self.assertAlmostEqual(Angle.DEG270.deg, 270.0, places=10)
        self.assertEqual(Angle.DEG360, Angle.PERIGON)
        self.assertTrue(Angle.is_nan(Angle.NAN))
        self.assertGreater(Angle.POSITIVE_INFINITY.rad, 0)
        self.assertLess(Angle.NEGATIVE_INFINITY.rad, 0)

    def test_immutable(self):
        a = Angle.from_deg(10.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            a.rad = 1.0

    def test_float_conversion(self):
        self.assertEqual(float(Angle.from_rad(0.25)), 0.25)


class TestAngleArithmetic(unittest.TestCase):
    """Test operators and their named forms"""

    def setUp(self):
        self.a = Angle.from_deg(30.0)
        self.b = Angle.from_deg(60.0)

    def test_add_subtract(self):
        self.assertAlmostEqual((self.a + self.b).deg, 90.0, places=10)
        self.assertAlmostEqual((self.b - self.a).deg, 30.0, places=10)
        self.assertEqual(self.a.add(self.b), self.a + self.b)
        self.assertEqual(self.b.subtract(self.a), self.b - self.a)

    def test_negation(self):
        self.assertEqual((-self.a).rad, -self.a.rad)
        self.assertEqual(self.a.negate(), -self.a)
        self.assertIs(+self.a, self.a)

    def test_scalar_multiplication_both_sides(self):
        self.assertEqual(2 * self.a, self.a * 2)
        self.assertAlmostEqual((2 * self.a).deg, 60.0, places=10)
        self.assertEqual(self.a * np.float64(3.0), self.a.scale(3.0))

    def test_division_by_scalar(self):
        self.assertAlmostEqual((self.b / 2).deg, 30.0, places=10)
        self.assertEqual(self.b.divide(2.0), self.b / 2.0)

    def test_division_by_zero_is_ieee(self):
        self.assertTrue(Angle.is_infinity(self.a / 0))
        self.assertGreater((self.a / 0.0).rad, 0)
        self.assertLess((-self.a / 0.0).rad, 0)
        self.assertTrue(Angle.is_nan(Angle.ZERO / 0.0))

    def test_ratio_of_angles(self):
        ratio = self.b / self.a
        self.assertIsInstance(ratio, float)
        self.assertAlmostEqual(ratio, 2.0, places=12)
        self.assertTrue(math.isinf(self.a / Angle.ZERO))

    def test_modulo(self):
        self.assertAlmostEqual((Angle.from_rad(7.0) % Angle.from_rad(2.0)).rad, 1.0, places=12)
        self.assertAlmostEqual((Angle.from_rad(-7.0) % Angle.from_rad(2.0)).rad, -1.0, places=12)
        self.assertTrue(Angle.is_nan(self.a % Angle.ZERO))

    def test_special_values_propagate(self):
        self.assertTrue(Angle.is_nan(Angle.NAN + self.a))
        self.assertTrue(Angle.is_nan(Angle.NAN * 0.0))
        self.assertEqual(Angle.POSITIVE_INFINITY + self.a, Angle.POSITIVE_INFINITY)
        self.assertTrue(Angle.is_nan(Angle.POSITIVE_INFINITY + Angle.NEGATIVE_INFINITY))

    def test_mixing_with_plain_numbers_is_rejected(self):
        with self.assertRaises(TypeError):
            self.a + 1.0
        with self.assertRaises(TypeError):
            self.a * self.b


class TestAngleComparison(unittest.TestCase):
    """Test ordering, equality and compare_to"""

    def test_ordering(self):
        a = Angle.from_deg(10.0)
        b = Angle.from_deg(20.0)
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)
        self.assertTrue(a <= Angle.from_deg(10.0))
        self.assertEqual(sorted([b, a]), [a, b])

    def test_exact_equality(self):
        a = Angle.from_rad(1.0)
        self.assertEqual(a, Angle.from_rad(1.0))
        self.assertNotEqual(a, Angle.from_rad(1.0 + 1e-15))
        self.assertEqual(hash(a), hash(Angle.from_rad(1.0)))
        self.assertNotEqual(Angle.NAN, Angle.NAN)

    def test_compare_to(self):
        a = Angle.from_deg(10.0)
        self.assertEqual(a.compare_to(Angle.from_deg(20.0)), -1)
        self.assertEqual(a.compare_to(Angle.from_deg(10.0)), 0)
        self.assertEqual(a.compare_to(Angle.from_deg(5.0)), 1)
        self.assertEqual(Angle.NAN.compare_to(a), -1)
        self.assertEqual(a.compare_to(Angle.NAN), 1)
        self.assertEqual(Angle.NAN.compare_to(Angle.NAN), 0)

    def test_compare_to_rejects_other_types(self):
        with self.assertRaises(TypeError):
            Angle.from_deg(10.0).compare_to(10.0)
        with self.assertRaises(TypeError):
            Angle.from_deg(10.0).compare_to("10 Degrees")

    def test_ordering_with_non_angle_raises(self):
        with self.assertRaises(TypeError):
            Angle.from_deg(10.0) < 1.0


class TestAnglePredicates(unittest.TestCase):
    """Test exact-value predicates"""

    def test_is_zero_has_no_tolerance(self):
        self.assertTrue(Angle.is_zero(Angle.ZERO))
        self.assertTrue(Angle.is_zero(Angle.from_rad(-0.0)))
        self.assertFalse(Angle.is_zero(Angle.from_rad(1e-300)))

    def test_is_nan_and_is_infinity(self):
        self.assertFalse(Angle.is_nan(Angle.ZERO))
        self.assertFalse(Angle.is_infinity(Angle.NAN))
        self.assertTrue(Angle.is_infinity(Angle.NEGATIVE_INFINITY))


class TestFoldPerigon(unittest.TestCase):
    """Test folding into a single turn"""

    def test_fold_above_full_turn(self):
        self.assertAlmostEqual(Angle.fold_perigon(Angle.from_deg(450.0)).deg, 90.0, delta=1e-10)

    def test_fold_negative_folds_upward(self):
        self.assertAlmostEqual(Angle.fold_perigon(Angle.from_deg(-90.0)).deg, 270.0, delta=1e-10)
        self.assertAlmostEqual(Angle.fold_perigon(Angle.from_deg(-450.0)).deg, 270.0, delta=1e-9)

    def test_full_turn_excluded_by_default(self):
        self.assertEqual(Angle.fold_perigon(Angle.PERIGON).rad, 0.0)

    def test_full_turn_kept_when_included(self):
        folded = Angle.fold_perigon(Angle.from_deg(360.0), include_perigon=True)
        self.assertAlmostEqual(folded.deg, 360.0, delta=1e-10)
        folded = Angle.fold_perigon(Angle.from_rad(2 * PERIGON), include_perigon=True)
        self.assertEqual(folded.rad, 0.0)

    def test_result_range(self):
        for d in np.linspace(-1000.0, 1000.0, 41):
            folded = Angle.fold_perigon(Angle.from_deg(d))
            self.assertGreaterEqual(folded.rad, 0.0)
            self.assertLess(folded.rad, PERIGON)

    def test_tiny_negative_does_not_reach_full_turn(self):
        folded = Angle.fold_perigon(Angle.from_rad(-1e-20))
        self.assertLess(folded.rad, PERIGON)

    def test_negative_full_turns_fold_to_positive_zero(self):
        for rad in (-PERIGON, -2 * PERIGON, -0.0):
            folded = Angle.fold_perigon(Angle.from_rad(rad))
            self.assertEqual(folded.rad, 0.0)
            self.assertEqual(math.copysign(1.0, folded.rad), 1.0)
        self.assertEqual(str(Angle.fold_perigon(Angle.from_deg(-360.0))), "0.0 Degrees")

    def test_special_values_fold_to_nan(self):
        self.assertTrue(Angle.is_nan(Angle.fold_perigon(Angle.NAN)))
        self.assertTrue(Angle.is_nan(Angle.fold_perigon(Angle.POSITIVE_INFINITY)))


class TestAngleFormatting(unittest.TestCase):
    """Test string forms"""

    def test_str_in_degrees(self):
        self.assertEqual(str(Angle.from_rad(0.0)), "0.0 Degrees")
        self.assertTrue(str(Angle.DEG180).endswith(" Degrees"))

    def test_repr(self):
        self.assertEqual(repr(Angle.from_rad(0.5)), "Angle(rad=0.5)")


if __name__ == '__main__':
    unittest.main()
