# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Unit-aware scalar angle.

An :class:`Angle` stores its value in radians and exposes a derived degrees
view. Arithmetic follows IEEE-754 throughout: NaN and infinities propagate and
division by zero yields an infinity (or NaN) instead of raising, so degenerate
values are detected with :meth:`Angle.is_nan` / :meth:`Angle.is_infinity`
rather than by catching exceptions.

Examples
--------
>>> a = Angle.from_deg(450.0)
>>> round(Angle.fold_perigon(a).deg, 9)
90.0
>>> str(Angle.from_rad(0.0))
'0.0 Degrees'
"""

import math
import numbers
from dataclasses import dataclass

import numpy as np

from .constants import ANGLE_TOLERANCE, DEG2RAD, PERIGON, RAD2DEG


def _ieee_div(a, b):
    """Divide two floats with IEEE-754 semantics (no ZeroDivisionError)"""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.true_divide(a, b))


def _ieee_fmod(a, b):
    """Truncated remainder, sign follows the dividend; ``x % 0`` is NaN"""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.fmod(a, b))


@dataclass(frozen=True, eq=False)
class Angle:
    """Immutable plane angle stored in radians.

    Build instances with :meth:`from_rad` or :meth:`from_deg`.

    Attributes
    ----------
    rad : float
        Angle in radians
    """
    rad: float

    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, 'rad', float(self.rad))

    # ------------------------------------------------------------------
    # Creators
    # ------------------------------------------------------------------
    @classmethod
    def from_rad(cls, radians) -> 'Angle':
        """Create an angle from radians"""
        return cls(radians)

    @classmethod
    def from_deg(cls, degrees) -> 'Angle':
        """Create an angle from degrees"""
        return cls(float(degrees) * DEG2RAD)

    @staticmethod
    def deg_to_rad(degrees: float) -> float:
        return float(degrees) * DEG2RAD

    @staticmethod
    def rad_to_deg(radians: float) -> float:
        return float(radians) * RAD2DEG

    @property
    def deg(self) -> float:
        """Angle in degrees"""
        return self.rad * RAD2DEG

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------
    @staticmethod
    def is_zero(angle: 'Angle') -> bool:
        """Exact zero test, no tolerance"""
        return angle.rad == 0.0

    @staticmethod
    def is_nan(angle: 'Angle') -> bool:
        return math.isnan(angle.rad)

    @staticmethod
    def is_infinity(angle: 'Angle') -> bool:
        return math.isinf(angle.rad)

    @staticmethod
    def fold_perigon(angle: 'Angle', include_perigon: bool = False) -> 'Angle':
        """
        Fold an angle into a single turn.

        Parameters
        ----------
        angle : Angle
            Angle to fold
        include_perigon : bool, optional
            If False (default) the result lies in [0, 2pi). If True, an angle
            within ``ANGLE_TOLERANCE`` of exactly one full turn is returned
            unchanged, so the range becomes [0, 2pi].

        Returns
        -------
        Angle
            Folded angle. Negative input folds upward (-90 deg -> 270 deg);
            NaN and infinities fold to NaN.
        """
        if include_perigon and abs(angle.rad - PERIGON) < ANGLE_TOLERANCE:
            return angle

        folded = _ieee_fmod(angle.rad, PERIGON)
        if folded < 0.0:
            folded += PERIGON
            # tiny negative remainders round up to exactly one turn
            if folded >= PERIGON:
                folded = 0.0
        elif folded == 0.0:
            # exact negative multiples of a turn leave -0.0
            folded = 0.0
        return Angle(folded)

    # ------------------------------------------------------------------
    # Named arithmetic
    # ------------------------------------------------------------------
    def add(self, other: 'Angle') -> 'Angle':
        return Angle(self.rad + other.rad)

    def subtract(self, other: 'Angle') -> 'Angle':
        return Angle(self.rad - other.rad)

    def negate(self) -> 'Angle':
        return Angle(-self.rad)

    def scale(self, factor: float) -> 'Angle':
        return Angle(float(factor) * self.rad)

    def divide(self, divisor):
        """Divide by a scalar (-> Angle) or by another angle (-> float ratio)"""
        if isinstance(divisor, Angle):
            return _ieee_div(self.rad, divisor.rad)
        return Angle(_ieee_div(self.rad, float(divisor)))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __mul__(self, factor):
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if not isinstance(divisor, (Angle, numbers.Real)):
            return NotImplemented
        return self.divide(divisor)

    def __mod__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(_ieee_fmod(self.rad, other.rad))

    def __float__(self):
        return self.rad

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def compare_to(self, other) -> int:
        """
        Three-way comparison by value.

        Returns
        -------
        int
            -1 if ``self < other``, 0 if equal, 1 if ``self > other``.
            NaN sorts below every number and equal to itself.

        Raises
        ------
        TypeError
            If ``other`` is not an :class:`Angle`
        """
        if not isinstance(other, Angle):
            raise TypeError(f"Object must be of type Angle, got {type(other).__name__}")

        a, b = self.rad, other.rad
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        # at least one NaN
        if math.isnan(a):
            return 0 if math.isnan(b) else -1
        return 1

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.rad == other.rad

    def __hash__(self):
        return hash(self.rad)

    def __lt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.rad < other.rad

    def __le__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.rad <= other.rad

    def __gt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.rad > other.rad

    def __ge__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.rad >= other.rad

    def __str__(self):
        return f"{self.deg} Degrees"


# Special values
Angle.ZERO = Angle(0.0)
Angle.PERIGON = Angle(PERIGON)
Angle.DEG0 = Angle.ZERO
Angle.DEG90 = Angle(0.5 * np.pi)
Angle.DEG180 = Angle(np.pi)
Angle.DEG270 = Angle(1.5 * np.pi)
Angle.DEG360 = Angle(PERIGON)
Angle.NAN = Angle(math.nan)
Angle.POSITIVE_INFINITY = Angle(math.inf)
Angle.NEGATIVE_INFINITY = Angle(-math.inf)


__all__ = ['Angle']
