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
Hamilton quaternion algebra.

Quaternions are stored scalar first as ``(w, x, y, z)`` and multiply with the
Hamilton convention ``i*j = k``. No unit-norm invariant is enforced: a
rotation quaternion should satisfy :attr:`Quaternion.is_normalized`, but any
four numbers form a valid :class:`Quaternion`.

Note that :meth:`Quaternion.norm` returns the *squared* magnitude
``w^2 + x^2 + y^2 + z^2``; take ``math.sqrt(q.norm())`` for the length.

References:
    Yu. N. Chelnokov, Quaternion and Biquaternion Models and Methods of
    Rigid Body Mechanics and Their Applications
"""

import numbers
import operator
from dataclasses import dataclass

import numpy as np

from ..core.constants import QUAT_TOLERANCE


def _reciprocal(d):
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.true_divide(1.0, d))


@dataclass(frozen=True, eq=False)
class Quaternion:
    """Immutable quaternion ``w + x*i + y*j + z*k``.

    Attributes
    ----------
    w : float
        Scalar part
    x, y, z : float
        Vector part components
    """
    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # numpy scalars must defer to the operators below
    __array_ufunc__ = None

    def __post_init__(self):
        for name in ('w', 'x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_scalar(cls, w) -> 'Quaternion':
        """Real quaternion ``(w, 0, 0, 0)``"""
        return cls(w, 0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, q) -> 'Quaternion':
        """Build from a length-4 sequence ``[w, x, y, z]``"""
        q = np.asarray(q, dtype=np.double).ravel()
        if q.shape != (4,):
            raise ValueError(f"Quaternion array must have 4 elements, got {q.size}")
        return cls(q[0], q[1], q[2], q[3])

    @staticmethod
    def _coerce(value):
        if isinstance(value, Quaternion):
            return value
        if isinstance(value, numbers.Real):
            return Quaternion.from_scalar(value)
        return None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def __getitem__(self, index):
        index = operator.index(index)
        if index == 0:
            return self.w
        if index == 1:
            return self.x
        if index == 2:
            return self.y
        if index == 3:
            return self.z
        raise IndexError(f"Quaternion index must be in [0, 3], got {index}")

    def __iter__(self):
        return iter((self.w, self.x, self.y, self.z))

    def __len__(self):
        return 4

    def __float__(self):
        return self.w

    def to_array(self) -> np.ndarray:
        """Components as a new array ``[w, x, y, z]``"""
        return np.array([self.w, self.x, self.y, self.z], dtype=np.double)

    @property
    def scalar_part(self) -> float:
        return self.w

    @property
    def vector_part(self) -> 'Quaternion':
        """Pure quaternion ``(0, x, y, z)``"""
        return Quaternion(0.0, self.x, self.y, self.z)

    # ------------------------------------------------------------------
    # Named arithmetic
    # ------------------------------------------------------------------
    def add(self, other: 'Quaternion') -> 'Quaternion':
        return Quaternion(self.w + other.w, self.x + other.x,
                          self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Quaternion') -> 'Quaternion':
        return Quaternion(self.w - other.w, self.x - other.x,
                          self.y - other.y, self.z - other.z)

    def negate(self) -> 'Quaternion':
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product ``self * other``.

        The product is associative but not commutative, e.g.
        ``(1, 2, 3, 4) * (2, 5, 6, 7) = (-54, 6, 18, 12)``.
        """
        w1, x1, y1, z1 = self
        w2, x2, y2, z2 = other
        return Quaternion(w1*w2 - x1*x2 - y1*y2 - z1*z2,
                          w1*x2 + x1*w2 + y1*z2 - z1*y2,
                          w1*y2 + y1*w2 + z1*x2 - x1*z2,
                          w1*z2 + z1*w2 + x1*y2 - y1*x2)

    def scale(self, factor: float) -> 'Quaternion':
        d = float(factor)
        return Quaternion(d * self.w, d * self.x, d * self.y, d * self.z)

    def divide(self, divisor: float) -> 'Quaternion':
        """Scale by ``1/divisor``; a zero divisor gives infinities, not an error"""
        return self.scale(_reciprocal(float(divisor)))

    # ------------------------------------------------------------------
    # Quaternionic operations
    # ------------------------------------------------------------------
    def conjugate(self) -> 'Quaternion':
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def norm(self) -> float:
        """Squared magnitude ``w^2 + x^2 + y^2 + z^2`` (no square root)"""
        return self.w*self.w + self.x*self.x + self.y*self.y + self.z*self.z

    def inverse(self) -> 'Quaternion':
        return self.conjugate().divide(self.norm())

    @property
    def is_normalized(self) -> bool:
        return abs(self.norm() - 1.0) < QUAT_TOLERANCE

    def equals(self, other: 'Quaternion', tolerance: float = QUAT_TOLERANCE) -> bool:
        """Componentwise comparison with an absolute tolerance"""
        return (abs(self.w - other.w) < tolerance and
                abs(self.x - other.x) < tolerance and
                abs(self.y - other.y) < tolerance and
                abs(self.z - other.z) < tolerance)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __pos__(self):
        return self

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        # scalars commute with quaternions
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return self.divide(other)
        return NotImplemented

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return (self.w == other.w and self.x == other.x and
                self.y == other.y and self.z == other.z)

    def __hash__(self):
        # real quaternions compare equal to their scalar
        if self.x == 0.0 and self.y == 0.0 and self.z == 0.0:
            return hash(self.w)
        return hash((self.w, self.x, self.y, self.z))

    def __format__(self, format_spec):
        if not format_spec:
            return str(self)
        return "({}, {}, {}, {})".format(*(format(c, format_spec) for c in self))

    def __str__(self):
        return f"({self.w:.6g}, {self.x:.6g}, {self.y:.6g}, {self.z:.6g})"


Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)
Quaternion.IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)
Quaternion.I1 = Quaternion(0.0, 1.0, 0.0, 0.0)
Quaternion.I2 = Quaternion(0.0, 0.0, 1.0, 0.0)
Quaternion.I3 = Quaternion(0.0, 0.0, 0.0, 1.0)


__all__ = ['Quaternion']
