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
Euler angle sequences.

Two three-angle parametrizations of a rotation are supported, distinguished by
:class:`EulerAnglesType`:

- ``CLASSIC``: precession ``psi`` about Z, nutation ``theta`` about the new X,
  spin ``phi`` about the new Z (intrinsic Z-X-Z), i.e.
  ``q = q_z(psi) * q_x(theta) * q_z(phi)``
- ``KRYLOV``: yaw ``psi``, pitch ``theta``, roll ``phi`` composed as
  ``q = q_y(psi) * q_z(theta) * q_x(phi)`` (intrinsic Y-Z-X, the
  ship/aircraft angles of A. N. Krylov)

The same three numbers describe different rotations under the two tags, so
:class:`EulerAngles` always carries its tag. Conversions live in
:mod:`pyorient.attitude.converters`.

The module also provides the elementary axis rotations as matrices
(``rot_x``, ``rot_y``, ``rot_z``) and as quaternions (``quat_x``, ``quat_y``,
``quat_z``). All rotations are active and right-handed.
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numba import njit

from ..core import mathangle
from ..core.angle import Angle
from .quaternion import Quaternion


class EulerAnglesType(Enum):
    """Euler angles sequence kinds.

    Attributes
    ----------
    CLASSIC : int
        Precession, nutation, spin (Z-X-Z)
    KRYLOV : int
        Yaw, pitch, roll (Y-Z-X)
    """
    CLASSIC = 1
    KRYLOV = 2


def _as_angle(value):
    if isinstance(value, Angle):
        return value
    return Angle.from_rad(value)


@dataclass(frozen=True)
class EulerAngles:
    """Immutable tagged triple of angles.

    Use :meth:`create_classic` or :meth:`create_krylov`; plain floats are
    taken as radians.

    Attributes
    ----------
    psi : Angle
        Precession or yaw
    theta : Angle
        Nutation or pitch
    phi : Angle
        Spin or roll
    angles_type : EulerAnglesType
        Sequence the three angles refer to
    """
    psi: Angle
    theta: Angle
    phi: Angle
    angles_type: EulerAnglesType

    def __post_init__(self):
        object.__setattr__(self, 'psi', _as_angle(self.psi))
        object.__setattr__(self, 'theta', _as_angle(self.theta))
        object.__setattr__(self, 'phi', _as_angle(self.phi))

    @classmethod
    def create_classic(cls, psi, theta, phi) -> 'EulerAngles':
        """Classic Euler angles: precession, nutation, spin"""
        return cls(psi, theta, phi, EulerAnglesType.CLASSIC)

    @classmethod
    def create_krylov(cls, psi, theta, phi) -> 'EulerAngles':
        """Krylov angles: yaw, pitch, roll"""
        return cls(psi, theta, phi, EulerAnglesType.KRYLOV)

    def __iter__(self):
        return iter((self.psi, self.theta, self.phi))

    def to_rad(self) -> np.ndarray:
        """Angles as an array ``[psi, theta, phi]`` in radians"""
        return np.array([self.psi.rad, self.theta.rad, self.phi.rad], dtype=np.double)

    def to_deg(self) -> np.ndarray:
        """Angles as an array ``[psi, theta, phi]`` in degrees"""
        return np.array([self.psi.deg, self.theta.deg, self.phi.deg], dtype=np.double)

    def __str__(self):
        name = getattr(self.angles_type, 'name', str(self.angles_type)).capitalize()
        return f"{name}(psi={self.psi}, theta={self.theta}, phi={self.phi})"


@njit(cache=True)
def rot_x(phi):
    """
    Rotation matrix about the x-axis.

    Parameters
    ----------
    phi : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for x-axis rotation
    """
    sinP = math.sin(phi)
    cosP = math.cos(phi)
    R = np.array([[1.0,  0.0,   0.0],
                  [0.0, cosP, -sinP],
                  [0.0, sinP,  cosP]],
                 dtype=np.double)
    return R


@njit(cache=True)
def rot_y(theta):
    """Rotation matrix about the y-axis (``theta`` in radians)"""
    sinT = math.sin(theta)
    cosT = math.cos(theta)
    R = np.array([[ cosT, 0.0, sinT],
                  [  0.0, 1.0,  0.0],
                  [-sinT, 0.0, cosT]],
                 dtype=np.double)
    return R


@njit(cache=True)
def rot_z(psi):
    """Rotation matrix about the z-axis (``psi`` in radians)"""
    sinS = math.sin(psi)
    cosS = math.cos(psi)
    R = np.array([[cosS, -sinS, 0.0],
                  [sinS,  cosS, 0.0],
                  [ 0.0,   0.0, 1.0]],
                 dtype=np.double)
    return R


def _half_sincos(angle):
    return mathangle.sincos(0.5 * _as_angle(angle))


def quat_x(angle) -> Quaternion:
    """Unit quaternion of a rotation about the x-axis"""
    s, c = _half_sincos(angle)
    return Quaternion(c, s, 0.0, 0.0)


def quat_y(angle) -> Quaternion:
    """Unit quaternion of a rotation about the y-axis"""
    s, c = _half_sincos(angle)
    return Quaternion(c, 0.0, s, 0.0)


def quat_z(angle) -> Quaternion:
    """Unit quaternion of a rotation about the z-axis"""
    s, c = _half_sincos(angle)
    return Quaternion(c, 0.0, 0.0, s)


__all__ = [
    'EulerAnglesType', 'EulerAngles',
    'rot_x', 'rot_y', 'rot_z',
    'quat_x', 'quat_y', 'quat_z',
]
