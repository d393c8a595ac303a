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
Direction cosine matrices.

A :class:`DirectionCosineMatrix` is an orthonormal 3x3 row-major matrix that
carries a vector from the body frame into the reference frame::

    v_ref = C @ v_body

Element ``R_ij`` is the projection of body axis ``j`` on reference axis ``i``,
so the columns of the matrix are the body axes expressed in the reference
frame.

Construction checks orthonormality with tolerance
``DCM_ORTHONORMAL_TOLERANCE``. A matrix outside tolerance is repaired by
Gram-Schmidt on its first two columns (the third becomes their cross product)
and a warning is logged; pass ``strict=True`` to get a ``ValueError``
instead.

References:
    S. W. Shepperd, "Quaternion from rotation matrix", Journal of Guidance
    and Control, 1(3), 1978
"""

import logging
import math

import numpy as np
from numba import njit

from ..core.angle import Angle
from ..core.constants import (
    DCM_EQUALITY_TOLERANCE,
    DCM_ORTHONORMAL_TOLERANCE,
    GIMBAL_LOCK_TOLERANCE_ZXZ,
    GIMBAL_LOCK_TOLERANCE_ZYX,
)
from .euler import rot_x, rot_y, rot_z
from .quaternion import Quaternion

logger = logging.getLogger(__name__)


@njit(cache=True)
def _is_orthonormal(C, tol):
    """Unit-length rows that are pairwise orthogonal (NaN entries pass)"""
    for i in range(3):
        length = C[i, 0]*C[i, 0] + C[i, 1]*C[i, 1] + C[i, 2]*C[i, 2]
        if abs(length - 1.0) > tol:
            return False
    for i in range(3):
        for j in range(i + 1, 3):
            dot = C[i, 0]*C[j, 0] + C[i, 1]*C[j, 1] + C[i, 2]*C[j, 2]
            if abs(dot) > tol:
                return False
    return True


@njit(cache=True, error_model='numpy')
def _orthonormalize(C):
    """Gram-Schmidt on columns 1 and 2, column 3 = col1 x col2"""
    m = C.copy()

    norm = math.sqrt(m[0, 0]*m[0, 0] + m[1, 0]*m[1, 0] + m[2, 0]*m[2, 0])
    m[0, 0] /= norm
    m[1, 0] /= norm
    m[2, 0] /= norm

    dot = m[0, 0]*m[0, 1] + m[1, 0]*m[1, 1] + m[2, 0]*m[2, 1]
    m[0, 1] -= dot * m[0, 0]
    m[1, 1] -= dot * m[1, 0]
    m[2, 1] -= dot * m[2, 0]

    norm = math.sqrt(m[0, 1]*m[0, 1] + m[1, 1]*m[1, 1] + m[2, 1]*m[2, 1])
    m[0, 1] /= norm
    m[1, 1] /= norm
    m[2, 1] /= norm

    m[0, 2] = m[1, 0]*m[2, 1] - m[2, 0]*m[1, 1]
    m[1, 2] = m[2, 0]*m[0, 1] - m[0, 0]*m[2, 1]
    m[2, 2] = m[0, 0]*m[1, 1] - m[1, 0]*m[0, 1]
    return m


@njit(cache=True)
def _quat2dcm(w, x, y, z):
    w2 = w*w
    x2 = x*x
    y2 = y*y
    z2 = z*z
    C = np.array([[w2 + x2 - y2 - z2,       2*(x*y - w*z),       2*(x*z + w*y)],
                  [    2*(x*y + w*z),   w2 - x2 + y2 - z2,       2*(y*z - w*x)],
                  [    2*(x*z - w*y),       2*(y*z + w*x),   w2 - x2 - y2 + z2]],
                 dtype=np.double)
    return C


@njit(cache=True, error_model='numpy')
def _dcm2quat(C):
    """Shepperd's method, returns ``[w, x, y, z]``.

    The branch is chosen so the square root is taken of the largest of
    ``1 + trace``, ``1 + 2*R11 - trace``, ``1 + 2*R22 - trace`` and
    ``1 + 2*R33 - trace``; the divisor is then never close to zero.
    """
    r11 = C[0, 0]
    r22 = C[1, 1]
    r33 = C[2, 2]
    trace = r11 + r22 + r33

    if trace > 0:
        s = 0.5 / math.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (C[2, 1] - C[1, 2]) * s
        y = (C[0, 2] - C[2, 0]) * s
        z = (C[1, 0] - C[0, 1]) * s
    elif r11 > r22 and r11 > r33:
        s = 2.0 * math.sqrt(1.0 + r11 - r22 - r33)
        w = (C[2, 1] - C[1, 2]) / s
        x = 0.25 * s
        y = (C[0, 1] + C[1, 0]) / s
        z = (C[0, 2] + C[2, 0]) / s
    elif r22 > r33:
        s = 2.0 * math.sqrt(1.0 + r22 - r11 - r33)
        w = (C[0, 2] - C[2, 0]) / s
        x = (C[0, 1] + C[1, 0]) / s
        y = 0.25 * s
        z = (C[1, 2] + C[2, 1]) / s
    else:
        s = 2.0 * math.sqrt(1.0 + r33 - r11 - r22)
        w = (C[1, 0] - C[0, 1]) / s
        x = (C[0, 2] + C[2, 0]) / s
        y = (C[1, 2] + C[2, 1]) / s
        z = 0.25 * s
    return np.array([w, x, y, z], dtype=np.double)


def _euler_zyx_dcm(yaw, pitch, roll):
    return rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)


def _euler_zxz_dcm(psi, theta, phi):
    return rot_z(psi) @ rot_x(theta) @ rot_z(phi)


def _rad(value):
    return value.rad if isinstance(value, Angle) else float(value)


class DirectionCosineMatrix:
    """Immutable orthonormal rotation matrix (body frame -> reference frame).

    Parameters
    ----------
    matrix : array_like, shape (3, 3)
        Row-major elements; the data is copied
    strict : bool, optional
        Raise ``ValueError`` instead of repairing a matrix that is not
        orthonormal within ``DCM_ORTHONORMAL_TOLERANCE``

    Raises
    ------
    ValueError
        If ``matrix`` is not 3x3, or ``strict`` is set and the matrix is not
        orthonormal
    """

    __slots__ = ('_matrix',)
    __array_ufunc__ = None

    def __init__(self, matrix, strict: bool = False):
        m = np.array(matrix, dtype=np.double)
        if m.shape != (3, 3):
            raise ValueError(f"Matrix must be 3x3, got shape {m.shape}")

        if not _is_orthonormal(m, DCM_ORTHONORMAL_TOLERANCE):
            if strict:
                raise ValueError("Matrix is not orthonormal within "
                                 f"{DCM_ORTHONORMAL_TOLERANCE:g}")
            logger.warning("Matrix is not orthonormal within %g, repairing with Gram-Schmidt",
                           DCM_ORTHONORMAL_TOLERANCE)
            m = _orthonormalize(m)

        m.setflags(write=False)
        self._matrix = m

    @classmethod
    def from_elements(cls, r11, r12, r13, r21, r22, r23, r31, r32, r33,
                      strict: bool = False) -> 'DirectionCosineMatrix':
        """Create a matrix from its nine elements, row by row"""
        return cls([[r11, r12, r13],
                    [r21, r22, r23],
                    [r31, r32, r33]], strict=strict)

    @classmethod
    def identity(cls) -> 'DirectionCosineMatrix':
        return cls(np.eye(3))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    @property
    def r11(self) -> float:
        return float(self._matrix[0, 0])

    @property
    def r12(self) -> float:
        return float(self._matrix[0, 1])

    @property
    def r13(self) -> float:
        return float(self._matrix[0, 2])

    @property
    def r21(self) -> float:
        return float(self._matrix[1, 0])

    @property
    def r22(self) -> float:
        return float(self._matrix[1, 1])

    @property
    def r23(self) -> float:
        return float(self._matrix[1, 2])

    @property
    def r31(self) -> float:
        return float(self._matrix[2, 0])

    @property
    def r32(self) -> float:
        return float(self._matrix[2, 1])

    @property
    def r33(self) -> float:
        return float(self._matrix[2, 2])

    def __getitem__(self, index):
        try:
            row, col = index
        except (TypeError, ValueError):
            raise IndexError("DCM index must be a (row, col) pair") from None
        if not (0 <= row <= 2 and 0 <= col <= 2):
            raise IndexError(f"Indices must be in [0, 2], got ({row}, {col})")
        return float(self._matrix[row, col])

    def to_array(self) -> np.ndarray:
        """Writable copy of the matrix"""
        return self._matrix.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._matrix, dtype=dtype)

    def x_axis(self) -> np.ndarray:
        """Body x-axis in the reference frame"""
        return self._matrix[:, 0].copy()

    def y_axis(self) -> np.ndarray:
        """Body y-axis in the reference frame"""
        return self._matrix[:, 1].copy()

    def z_axis(self) -> np.ndarray:
        """Body z-axis in the reference frame"""
        return self._matrix[:, 2].copy()

    # ------------------------------------------------------------------
    # Orthonormality
    # ------------------------------------------------------------------
    def is_orthonormal(self, tolerance: float = DCM_EQUALITY_TOLERANCE) -> bool:
        return bool(_is_orthonormal(self._matrix, tolerance))

    def orthonormalize(self) -> 'DirectionCosineMatrix':
        """Re-run the Gram-Schmidt repair, e.g. after long chains of products"""
        return DirectionCosineMatrix(_orthonormalize(self._matrix))

    @staticmethod
    def orthonormalize_array(matrix) -> np.ndarray:
        """
        Gram-Schmidt repair of a raw 3x3 array.

        Parameters
        ----------
        matrix : array_like, shape (3, 3)
            Nearly orthonormal matrix

        Returns
        -------
        ndarray, shape (3, 3)
            Matrix whose first column is the normalized input column 1, second
            column the normalized component of column 2 orthogonal to it, and
            third column their cross product
        """
        m = np.array(matrix, dtype=np.double)
        if m.shape != (3, 3):
            raise ValueError(f"Matrix must be 3x3, got shape {m.shape}")
        return _orthonormalize(m)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def transpose(self) -> 'DirectionCosineMatrix':
        """Inverse rotation (reference frame -> body frame)"""
        return DirectionCosineMatrix(self._matrix.T)

    def compose(self, other: 'DirectionCosineMatrix') -> 'DirectionCosineMatrix':
        """Product ``self @ other``: ``other`` is applied first"""
        return DirectionCosineMatrix(self._matrix @ other._matrix)

    def transform_vector(self, vector_in_body_frame) -> np.ndarray:
        """Transform a vector from the body frame to the reference frame"""
        v = np.asarray(vector_in_body_frame, dtype=np.double)
        if v.shape != (3,):
            raise ValueError(f"Vector must have shape (3,), got {v.shape}")
        return self._matrix @ v

    def inverse_transform_vector(self, vector_in_reference_frame) -> np.ndarray:
        """Transform a vector from the reference frame to the body frame"""
        v = np.asarray(vector_in_reference_frame, dtype=np.double)
        if v.shape != (3,):
            raise ValueError(f"Vector must have shape (3,), got {v.shape}")
        return self._matrix.T @ v

    def __matmul__(self, other):
        if isinstance(other, DirectionCosineMatrix):
            return self.compose(other)
        if isinstance(other, (np.ndarray, list, tuple)):
            return self.transform_vector(other)
        return NotImplemented

    __mul__ = __matmul__

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_quaternion(cls, q) -> 'DirectionCosineMatrix':
        """
        Create a DCM from a rotation quaternion.

        Parameters
        ----------
        q : Quaternion or array_like, shape (4,)
            Quaternion ``[w, x, y, z]``; should be unit norm. A non-unit
            quaternion scales the matrix by ``|q|^2`` and is then repaired by
            the constructor.

        Returns
        -------
        DirectionCosineMatrix
        """
        if not isinstance(q, Quaternion):
            q = Quaternion.from_array(q)
        return cls(_quat2dcm(q.w, q.x, q.y, q.z))

    @classmethod
    def from_euler_zyx(cls, yaw, pitch, roll) -> 'DirectionCosineMatrix':
        """
        Create a DCM from yaw-pitch-roll angles, ``C = Rz(yaw) Ry(pitch) Rx(roll)``.

        Angles are :class:`Angle` instances or floats in radians.
        """
        return cls(_euler_zyx_dcm(_rad(yaw), _rad(pitch), _rad(roll)))

    @classmethod
    def from_euler_zxz(cls, psi, theta, phi) -> 'DirectionCosineMatrix':
        """
        Create a DCM from precession-nutation-spin angles,
        ``C = Rz(psi) Rx(theta) Rz(phi)``.

        Angles are :class:`Angle` instances or floats in radians.
        """
        return cls(_euler_zxz_dcm(_rad(psi), _rad(theta), _rad(phi)))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_quaternion(self) -> Quaternion:
        """Scalar-first unit quaternion by Shepperd's method"""
        return Quaternion.from_array(_dcm2quat(self._matrix))

    def to_euler_zyx(self):
        """
        Extract yaw-pitch-roll angles.

        Returns
        -------
        tuple of float
            ``(yaw, pitch, roll)`` in radians. At gimbal lock
            (``|R31|`` within ``GIMBAL_LOCK_TOLERANCE_ZYX`` of 1) only the
            difference/sum of yaw and roll is observable; roll is set to zero
            and the whole rotation about the vertical is reported as yaw.
        """
        C = self._matrix
        pitch = float(np.arcsin(np.clip(-C[2, 0], -1.0, 1.0)))

        if abs(abs(C[2, 0]) - 1.0) < GIMBAL_LOCK_TOLERANCE_ZYX:
            logger.debug("Gimbal lock in ZYX extraction (R31=%.12f), roll set to zero", C[2, 0])
            yaw = float(np.arctan2(-C[0, 1], C[1, 1]))
            return yaw, pitch, 0.0

        yaw = float(np.arctan2(C[1, 0], C[0, 0]))
        roll = float(np.arctan2(C[2, 1], C[2, 2]))
        return yaw, pitch, roll

    def to_euler_zxz(self):
        """
        Extract precession-nutation-spin angles.

        Returns
        -------
        tuple of float
            ``(psi, theta, phi)`` in radians with ``theta`` in [0, pi]. When
            ``|sin(theta)|`` is below ``GIMBAL_LOCK_TOLERANCE_ZXZ`` the two Z
            rotations are indistinguishable; ``psi`` is set to zero.
        """
        C = self._matrix
        theta = float(np.arccos(np.clip(C[2, 2], -1.0, 1.0)))

        if abs(math.sin(theta)) > GIMBAL_LOCK_TOLERANCE_ZXZ:
            psi = float(np.arctan2(C[0, 2], -C[1, 2]))
            phi = float(np.arctan2(C[2, 0], C[2, 1]))
        else:
            logger.debug("Singular nutation in ZXZ extraction (theta=%.3e), psi set to zero", theta)
            psi = 0.0
            phi = float(np.arctan2(-C[0, 1], C[0, 0]))
        return psi, theta, phi

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------
    def equals(self, other: 'DirectionCosineMatrix',
               tolerance: float = DCM_EQUALITY_TOLERANCE) -> bool:
        return bool(np.all(np.abs(self._matrix - other._matrix) <= tolerance))

    def __eq__(self, other):
        if not isinstance(other, DirectionCosineMatrix):
            return NotImplemented
        return self.equals(other)

    # tolerance-based equality is not transitive
    __hash__ = None

    def __repr__(self):
        return f"DirectionCosineMatrix({self._matrix.tolist()!r})"

    def __str__(self):
        rows = "\n".join("[{:.6f}, {:.6f}, {:.6f}]".format(*row) for row in self._matrix)
        return f"DCM:\n{rows}"


DirectionCosineMatrix.IDENTITY = DirectionCosineMatrix(np.eye(3))


__all__ = ['DirectionCosineMatrix']
