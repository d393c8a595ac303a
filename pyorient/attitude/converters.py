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
Conversions between Euler angles, quaternions and direction cosine matrices.

All conversions share one convention: the quaternion ``q`` and the matrix
``C`` describe the same active rotation, so that
``to_direction_cosine_matrix(e) == DirectionCosineMatrix.from_quaternion(to_quaternion(e))``
for every sequence type.

References:
    Yu. N. Chelnokov, Quaternion and Biquaternion Models and Methods of
    Rigid Body Mechanics and Their Applications. Geometry and Kinematics of
    Motion (2006), pp. 151, 162-163, 379
"""

import logging

import numpy as np

from ..core import mathangle
from ..core.exceptions import NotSupportedError
from .dcm import DirectionCosineMatrix
from .euler import EulerAngles, EulerAnglesType
from .quaternion import Quaternion

logger = logging.getLogger(__name__)

# |sin(theta)| above which Krylov angles are reported as close to gimbal lock
_KRYLOV_LOCK_WARNING = 1.0 - 1e-6


# ----------------------------------------------------------------------
# Euler angles -> quaternion
# ----------------------------------------------------------------------
def to_quaternion(angles: EulerAngles) -> Quaternion:
    """
    Convert Euler angles to the corresponding rotation quaternion.

    Parameters
    ----------
    angles : EulerAngles
        Classic or Krylov angles

    Returns
    -------
    Quaternion
        Unit quaternion ``[w, x, y, z]``

    Raises
    ------
    NotSupportedError
        If ``angles.angles_type`` is not a known sequence
    """
    if angles.angles_type is EulerAnglesType.CLASSIC:
        return _quaternion_from_classic(angles.psi, angles.theta, angles.phi)
    elif angles.angles_type is EulerAnglesType.KRYLOV:
        return _quaternion_from_krylov(angles.psi, angles.theta, angles.phi)
    raise NotSupportedError(angles.angles_type)


def _quaternion_from_classic(psi, theta, phi):
    # q = q_z(psi) * q_x(theta) * q_z(phi)
    sinPsi, cosPsi = mathangle.sincos(0.5 * psi)
    sinTheta, cosTheta = mathangle.sincos(0.5 * theta)
    sinPhi, cosPhi = mathangle.sincos(0.5 * phi)

    return Quaternion(cosPsi*cosTheta*cosPhi - sinPsi*cosTheta*sinPhi,
                      cosPsi*sinTheta*cosPhi + sinPsi*sinTheta*sinPhi,
                      sinPsi*sinTheta*cosPhi - cosPsi*sinTheta*sinPhi,
                      cosPsi*cosTheta*sinPhi + sinPsi*cosTheta*cosPhi)


def _quaternion_from_krylov(psi, theta, phi):
    # q = q_y(psi) * q_z(theta) * q_x(phi)
    sinPsi, cosPsi = mathangle.sincos(0.5 * psi)
    sinTheta, cosTheta = mathangle.sincos(0.5 * theta)
    sinPhi, cosPhi = mathangle.sincos(0.5 * phi)

    return Quaternion(cosPsi*cosTheta*cosPhi - sinPsi*sinTheta*sinPhi,
                      sinPsi*sinTheta*cosPhi + cosPsi*cosTheta*sinPhi,
                      sinPsi*cosTheta*cosPhi + cosPsi*sinTheta*sinPhi,
                      cosPsi*sinTheta*cosPhi - sinPsi*cosTheta*sinPhi)


# ----------------------------------------------------------------------
# Euler angles -> direction cosine matrix
# ----------------------------------------------------------------------
def to_direction_cosine_matrix(angles: EulerAngles) -> DirectionCosineMatrix:
    """
    Convert Euler angles to a direction cosine matrix.

    Raises
    ------
    NotSupportedError
        If ``angles.angles_type`` is not a known sequence
    """
    if angles.angles_type is EulerAnglesType.CLASSIC:
        return _dcm_from_classic(angles.psi, angles.theta, angles.phi)
    elif angles.angles_type is EulerAnglesType.KRYLOV:
        return _dcm_from_krylov(angles.psi, angles.theta, angles.phi)
    raise NotSupportedError(angles.angles_type)


def _dcm_from_classic(psi, theta, phi):
    # C = Rz(psi) Rx(theta) Rz(phi)
    sinPsi, cosPsi = mathangle.sincos(psi)
    sinTheta, cosTheta = mathangle.sincos(theta)
    sinPhi, cosPhi = mathangle.sincos(phi)

    return DirectionCosineMatrix.from_elements(
        cosPsi*cosPhi - sinPsi*cosTheta*sinPhi, -cosPsi*sinPhi - sinPsi*cosTheta*cosPhi,  sinPsi*sinTheta,
        sinPsi*cosPhi + cosPsi*cosTheta*sinPhi, -sinPsi*sinPhi + cosPsi*cosTheta*cosPhi, -cosPsi*sinTheta,
                               sinTheta*sinPhi,                         sinTheta*cosPhi,         cosTheta)


def _dcm_from_krylov(psi, theta, phi):
    # C = Ry(psi) Rz(theta) Rx(phi)
    sinPsi, cosPsi = mathangle.sincos(psi)
    sinTheta, cosTheta = mathangle.sincos(theta)
    sinPhi, cosPhi = mathangle.sincos(phi)

    return DirectionCosineMatrix.from_elements(
         cosPsi*cosTheta, sinPsi*sinPhi - cosPsi*sinTheta*cosPhi, sinPsi*cosPhi + cosPsi*sinTheta*sinPhi,
                sinTheta,                        cosTheta*cosPhi,                       -cosTheta*sinPhi,
        -sinPsi*cosTheta, cosPsi*sinPhi + sinPsi*sinTheta*cosPhi, cosPsi*cosPhi - sinPsi*sinTheta*sinPhi)


# ----------------------------------------------------------------------
# Quaternion <-> direction cosine matrix
# ----------------------------------------------------------------------
def quaternion_to_dcm(q: Quaternion) -> DirectionCosineMatrix:
    """Direction cosine matrix of a unit quaternion"""
    return DirectionCosineMatrix.from_quaternion(q)


def dcm_to_quaternion(dcm: DirectionCosineMatrix) -> Quaternion:
    """Unit quaternion of a direction cosine matrix (Shepperd's method)"""
    return dcm.to_quaternion()


# ----------------------------------------------------------------------
# Quaternion -> Euler angles
# ----------------------------------------------------------------------
def to_euler_angles(q: Quaternion, angles_type: EulerAnglesType) -> EulerAngles:
    """
    Convert a quaternion to Euler angles of the requested sequence.

    Raises
    ------
    NotImplementedError
        For ``EulerAnglesType.CLASSIC``, see :func:`to_classic_euler_angles`
    NotSupportedError
        If ``angles_type`` is not a known sequence
    """
    if angles_type is EulerAnglesType.CLASSIC:
        return to_classic_euler_angles(q)
    elif angles_type is EulerAnglesType.KRYLOV:
        return to_krylov_euler_angles(q)
    raise NotSupportedError(angles_type)


def to_classic_euler_angles(q: Quaternion) -> EulerAngles:
    """
    Convert a quaternion to classic Euler angles (Z-X-Z).

    Not implemented: the closed form is singular at ``theta = 0`` and no
    formula stable across that point has been validated. Go through
    :meth:`DirectionCosineMatrix.to_euler_zxz` if a best-effort
    extraction is acceptable.

    Raises
    ------
    NotImplementedError
        Always
    """
    raise NotImplementedError(
        "Quaternion to classic Euler angles is not implemented "
        "(singular at theta = 0)")


def to_krylov_euler_angles(q: Quaternion) -> EulerAngles:
    """
    Convert a unit quaternion to Krylov angles (yaw, pitch, roll).

    The result is reliable away from gimbal lock at ``theta = +-90 deg``,
    where yaw and roll become indistinguishable.

    Parameters
    ----------
    q : Quaternion
        Unit quaternion ``[w, x, y, z]``

    Returns
    -------
    EulerAngles
        Krylov angles with ``theta`` in [-90 deg, 90 deg]
    """
    w, x, y, z = q
    sinTheta = 2.0 * (x*y + w*z)
    if abs(sinTheta) > _KRYLOV_LOCK_WARNING:
        logger.debug("Krylov angles close to gimbal lock (sin(theta)=%.9f)", sinTheta)

    psi = np.arctan2(w*y - x*z, w*w + x*x - 0.5)
    theta = np.arcsin(np.clip(sinTheta, -1.0, 1.0))
    phi = np.arctan2(w*x - y*z, w*w + y*y - 0.5)

    return EulerAngles.create_krylov(float(psi), float(theta), float(phi))


# ----------------------------------------------------------------------
# Direction cosine matrix -> Euler angles
# ----------------------------------------------------------------------
def dcm_to_euler_angles(dcm: DirectionCosineMatrix, angles_type: EulerAnglesType) -> EulerAngles:
    """
    Convert a direction cosine matrix to Euler angles of the requested sequence.

    Classic angles come from :meth:`DirectionCosineMatrix.to_euler_zxz`
    (psi is reported as zero when the nutation is singular); Krylov angles go
    through the quaternion.

    Raises
    ------
    NotSupportedError
        If ``angles_type`` is not a known sequence
    """
    if angles_type is EulerAnglesType.CLASSIC:
        return EulerAngles.create_classic(*dcm.to_euler_zxz())
    elif angles_type is EulerAnglesType.KRYLOV:
        return to_krylov_euler_angles(dcm.to_quaternion())
    raise NotSupportedError(angles_type)


__all__ = [
    'to_quaternion', 'to_direction_cosine_matrix',
    'quaternion_to_dcm', 'dcm_to_quaternion',
    'to_euler_angles', 'to_classic_euler_angles', 'to_krylov_euler_angles',
    'dcm_to_euler_angles',
]
