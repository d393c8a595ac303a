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
Attitude module: rotation representations and conversions.

This module provides interconvertible representations of a rigid-body
rotation:

- Quaternions (Hamilton, scalar first)
- Direction Cosine Matrices (body frame -> reference frame)
- Euler angle sequences, classic (Z-X-Z) and Krylov (yaw-pitch-roll, Y-Z-X)

All rotations are active and assume right-hand coordinate frames.

References:
    Yu. N. Chelnokov, Quaternion and Biquaternion Models and Methods of
    Rigid Body Mechanics and Their Applications
"""

from .converters import (
    dcm_to_euler_angles,
    dcm_to_quaternion,
    quaternion_to_dcm,
    to_classic_euler_angles,
    to_direction_cosine_matrix,
    to_euler_angles,
    to_krylov_euler_angles,
    to_quaternion,
)
from .dcm import DirectionCosineMatrix
from .euler import EulerAngles, EulerAnglesType, quat_x, quat_y, quat_z, rot_x, rot_y, rot_z
from .quaternion import Quaternion

__all__ = [
    'Quaternion', 'DirectionCosineMatrix',
    'EulerAngles', 'EulerAnglesType',
    'rot_x', 'rot_y', 'rot_z', 'quat_x', 'quat_y', 'quat_z',
    'to_quaternion', 'to_direction_cosine_matrix',
    'quaternion_to_dcm', 'dcm_to_quaternion',
    'to_euler_angles', 'to_classic_euler_angles', 'to_krylov_euler_angles',
    'dcm_to_euler_angles',
]
