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

"""Orientation Constants and Numerical Tolerances"""

import numpy as np

# Angular units
DEG2RAD = np.pi / 180.0   # degrees to radians
RAD2DEG = 180.0 / np.pi   # radians to degrees
PERIGON = 2.0 * np.pi     # full turn (rad)
HALF_PI = 0.5 * np.pi     # quarter turn (rad)

# Angle folding
ANGLE_TOLERANCE = 1e-10   # |rad - 2pi| below which a full turn is kept

# Quaternion
QUAT_TOLERANCE = 1e-10    # default equality and unit-norm tolerance

# Direction cosine matrix
DCM_ORTHONORMAL_TOLERANCE = 1e-6  # constructor repair threshold
DCM_EQUALITY_TOLERANCE = 1e-9     # elementwise equality / is_orthonormal default

# Gimbal lock detection
GIMBAL_LOCK_TOLERANCE_ZYX = 1e-9   # ||R31| - 1| for yaw-pitch-roll extraction
GIMBAL_LOCK_TOLERANCE_ZXZ = 1e-12  # |sin(theta)| for precession-nutation-spin

__all__ = [
    'DEG2RAD', 'RAD2DEG', 'PERIGON', 'HALF_PI',
    'ANGLE_TOLERANCE', 'QUAT_TOLERANCE',
    'DCM_ORTHONORMAL_TOLERANCE', 'DCM_EQUALITY_TOLERANCE',
    'GIMBAL_LOCK_TOLERANCE_ZYX', 'GIMBAL_LOCK_TOLERANCE_ZXZ',
]
