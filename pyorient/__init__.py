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
PyOrient - Rigid-Body Orientation Math Kernel

Interconvertible representations of a 3D rotation: a unit-aware Angle,
Hamilton quaternions, orthonormal direction cosine matrices and Euler angle
sequences (classic and Krylov), with closed-form conversions between them.
"""

__version__ = "1.0.0"
__author__ = "PyOrient Development Team"
__title__ = "pyorient"
__description__ = "Rigid-body orientation representations and conversions"

from . import logger
from .core import *
from .attitude import *
