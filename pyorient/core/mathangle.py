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

"""Trigonometric functions of :class:`~pyorient.core.angle.Angle` values.

Unlike :mod:`math`, these never raise on infinite input; they return NaN,
matching the IEEE-754 behaviour of the rest of the package.
"""

import numpy as np

from .angle import Angle


def _rad(angle):
    return angle.rad if isinstance(angle, Angle) else float(angle)


def sin(angle: Angle) -> float:
    with np.errstate(invalid='ignore'):
        return float(np.sin(_rad(angle)))


def cos(angle: Angle) -> float:
    with np.errstate(invalid='ignore'):
        return float(np.cos(_rad(angle)))


def tan(angle: Angle) -> float:
    with np.errstate(invalid='ignore'):
        return float(np.tan(_rad(angle)))


def sincos(angle: Angle):
    """
    Sine and cosine of an angle in one call.

    Parameters
    ----------
    angle : Angle
        Input angle (a plain float is taken as radians)

    Returns
    -------
    tuple of float
        ``(sin, cos)``
    """
    rad = _rad(angle)
    with np.errstate(invalid='ignore'):
        return float(np.sin(rad)), float(np.cos(rad))


__all__ = ['sin', 'cos', 'tan', 'sincos']
