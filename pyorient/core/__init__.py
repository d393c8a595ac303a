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

"""Core Orientation Module.

Fundamental building blocks shared by all attitude representations:

- **Constants**: angular unit factors and the numerical tolerances that are
  part of the public contract (orthonormality, equality, gimbal lock)
- **Angle**: immutable unit-aware scalar angle with IEEE-754 arithmetic
- **Trig helpers**: ``sin``/``cos``/``tan``/``sincos`` on :class:`Angle`
- **Exceptions**: :class:`NotSupportedError` for unknown sequence types

Example Usage:
    >>> from pyorient.core import Angle, mathangle
    >>> a = Angle.from_deg(30.0)
    >>> s, c = mathangle.sincos(a)
"""

from . import mathangle
from .angle import *
from .constants import *
from .exceptions import *
