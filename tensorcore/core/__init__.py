# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Core array products and the array abstraction they build on."""

from __future__ import absolute_import

from .arrays import *
from .duals import *
from .elementwise import *
from .outer import *

__all__ = ()
__all__ += arrays.__all__
__all__ += duals.__all__
__all__ += elementwise.__all__
__all__ += outer.__all__
