# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""tensorcore: element-wise and tensor products of arrays.

The package provides `hadamard` and `tensor` products, each with an
in-place variant, for Numpy arrays and arrays with offset axes.
"""

from __future__ import absolute_import

import logging
from os import path

__all__ = ('core', 'util')

# Set package version
curdir = path.abspath(path.dirname(__file__))

with open(path.join(curdir, 'VERSION')) as version_file:
    __version__ = version_file.read().strip()

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Import all names from "core" into the top-level namespace
from .core import __all__ as _core_all
from .core import *
from .util.exceptions import ShapeMismatch

from . import util

# Add `test` function to global namespace so users can run
# `tensorcore.test()`
from .util import test

__all__ += _core_all
__all__ += ('ShapeMismatch', 'test')
del _core_all
