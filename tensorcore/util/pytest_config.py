# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test configuration file."""

from __future__ import absolute_import, division, print_function

import numpy as np

import tensorcore
from tensorcore.util.testutils import simple_fixture

try:
    import pytest
    from pytest import fixture
except ImportError:
    pytest = None

    # Identity fixture
    def fixture(*arg, **kw):
        if arg and callable(arg[0]):
            return arg[0]
        return fixture


# --- Add numpy and tensorcore to all doctests ---


@fixture(autouse=True)
def _add_doctest_np_tensorcore(doctest_namespace):
    doctest_namespace['np'] = np
    doctest_namespace['tensorcore'] = tensorcore


# --- Reusable fixtures --- #

# NOTE: All global fixtures are prefixed with `tc_` to make them
# non-conflicting with other packages' fixture names.

numeric_dtype_params = [np.dtype(dt) for dt in
                        ['int32', 'int64', 'float32', 'float64',
                         'complex64', 'complex128']]
tc_dtype = simple_fixture(name='dtype', params=numeric_dtype_params,
                          fmt=' {name} = np.{value.name} ')

tc_order = simple_fixture(name='order', params=['C', 'F'])

tc_traversal = simple_fixture(name='traversal',
                              params=[None, 'linear', 'cartesian'])
