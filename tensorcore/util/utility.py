# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities mainly for internal use."""

from __future__ import absolute_import

from itertools import product

__all__ = (
    'is_string',
    'nd_iterator',
)


def is_string(obj):
    """Return ``True`` if ``obj`` behaves like a string, ``False`` else."""
    try:
        obj + ''
    except TypeError:
        return False
    else:
        return True


def nd_iterator(shape):
    """Iterator over n-d cube with shape.

    The last index varies fastest, i.e., the points are produced in
    row-major (C) order. A shape ``()`` yields exactly one empty tuple.

    Parameters
    ----------
    shape : sequence of int
        The number of points per axis

    Returns
    -------
    nd_iterator : generator
        Generator returning tuples of integers of length ``len(shape)``.

    Examples
    --------
    >>> for pt in nd_iterator([2, 2]):
    ...     print(pt)
    (0, 0)
    (0, 1)
    (1, 0)
    (1, 1)
    >>> list(nd_iterator(()))
    [()]
    """
    return product(*map(range, shape))


if __name__ == '__main__':
    from tensorcore.util.testutils import run_doctests
    run_doctests()
