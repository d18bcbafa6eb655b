# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Element-wise (Hadamard) product of arrays with identical axes."""

from __future__ import absolute_import

import numpy as np

from tensorcore.core.arrays import (
    asarray, axes, index_style, linear_view, memory_order, with_axes,
    writable_storage)
from tensorcore.util.exceptions import ShapeMismatch

__all__ = ('hadamard', 'hadamard_into', 'odot')


def hadamard(A, B):
    """Return the element-wise product of ``A`` and ``B``.

    ``A`` and ``B`` must have identical axes, including the start index
    of each axis. The entries are multiplied with `numpy.multiply`, i.e.,
    for ``object`` arrays with the ``*`` of the entries.

    `odot` is an alias of this function that can be passed to
    higher-order functions.

    Parameters
    ----------
    A, B : `array-like`, `OffsetArray` or `DualVector`
        Factors of the product.

    Returns
    -------
    C : `numpy.ndarray` or `OffsetArray`
        Newly allocated array with ``axes(C) == axes(A)`` and
        ``C[i] == A[i] * B[i]``.

    Raises
    ------
    ShapeMismatch
        If ``axes(A) != axes(B)``.

    Examples
    --------
    >>> hadamard([2, 3], [5, 7])
    array([10, 21])
    >>> hadamard([2, 3], [5])
    Traceback (most recent call last):
        ...
    tensorcore.util.exceptions.ShapeMismatch: axes of A and B must match, \
got (range(0, 2),) and (range(0, 1),)
    """
    axA, axB = axes(A), axes(B)
    if axA != axB:
        raise ShapeMismatch(
            'axes of A and B must match, got {} and {}'.format(axA, axB),
            expected=axA, actual=axB, operands={'A': axA, 'B': axB})

    return with_axes(np.asarray(np.multiply(asarray(A), asarray(B))), axA)


odot = hadamard


def hadamard_into(dest, A, B):
    """Store the element-wise product of ``A`` and ``B`` in ``dest``.

    Same as `hadamard`, but the result is written to the pre-allocated
    array ``dest``, which must have the same axes as ``A`` and ``B``.
    The axes are checked before anything is written.

    Parameters
    ----------
    dest : `numpy.ndarray` or `OffsetArray`
        Array to which the product is written.
    A, B : `array-like`, `OffsetArray` or `DualVector`
        Factors of the product.

    Returns
    -------
    dest : `numpy.ndarray` or `OffsetArray`
        The same object as the input ``dest``.

    Raises
    ------
    ShapeMismatch
        If the axes of ``dest``, ``A`` and ``B`` are not all equal.

    Examples
    --------
    >>> dest = np.empty(2, dtype=int)
    >>> out = hadamard_into(dest, [2, 3], [5, 7])
    >>> out is dest
    True
    >>> dest
    array([10, 21])
    """
    axA, axB, axdest = axes(A), axes(B), axes(dest)
    if not ((axdest == axA) & (axdest == axB)):
        raise ShapeMismatch(
            'axes(dest) must equal axes(A) and axes(B), got dest={}, A={}, '
            'B={}'.format(axdest, axA, axB),
            expected=axdest, actual=(axA, axB),
            operands={'dest': axdest, 'A': axA, 'B': axB})

    out = writable_storage(dest)
    a, b = asarray(A), asarray(B)
    order = memory_order(out)
    if (index_style(dest) == 'linear' and
            memory_order(a) == order and memory_order(b) == order):
        np.multiply(linear_view(a), linear_view(b), out=linear_view(out))
    else:
        np.multiply(a, b, out=out)
    return dest


if __name__ == '__main__':
    from tensorcore.util.testutils import run_doctests
    run_doctests()
