# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Tensor (outer) product of arrays of arbitrary shape."""

from __future__ import absolute_import

import logging

import numpy as np

from tensorcore.core.arrays import (
    INDEX_STYLES, asarray, axes, index_style, linear_view, memory_order,
    with_axes, writable_storage)
from tensorcore.core.duals import plain
from tensorcore.util.exceptions import ShapeMismatch
from tensorcore.util.utility import nd_iterator

__all__ = ('TENSOR_TRAVERSALS', 'tensor', 'tensor_into', 'otimes')


_LOGGER = logging.getLogger(__name__)

# Traversals of `tensor_into` are named after the index style they need
TENSOR_TRAVERSALS = INDEX_STYLES


def tensor(A, B):
    """Return the tensor product of ``A`` and ``B``.

    If ``C = tensor(A, B)``, then
    ``C[i1, ..., im, j1, ..., jn] == A[i1, ..., im] * B[j1, ..., jn]``,
    and the axes of ``C`` are the axes of ``A`` followed by the axes
    of ``B``.

    Dual (row-vector) views are replaced by their `plain` vector before
    multiplying. This makes sure that
    ``adjoint(tensor(x, y)) == tensor(adjoint(y), adjoint(x))`` holds
    for any mixture of plain and dual vectors, and the same for
    `transpose`.

    `otimes` is an alias of this function that can be passed to
    higher-order functions.

    Parameters
    ----------
    A, B : `array-like`, `OffsetArray` or `DualVector`
        Factors of the product, of any shape.

    Returns
    -------
    C : `numpy.ndarray` or `OffsetArray`
        Newly allocated array with ``axes(C) == axes(A) + axes(B)``.

    Examples
    --------
    >>> a = [2, 3]
    >>> b = [5, 7, 11]
    >>> tensor(a, b)
    array([[10, 14, 22],
           [15, 21, 33]])

    The extra leading axis of dual vectors is ignored:

    >>> from tensorcore.core.duals import adjoint
    >>> adjoint(tensor(adjoint(b), adjoint(a)))
    array([[10, 14, 22],
           [15, 21, 33]])

    For vectors ``v`` and ``w``, the Kronecker product is the tensor
    product ``tensor(w, v)`` flattened in column-major order:

    >>> v, w = np.array([1, 2]), np.array([1, 10, 100])
    >>> np.kron(v, w)
    array([  1,  10, 100,   2,  20, 200])
    >>> tensor(w, v).ravel(order='F')
    array([  1,  10, 100,   2,  20, 200])
    """
    A, B = plain(A), plain(B)
    out_axes = axes(A) + axes(B)
    return with_axes(np.asarray(np.multiply.outer(asarray(A), asarray(B))),
                     out_axes)


otimes = tensor


def _tensor_cartesian(out, a, b):
    """Fill ``out`` looping over multi-indices of ``b``."""
    for j in nd_iterator(b.shape):
        # The ellipsis keeps 0-d selections as writable views
        np.multiply(a, b[j], out=out[(Ellipsis,) + j])


def _tensor_linear(out, a, b):
    """Fill ``out`` with a linear cursor in its memory order."""
    order = memory_order(out)
    out_flat = linear_view(out)
    a_flat = a.ravel(order=order)
    b_flat = b.ravel(order=order)

    i = 0
    if order == 'C':
        # Last axes vary fastest, i.e., those of `b`
        n = b_flat.size
        for a_val in a_flat:
            np.multiply(a_val, b_flat, out=out_flat[i:i + n])
            i += n
    else:
        n = a_flat.size
        for b_val in b_flat:
            np.multiply(a_flat, b_val, out=out_flat[i:i + n])
            i += n


def tensor_into(dest, A, B, traversal=None):
    """Store the tensor product of ``A`` and ``B`` in ``dest``.

    Same as `tensor`, but the result is written to the pre-allocated
    array ``dest``. The axes of ``dest`` must be exactly the axes of
    ``A`` followed by the axes of ``B``. They are checked before
    anything is written.

    Parameters
    ----------
    dest : `numpy.ndarray` or `OffsetArray`
        Array to which the product is written.
    A, B : `array-like`, `OffsetArray` or `DualVector`
        Factors of the product, of any shape.
    traversal : {None, 'linear', 'cartesian'}, optional
        Strategy used to fill ``dest``. It only influences speed, not
        the result.

        ``'linear'``: Advance a single cursor through the memory of
        ``dest``. Requires ``index_style(dest) == 'linear'``.

        ``'cartesian'``: For each multi-index ``j`` of ``B``, write
        ``A * B[j]`` to the sub-array ``dest[..., j]``.

        ``None``: Use ``'linear'`` if ``dest`` supports it, otherwise
        ``'cartesian'``.

    Returns
    -------
    dest : `numpy.ndarray` or `OffsetArray`
        The same object as the input ``dest``.

    Raises
    ------
    ShapeMismatch
        If ``axes(dest) != axes(A) + axes(B)``.

    Examples
    --------
    >>> dest = np.zeros((2, 3), dtype=int)
    >>> out = tensor_into(dest, [2, 3], [5, 7, 11])
    >>> out is dest
    True
    >>> dest
    array([[10, 14, 22],
           [15, 21, 33]])

    The order of the factors matters:

    >>> tensor_into(dest, [5, 7, 11], [2, 3])
    Traceback (most recent call last):
        ...
    tensorcore.util.exceptions.ShapeMismatch: axes(dest) must concatenate \
axes(A) and axes(B), got dest=(range(0, 2), range(0, 3)), A=(range(0, 3),), \
B=(range(0, 2),)
    """
    if traversal is not None:
        traversal, traversal_in = str(traversal).lower(), traversal
        if traversal not in TENSOR_TRAVERSALS:
            raise ValueError('bad traversal {!r}'.format(traversal_in))

    A, B = plain(A), plain(B)
    axA, axB, axdest = axes(A), axes(B), axes(dest)
    if axdest != axA + axB:
        raise ShapeMismatch(
            'axes(dest) must concatenate axes(A) and axes(B), got dest={}, '
            'A={}, B={}'.format(axdest, axA, axB),
            expected=axA + axB, actual=axdest,
            operands={'dest': axdest, 'A': axA, 'B': axB})

    out = writable_storage(dest)
    if traversal is None:
        traversal = index_style(dest)
    elif traversal == 'linear' and index_style(dest) != 'linear':
        raise ValueError("traversal 'linear' requires a contiguous `dest`")

    _LOGGER.debug('tensor_into: %s traversal of dest with shape %s',
                  traversal, out.shape)
    if traversal == 'linear':
        _tensor_linear(out, asarray(A), asarray(B))
    else:
        _tensor_cartesian(out, asarray(A), asarray(B))
    return dest


if __name__ == '__main__':
    from tensorcore.util.testutils import run_doctests
    run_doctests()
