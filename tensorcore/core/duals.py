# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Row-vector (dual) views of one-dimensional arrays.

A `DualVector` marks a vector as a row vector, either as its adjoint
(conjugate transpose) or as its plain transpose. The tensor product
strips this marker with `plain` before multiplying, which makes the
product compatible with `adjoint` and `transpose`::

    adjoint(tensor(u, v)) == tensor(adjoint(v), adjoint(u))
"""

from __future__ import absolute_import

import numpy as np

from tensorcore.core.arrays import OffsetArray, asarray, axes

__all__ = ('DualVector', 'adjoint', 'transpose', 'is_dual', 'plain')


DUAL_KINDS = ('adjoint', 'transpose')


class DualVector(object):

    """Row-vector view of a one-dimensional array.

    As an array, a dual vector has two axes, a singleton one followed by
    the axis of its ``parent``. Entries of an ``'adjoint'`` view are the
    complex conjugates of the parent entries.
    """

    def __init__(self, parent, kind='adjoint'):
        """Initialize a new instance.

        Parameters
        ----------
        parent : `array-like` or `OffsetArray`
            One-dimensional array to be viewed as a row vector.
        kind : {'adjoint', 'transpose'}, optional
            Type of the dual view.
        """
        if isinstance(parent, DualVector):
            raise TypeError('`parent` cannot be a `DualVector`')
        if not isinstance(parent, OffsetArray):
            parent = np.asarray(parent)
        if parent.ndim != 1:
            raise ValueError('`parent` must be one-dimensional, got array '
                             'with {} axes'.format(parent.ndim))
        kind, kind_in = str(kind).lower(), kind
        if kind not in DUAL_KINDS:
            raise ValueError('`kind` {!r} not understood'.format(kind_in))

        self.__parent = parent
        self.__kind = kind

    @property
    def parent(self):
        """The wrapped one-dimensional array."""
        return self.__parent

    @property
    def kind(self):
        """Type of the view, ``'adjoint'`` or ``'transpose'``."""
        return self.__kind

    @property
    def axes(self):
        """Index ranges of the row vector."""
        return (range(1),) + axes(self.parent)

    @property
    def shape(self):
        """Number of entries per axis of the row vector."""
        return (1,) + self.parent.shape

    @property
    def ndim(self):
        """Number of axes of the row vector, always 2."""
        return 2

    @property
    def size(self):
        """Total number of entries."""
        return self.parent.size

    @property
    def dtype(self):
        """Data type of the entries."""
        return self.parent.dtype

    def __len__(self):
        """Return ``len(self)``, the length of the singleton first axis."""
        return 1

    def __array__(self, dtype=None, copy=None):
        """Return the entries as ``1 x n`` `numpy.ndarray`.

        Without conjugation the result is a view of ``parent`` unless
        ``copy=True`` or a ``dtype`` conversion is needed.
        """
        arr = asarray(self.parent)
        row = arr.reshape((1,) + arr.shape)
        if self.kind == 'adjoint' and arr.dtype.kind in 'cO':
            if copy is False:
                raise ValueError('adjoint view with dtype {} cannot be '
                                 'converted to an array without copy'
                                 ''.format(arr.dtype))
            return np.asarray(np.conj(row), dtype=dtype)

        if copy:
            return np.array(row, dtype=dtype, copy=True)
        result = np.asarray(row, dtype=dtype)
        if copy is False and result is not row:
            raise ValueError('unable to convert dual view with dtype {} to '
                             'dtype {} without copy'.format(arr.dtype, dtype))
        return result

    def __eq__(self, other):
        """Return ``self == other``.

        The view is compared as the ``1 x n`` row it represents, with
        any array-like ``other``.
        """
        if other is self:
            return True
        return (self.axes == axes(other) and
                bool(np.array_equal(np.asarray(self), asarray(other))))

    def __ne__(self, other):
        """Return ``self != other``."""
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        """Return ``repr(self)``."""
        return '{}({!r}, kind={!r})'.format(self.__class__.__name__,
                                            self.parent, self.kind)


def is_dual(x):
    """Return ``True`` if ``x`` is a dual (row-vector) view."""
    return isinstance(x, DualVector)


def _with_axes_of(arr, x):
    """Wrap ``arr`` with the offsets of ``x`` if it has any."""
    if isinstance(x, OffsetArray):
        return OffsetArray(arr, x.offsets)
    else:
        return arr


def plain(x):
    """Return the one-dimensional array behind a dual view.

    The result holds the entries as seen through the view, i.e., the
    parent itself for transposes and its conjugate for adjoints. Inputs
    that are not dual views are returned unchanged.

    Examples
    --------
    >>> v = np.array([1 + 1j, 2 + 0j])
    >>> plain(adjoint(v)).tolist()
    [(1-1j), (2-0j)]
    >>> plain(transpose(v)) is v
    True
    """
    if not is_dual(x):
        return x
    if x.kind == 'transpose':
        return x.parent
    else:
        return _with_axes_of(np.conj(asarray(x.parent)), x.parent)


def _dual(x, kind):
    """Implementation of `adjoint` and `transpose`."""
    conj = np.conj if kind == 'adjoint' else (lambda arr: arr)

    if is_dual(x):
        if x.kind == kind:
            return x.parent
        else:
            # Switching between adjoint and transpose conjugates
            return _with_axes_of(np.conj(asarray(x.parent)), x.parent)

    if not isinstance(x, OffsetArray):
        x = np.asarray(x)

    if x.ndim == 0:
        return np.asarray(conj(x))
    elif x.ndim == 1:
        return DualVector(x, kind)
    elif x.ndim == 2:
        arr = conj(asarray(x)).T
        if isinstance(x, OffsetArray):
            return OffsetArray(arr, x.offsets[::-1])
        else:
            return arr
    else:
        raise ValueError('{} is only defined for arrays with at most 2 '
                         'axes, got {}'.format(kind, x.ndim))


def adjoint(x):
    """Return the adjoint (conjugate transpose) of ``x``.

    Parameters
    ----------
    x : `array-like`, `OffsetArray` or `DualVector`
        Array with at most two axes.

    Returns
    -------
    adj :
        For one-dimensional input, an ``'adjoint'`` `DualVector`;
        for dual views, the corresponding plain vector; for matrices,
        the conjugate transposed matrix with reversed axes.

    Examples
    --------
    >>> v = np.array([1, 2])
    >>> adjoint(v)
    DualVector(array([1, 2]), kind='adjoint')
    >>> adjoint(adjoint(v)) is v
    True
    >>> adjoint(np.array([[1, 2], [3, 4]]))
    array([[1, 3],
           [2, 4]])
    >>> adjoint(np.array([[1j, 2]])).tolist()
    [[-1j], [(2-0j)]]
    """
    return _dual(x, 'adjoint')


def transpose(x):
    """Return the transpose of ``x``, without conjugation.

    See Also
    --------
    adjoint : same with complex conjugation

    Examples
    --------
    >>> v = np.array([1, 2, 3])
    >>> transpose(v)
    DualVector(array([1, 2, 3]), kind='transpose')
    >>> transpose(transpose(v)) is v
    True
    """
    return _dual(x, 'transpose')


if __name__ == '__main__':
    from tensorcore.util.testutils import run_doctests
    run_doctests()
