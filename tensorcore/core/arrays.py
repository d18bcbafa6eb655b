# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Generic array abstraction used by the product functions.

An array is anything `numpy.asarray` understands, or an `OffsetArray`,
i.e., a Numpy array whose axes start at arbitrary integers. The shape of
an array is described by its `axes`, one `range` per dimension, and two
shapes are equal only if all ranges are equal, including their start.
"""

from __future__ import absolute_import, division

from itertools import product

import numpy as np

from tensorcore.util.normalize import normalized_scalar_param_list

__all__ = (
    'INDEX_STYLES',
    'OffsetArray',
    'axes',
    'asarray',
    'index_style',
    'memory_order',
    'linear_view',
    'eachindex',
    'elements',
    'with_axes',
    'writable_storage',
)


INDEX_STYLES = ('linear', 'cartesian')


class OffsetArray(object):

    """Numpy array with arbitrary start index per axis.

    Integer multi-indices are given in the shifted coordinates, i.e.,
    the first entry of an axis with offset ``1`` has index ``1``. The
    data is stored in ``parent`` without copy.

    Examples
    --------
    >>> x = OffsetArray([[1, 2, 3], [4, 5, 6]], offsets=(1, -1))
    >>> x.axes
    (range(1, 3), range(-1, 2))
    >>> print(x[2, -1])
    4
    >>> x[2, -1] = 7
    >>> x.parent
    array([[1, 2, 3],
           [7, 5, 6]])
    """

    def __init__(self, parent, offsets=0):
        """Initialize a new instance.

        Parameters
        ----------
        parent : `array-like`
            Data of the array. A `numpy.ndarray` is used as-is, other
            objects are converted with `numpy.asarray`.
        offsets : int or sequence of int, optional
            Start index of each axis. A single int is used for all axes.
        """
        if isinstance(parent, OffsetArray):
            raise TypeError('`parent` cannot be an `OffsetArray`, use '
                            '`parent.parent` to re-wrap its data')
        self.__parent = np.asarray(parent)
        self.__offsets = tuple(
            normalized_scalar_param_list(offsets, self.__parent.ndim,
                                         param_conv=int))

    @property
    def parent(self):
        """Zero-based storage of this array."""
        return self.__parent

    @property
    def offsets(self):
        """Start index of each axis."""
        return self.__offsets

    @property
    def axes(self):
        """Tuple of index ranges, one per axis."""
        return tuple(range(o, o + n)
                     for o, n in zip(self.offsets, self.parent.shape))

    @property
    def shape(self):
        """Number of entries per axis."""
        return self.parent.shape

    @property
    def ndim(self):
        """Number of axes."""
        return self.parent.ndim

    @property
    def size(self):
        """Total number of entries."""
        return self.parent.size

    @property
    def dtype(self):
        """Data type of the entries."""
        return self.parent.dtype

    def __len__(self):
        """Return ``len(self)``."""
        return len(self.parent)

    def _storage_index(self, index):
        """Return the zero-based index corresponding to ``index``."""
        if not isinstance(index, tuple):
            index = (index,)
        if len(index) != self.ndim:
            raise IndexError('expected {} indices, got {}'
                             ''.format(self.ndim, len(index)))

        storage_index = []
        for i, (idx, ax) in enumerate(zip(index, self.axes)):
            if not isinstance(idx, (int, np.integer)):
                raise TypeError('only integer indices are supported, got '
                                '{!r} for axis {}'.format(idx, i))
            if idx not in ax:
                raise IndexError('index {} is out of bounds for axis {} '
                                 'with range {!r}'.format(idx, i, ax))
            storage_index.append(idx - ax.start)
        return tuple(storage_index)

    def __getitem__(self, index):
        """Return ``self[index]`` for an integer multi-index."""
        return self.parent[self._storage_index(index)]

    def __setitem__(self, index, value):
        """Implement ``self[index] = value`` for an integer multi-index."""
        self.parent[self._storage_index(index)] = value

    def __array__(self, dtype=None, copy=None):
        """Return the storage as `numpy.ndarray`.

        With ``copy=False``, a ``dtype`` that requires conversion raises
        ``ValueError``.
        """
        if copy:
            return np.array(self.parent, dtype=dtype, copy=True)
        arr = np.asarray(self.parent, dtype=dtype)
        if copy is False and arr is not self.parent:
            raise ValueError('unable to convert `OffsetArray` with dtype {} '
                             'to dtype {} without copy'
                             ''.format(self.dtype, dtype))
        return arr

    def __eq__(self, other):
        """Return ``self == other``.

        Arrays are equal if their axes and their entries are equal.
        """
        if other is self:
            return True
        return (self.axes == axes(other) and
                bool(np.array_equal(self.parent, asarray(other))))

    def __ne__(self, other):
        """Return ``self != other``."""
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        """Return ``repr(self)``."""
        inner = repr(self.parent).replace('\n', '\n' + ' ' * 12)
        return '{}({}, offsets={})'.format(self.__class__.__name__, inner,
                                           self.offsets)


def axes(x):
    """Return the index ranges of ``x``.

    Parameters
    ----------
    x : `array-like`, `OffsetArray` or `DualVector`
        Object whose axes should be determined.

    Returns
    -------
    axes : tuple of range
        One range per dimension. Plain arrays have zero-based axes.

    Examples
    --------
    >>> axes([[1, 2, 3], [4, 5, 6]])
    (range(0, 2), range(0, 3))
    >>> axes(OffsetArray([1, 2], offsets=1))
    (range(1, 3),)
    >>> axes(5)
    ()
    """
    x_axes = getattr(x, 'axes', None)
    if x_axes is not None:
        return tuple(x_axes)
    return tuple(range(n) for n in np.shape(x))


def asarray(x):
    """Return the zero-based storage of ``x`` as `numpy.ndarray`.

    For `OffsetArray` this is its ``parent``, without copy. Other inputs
    are converted with `numpy.asarray`.
    """
    if isinstance(x, OffsetArray):
        return x.parent
    return np.asarray(x)


def memory_order(x):
    """Return the contiguous memory order of ``x``, or ``None``.

    Arrays that are both C- and Fortran-contiguous (e.g. one-dimensional
    ones) are reported as ``'C'``.

    Examples
    --------
    >>> arr = np.zeros((2, 3))
    >>> memory_order(arr)
    'C'
    >>> memory_order(arr.T)
    'F'
    >>> memory_order(arr[:, ::2]) is None
    True
    """
    arr = asarray(x)
    if arr.flags.c_contiguous:
        return 'C'
    elif arr.flags.f_contiguous:
        return 'F'
    else:
        return None


def index_style(x):
    """Return the preferred traversal style of ``x``.

    Contiguous arrays can be traversed with a single linear cursor
    (``'linear'``), all others need multi-index addressing
    (``'cartesian'``). This is only a hint for choosing the fastest
    traversal, results do not depend on it.

    Examples
    --------
    >>> index_style(np.zeros((2, 3)))
    'linear'
    >>> index_style(np.zeros((2, 3))[:, 1:])
    'cartesian'
    """
    if isinstance(x, (np.ndarray, OffsetArray)):
        return 'linear' if memory_order(x) is not None else 'cartesian'
    else:
        return 'cartesian'


def linear_view(x):
    """Return a one-dimensional view of the storage of ``x``.

    The entries of the view are ordered as in memory, and writing to
    the view writes to ``x``.

    Parameters
    ----------
    x : `numpy.ndarray` or `OffsetArray`
        Array with ``index_style(x) == 'linear'``.

    Returns
    -------
    view : `numpy.ndarray`

    Examples
    --------
    >>> arr = np.zeros((2, 2), dtype=int, order='F')
    >>> linear_view(arr)[1] = 1
    >>> arr
    array([[0, 0],
           [1, 0]])
    """
    if index_style(x) != 'linear':
        raise ValueError('array with index style {!r} has no linear view'
                         ''.format(index_style(x)))
    arr = asarray(x)
    return arr.reshape(-1, order=memory_order(x))


def eachindex(x):
    """Return an iterator over the multi-indices of ``x``.

    Indices are given in the coordinates of ``axes(x)``, with the last
    index varying fastest.

    Examples
    --------
    >>> list(eachindex(OffsetArray([[1, 2], [3, 4]], offsets=(1, 0))))
    [(1, 0), (1, 1), (2, 0), (2, 1)]
    """
    return product(*axes(x))


def elements(x):
    """Return an iterator over the entries of ``x`` in index order.

    Examples
    --------
    >>> list(elements(OffsetArray([[1, 2], [3, 4]], offsets=5)))
    [1, 2, 3, 4]
    """
    return iter(asarray(x).ravel(order='C').tolist())


def with_axes(arr, out_axes):
    """Return ``arr`` as array with the given axes.

    Zero-based axes give ``arr`` itself, all others an `OffsetArray`
    sharing the memory of ``arr``.

    Examples
    --------
    >>> with_axes(np.zeros(2), (range(1, 3),)).offsets
    (1,)
    """
    offsets = tuple(ax.start for ax in out_axes)
    if any(offsets):
        return OffsetArray(arr, offsets)
    else:
        return arr


def writable_storage(dest):
    """Return the storage of ``dest``, which must be writable in place."""
    if not isinstance(dest, (np.ndarray, OffsetArray)):
        raise TypeError('`dest` must be a `numpy.ndarray` or `OffsetArray`, '
                        'got {!r}'.format(dest))
    return asarray(dest)


if __name__ == '__main__':
    from tensorcore.util.testutils import run_doctests
    run_doctests()
