# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Testing utilities."""

from __future__ import absolute_import, division, print_function

import os
from itertools import zip_longest

import numpy as np

from tensorcore.util.utility import is_string

__all__ = (
    'dtype_ndigits',
    'all_equal',
    'all_almost_equal',
    'simple_fixture',
    'noise_array',
    'test',
    'run_doctests',
    'test_file',
)


def _ndigits(a, b, default=None):
    """Return number of expected correct digits comparing ``a`` and ``b``.

    The returned number is the minimum `dtype_ndigits` of the two objects.
    """
    dtype1 = getattr(a, 'dtype', object)
    dtype2 = getattr(b, 'dtype', object)
    return min(dtype_ndigits(dtype1, default), dtype_ndigits(dtype2, default))


def dtype_ndigits(dtype, default=None):
    """Return the number of correct digits expected for a given dtype.

    Returned numbers:

    - ``np.float16``: ``1``
    - ``np.float32`` or ``np.complex64``: ``3``
    - Others: ``default`` if given, otherwise ``5``
    """
    small_dtypes = [np.float32, np.complex64]
    tiny_dtypes = [np.float16]

    if dtype in tiny_dtypes:
        return 1
    elif dtype in small_dtypes:
        return 3
    else:
        return default if default is not None else 5


def all_equal(iter1, iter2):
    """Return ``True`` if all elements in ``a`` and ``b`` are equal."""
    # Arrays first, the direct comparison below broadcasts size-1 shapes
    if hasattr(iter1, '__array__') and hasattr(iter2, '__array__'):
        arr1, arr2 = np.asarray(iter1), np.asarray(iter2)
        return arr1.shape == arr2.shape and bool(np.all(arr1 == arr2))

    # Direct comparison for scalars, tuples or lists
    try:
        if iter1 == iter2:
            return True
    except ValueError:  # Raised by NumPy when comparing arrays
        pass

    # Special case for None
    if iter1 is None and iter2 is None:
        return True

    # If one nested iterator is exhausted, go to direct comparison
    try:
        it1 = iter(iter1)
        it2 = iter(iter2)
    except TypeError:
        try:
            return bool(iter1 == iter2)
        except ValueError:  # Raised by NumPy when comparing arrays
            return False

    diff_length_sentinel = object()

    # Compare element by element and return False if the sequences have
    # different lengths
    for [ip1, ip2] in zip_longest(it1, it2,
                                  fillvalue=diff_length_sentinel):
        # Verify that none of the lists has ended (then they are not the
        # same size)
        if ip1 is diff_length_sentinel or ip2 is diff_length_sentinel:
            return False

        if not all_equal(ip1, ip2):
            return False

    return True


def all_almost_equal(iter1, iter2, ndigits=None):
    """Return ``True`` if all elements in ``a`` and ``b`` are almost equal."""
    if hasattr(iter1, '__array__') and hasattr(iter2, '__array__'):
        arr1, arr2 = np.asarray(iter1), np.asarray(iter2)
        if arr1.shape != arr2.shape:
            return False
        # Only get default ndigits if comparing arrays, need to keep `None`
        # otherwise for recursive calls.
        if ndigits is None:
            ndigits = _ndigits(arr1, arr2, None)
        return bool(np.allclose(arr1, arr2,
                                rtol=10 ** -ndigits, atol=10 ** -ndigits,
                                equal_nan=True))

    try:
        if iter1 is iter2 or iter1 == iter2:
            return True
    except ValueError:
        pass

    if iter1 is None and iter2 is None:
        return True

    try:
        it1 = iter(iter1)
        it2 = iter(iter2)
    except TypeError:
        if ndigits is None:
            ndigits = _ndigits(iter1, iter2, None)
        return bool(np.isclose(iter1, iter2,
                               atol=10 ** -ndigits, rtol=10 ** -ndigits,
                               equal_nan=True))

    diff_length_sentinel = object()
    for [ip1, ip2] in zip_longest(it1, it2,
                                  fillvalue=diff_length_sentinel):
        if ip1 is diff_length_sentinel or ip2 is diff_length_sentinel:
            return False

        if not all_almost_equal(ip1, ip2, ndigits):
            return False

    return True


def simple_fixture(name, params, fmt=None):
    """Helper to create a pytest fixture using only name and params.

    Parameters
    ----------
    name : str
        Name of the parameters used for the ``ids`` argument
        to `pytest.fixture`.
    params : sequence
        Values to be taken as parameters in the fixture. They are
        used as ``params`` argument to `pytest.fixture`.
    fmt : str, optional
        Use this format string for the generation of the ``ids``.
        For each value, the id string is generated as ::

            fmt.format(name=name, value=value)

        hence the format string must use ``{name}`` and ``{value}``.
        Default format strings are:

            - ``" {name}='{value}' "`` for string parameters,
            - ``" {name}={value} "`` for other types.
    """
    import pytest

    if fmt is None:
        fmt_str = " {name}='{value}' "
        fmt_default = " {name}={value} "

        ids = []
        for p in params:
            if is_string(p):
                ids.append(fmt_str.format(name=name, value=p))
            else:
                ids.append(fmt_default.format(name=name, value=p))
    else:
        # Use provided `fmt` for everything
        ids = [fmt.format(name=name, value=p) for p in params]

    wrapper = pytest.fixture(scope='module', ids=ids, params=params)
    return wrapper(lambda request: request.param)


def noise_array(shape, dtype='float64', order='C'):
    """Generate a white noise array of given shape and data type.

    The array contains white noise with standard deviation 1 in the case of
    floating point dtypes and uniformly spaced values between -10 and 10 in
    the case of integer dtypes.

    Notes
    -----
    This method is intended for internal testing purposes.

    Parameters
    ----------
    shape : int or sequence of int
        Shape of the generated array.
    dtype : optional
        Data type of the generated array.
    order : {'C', 'F'}, optional
        Memory layout of the generated array.

    Returns
    -------
    noise_array : `numpy.ndarray`

    Examples
    --------
    >>> arr = noise_array((2, 3), dtype='complex128', order='F')
    >>> arr.shape
    (2, 3)
    >>> arr.flags.f_contiguous
    True
    """
    dtype = np.dtype(dtype)
    shape = (shape,) if np.isscalar(shape) else tuple(shape)
    if dtype == bool:
        arr = np.random.randint(0, 2, size=shape).astype(bool)
    elif np.issubdtype(dtype, np.unsignedinteger):
        arr = np.random.randint(0, 10, shape)
    elif np.issubdtype(dtype, np.signedinteger):
        arr = np.random.randint(-10, 10, shape)
    elif np.issubdtype(dtype, np.floating):
        arr = np.random.randn(*shape)
    elif np.issubdtype(dtype, np.complexfloating):
        arr = (
            np.random.randn(*shape)
            + 1j * np.random.randn(*shape)
        ) / np.sqrt(2.0)
    else:
        raise ValueError('bad dtype {}'.format(dtype))

    return np.asarray(arr, order=order).astype(dtype, order=order)


def test(arguments=None):
    """Run tensorcore tests given by arguments."""
    try:
        import pytest
    except ImportError:
        raise ImportError(
            'tensorcore tests cannot be run without `pytest` installed.\n'
            'Run `$ pip install [--user] tensorcore[testing]` in order to '
            'install `pytest`.'
        )

    this_dir = os.path.dirname(__file__)
    pkg_root = os.path.abspath(os.path.join(this_dir, os.pardir))

    args = [pkg_root]
    if arguments is not None:
        args.extend(arguments)

    return pytest.main(args)


def run_doctests(**kwargs):
    """Run all doctests in the current module.

    This function calls ``doctest.testmod()``, by default with the options
    ``optionflags=doctest.NORMALIZE_WHITESPACE`` and
    ``extraglobs={'tensorcore': tensorcore, 'np': np}``. This can be changed
    with keyword arguments.

    Parameters
    ----------
    kwargs :
        Extra keyword arguments passed on to the ``doctest.testmod``
        function.
    """
    from doctest import testmod, NORMALIZE_WHITESPACE
    import tensorcore

    optionflags = kwargs.pop('optionflags', NORMALIZE_WHITESPACE)
    extraglobs = kwargs.pop('extraglobs', {'tensorcore': tensorcore, 'np': np})
    return testmod(optionflags=optionflags, extraglobs=extraglobs, **kwargs)


def test_file(file, args=None):
    """Run tests in file with proper default arguments."""
    try:
        import pytest
    except ImportError:
        raise ImportError('tensorcore tests cannot be run without `pytest` '
                          'installed.\nRun `$ pip install [--user] '
                          'tensorcore[testing]` in order to install `pytest`.')

    if args is None:
        args = []

    args.extend([str(file.replace('\\', '/')), '-v', '--capture=sys'])

    return pytest.main(args)


if __name__ == '__main__':
    run_doctests()
