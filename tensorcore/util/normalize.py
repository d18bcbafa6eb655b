# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities for normalization of user input."""

from __future__ import absolute_import

import numpy as np

__all__ = ('normalized_scalar_param_list',)


def normalized_scalar_param_list(param, length, param_conv=None):
    """Return a list of given length from a scalar parameter.

    The typical use case is when a single value or a sequence of
    values is accepted as input, like the per-axis offsets of an
    `OffsetArray`. A single value is repeated ``length`` times, a
    sequence must have exactly ``length`` entries.

    A zero ``length`` is allowed and gives an empty list, since
    zero-dimensional arrays have no axes.

    Parameters
    ----------
    param :
        Input parameter to turn into a list.
    length : nonnegative int
        Desired length of the output list.
    param_conv : callable, optional
        Conversion applied to each list element. ``None`` means no
        conversion.

    Returns
    -------
    plist : list
        Input parameter turned into a list of length ``length``.

    Examples
    --------
    >>> normalized_scalar_param_list((1, 2, 3), 3)
    [1, 2, 3]
    >>> normalized_scalar_param_list(1, 3)
    [1, 1, 1]
    >>> normalized_scalar_param_list(1.0, 2, param_conv=int)
    [1, 1]
    >>> normalized_scalar_param_list(5, 0)
    []
    >>> normalized_scalar_param_list((1, 2), 3)
    Traceback (most recent call last):
        ...
    ValueError: sequence `param` has length 2, expected 3
    """
    length, length_in = int(length), length
    if length < 0:
        raise ValueError('`length` must be nonnegative, got {}'
                         ''.format(length_in))

    if np.isscalar(param):
        nonconv_list = [param] * length
    else:
        try:
            param_len = len(param)
        except TypeError:
            # Not a sequence -> single parameter
            nonconv_list = [param] * length
        else:
            if param_len != length:
                raise ValueError('sequence `param` has length {}, '
                                 'expected {}'.format(param_len, length))
            nonconv_list = list(param)

    if param_conv is None:
        return nonconv_list
    else:
        return [param_conv(p) for p in nonconv_list]


if __name__ == '__main__':
    from tensorcore.util.testutils import run_doctests
    run_doctests()
