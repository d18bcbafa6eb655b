# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Unit tests for the tensor (outer) product."""

from __future__ import division

import logging
from fractions import Fraction
from functools import reduce

import numpy as np
import pytest

import tensorcore
from tensorcore import (
    INDEX_STYLES, TENSOR_TRAVERSALS, DualVector, OffsetArray, ShapeMismatch,
    adjoint, axes, index_style, tensor, tensor_into, otimes, transpose)
from tensorcore.util.testutils import (
    all_almost_equal, all_equal, noise_array, simple_fixture)


shape_pair = simple_fixture(
    'shapes',
    [((), ()), ((), (3,)), ((2,), ()), ((2,), (3,)), ((2, 3), (4,)),
     ((3,), (2, 4)), ((2, 2), (3, 1, 2))])

dual = simple_fixture('dual', [adjoint, transpose],
                      fmt=' {name} = {value.__name__} ')

plain_or_dual = [False, True]


def _expected_tensor(a, b):
    """Reference tensor product with explicit loops."""
    result = np.empty(a.shape + b.shape, dtype=np.result_type(a, b))
    for i in np.ndindex(*a.shape):
        for j in np.ndindex(*b.shape):
            result[i + j] = a[i] * b[j]
    return result


# --- tensor --- #


def test_tensor_concrete():
    result = tensor([2, 3], [5, 7, 11])
    assert result.shape == (2, 3)
    assert all_equal(result, [[10, 14, 22], [15, 21, 33]])


def test_tensor_shapes(shape_pair, tc_dtype):
    shape_a, shape_b = shape_pair
    a = noise_array(shape_a, dtype=tc_dtype)
    b = noise_array(shape_b, dtype=tc_dtype)
    result = tensor(a, b)

    assert result.shape == shape_a + shape_b
    assert axes(result) == axes(a) + axes(b)
    assert all_almost_equal(result, _expected_tensor(a, b))


def test_tensor_does_not_mutate_inputs(shape_pair):
    shape_a, shape_b = shape_pair
    a = noise_array(shape_a)
    b = noise_array(shape_b)
    a_copy, b_copy = a.copy(), b.copy()
    tensor(a, b)

    assert all_equal(a, a_copy)
    assert all_equal(b, b_copy)


def test_tensor_offset_axes():
    a = OffsetArray([2, 3], offsets=1)
    b = np.array([5, 7, 11])
    result = tensor(a, b)

    assert isinstance(result, OffsetArray)
    assert axes(result) == (range(1, 3), range(0, 3))
    assert result[1, 0] == 10 and result[2, 2] == 33

    result = tensor(b, a)
    assert axes(result) == (range(0, 3), range(1, 3))
    assert result[2, 1] == 22


def test_tensor_element_type_multiply():
    a = np.array([Fraction(1, 2), Fraction(1, 3)], dtype=object)
    b = np.array([Fraction(3, 5)], dtype=object)
    result = tensor(a, b)

    assert result.shape == (2, 1)
    assert result[0, 0] == Fraction(3, 10)
    assert result[1, 0] == Fraction(1, 5)


def test_otimes_alias():
    assert otimes is tensor
    assert tensorcore.otimes is tensor

    vecs = [np.array([1, 2]), np.array([3]), np.array([1, 10])]
    result = reduce(otimes, vecs)
    assert result.shape == (2, 1, 2)
    assert all_equal(result, [[[3, 30]], [[6, 60]]])


def test_tensor_dual_inputs_are_stripped():
    u = np.array([1 + 2j, 3])
    v = np.array([4, 5j, 6])

    expected = tensor(u, np.conj(v))
    assert all_equal(tensor(u, adjoint(v)), expected)
    assert all_equal(tensor(u, transpose(v)), tensor(u, v))
    assert all_equal(tensor(adjoint(u), transpose(v)),
                     tensor(np.conj(u), v))

    # The dual views themselves are left alone
    u_dual = adjoint(u)
    tensor(u_dual, v)
    assert isinstance(u_dual, DualVector)
    assert u_dual.parent is u


@pytest.mark.parametrize('u_is_dual', plain_or_dual)
@pytest.mark.parametrize('v_is_dual', plain_or_dual)
def test_tensor_duality_law(dual, u_is_dual, v_is_dual):
    u = noise_array(3, dtype='complex128')
    v = noise_array(4, dtype='complex128')
    if u_is_dual:
        u = dual(u)
    if v_is_dual:
        v = dual(v)

    lhs = dual(tensor(u, v))
    rhs = tensor(dual(v), dual(u))
    assert lhs.shape == rhs.shape == (4, 3)
    assert all_almost_equal(lhs, rhs)


def test_tensor_duality_law_concrete():
    a = [2, 3]
    b = [5, 7, 11]
    assert all_equal(adjoint(tensor(adjoint(b), adjoint(a))),
                     [[10, 14, 22], [15, 21, 33]])
    assert all_equal(transpose(tensor(transpose(b), transpose(a))),
                     [[10, 14, 22], [15, 21, 33]])


def test_tensor_kronecker_relation():
    v = noise_array(3)
    w = noise_array(4)

    assert all_almost_equal(tensor(w, v).ravel(order='F'), np.kron(v, w))
    assert all_almost_equal(
        tensor(w, v),
        np.kron(v, w).reshape((len(w), len(v)), order='F'))


# --- tensor_into --- #


def test_tensor_into_concrete(tc_traversal):
    dest = np.zeros((2, 3), dtype=int)
    out = tensor_into(dest, [2, 3], [5, 7, 11], traversal=tc_traversal)

    assert out is dest
    assert all_equal(dest, [[10, 14, 22], [15, 21, 33]])


def test_tensor_into_matches_tensor(shape_pair, tc_dtype, tc_order,
                                    tc_traversal):
    shape_a, shape_b = shape_pair
    a = noise_array(shape_a, dtype=tc_dtype, order=tc_order)
    b = noise_array(shape_b, dtype=tc_dtype, order=tc_order)
    dest = np.empty(shape_a + shape_b, dtype=tc_dtype, order=tc_order)

    out = tensor_into(dest, a, b, traversal=tc_traversal)
    assert out is dest
    assert all_almost_equal(dest, tensor(a, b))


def test_tensor_into_traversals_agree(tc_order):
    a = noise_array((3, 2), dtype='complex128')
    b = noise_array((2, 5), dtype='complex128', order='F')
    dest_lin = np.empty((3, 2, 2, 5), dtype='complex128', order=tc_order)
    dest_cart = np.empty((3, 2, 2, 5), dtype='complex128', order=tc_order)

    tensor_into(dest_lin, a, b, traversal='linear')
    tensor_into(dest_cart, a, b, traversal='cartesian')
    assert all_almost_equal(dest_lin, dest_cart)


def test_tensor_into_noncontiguous_dest():
    a = noise_array(3)
    b = noise_array(4)
    storage = np.zeros((3, 8))
    dest = storage[:, ::2]
    assert index_style(dest) == 'cartesian'

    out = tensor_into(dest, a, b)
    assert out is dest
    assert all_almost_equal(dest, np.multiply.outer(a, b))
    assert all_equal(storage[:, 1::2], np.zeros((3, 4)))

    # The linear traversal needs contiguous memory
    with pytest.raises(ValueError):
        tensor_into(dest, a, b, traversal='linear')


def test_tensor_into_offset_axes(tc_traversal):
    a = OffsetArray([2, 3], offsets=-1)
    b = OffsetArray([5, 7, 11], offsets=1)
    dest = OffsetArray(np.zeros((2, 3), dtype=int), offsets=(-1, 1))

    out = tensor_into(dest, a, b, traversal=tc_traversal)
    assert out is dest
    assert dest[-1, 1] == 10 and dest[0, 3] == 33
    assert all_equal(dest.parent, [[10, 14, 22], [15, 21, 33]])

    # Zero-based `dest` has the wrong axes
    with pytest.raises(ShapeMismatch):
        tensor_into(np.zeros((2, 3), dtype=int), a, b)


def test_tensor_into_dual_inputs(dual, tc_traversal):
    u = noise_array(3, dtype='complex128')
    v = noise_array(4, dtype='complex128')
    u_dual, v_dual = dual(u), dual(v)

    dest = np.empty((3, 4), dtype='complex128')
    tensor_into(dest, u_dual, v_dual, traversal=tc_traversal)
    assert all_almost_equal(dest, tensor(u_dual, v_dual))

    dest = np.empty((3, 4), dtype='complex128')
    tensor_into(dest, u, v_dual, traversal=tc_traversal)
    assert all_almost_equal(dest, tensor(u, v_dual))

    # The wrappers are not modified
    assert u_dual.parent is u and v_dual.parent is v
    assert u_dual.kind == dual.__name__


def test_tensor_into_shape_mismatch():
    a = np.array([2, 3])
    b = np.array([5, 7, 11])
    dest = np.full((3, 2), -1)

    # Concatenation is not commutative
    with pytest.raises(ShapeMismatch) as err:
        tensor_into(dest, a, b)
    assert str(err.value) == (
        'axes(dest) must concatenate axes(A) and axes(B), got '
        'dest=(range(0, 3), range(0, 2)), A=(range(0, 2),), '
        'B=(range(0, 3),)')
    assert err.value.expected == (range(2), range(3))
    assert err.value.actual == (range(3), range(2))
    assert all_equal(dest, np.full((3, 2), -1))

    # Same size, wrong rank
    with pytest.raises(ShapeMismatch):
        tensor_into(np.zeros(6), a, b)

    # Dual inputs have one axis after stripping
    with pytest.raises(ShapeMismatch):
        tensor_into(np.zeros((1, 2, 3)), adjoint(a), b)


def test_tensor_traversals():
    # Each traversal is named after the index style of `dest` it needs
    assert TENSOR_TRAVERSALS == INDEX_STYLES
    assert set(TENSOR_TRAVERSALS) == {'linear', 'cartesian'}
    for arr in (np.zeros((2, 3)), np.zeros((2, 6))[:, ::2]):
        assert index_style(arr) in TENSOR_TRAVERSALS


def test_tensor_into_bad_traversal():
    dest = np.zeros((2, 3))
    with pytest.raises(ValueError):
        tensor_into(dest, [2, 3], [5, 7, 11], traversal='diagonal')
    assert all_equal(dest, np.zeros((2, 3)))


def test_tensor_into_bad_dest():
    with pytest.raises(TypeError):
        tensor_into([[0, 0]], [1], [2, 3])


def test_tensor_into_logs_traversal(caplog):
    dest = np.zeros((2, 3))
    with caplog.at_level(logging.DEBUG, logger='tensorcore'):
        tensor_into(dest, [2, 3], [5, 7, 11])
    assert any('linear traversal' in rec.getMessage()
               for rec in caplog.records)


if __name__ == '__main__':
    tensorcore.util.test_file(__file__)
