# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""tensorcore specific exceptions."""

from __future__ import absolute_import

__all__ = ('ShapeMismatch',)


class ShapeMismatch(ValueError):

    """Exception for incompatible axes of array operands.

    Raised by the product functions before anything is written, so a
    destination array is left untouched when this error occurs.

    Attributes
    ----------
    expected : tuple of range
        Axes that were required for the operation to succeed.
    actual : tuple
        Axes that were found instead.
    operands : dict
        Mapping from operand name (``'dest'``, ``'A'``, ``'B'``) to the
        axes of that operand, for diagnostics.
    """

    def __init__(self, message, expected=None, actual=None, operands=None):
        super(ShapeMismatch, self).__init__(message)
        self.expected = expected
        self.actual = actual
        self.operands = dict(operands) if operands is not None else {}
