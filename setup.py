# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Setup script for tensorcore.

Installation command::

    pip install [--user] [-e] .
"""

from __future__ import print_function, absolute_import

from setuptools import setup, find_packages
import os


root_path = os.path.dirname(__file__)

requires = open(os.path.join(root_path, 'requirements.txt')).readlines()
test_requires = open(
    os.path.join(root_path, 'test_requirements.txt')).readlines()

with open(os.path.join(root_path, 'tensorcore', 'VERSION')) as version_file:
    version = version_file.read().strip()


long_description = """
tensorcore is a small Python library for the element-wise (Hadamard) and
tensor (outer) products of multidimensional arrays.

Features
========

- ``hadamard`` and ``tensor`` products with allocating and in-place
  (``hadamard_into``, ``tensor_into``) variants.
- Arrays with arbitrary start index per axis (``OffsetArray``). Shapes
  are compared including the start of each axis.
- Row-vector views (``adjoint``, ``transpose``) that the tensor product
  handles such that ``adjoint(tensor(u, v)) == tensor(adjoint(v), adjoint(u))``.
- Memory-order aware traversal of the destination in ``tensor_into``.
"""

setup(
    name='tensorcore',

    version=version,

    description='Element-wise and tensor products of arrays',
    long_description=long_description,

    author='tensorcore contributors',

    license='MPL-2.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries',

        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',

        'Programming Language :: Python :: 3',

        'Operating System :: OS Independent'
    ],

    keywords='research mathematics linear-algebra tensor-product arrays',

    packages=find_packages(exclude=['*test*']),
    package_dir={'tensorcore': 'tensorcore'},
    package_data={'tensorcore': ['VERSION']},

    python_requires='>=3.7',
    install_requires=requires,
    tests_require=['pytest'],
    extras_require={
        'testing': test_requires,
    },
)
