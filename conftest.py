# Copyright 2024-2025 The tensorcore contributors
#
# This file is part of tensorcore.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Root test configuration, loads the shared tensorcore fixtures."""

pytest_plugins = ['tensorcore.util.pytest_config']
