#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Base62UX: Human-Friendly Binary Encoding
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/conftest.py

import os
import sys

import pytest

# Add the 'src' directory to the Python path so modules such as 'base62ux'
# can be imported directly by tests.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def random_bytes():
    """Returns a factory for random byte buffers."""
    def _make(length=32):
        return os.urandom(length)
    return _make

# === End of tests/conftest.py ===
