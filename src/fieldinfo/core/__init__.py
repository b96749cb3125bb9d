# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
fieldinfo core: primitives shared across the package and the field
record containers built on top of them.
"""

from . import fields, primitives

__all__ = ["fields", "primitives"]
