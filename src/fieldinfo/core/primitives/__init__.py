# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
fieldinfo Core Primitives

Base model configuration, constrained types and enums used by the
field record containers.
"""

from .enums import FieldModifierEnum
from .model import Model
from .types import NonNegativeInt

__all__ = [
    "FieldModifierEnum",
    "Model",
    "NonNegativeInt",
]
