# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Field record containers.

This module exposes the field record type, the list flavors built on it
and the shared empty list.
"""

from .errors import ImmutableListError
from .field_info_list import (
    EMPTY_LIST,
    FieldInfoFilter,
    FieldInfoList,
    FieldInfoView,
    FrozenFieldInfoList,
)
from .records import FieldInfo, FieldRecord
from .settings import FieldInfoListSettings

__all__ = [
    "EMPTY_LIST",
    "FieldInfo",
    "FieldInfoFilter",
    "FieldInfoList",
    "FieldInfoListSettings",
    "FieldInfoView",
    "FieldRecord",
    "FrozenFieldInfoList",
    "ImmutableListError",
]
