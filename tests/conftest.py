# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for fieldinfo testing.

This module provides convenient factories for field records and a few
ready-made lists covering duplicates, modifiers and annotations.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pytest

from fieldinfo.core.fields import FieldInfo, FieldInfoList
from fieldinfo.core.primitives import FieldModifierEnum


def make_field(
    name: str,
    type_signature: str = "int",
    modifiers: Iterable[FieldModifierEnum] = (),
    annotations: Iterable[str] = (),
    declaring_class_name: Optional[str] = "com.example.Widget",
    constant_initializer_value=None,
) -> FieldInfo:
    """
    Create a field record for testing.

    Args:
        name: Field name
        type_signature: Rendered field type
        modifiers: Modifiers to attach
        annotations: Annotation class names, in order
        declaring_class_name: Owning class
        constant_initializer_value: Optional constant value

    Example:
        >>> str(make_field("MAX", modifiers=[FieldModifierEnum.STATIC]))
        'static int MAX'
    """
    return FieldInfo(
        name=name,
        type_signature=type_signature,
        declaring_class_name=declaring_class_name,
        modifiers=frozenset(modifiers),
        annotations=tuple(annotations),
        constant_initializer_value=constant_initializer_value,
    )


@pytest.fixture
def duplicate_fields() -> FieldInfoList:
    """Three fields where the first and last share the name 'a'."""
    return FieldInfoList(
        [
            make_field("a", type_signature="int"),
            make_field("b", type_signature="long"),
            make_field("a", type_signature="java.lang.String"),
        ]
    )


@pytest.fixture
def widget_fields() -> FieldInfoList:
    """Fields of a typical class with a mix of modifiers and annotations."""
    return FieldInfoList(
        [
            make_field(
                "MAX_SIZE",
                modifiers=[
                    FieldModifierEnum.PUBLIC,
                    FieldModifierEnum.STATIC,
                    FieldModifierEnum.FINAL,
                ],
                annotations=["Deprecated"],
                constant_initializer_value=10,
            ),
            make_field(
                "cache",
                type_signature="java.lang.String",
                modifiers=[FieldModifierEnum.PRIVATE, FieldModifierEnum.TRANSIENT],
            ),
            make_field(
                "counter",
                type_signature="long",
                modifiers=[FieldModifierEnum.PROTECTED, FieldModifierEnum.VOLATILE],
            ),
            make_field(
                "names",
                type_signature="java.util.List<java.lang.String>",
                modifiers=[FieldModifierEnum.PUBLIC],
                annotations=["javax.annotation.Nonnull", "Internal"],
            ),
        ]
    )


@pytest.fixture
def field_factory():
    """Factory fixture building field records; see make_field for arguments."""
    return make_field
