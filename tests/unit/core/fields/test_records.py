# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import dataclasses

import pytest

from fieldinfo.core.fields import FieldInfo, FieldRecord
from fieldinfo.core.primitives import FieldModifierEnum


def test_field_info_is_frozen(field_factory):
    """Test that field records cannot be changed after creation."""
    field_info = field_factory("count")
    with pytest.raises(dataclasses.FrozenInstanceError):
        field_info.name = "other"


def test_field_info_defaults():
    """Test that only name and type are required."""
    field_info = FieldInfo(name="count", type_signature="int")
    assert field_info.declaring_class_name is None
    assert field_info.modifiers == frozenset()
    assert field_info.annotations == ()
    assert field_info.constant_initializer_value is None


def test_field_info_satisfies_record_protocol(field_factory):
    """Test that FieldInfo is accepted as a FieldRecord."""
    assert isinstance(field_factory("count"), FieldRecord)
    assert not isinstance(object(), FieldRecord)


def test_modifier_properties(field_factory):
    """Test the modifier convenience properties."""
    field_info = field_factory(
        "MAX",
        modifiers=[FieldModifierEnum.PUBLIC, FieldModifierEnum.STATIC, FieldModifierEnum.FINAL],
    )
    assert field_info.is_public
    assert field_info.is_static
    assert field_info.is_final
    assert not field_info.is_private
    assert not field_info.is_protected
    assert not field_info.is_transient
    assert not field_info.is_volatile


def test_has_annotation(field_factory):
    """Test annotation lookup by class name."""
    field_info = field_factory("id", annotations=["Id", "Column"])
    assert field_info.has_annotation("Column")
    assert not field_info.has_annotation("column")


class TestDisplayString:
    """Tests for str(FieldInfo)."""

    def test_plain_field(self, field_factory):
        """Test a field without modifiers or annotations."""
        assert str(field_factory("count")) == "int count"

    def test_full_signature(self, field_factory):
        """Test annotations, modifiers in canonical order and constant value."""
        field_info = field_factory(
            "MAX",
            modifiers=[FieldModifierEnum.FINAL, FieldModifierEnum.STATIC, FieldModifierEnum.PUBLIC],
            annotations=["Deprecated"],
            constant_initializer_value=3,
        )
        assert str(field_info) == "@Deprecated public static final int MAX = 3"

    def test_multiple_annotations_keep_order(self, field_factory):
        """Test that annotations are rendered in declaration order."""
        field_info = field_factory(
            "names",
            type_signature="java.util.List<java.lang.String>",
            annotations=["Nonnull", "Internal"],
        )
        assert str(field_info) == "@Nonnull @Internal java.util.List<java.lang.String> names"

    def test_flag_only_modifiers_are_not_rendered(self, field_factory):
        """Test that synthetic and enum flags do not appear in the string."""
        field_info = field_factory(
            "this$0",
            type_signature="com.example.Outer",
            modifiers=[FieldModifierEnum.FINAL, FieldModifierEnum.SYNTHETIC],
        )
        assert str(field_info) == "final com.example.Outer this$0"

    def test_string_constant_is_quoted_and_escaped(self, field_factory):
        """Test string constants are double-quoted with quotes and backslashes escaped."""
        field_info = field_factory(
            "GREETING",
            type_signature="java.lang.String",
            modifiers=[FieldModifierEnum.STATIC, FieldModifierEnum.FINAL],
            constant_initializer_value='say "hi" \\ bye',
        )
        assert str(field_info) == (
            'static final java.lang.String GREETING = "say \\"hi\\" \\\\ bye"'
        )

    def test_boolean_constant_is_lowercase(self, field_factory):
        """Test boolean constants render as source literals."""
        field_info = field_factory(
            "DEBUG", type_signature="boolean", constant_initializer_value=False
        )
        assert str(field_info) == "boolean DEBUG = false"

    def test_zero_constant_is_rendered(self, field_factory):
        """Test that falsy, non-None constants are still rendered."""
        field_info = field_factory("ZERO", constant_initializer_value=0)
        assert str(field_info) == "int ZERO = 0"
