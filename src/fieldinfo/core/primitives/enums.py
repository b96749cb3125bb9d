# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional


class FieldModifierEnum(str, Enum):
    """
    Modifiers that can be attached to a class field.

    Members are declared in the order they are rendered in a field's
    display string (``public static final ...``). SYNTHETIC and ENUM are
    access flags without a source keyword and are never rendered.
    """

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    STATIC = "static"
    FINAL = "final"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    SYNTHETIC = "synthetic"
    ENUM = "enum"

    @property
    def is_keyword(self) -> bool:
        """Whether the modifier appears as a keyword in source code."""
        return self not in (FieldModifierEnum.SYNTHETIC, FieldModifierEnum.ENUM)

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["FieldModifierEnum"]:
        """Look up enum member by its keyword."""
        for member in cls:
            if member.value == keyword:
                return member
        return None

    @classmethod
    def from_access_flags(cls, access_flags: int) -> FrozenSet["FieldModifierEnum"]:
        """
        Decode the access flags of a class-file field_info structure.

        Args:
            access_flags: Bit mask as stored in the class file

        Returns:
            The set of modifiers whose flag bit is set

        Examples:
            >>> sorted(m.value for m in FieldModifierEnum.from_access_flags(0x0019))
            ['final', 'public', 'static']
        """
        return frozenset(
            member
            for member, flag in _ACCESS_FLAGS.items()
            if access_flags & flag
        )


_ACCESS_FLAGS = {
    FieldModifierEnum.PUBLIC: 0x0001,
    FieldModifierEnum.PRIVATE: 0x0002,
    FieldModifierEnum.PROTECTED: 0x0004,
    FieldModifierEnum.STATIC: 0x0008,
    FieldModifierEnum.FINAL: 0x0010,
    FieldModifierEnum.VOLATILE: 0x0040,
    FieldModifierEnum.TRANSIENT: 0x0080,
    FieldModifierEnum.SYNTHETIC: 0x1000,
    FieldModifierEnum.ENUM: 0x4000,
}
