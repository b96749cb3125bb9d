# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Field record structures.

A FieldInfo describes one field of a class as discovered by a classpath
scanner: its name, rendered type signature, modifiers and annotations.
Containers in this package only rely on the FieldRecord protocol (a
``name`` attribute and ``str()``), so scanners may hand over their own
record types as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Optional, Protocol, Tuple, runtime_checkable

from ..primitives import FieldModifierEnum


@runtime_checkable
class FieldRecord(Protocol):
    """Minimal shape a record needs to be held by a field list."""

    name: str


@dataclass(frozen=True, slots=True)
class FieldInfo:
    """
    Immutable metadata for a single class field.

    Attributes:
        name: Field name as declared
        type_signature: Rendered type of the field (e.g. ``java.util.List<java.lang.String>``)
        declaring_class_name: Fully qualified name of the class declaring the field
        modifiers: Modifiers attached to the field
        annotations: Class names of the annotations on the field, in declaration order
        constant_initializer_value: Compile-time constant value, if the field has one
    """

    name: str
    type_signature: str
    declaring_class_name: Optional[str] = None
    modifiers: FrozenSet[FieldModifierEnum] = frozenset()
    annotations: Tuple[str, ...] = ()
    constant_initializer_value: Optional[Any] = None

    @property
    def is_public(self) -> bool:
        return FieldModifierEnum.PUBLIC in self.modifiers

    @property
    def is_protected(self) -> bool:
        return FieldModifierEnum.PROTECTED in self.modifiers

    @property
    def is_private(self) -> bool:
        return FieldModifierEnum.PRIVATE in self.modifiers

    @property
    def is_static(self) -> bool:
        return FieldModifierEnum.STATIC in self.modifiers

    @property
    def is_final(self) -> bool:
        return FieldModifierEnum.FINAL in self.modifiers

    @property
    def is_transient(self) -> bool:
        return FieldModifierEnum.TRANSIENT in self.modifiers

    @property
    def is_volatile(self) -> bool:
        return FieldModifierEnum.VOLATILE in self.modifiers

    def has_annotation(self, annotation_name: str) -> bool:
        """Whether an annotation with the given class name is present."""
        return annotation_name in self.annotations

    def modifiers_str(self) -> str:
        """Source keywords of the modifiers, in canonical order."""
        return " ".join(
            modifier.value
            for modifier in FieldModifierEnum
            if modifier in self.modifiers and modifier.is_keyword
        )

    def __str__(self) -> str:
        parts = [f"@{annotation}" for annotation in self.annotations]
        modifiers = self.modifiers_str()
        if modifiers:
            parts.append(modifiers)
        parts.append(self.type_signature)
        parts.append(self.name)
        display = " ".join(parts)
        if self.constant_initializer_value is not None:
            display += f" = {_render_constant(self.constant_initializer_value)}"
        return display


def _render_constant(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)
