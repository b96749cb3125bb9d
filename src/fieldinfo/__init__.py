# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
fieldinfo - Typed containers for class field metadata

Holds the field records produced by a classpath scanner and offers
name-based lookup, string projection and predicate filtering over them.

Key Entry Points:
- fieldinfo.FieldInfo - A single field record (name, type, modifiers, annotations)
- fieldinfo.FieldInfoList - Mutable, ordered list of field records
- fieldinfo.EMPTY_LIST - Shared, permanently empty, read-only list

Example Usage:
    ```python
    from fieldinfo import FieldInfo, FieldInfoList, FieldModifierEnum

    fields = FieldInfoList([
        FieldInfo(name="count", type_signature="int"),
        FieldInfo(
            name="MAX",
            type_signature="int",
            modifiers=frozenset({FieldModifierEnum.STATIC, FieldModifierEnum.FINAL}),
        ),
    ])

    fields.get_names()                         # ['count', 'MAX']
    constants = fields.filter(lambda f: f.is_static and f.is_final)
    ```
"""

import importlib
import logging

# Add a NullHandler to the package logger so applications that do not
# configure logging do not see "No handlers could be found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "EMPTY_LIST",
    "FieldInfo",
    "FieldInfoFilter",
    "FieldInfoList",
    "FieldInfoListSettings",
    "FieldInfoView",
    "FieldModifierEnum",
    "FieldRecord",
    "FrozenFieldInfoList",
    "ImmutableListError",
]


_LAZY_MODULES = {
    "core": "fieldinfo.core",
}

_LAZY_ATTRIBUTES = {
    "EMPTY_LIST": "fieldinfo.core.fields",
    "FieldInfo": "fieldinfo.core.fields",
    "FieldInfoFilter": "fieldinfo.core.fields",
    "FieldInfoList": "fieldinfo.core.fields",
    "FieldInfoListSettings": "fieldinfo.core.fields",
    "FieldInfoView": "fieldinfo.core.fields",
    "FieldModifierEnum": "fieldinfo.core.primitives",
    "FieldRecord": "fieldinfo.core.fields",
    "FrozenFieldInfoList": "fieldinfo.core.fields",
    "ImmutableListError": "fieldinfo.core.fields",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is not None:
        module = importlib.import_module(module_path)
        globals()[name] = module
        return module
    module_path = _LAZY_ATTRIBUTES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'fieldinfo' has no attribute '{name}'")
    value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value
