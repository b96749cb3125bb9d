#!/usr/bin/env python3
"""
Build a field list the way a classpath scanner would and query it.
"""

import logging

from fieldinfo import EMPTY_LIST, FieldInfo, FieldInfoList, FieldModifierEnum

logging.basicConfig(level=logging.DEBUG)

# (name, type, access_flags, annotations, constant value) as read from a class file
raw_fields = [
    ("serialVersionUID", "long", 0x001A, (), 1),
    ("DEFAULT_NAME", "java.lang.String", 0x0019, (), "widget"),
    ("name", "java.lang.String", 0x0002, ("javax.annotation.Nonnull",), None),
    ("cache", "java.util.Map<java.lang.String, java.lang.Object>", 0x0082, (), None),
    ("legacyId", "int", 0x0001, ("Deprecated",), None),
]

fields = FieldInfoList.with_size_hint(len(raw_fields))
for name, type_signature, access_flags, annotations, value in raw_fields:
    fields.append(
        FieldInfo(
            name=name,
            type_signature=type_signature,
            declaring_class_name="com.example.Widget",
            modifiers=FieldModifierEnum.from_access_flags(access_flags),
            annotations=annotations,
            constant_initializer_value=value,
        )
    )

print("Fields:")
for display in fields.get_as_strings():
    print(f"  {display}")

constants = fields.filter(lambda f: f.is_static and f.is_final)
print(f"\nConstants: {constants.get_names()}")
print(f"Has 'cache': {fields.contains_name('cache')}")
print(f"Lookup 'missing': {fields.get_by_name('missing')}")

deprecated = fields.filter(lambda f: f.has_annotation("Deprecated")).freeze()
print(f"Deprecated: {deprecated.get_names()}")

print(f"Volatile fields frozen: {fields.filter(lambda f: f.is_volatile).freeze() is EMPTY_LIST}")
print()
print(fields.to_frame()[["name", "modifiers", "type_signature"]].to_string(index=False))
