# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ordered containers of field records.

Three flavors share one query surface:

- FieldInfoView: read-only sequence with name lookup, string projection
  and predicate filtering
- FieldInfoList: the mutable list scanners append discovered fields to
- FrozenFieldInfoList: read-only list whose mutators fail loudly; the
  shared EMPTY_LIST is its canonical, permanently empty instance

Queries never modify the list they run on. Derived lists (filter results,
slices, copies) hold the same record objects as their source.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence
from typing import Callable, Iterable, List, Optional

import pandas as pd
from pydantic import TypeAdapter

from ..primitives import NonNegativeInt
from .errors import ImmutableListError
from .records import FieldInfo, FieldRecord
from .settings import FieldInfoListSettings

logger = logging.getLogger(__name__)

FieldInfoFilter = Callable[[FieldRecord], bool]

_SIZE_HINT_ADAPTER = TypeAdapter(NonNegativeInt)

FRAME_COLUMNS = [
    "name",
    "type_signature",
    "declaring_class_name",
    "modifiers",
    "annotations",
]


class FieldInfoView(Sequence):
    """
    Read-only, ordered sequence of field records.

    Duplicate names are allowed; name lookups follow a first-match policy.
    """

    __slots__ = ("_fields", "_settings")

    def __init__(
        self,
        fields: Iterable[FieldInfo] = (),
        *,
        settings: Optional[FieldInfoListSettings] = None,
    ):
        if settings is None:
            settings = FieldInfoListSettings()
        self._settings = settings
        self._fields: List[FieldInfo] = self._check_records(fields)

    def _check_records(self, records: Iterable[FieldInfo]) -> List[FieldInfo]:
        """Materialize records, rejecting the whole batch if any is malformed."""
        records = list(records)
        if self.settings.validate_records:
            for record in records:
                if not (isinstance(record, FieldRecord) and isinstance(record.name, str)):
                    raise TypeError(
                        f"{type(self).__name__} records need a string 'name' attribute, "
                        f"got {type(record).__name__}"
                    )
        return records

    @property
    def settings(self) -> FieldInfoListSettings:
        """Settings this list was built with; fixed for the list's lifetime."""
        return self._settings

    # === SEQUENCE PROTOCOL ===

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FieldInfoList(self._fields[index], settings=self.settings)
        return self._fields[index]

    def __iter__(self):
        return iter(self._fields)

    def __contains__(self, record) -> bool:
        return record in self._fields

    def __eq__(self, other) -> bool:
        if isinstance(other, FieldInfoView):
            return self._fields == other._fields
        if isinstance(other, list):
            return self._fields == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"

    # === QUERIES ===

    def get_names(self) -> List[str]:
        """Get the names of all fields in this list, in list order."""
        return [field_info.name for field_info in self._fields]

    def get_as_strings(self) -> List[str]:
        """
        Get the display strings of all fields in this list (with annotations,
        modifiers, etc.), by calling ``str()`` on each item in list order.
        """
        return [str(field_info) for field_info in self._fields]

    def contains_name(self, name: str) -> bool:
        """Check whether any field in this list has exactly the given name."""
        return any(field_info.name == name for field_info in self._fields)

    def get_by_name(self, name: str) -> Optional[FieldInfo]:
        """
        Get the first field in this list with the given name.

        Args:
            name: Exact (case-sensitive) field name

        Returns:
            The earliest matching field, or None if no field has that name
        """
        for field_info in self._fields:
            if field_info.name == name:
                return field_info
        return None

    def filter(self, predicate: FieldInfoFilter) -> FieldInfoList:
        """
        Find the subset of fields in this list for which the predicate is true.

        The predicate is called exactly once per field, left to right. The
        source list is not modified.

        Args:
            predicate: Callable deciding whether a field is kept

        Returns:
            New mutable list of the kept fields, in their original relative order
        """
        filtered = FieldInfoList(settings=self.settings)
        for field_info in self._fields:
            if predicate(field_info):
                filtered._fields.append(field_info)
        logger.debug(f"Filter kept {len(filtered)} of {len(self._fields)} fields")
        return filtered

    def copy(self) -> FieldInfoList:
        """Mutable shallow copy sharing the same record objects."""
        return FieldInfoList(self._fields, settings=self.settings)

    def to_frame(self) -> pd.DataFrame:
        """
        Tabulate the fields in this list, one row per field in list order.

        Attributes missing from a record are reported as None.

        Returns:
            DataFrame with name, type_signature, declaring_class_name,
            modifiers, annotations and (per settings) display columns
        """
        columns = list(FRAME_COLUMNS)
        if self.settings.include_display_string:
            columns.append("display")

        rows = []
        for field_info in self._fields:
            modifiers_str = getattr(field_info, "modifiers_str", None)
            row = {
                "name": field_info.name,
                "type_signature": getattr(field_info, "type_signature", None),
                "declaring_class_name": getattr(field_info, "declaring_class_name", None),
                "modifiers": modifiers_str() if callable(modifiers_str) else None,
                "annotations": getattr(field_info, "annotations", None),
            }
            if self.settings.include_display_string:
                row["display"] = str(field_info)
            rows.append(row)

        return pd.DataFrame(rows, columns=columns)


class FieldInfoList(FieldInfoView, MutableSequence):
    """
    Mutable, ordered list of field records.

    Built empty, from an iterable of records, or via with_size_hint(), and
    filled by the producer before being handed to read-only consumers.
    """

    __slots__ = ()

    @classmethod
    def with_size_hint(
        cls, size_hint: NonNegativeInt, settings: Optional[FieldInfoListSettings] = None
    ) -> FieldInfoList:
        """
        Create an empty list for roughly ``size_hint`` records.

        The hint only documents the expected size; the list grows past it
        freely and otherwise behaves like ``FieldInfoList()``.
        """
        size_hint = _SIZE_HINT_ADAPTER.validate_python(size_hint)
        logger.debug(f"Creating {cls.__name__} with size hint {size_hint}")
        return cls(settings=settings)

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._fields[index] = self._check_records(value)
        else:
            self._fields[index] = self._check_records([value])[0]

    def __delitem__(self, index) -> None:
        del self._fields[index]

    def insert(self, index: int, value: FieldInfo) -> None:
        self._fields.insert(index, self._check_records([value])[0])

    def append(self, value: FieldInfo) -> None:
        self._fields.append(self._check_records([value])[0])

    def extend(self, values: Iterable[FieldInfo]) -> None:
        self._fields.extend(self._check_records(values))

    def clear(self) -> None:
        self._fields.clear()

    def remove_all(self, records: Iterable[FieldInfo]) -> bool:
        """
        Remove every occurrence of each given record.

        Returns:
            True if the list changed
        """
        targets = list(records)
        kept = [field_info for field_info in self._fields if field_info not in targets]
        changed = len(kept) != len(self._fields)
        self._fields[:] = kept
        return changed

    def retain_all(self, predicate: FieldInfoFilter) -> bool:
        """
        Keep only the fields for which the predicate is true, in place.

        Returns:
            True if the list changed
        """
        kept = [field_info for field_info in self._fields if predicate(field_info)]
        changed = len(kept) != len(self._fields)
        self._fields[:] = kept
        return changed

    def freeze(self) -> FrozenFieldInfoList:
        """
        Read-only snapshot of this list for handing to consumers.

        Later changes to this list do not show in the snapshot. Freezing an
        empty list with default settings returns the shared EMPTY_LIST.
        """
        if not self._fields and self.settings == EMPTY_LIST.settings:
            return EMPTY_LIST
        logger.debug(f"Freezing {len(self._fields)} fields")
        return FrozenFieldInfoList(self._fields, settings=self.settings)


def _immutable(operation: str):
    def reject(self, *args, **kwargs):
        logger.debug(f"Rejected '{operation}' on {type(self).__name__}")
        raise ImmutableListError(operation)

    reject.__name__ = operation
    reject.__doc__ = f"Not supported: raises ImmutableListError ({operation})."
    return reject


class FrozenFieldInfoList(FieldInfoView):
    """
    Read-only field list.

    Carries the mutator names of FieldInfoList so that attempts to change
    it raise ImmutableListError instead of silently succeeding.
    """

    __slots__ = ()

    append = _immutable("append")
    insert = _immutable("insert")
    extend = _immutable("extend")
    remove = _immutable("remove")
    pop = _immutable("pop")
    remove_all = _immutable("remove_all")
    retain_all = _immutable("retain_all")
    clear = _immutable("clear")
    reverse = _immutable("reverse")
    __setitem__ = _immutable("__setitem__")
    __delitem__ = _immutable("__delitem__")
    __iadd__ = _immutable("__iadd__")


EMPTY_LIST = FrozenFieldInfoList()
