"""
Module: data.records

Purpose:
    Attribute access helpers for open records. A record is any mapping
    (usually a dict) or, failing that, any object with attributes.
    Absent attributes are reported as the MISSING sentinel so they stay
    distinct from None and "".

Key Functions:
    - get_field(): Read an attribute, MISSING if absent
    - set_field(): Write an attribute
    - copy_record(): Shallow copy of a record
    - is_record_sequence(): Input guard shared by tree and grouping

Used By:
    - data.tree_builder
    - data.grouping
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any


class _Missing:
    """Marker type for an absent attribute."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def get_field(record: Any, name: str) -> Any:
    """
    Read ``name`` from a record.

    Mappings are read by key, other objects by attribute.

    Returns:
        The value, or MISSING when the record has no such attribute.
    """
    if isinstance(record, Mapping):
        return record.get(name, MISSING)
    return getattr(record, name, MISSING)


def set_field(record: Any, name: str, value: Any) -> None:
    """Write ``value`` under ``name`` on a record (key or attribute)."""
    if isinstance(record, MutableMapping):
        record[name] = value
    else:
        setattr(record, name, value)


def copy_record(record: Any) -> Any:
    """Shallow copy of a mapping or attribute record."""
    return copy.copy(record)


def is_record_sequence(data: Any) -> bool:
    """True for list/tuple input. Strings and other iterables are rejected."""
    return isinstance(data, (list, tuple))


def hashable_or_missing(value: Any) -> Any:
    """Return ``value`` if it can be used as a dict key, else MISSING."""
    try:
        hash(value)
    except TypeError:
        return MISSING
    return value
