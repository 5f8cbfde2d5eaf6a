"""
Value model -- sentinels, type tags and capabilities shared by every guard.

Pure functions, no I/O.

Type tags are the runtime "primitive type" names guards compare against:

    ==========  ==================================================
    tag         values
    ==========  ==================================================
    undefined   the UNDEFINED sentinel
    null        None
    boolean     bool
    number      any numbers.Number except bool (int, float, Decimal...)
    string      str
    bytes       bytes, bytearray
    function    classes and routines (functions, methods, builtins)
    object      everything else (lists, tuples, dicts, instances)
    ==========  ==================================================
"""

from __future__ import annotations

import inspect
import numbers
from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

UNDEFINED_TAG = "undefined"
NULL_TAG = "null"
BOOLEAN_TAG = "boolean"
NUMBER_TAG = "number"
STRING_TAG = "string"
BYTES_TAG = "bytes"
FUNCTION_TAG = "function"
OBJECT_TAG = "object"

TYPE_TAGS: frozenset[str] = frozenset({
    UNDEFINED_TAG,
    NULL_TAG,
    BOOLEAN_TAG,
    NUMBER_TAG,
    STRING_TAG,
    BYTES_TAG,
    FUNCTION_TAG,
    OBJECT_TAG,
})

# Tags whose example values act as primitive shape descriptors.
PRIMITIVE_TAGS: frozenset[str] = frozenset({
    NULL_TAG,
    BOOLEAN_TAG,
    NUMBER_TAG,
    STRING_TAG,
    BYTES_TAG,
})


class _Undefined:
    """Marker for an argument that was never supplied."""

    _instance: ClassVar[_Undefined | None] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def type_tag(value: Any) -> str:
    """Return the type tag of ``value``."""
    if value is UNDEFINED:
        return UNDEFINED_TAG
    if value is None:
        return NULL_TAG
    if isinstance(value, bool):
        return BOOLEAN_TAG
    if isinstance(value, numbers.Number):
        return NUMBER_TAG
    if isinstance(value, str):
        return STRING_TAG
    if isinstance(value, (bytes, bytearray)):
        return BYTES_TAG
    if isinstance(value, type) or inspect.isroutine(value):
        return FUNCTION_TAG
    return OBJECT_TAG


def is_array(value: Any) -> bool:
    """Arrays are lists and tuples; strings and bytes never are."""
    return isinstance(value, (list, tuple))


def is_plain_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_constructor(value: Any) -> bool:
    """Classes and bare routines count as constructor references."""
    return isinstance(value, type) or inspect.isroutine(value)


def class_name(value: Any) -> str:
    """Name of the value's immediate class."""
    return type(value).__name__


def constructor_name(ref: Any) -> str:
    return getattr(ref, "__qualname__", None) or getattr(
        ref, "__name__", repr(ref)
    )


# ---------------------------------------------------------------------------
# Super class capability
# ---------------------------------------------------------------------------


@runtime_checkable
class SuperClassAware(Protocol):
    """
    Capability of reporting a nominal super class name.

    ``check_super_class`` relies on this accessor instead of inspecting the
    MRO, so a class family decides for itself which name it reports.
    """

    def get_super(self) -> str: ...


class SuperClass:
    """
    Opt-in base that implements ``SuperClassAware``.

    The first class derived from ``SuperClass`` names the family and every
    descendant reports that name::

        class Item(SuperClass): ...
        class Sword(Item): ...

        Sword().get_super()  # "Item"

    A class may report a different name with the ``super_name`` keyword::

        class Weapon(Item, super_name="Weapon"): ...
    """

    super_name: ClassVar[str | None] = None

    def __init_subclass__(cls, super_name: str | None = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if super_name is not None:
            cls.super_name = super_name
        elif cls.super_name is None:
            cls.super_name = cls.__name__

    def get_super(self) -> str:
        return type(self).super_name or type(self).__name__
