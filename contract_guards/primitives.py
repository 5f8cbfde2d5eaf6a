"""
Primitive guards -- single-value contract checks.

Each guard takes a value and the human-readable name of the argument it was
bound to, returns ``None`` when the contract holds and raises a typed
``GuardError`` the moment it does not.

Examples::

    def square_number(num=UNDEFINED):
        check_undefined(num, "num")
        check_data_type(num, "num", "number")
        return num * num

    check_age = lambda age: 5 <= age <= 18

    def enrol_students(student_names, student_ages):
        check_array_elements(
            student_ages, "student_ages", check_age, "Age must be between 5 - 18"
        )
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from contract_guards.exceptions import (
    ArgumentError,
    ArrayLengthError,
    ConditionError,
    IndexRangeError,
    TypeMismatchError,
)
from contract_guards.values import (
    UNDEFINED,
    SuperClassAware,
    class_name,
    is_array,
    type_tag,
)


def check_undefined(value: Any, name: str) -> None:
    """Raise ``ArgumentError`` if ``value`` is the UNDEFINED sentinel."""
    if value is UNDEFINED:
        raise ArgumentError(name)


def check_data_type(value: Any, name: str, type_name: str) -> None:
    """Raise ``TypeMismatchError`` if the value's type tag is not ``type_name``."""
    actual = type_tag(value)
    if actual != type_name:
        raise TypeMismatchError(
            name,
            type_name,
            actual,
            f"Must provide {type_name} datatype for '{name}' Argument "
            f"(got {actual})",
        )


def check_instance_type(value: Any, name: str, expected_class: str) -> None:
    """
    Raise ``TypeMismatchError`` unless the value's immediate class is named
    ``expected_class``. Subclasses do not match.
    """
    actual = class_name(value)
    if actual != expected_class:
        raise TypeMismatchError(
            name,
            expected_class,
            actual,
            f"Must provide '{expected_class}' instancetype for '{name}' "
            f"Argument (got '{actual}')",
        )


def check_super_class(value: Any, name: str, super_class_name: str) -> None:
    """
    Raise ``TypeMismatchError`` unless ``value.get_super()`` reports
    ``super_class_name``.

    The value must implement ``SuperClassAware`` (usually by deriving from
    ``SuperClass``); values without the accessor fail the check.
    """
    if not isinstance(value, SuperClassAware):
        raise TypeMismatchError(
            name,
            super_class_name,
            class_name(value),
            f"Must provide instancetype that is a child of "
            f"'{super_class_name}' Superclass for '{name}' Argument "
            f"('{class_name(value)}' does not report a super class)",
        )

    reported = value.get_super()
    if reported != super_class_name:
        raise TypeMismatchError(
            name,
            super_class_name,
            str(reported),
            f"Must provide instancetype that is a child of "
            f"'{super_class_name}' Superclass for '{name}' Argument "
            f"(got child of '{reported}')",
        )


def check_is_array(value: Any, name: str) -> None:
    if not is_array(value):
        raise TypeMismatchError(
            name,
            "array",
            type_tag(value),
            f"Must provide an array for '{name}' Argument",
        )


def check_array_length(array: Sequence[Any], name: str, target_length: int) -> None:
    if len(array) != target_length:
        raise ArrayLengthError(name, target_length, len(array))


def check_index_range(array: Sequence[Any], name: str, index: int) -> None:
    """Raise ``IndexRangeError`` if ``index`` is negative or past the end."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeMismatchError(
            name,
            "integer index",
            type_tag(index),
            f"Must provide an integer index for array argument '{name}'",
        )
    if index < 0 or index > len(array) - 1:
        raise IndexRangeError(name, index, len(array))


def check_array_elements(
    array: Sequence[Any],
    name: str,
    predicate: Callable[[Any], bool],
    condition: str,
) -> None:
    """
    Raise ``ConditionError`` at the first element for which ``predicate``
    returns a falsy value. ``condition`` describes the predicate in the
    error message.
    """
    for index, element in enumerate(array):
        if not predicate(element):
            raise ConditionError(name, index, element, condition)
