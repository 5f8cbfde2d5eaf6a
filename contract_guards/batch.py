"""
Batch guards -- apply a primitive guard across parallel values and names.

The two sequences must have equal length; the arity is checked before any
element is inspected. Elements are then checked in order and the first
failure propagates (fail-fast).

Example::

    def add_numbers(num1, num2):
        # value and name must share an index in their sequences
        check_undefined_array([num1, num2], ["num1", "num2"])
        check_data_type_array([num1, num2], ["num1", "num2"], "number")
        return num1 + num2
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from contract_guards.exceptions import ArityError
from contract_guards.logging_config import get_logger
from contract_guards.primitives import (
    check_data_type,
    check_instance_type,
    check_super_class,
    check_undefined,
)

logger = get_logger("batch")


def check_arity(values: Sequence[Any], names: Sequence[str], noun: str) -> None:
    """Raise ``ArityError`` if ``values`` and ``names`` differ in length."""
    if len(values) != len(names):
        logger.debug(
            "batch_arity_mismatch",
            extra={
                "noun": noun,
                "value_count": len(values),
                "name_count": len(names),
            },
        )
        raise ArityError(noun, len(values), len(names))


def check_undefined_array(values: Sequence[Any], names: Sequence[str]) -> None:
    check_arity(values, names, "variables")
    for value, name in zip(values, names):
        check_undefined(value, name)


def check_data_type_array(
    values: Sequence[Any],
    names: Sequence[str],
    type_name: str,
) -> None:
    check_arity(values, names, "variables")
    for value, name in zip(values, names):
        check_data_type(value, name, type_name)


def check_instance_type_array(
    instances: Sequence[Any],
    names: Sequence[str],
    expected_class: str,
) -> None:
    check_arity(instances, names, "instances")
    for instance, name in zip(instances, names):
        check_instance_type(instance, name, expected_class)


def check_super_class_array(
    instances: Sequence[Any],
    names: Sequence[str],
    super_class_name: str,
) -> None:
    """Every instance must report ``super_class_name`` via ``get_super()``."""
    check_arity(instances, names, "instances")
    for instance, name in zip(instances, names):
        check_super_class(instance, name, super_class_name)
