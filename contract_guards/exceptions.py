"""
Typed Exception Hierarchy for Contract Guards.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A guard exists to fail fast with an actionable message. Callers that want to
react to a particular violation must be able to catch it by TYPE and read its
context as ATTRIBUTES, never by parsing the message string:

    try:
        check_object_structure(payload, "payload", PERSON_SCHEMA)
    except MissingPropertyError as e:
        return {"error": e.code, "missing": e.property_name}
    except StructureError as e:
        return {"error": e.code, "path": e.path}

Every exception:
  1. Has a typed class (catch by type, not message)
  2. Has a ``code`` class attribute (machine-readable, API-safe)
  3. Carries structured data (argument name, expected/actual, path)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    GuardError (base)
    |
    +-- ArgumentError
    +-- TypeMismatchError
    +-- ArityError
    +-- RangeError
    |   +-- ArrayLengthError
    |   +-- IndexRangeError
    +-- ConditionError
    +-- MembershipError
    +-- StructureError
    |   +-- UnexpectedPropertyError
    |   +-- MissingPropertyError
    |   +-- ExpectedArrayError
    |   +-- ExpectedNonArrayError
    |   +-- ExpectedConstructorValueError
    |   +-- ExpectedInstanceOfError
    |   +-- WrongPrimitiveTypeError
    |   +-- StructureDepthError
    +-- InvalidSchemaError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category    | Code                        | When Raised
------------|-----------------------------|-----------------------------------------
Argument    | ARGUMENT_UNDEFINED          | Value left as the UNDEFINED sentinel
Type        | TYPE_MISMATCH               | Type tag / class / super class differs
Arity       | ARITY_MISMATCH              | Values and names differ in length
Range       | ARRAY_LENGTH_MISMATCH       | Array length != target length
            | INDEX_OUT_OF_RANGE          | Index < 0 or > last valid index
Condition   | CONDITION_NOT_MET           | Array element failed the predicate
Membership  | NOT_A_MEMBER                | Value outside the accepted constants
Structure   | UNEXPECTED_PROPERTY         | Property not declared in the schema
            | MISSING_PROPERTY            | Schema property absent from the value
            | EXPECTED_ARRAY              | Schema wants an array, got non-array
            | EXPECTED_NON_ARRAY          | Got an array where schema forbids one
            | EXPECTED_CONSTRUCTOR_VALUE  | Value is not the required class itself
            | EXPECTED_INSTANCE_OF        | Value's class differs from the marker's
            | WRONG_PRIMITIVE_TYPE        | Value's type tag differs
            | STRUCTURE_DEPTH_EXCEEDED    | Nesting deeper than max_structure_depth
Schema      | INVALID_SCHEMA              | The schema itself is malformed

===============================================================================
DESIGN DECISIONS
===============================================================================

1. WHY INHERIT FROM Exception (not TypeError, ValueError, etc.)?
   Contract violations should be catchable as one group (``GuardError``)
   without also catching unrelated programming errors.

2. WHY A SEPARATE InvalidSchemaError?
   A malformed schema is a bug in the guard's caller, not a violation by
   the value under test. It is never raised for a well-formed schema.

3. WHY StructureError.kind AND SUBCLASSES?
   Subclasses allow typed catches; ``kind`` lets middleware switch on a
   single attribute when serializing the failure.
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class GuardError(Exception):
    """
    Base exception for all contract guard errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "GUARD_ERROR"


class ArgumentError(GuardError):
    """A required argument was left undefined."""

    code: str = "ARGUMENT_UNDEFINED"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' Argument left Undefined")


class TypeMismatchError(GuardError):
    """Type tag, class name or super class name did not match."""

    code: str = "TYPE_MISMATCH"

    def __init__(self, name: str, expected: str, actual: str, message: str):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class ArityError(GuardError):
    """Two parallel sequences had mismatched lengths."""

    code: str = "ARITY_MISMATCH"

    def __init__(self, noun: str, value_count: int, name_count: int):
        self.noun = noun
        self.value_count = value_count
        self.name_count = name_count
        singular = noun[:-1] if noun.endswith("s") else noun
        super().__init__(
            f"Amount of {noun} and {singular} names must be equal "
            f"(got {value_count} {noun} and {name_count} names)"
        )


# Range-related exceptions


class RangeError(GuardError):
    """Base exception for length and index bound violations."""

    code: str = "RANGE_VIOLATION"


class ArrayLengthError(RangeError):
    """Array does not have the required length."""

    code: str = "ARRAY_LENGTH_MISMATCH"

    def __init__(self, name: str, target_length: int, actual_length: int):
        self.name = name
        self.target_length = target_length
        self.actual_length = actual_length
        super().__init__(
            f"Must provide an array of a length of {target_length} for "
            f"'{name}' Argument (got length {actual_length})"
        )


class IndexRangeError(RangeError):
    """Index falls outside the valid indices of an array."""

    code: str = "INDEX_OUT_OF_RANGE"

    def __init__(self, name: str, index: int, length: int):
        self.name = name
        self.index = index
        self.length = length
        super().__init__(
            f"Index {index} is out of range for array argument '{name}' "
            f"(valid range 0..{length - 1})"
        )


class ConditionError(GuardError):
    """An array element failed a caller-supplied predicate."""

    code: str = "CONDITION_NOT_MET"

    def __init__(self, name: str, index: int, element: Any, condition: str):
        self.name = name
        self.index = index
        self.element = element
        self.condition = condition
        super().__init__(
            f"Element at index {index} of array argument '{name}' "
            f"doesn't fulfill condition: {condition}"
        )


class MembershipError(GuardError):
    """Value is not one of a closed set of accepted constants."""

    code: str = "NOT_A_MEMBER"

    def __init__(self, name: str, value: Any, set_name: str):
        self.name = name
        self.value = value
        self.set_name = set_name
        super().__init__(
            f"'{name}' Argument was provided {value!r} which is not a member "
            f"of '{set_name}'"
        )


# Structure-related exceptions


class StructureViolation(str, Enum):
    """Kinds of structural schema violation."""

    UNEXPECTED_PROPERTY = "unexpectedProperty"
    MISSING_PROPERTY = "missingProperty"
    EXPECTED_ARRAY = "expectedArray"
    EXPECTED_NON_ARRAY = "expectedNonArray"
    EXPECTED_CONSTRUCTOR_VALUE = "expectedConstructorValue"
    EXPECTED_INSTANCE_OF = "expectedInstanceOf"
    WRONG_PRIMITIVE_TYPE = "wrongPrimitiveType"
    DEPTH_EXCEEDED = "depthExceeded"


class StructureError(GuardError):
    """
    Base exception for structural schema violations.

    ``path`` is the fully qualified dotted path of the offending property,
    e.g. ``person.hair.color``.
    """

    code: str = "STRUCTURE_VIOLATION"
    kind: StructureViolation

    def __init__(self, object_name: str, property_name: str, message: str):
        self.object_name = object_name
        self.property_name = property_name
        self.path = f"{object_name}.{property_name}"
        super().__init__(message)


class UnexpectedPropertyError(StructureError):
    """Value has a property the schema does not declare."""

    code: str = "UNEXPECTED_PROPERTY"
    kind = StructureViolation.UNEXPECTED_PROPERTY

    def __init__(self, object_name: str, property_name: str):
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument was provided a property "
            f"'{property_name}' which violates the required structure",
        )


class MissingPropertyError(StructureError):
    """Value lacks a property the schema requires."""

    code: str = "MISSING_PROPERTY"
    kind = StructureViolation.MISSING_PROPERTY

    def __init__(self, object_name: str, property_name: str):
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument missing required property "
            f"'{property_name}'",
        )


class ExpectedArrayError(StructureError):
    """Schema marks the property as an array but the value is not one."""

    code: str = "EXPECTED_ARRAY"
    kind = StructureViolation.EXPECTED_ARRAY

    def __init__(self, object_name: str, property_name: str, actual_type: str):
        self.actual_type = actual_type
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument is required to be provided an "
            f"array for property '{property_name}' but was provided "
            f"{actual_type}",
        )


class ExpectedNonArrayError(StructureError):
    """Value is an array where the schema does not allow one."""

    code: str = "EXPECTED_NON_ARRAY"
    kind = StructureViolation.EXPECTED_NON_ARRAY

    def __init__(self, object_name: str, property_name: str):
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument was provided for property "
            f"'{property_name}' an array value which violates the required "
            f"structure",
        )


class ExpectedConstructorValueError(StructureError):
    """Value is not the exact class the constructor marker names."""

    code: str = "EXPECTED_CONSTRUCTOR_VALUE"
    kind = StructureViolation.EXPECTED_CONSTRUCTOR_VALUE

    def __init__(self, object_name: str, property_name: str, expected: str):
        self.expected = expected
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument is required to be provided the "
            f"value of '{expected}' constructor for property "
            f"'{property_name}'",
        )


class ExpectedInstanceOfError(StructureError):
    """Value's class differs from the instance marker's class."""

    code: str = "EXPECTED_INSTANCE_OF"
    kind = StructureViolation.EXPECTED_INSTANCE_OF

    def __init__(
        self,
        object_name: str,
        property_name: str,
        expected: str,
        actual: str,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument is required to be provided the "
            f"value of an instance of the '{expected}' constructor for "
            f"property '{object_name}.{property_name}' (got '{actual}')",
        )


class WrongPrimitiveTypeError(StructureError):
    """Value's type tag differs from the declared primitive type."""

    code: str = "WRONG_PRIMITIVE_TYPE"
    kind = StructureViolation.WRONG_PRIMITIVE_TYPE

    def __init__(
        self,
        object_name: str,
        property_name: str,
        expected: str,
        actual: str,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument was provided a datatype of "
            f"{actual} for property '{property_name}' which violates the "
            f"required structure (expected {expected})",
        )


class StructureDepthError(StructureError):
    """Nesting exceeded the configured recursion ceiling."""

    code: str = "STRUCTURE_DEPTH_EXCEEDED"
    kind = StructureViolation.DEPTH_EXCEEDED

    def __init__(self, object_name: str, property_name: str, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            object_name,
            property_name,
            f"'{object_name}' object argument nests deeper than the maximum "
            f"structure depth of {max_depth} at property '{property_name}'",
        )


class InvalidSchemaError(GuardError):
    """The schema or a shape descriptor is malformed."""

    code: str = "INVALID_SCHEMA"

    def __init__(self, schema_name: str, reason: str):
        self.schema_name = schema_name
        self.reason = reason
        super().__init__(f"Invalid schema for '{schema_name}': {reason}")
