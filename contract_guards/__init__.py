"""
Contract Guards - runtime precondition checks for dynamically typed inputs.

A flat collection of stateless guards that inspect the arguments of a call
and raise a typed, descriptive ``GuardError`` the moment a contract is
violated:
- Undefined arguments, type tags, classes and reported super classes
- Array shape, length, index range and element predicates
- Membership in code registries and enumerations
- Closed-world object structure, matched recursively against a schema
"""

from contract_guards.batch import (
    check_data_type_array,
    check_instance_type_array,
    check_super_class_array,
    check_undefined_array,
)
from contract_guards.config import (
    DEFAULT_SETTINGS,
    GuardSettings,
    load_settings,
    settings_from_dict,
)
from contract_guards.exceptions import (
    ArgumentError,
    ArityError,
    ArrayLengthError,
    ConditionError,
    ExpectedArrayError,
    ExpectedConstructorValueError,
    ExpectedInstanceOfError,
    ExpectedNonArrayError,
    GuardError,
    IndexRangeError,
    InvalidSchemaError,
    MembershipError,
    MissingPropertyError,
    RangeError,
    StructureDepthError,
    StructureError,
    StructureViolation,
    TypeMismatchError,
    UnexpectedPropertyError,
    WrongPrimitiveTypeError,
)
from contract_guards.membership import (
    CodeInfo,
    CodeRegistry,
    HttpStatusRegistry,
    check_enum_value,
    check_is_member_of_code_registry,
)
from contract_guards.primitives import (
    check_array_elements,
    check_array_length,
    check_data_type,
    check_index_range,
    check_instance_type,
    check_is_array,
    check_super_class,
    check_undefined,
)
from contract_guards.structure import (
    ANY,
    ConstructorMarker,
    InstanceMarker,
    PrimitiveMarker,
    ShapeKind,
    check_object_structure,
    check_object_structure_array,
    classify_descriptor,
    validate_structure,
    validate_structure_array,
)
from contract_guards.values import (
    UNDEFINED,
    SuperClass,
    SuperClassAware,
    type_tag,
)

__version__ = "0.1.0"

__all__ = [
    # Primitive guards
    "check_undefined",
    "check_data_type",
    "check_instance_type",
    "check_super_class",
    "check_is_array",
    "check_array_length",
    "check_index_range",
    "check_array_elements",
    # Batch guards
    "check_undefined_array",
    "check_data_type_array",
    "check_instance_type_array",
    "check_super_class_array",
    # Membership guards
    "check_is_member_of_code_registry",
    "check_enum_value",
    "CodeInfo",
    "CodeRegistry",
    "HttpStatusRegistry",
    # Structure
    "check_object_structure",
    "check_object_structure_array",
    "validate_structure",
    "validate_structure_array",
    "classify_descriptor",
    "ANY",
    "ConstructorMarker",
    "InstanceMarker",
    "PrimitiveMarker",
    "ShapeKind",
    # Values
    "UNDEFINED",
    "SuperClass",
    "SuperClassAware",
    "type_tag",
    # Settings
    "GuardSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "settings_from_dict",
    # Exceptions
    "GuardError",
    "ArgumentError",
    "TypeMismatchError",
    "ArityError",
    "RangeError",
    "ArrayLengthError",
    "IndexRangeError",
    "ConditionError",
    "MembershipError",
    "StructureError",
    "StructureViolation",
    "UnexpectedPropertyError",
    "MissingPropertyError",
    "ExpectedArrayError",
    "ExpectedNonArrayError",
    "ExpectedConstructorValueError",
    "ExpectedInstanceOfError",
    "WrongPrimitiveTypeError",
    "StructureDepthError",
    "InvalidSchemaError",
]
