"""
Structure -- recursive object-shape matching.

Responsibility:
    Validates a mapping against a declarative schema: a mapping from
    property name to shape descriptor. The match is closed-world: the
    value must have exactly the schema's properties, and every property
    must conform to its descriptor. Nested schemas are matched
    recursively and failures report the dotted property path.

Shape descriptors (classified by ``SHAPE_RULES``, first match wins):
    ANY / wildcard token    -> WILDCARD     anything, no further checks
    ConstructorMarker(T)    -> CONSTRUCTOR  value must be T itself
    InstanceMarker(T)       -> INSTANCE     type(value) must be T
    PrimitiveMarker(tag)    -> PRIMITIVE    type_tag(value) must be tag
    list / tuple            -> ARRAY        value must be an array
    mapping                 -> NESTED       value must match the sub-schema
    bare class / routine    -> CONSTRUCTOR
    "", 0, True, None, b""  -> PRIMITIVE    by example: tag of the example
    any other instance      -> INSTANCE     by example: class of the example

Matching order (fail-fast, deterministic):
    Pass 1 walks the value's own properties in iteration order:
        unexpected property -> wildcard -> array / non-array -> by kind.
    Pass 2 walks the schema's keys in order and reports the first
    missing property. Pass 2 only runs when pass 1 found nothing.

Array elements are not matched against any element schema; a property
marked as an array only requires the value to be an array.

Example::

    class Hobby:
        def __init__(self, name):
            self.name = name

    class Money: ...

    PERSON = {
        "name": "",
        "age": 0,
        "friends": [],
        "hair": {"color": ""},
        "hobby": InstanceMarker(Hobby),
        "make_money": ConstructorMarker(Money),
        "notes": ANY,
    }

    check_object_structure(
        {
            "name": "Jack",
            "age": 30,
            "friends": ["John", "Ben"],
            "hair": {"color": "black"},
            "hobby": Hobby("tennis"),
            "make_money": Money,
            "notes": None,
        },
        "person",
        PERSON,
    )
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from contract_guards.batch import check_arity
from contract_guards.config import DEFAULT_SETTINGS, GuardSettings
from contract_guards.exceptions import (
    ExpectedArrayError,
    ExpectedConstructorValueError,
    ExpectedInstanceOfError,
    ExpectedNonArrayError,
    InvalidSchemaError,
    MissingPropertyError,
    StructureDepthError,
    StructureError,
    TypeMismatchError,
    UnexpectedPropertyError,
    WrongPrimitiveTypeError,
)
from contract_guards.logging_config import get_logger
from contract_guards.values import (
    OBJECT_TAG,
    PRIMITIVE_TAGS,
    TYPE_TAGS,
    class_name,
    constructor_name,
    is_array,
    is_constructor,
    is_plain_object,
    type_tag,
)

logger = get_logger("structure")

Schema = Mapping[str, Any]


# ---------------------------------------------------------------------------
# Shape descriptors
# ---------------------------------------------------------------------------


class _Any:
    """Wildcard descriptor: matches any value."""

    _instance: ClassVar[_Any | None] = None

    def __new__(cls) -> _Any:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self) -> str:
        return "ANY"


ANY = _Any()


@dataclass(frozen=True)
class ConstructorMarker:
    """
    The value must be ``type_ref`` itself, not an instance of it.

    Classes match by identity. Routines match by equality, so a bound
    method matches any bound method of the same function and instance.
    """

    type_ref: Any

    def __post_init__(self) -> None:
        if not is_constructor(self.type_ref):
            raise InvalidSchemaError(
                "ConstructorMarker",
                f"type_ref must be a class or routine, got {self.type_ref!r}",
            )


@dataclass(frozen=True)
class InstanceMarker:
    """
    The value's exact class must be ``type_ref``.

    A list or tuple ``type_ref`` makes the property array-shaped.
    """

    type_ref: type

    def __post_init__(self) -> None:
        if not isinstance(self.type_ref, type):
            raise InvalidSchemaError(
                "InstanceMarker",
                f"type_ref must be a class, got {self.type_ref!r}",
            )


@dataclass(frozen=True)
class PrimitiveMarker:
    """The value's type tag must be ``type_name``."""

    type_name: str

    def __post_init__(self) -> None:
        if self.type_name not in TYPE_TAGS:
            raise InvalidSchemaError(
                "PrimitiveMarker",
                f"unknown type tag {self.type_name!r}, "
                f"expected one of {sorted(TYPE_TAGS)}",
            )


class ShapeKind(str, Enum):
    """Descriptor variants."""

    WILDCARD = "wildcard"
    ARRAY = "array"
    NESTED = "nested"
    CONSTRUCTOR = "constructor"
    INSTANCE = "instance"
    PRIMITIVE = "primitive"


def _is_wildcard(descriptor: Any, settings: GuardSettings) -> bool:
    if descriptor is ANY:
        return True
    return isinstance(descriptor, str) and descriptor == settings.wildcard_token


SHAPE_RULES: tuple[tuple[Callable[[Any, GuardSettings], bool], ShapeKind], ...] = (
    (_is_wildcard, ShapeKind.WILDCARD),
    (lambda d, _: isinstance(d, ConstructorMarker), ShapeKind.CONSTRUCTOR),
    (lambda d, _: isinstance(d, InstanceMarker), ShapeKind.INSTANCE),
    (lambda d, _: isinstance(d, PrimitiveMarker), ShapeKind.PRIMITIVE),
    (lambda d, _: is_array(d), ShapeKind.ARRAY),
    (lambda d, _: is_plain_object(d), ShapeKind.NESTED),
    (lambda d, _: is_constructor(d), ShapeKind.CONSTRUCTOR),
    (lambda d, _: type_tag(d) in PRIMITIVE_TAGS, ShapeKind.PRIMITIVE),
)


def classify_descriptor(
    descriptor: Any,
    *,
    settings: GuardSettings | None = None,
) -> ShapeKind:
    """Return the ``ShapeKind`` of a shape descriptor."""
    settings = settings or DEFAULT_SETTINGS
    for predicate, kind in SHAPE_RULES:
        if predicate(descriptor, settings):
            return kind
    return ShapeKind.INSTANCE


def _constructor_ref(descriptor: Any) -> Any:
    if isinstance(descriptor, ConstructorMarker):
        return descriptor.type_ref
    return descriptor


def _instance_type(descriptor: Any) -> type:
    if isinstance(descriptor, InstanceMarker):
        return descriptor.type_ref
    return type(descriptor)


def _primitive_name(descriptor: Any) -> str:
    if isinstance(descriptor, PrimitiveMarker):
        return descriptor.type_name
    return type_tag(descriptor)


def _describe(value: Any) -> str:
    tag = type_tag(value)
    if tag == OBJECT_TAG:
        return class_name(value)
    return tag


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _MatchContext:
    object_name: str
    settings: GuardSettings
    depth: int = 1

    def child(self, key: str) -> _MatchContext:
        if self.depth >= self.settings.max_structure_depth:
            raise StructureDepthError(
                self.object_name, key, self.settings.max_structure_depth
            )
        return _MatchContext(
            f"{self.object_name}.{key}", self.settings, self.depth + 1
        )


def _match_wildcard(
    ctx: _MatchContext, key: str, prop: Any, descriptor: Any
) -> None:
    return None


def _match_array(
    ctx: _MatchContext, key: str, prop: Any, descriptor: Any
) -> None:
    if not is_array(prop):
        raise ExpectedArrayError(ctx.object_name, key, _describe(prop))


def _match_nested(
    ctx: _MatchContext, key: str, prop: Any, descriptor: Any
) -> None:
    if not is_plain_object(prop):
        raise WrongPrimitiveTypeError(
            ctx.object_name, key, OBJECT_TAG, _describe(prop)
        )
    _match(prop, descriptor, ctx.child(key))


def _match_constructor(
    ctx: _MatchContext, key: str, prop: Any, descriptor: Any
) -> None:
    ref = _constructor_ref(descriptor)
    if prop is not ref and not (inspect.isroutine(ref) and prop == ref):
        raise ExpectedConstructorValueError(
            ctx.object_name, key, constructor_name(ref)
        )


def _match_instance(
    ctx: _MatchContext, key: str, prop: Any, descriptor: Any
) -> None:
    expected = _instance_type(descriptor)
    if type(prop) is not expected:
        raise ExpectedInstanceOfError(
            ctx.object_name, key, expected.__name__, class_name(prop)
        )


def _match_primitive(
    ctx: _MatchContext, key: str, prop: Any, descriptor: Any
) -> None:
    expected = _primitive_name(descriptor)
    actual = type_tag(prop)
    if actual != expected:
        raise WrongPrimitiveTypeError(ctx.object_name, key, expected, actual)


_PROPERTY_MATCHERS: dict[
    ShapeKind, Callable[[_MatchContext, str, Any, Any], None]
] = {
    ShapeKind.WILDCARD: _match_wildcard,
    ShapeKind.ARRAY: _match_array,
    ShapeKind.NESTED: _match_nested,
    ShapeKind.CONSTRUCTOR: _match_constructor,
    ShapeKind.INSTANCE: _match_instance,
    ShapeKind.PRIMITIVE: _match_primitive,
}

# Kinds that accept an array value.
_ARRAY_TOLERANT = frozenset({ShapeKind.WILDCARD, ShapeKind.ARRAY})


def _accepts_array(kind: ShapeKind, descriptor: Any) -> bool:
    if kind in _ARRAY_TOLERANT:
        return True
    return isinstance(descriptor, InstanceMarker) and issubclass(
        descriptor.type_ref, (list, tuple)
    )


def _match(value: Mapping[str, Any], schema: Schema, ctx: _MatchContext) -> None:
    # Pass 1: the value's own properties, in the value's order.
    for key, prop in value.items():
        if key not in schema:
            raise UnexpectedPropertyError(ctx.object_name, key)

        descriptor = schema[key]
        kind = classify_descriptor(descriptor, settings=ctx.settings)
        if is_array(prop) and not _accepts_array(kind, descriptor):
            raise ExpectedNonArrayError(ctx.object_name, key)
        _PROPERTY_MATCHERS[kind](ctx, key, prop, descriptor)

    # Pass 2: required properties, in the schema's order.
    for key in schema:
        if key not in value:
            raise MissingPropertyError(ctx.object_name, key)


def check_object_structure(
    value: Any,
    name: str,
    schema: Schema,
    *,
    settings: GuardSettings | None = None,
) -> None:
    """
    Raise a ``StructureError`` subclass unless ``value`` matches ``schema``.

    The first violation in matching order is raised; nested failures
    propagate unchanged with a fully qualified ``path``. Raises
    ``TypeMismatchError`` if ``value`` is not a mapping and
    ``InvalidSchemaError`` if ``schema`` is not a mapping.
    """
    settings = settings or DEFAULT_SETTINGS
    if not is_plain_object(schema):
        raise InvalidSchemaError(
            name, f"schema must be a mapping, got {_describe(schema)}"
        )
    if not is_plain_object(value):
        raise TypeMismatchError(
            name,
            OBJECT_TAG,
            _describe(value),
            f"Must provide an object for '{name}' Argument",
        )

    logger.debug(
        "structure_check_started",
        extra={"object_name": name, "property_count": len(value)},
    )
    try:
        _match(value, schema, _MatchContext(name, settings))
    except StructureError as exc:
        logger.log(
            settings.violation_level,
            "structure_check_failed",
            extra={
                "object_name": name,
                "path": exc.path,
                "violation": exc.kind.value,
                "error_code": exc.code,
            },
        )
        raise
    logger.debug("structure_check_passed", extra={"object_name": name})


def check_object_structure_array(
    values: Sequence[Any],
    names: Sequence[str],
    schema: Schema,
    *,
    settings: GuardSettings | None = None,
) -> None:
    """Match every value against ``schema`` after an arity check."""
    check_arity(values, names, "objects")
    for value, name in zip(values, names):
        check_object_structure(value, name, schema, settings=settings)


validate_structure = check_object_structure
validate_structure_array = check_object_structure_array
