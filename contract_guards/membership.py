"""Membership guards -- closed code registries and enumerations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, ClassVar

from contract_guards.exceptions import MembershipError, TypeMismatchError
from contract_guards.values import type_tag


@dataclass(frozen=True)
class CodeInfo:
    """A single accepted code in a registry."""

    code: int
    phrase: str
    category: str


class CodeRegistry:
    """
    Closed registry of accepted integer codes.

    Subclasses fill ``_CODES``; membership is exact, with no coercion of
    strings or floats and no acceptance of ``bool``.
    """

    registry_name: ClassVar[str] = "CodeRegistry"
    _CODES: ClassVar[dict[int, CodeInfo]] = {}

    @classmethod
    def is_valid(cls, code: Any) -> bool:
        if isinstance(code, bool) or not isinstance(code, int):
            return False
        return int(code) in cls._CODES

    @classmethod
    def get_info(cls, code: int) -> CodeInfo | None:
        if not cls.is_valid(code):
            return None
        return cls._CODES[int(code)]

    @classmethod
    def codes(cls) -> frozenset[int]:
        return frozenset(cls._CODES)


def _http_category(code: int) -> str:
    if code < 200:
        return "informational"
    if code < 300:
        return "success"
    if code < 400:
        return "redirection"
    if code < 500:
        return "client_error"
    return "server_error"


class HttpStatusRegistry(CodeRegistry):
    """Registry of the HTTP status codes known to ``http.HTTPStatus``."""

    registry_name: ClassVar[str] = "HttpStatusRegistry"
    _CODES: ClassVar[dict[int, CodeInfo]] = {
        status.value: CodeInfo(
            status.value, status.phrase, _http_category(status.value)
        )
        for status in HTTPStatus
    }


def check_is_member_of_code_registry(
    value: Any,
    name: str,
    registry: type[CodeRegistry] = HttpStatusRegistry,
) -> None:
    """Raise ``MembershipError`` if ``value`` is not a code in ``registry``."""
    if not registry.is_valid(value):
        raise MembershipError(name, value, registry.registry_name)


def _enum_constants(enum_object: Any, enum_name: str) -> Iterable[Any]:
    if isinstance(enum_object, type) and issubclass(enum_object, Enum):
        members = list(enum_object)
        return members + [member.value for member in members]
    if isinstance(enum_object, Mapping):
        return list(enum_object.values())
    raise TypeMismatchError(
        enum_name,
        "enumeration",
        type_tag(enum_object),
        f"Must provide an Enum class or mapping for '{enum_name}' enumeration",
    )


def _same_constant(value: Any, constant: Any) -> bool:
    if value is constant:
        return True
    # True == 1 must not make a bool a member of an int enumeration
    if isinstance(value, bool) != isinstance(constant, bool):
        return False
    return value == constant


def check_enum_value(
    enum_object: Any,
    enum_name: str,
    value: Any,
    name: str,
) -> None:
    """
    Raise ``MembershipError`` if ``value`` is not one of the enumeration's
    constants.

    ``enum_object`` is an ``Enum`` subclass, whose members and member values
    are both accepted, or a mapping whose values are the accepted constants.
    """
    constants = _enum_constants(enum_object, enum_name)
    if not any(_same_constant(value, constant) for constant in constants):
        raise MembershipError(name, value, enum_name)
