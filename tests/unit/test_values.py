"""Tests for the value model: sentinel, type tags, arrays and SuperClass."""

import pickle
from decimal import Decimal
from fractions import Fraction

import pytest

from contract_guards.values import (
    UNDEFINED,
    SuperClass,
    SuperClassAware,
    class_name,
    constructor_name,
    is_array,
    is_constructor,
    type_tag,
)


class Widget:
    def method(self):
        return None


class TestUndefined:
    def test_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED

    def test_falsy_and_repr(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_pickle_preserves_identity(self):
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


class TestTypeTag:
    @pytest.mark.parametrize(
        "value,tag",
        [
            (UNDEFINED, "undefined"),
            (None, "null"),
            (False, "boolean"),
            (0, "number"),
            (2.5, "number"),
            (Decimal("1"), "number"),
            (Fraction(1, 3), "number"),
            (1j, "number"),
            ("", "string"),
            (b"", "bytes"),
            (bytearray(), "bytes"),
            (Widget, "function"),
            (print, "function"),
            (lambda: None, "function"),
            (Widget().method, "function"),
            ([], "object"),
            ((), "object"),
            ({}, "object"),
            (set(), "object"),
            (Widget(), "object"),
        ],
    )
    def test_tags(self, value, tag):
        assert type_tag(value) == tag


class TestPredicates:
    def test_is_array(self):
        assert is_array([]) and is_array((1,))
        assert not is_array("abc")
        assert not is_array(range(3))

    def test_is_constructor(self):
        assert is_constructor(Widget)
        assert is_constructor(len)
        assert not is_constructor(Widget())

    def test_names(self):
        assert class_name(Widget()) == "Widget"
        assert constructor_name(Widget) == "Widget"
        assert constructor_name(len) == "len"


class TestSuperClass:
    def test_first_subclass_names_family(self):
        class Item(SuperClass):
            pass

        class Sword(Item):
            pass

        class Longsword(Sword):
            pass

        assert Item().get_super() == "Item"
        assert Sword().get_super() == "Item"
        assert Longsword().get_super() == "Item"

    def test_families_are_independent(self):
        class Item(SuperClass):
            pass

        class Vehicle(SuperClass):
            pass

        assert Item.super_name == "Item"
        assert Vehicle.super_name == "Vehicle"
        assert SuperClass.super_name is None

    def test_satisfies_capability(self):
        class Item(SuperClass):
            pass

        assert isinstance(Item(), SuperClassAware)
        assert not isinstance(Widget(), SuperClassAware)
