"""
Tests for the primitive guards.

Each guard returns None when its contract holds and raises a typed
GuardError naming the offending argument when it does not.
"""

from decimal import Decimal

import pytest

from contract_guards.exceptions import (
    ArgumentError,
    ArrayLengthError,
    ConditionError,
    GuardError,
    IndexRangeError,
    RangeError,
    TypeMismatchError,
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
from contract_guards.values import UNDEFINED, SuperClass


class Item(SuperClass):
    pass


class Sword(Item):
    pass


class Vehicle(SuperClass):
    pass


class Car(Vehicle):
    pass


class Plain:
    pass


class ReportsWeapon:
    """Implements the accessor without deriving from SuperClass."""

    def get_super(self):
        return "Weapon"


class TestCheckUndefined:
    def test_defined_values_accepted(self):
        for value in (0, "", None, False, [], {}):
            assert check_undefined(value, "value") is None

    def test_undefined_rejected(self):
        with pytest.raises(ArgumentError, match="'num' Argument left Undefined") as exc:
            check_undefined(UNDEFINED, "num")
        assert exc.value.name == "num"
        assert exc.value.code == "ARGUMENT_UNDEFINED"

    def test_none_is_not_undefined(self):
        """None is an ordinary value, only the sentinel is undefined."""
        check_undefined(None, "maybe")

    def test_undefined_as_default_argument(self):
        def square_number(num=UNDEFINED):
            check_undefined(num, "num")
            return num * num

        assert square_number(3) == 9
        with pytest.raises(ArgumentError):
            square_number()


class TestCheckDataType:
    @pytest.mark.parametrize(
        "value,type_name",
        [
            ("Jack", "string"),
            (30, "number"),
            (1.5, "number"),
            (Decimal("1.5"), "number"),
            (True, "boolean"),
            (None, "null"),
            (b"raw", "bytes"),
            (len, "function"),
            (Plain, "function"),
            ([1, 2], "object"),
            ({"a": 1}, "object"),
            (Plain(), "object"),
            (UNDEFINED, "undefined"),
        ],
    )
    def test_matching_type_accepted(self, value, type_name):
        check_data_type(value, "value", type_name)

    def test_mismatch_names_expected_and_actual(self):
        message = "Must provide number datatype for 'num'"
        with pytest.raises(TypeMismatchError, match=message) as exc:
            check_data_type("5", "num", "number")
        assert exc.value.expected == "number"
        assert exc.value.actual == "string"
        assert exc.value.name == "num"

    def test_bool_is_not_a_number(self):
        with pytest.raises(TypeMismatchError):
            check_data_type(True, "flag", "number")

    def test_unknown_type_name_never_matches(self):
        with pytest.raises(TypeMismatchError):
            check_data_type(1, "num", "int")


class TestCheckInstanceType:
    def test_exact_class_name_accepted(self):
        check_instance_type(Sword(), "weapon", "Sword")
        check_instance_type("text", "label", "str")

    def test_other_class_rejected(self):
        message = "Must provide 'Sword' instancetype for 'weapon'"
        with pytest.raises(TypeMismatchError, match=message) as exc:
            check_instance_type(Car(), "weapon", "Sword")
        assert exc.value.actual == "Car"

    def test_not_ancestor_aware(self):
        """A Sword is an Item, but its immediate class name is Sword."""
        with pytest.raises(TypeMismatchError):
            check_instance_type(Sword(), "weapon", "Item")


class TestCheckSuperClass:
    def test_family_name_reported_by_descendants(self):
        check_super_class(Sword(), "weapon", "Item")
        check_super_class(Item(), "item", "Item")
        check_super_class(Car(), "car", "Vehicle")

    def test_wrong_family_rejected(self):
        message = "child of 'Item' Superclass for 'thing'"
        with pytest.raises(TypeMismatchError, match=message) as exc:
            check_super_class(Car(), "thing", "Item")
        assert exc.value.actual == "Vehicle"

    def test_duck_typed_accessor_accepted(self):
        check_super_class(ReportsWeapon(), "weapon", "Weapon")

    def test_value_without_accessor_rejected(self):
        with pytest.raises(TypeMismatchError, match="does not report a super class"):
            check_super_class(Plain(), "thing", "Item")

    def test_super_name_keyword_overrides_family(self):
        class Weapon(Item, super_name="Weapon"):
            pass

        class Axe(Weapon):
            pass

        check_super_class(Axe(), "axe", "Weapon")
        with pytest.raises(TypeMismatchError):
            check_super_class(Axe(), "axe", "Item")


class TestCheckIsArray:
    @pytest.mark.parametrize("value", [[], [1, 2], (), (1,)])
    def test_lists_and_tuples_accepted(self, value):
        check_is_array(value, "arr")

    @pytest.mark.parametrize("value", ["abc", b"abc", {"a": 1}, {1, 2}, 5, None])
    def test_non_arrays_rejected(self, value):
        message = "Must provide an array for 'arr' Argument"
        with pytest.raises(TypeMismatchError, match=message):
            check_is_array(value, "arr")


class TestCheckArrayLength:
    def test_matching_length_accepted(self):
        check_array_length([1, 2, 3], "arr", 3)
        check_array_length([], "arr", 0)

    def test_wrong_length_rejected(self):
        with pytest.raises(ArrayLengthError, match="length of 2 for 'arr'") as exc:
            check_array_length([1, 2, 3], "arr", 2)
        assert exc.value.actual_length == 3
        assert exc.value.target_length == 2
        assert isinstance(exc.value, RangeError)


class TestCheckIndexRange:
    def test_valid_indices_accepted(self):
        for index in (0, 1, 2):
            check_index_range([1, 2, 3], "arr", index)

    def test_index_past_end_rejected(self):
        with pytest.raises(IndexRangeError) as exc:
            check_index_range([1, 2, 3], "arr", 3)
        assert exc.value.index == 3
        assert exc.value.length == 3
        assert isinstance(exc.value, RangeError)

    def test_negative_index_rejected(self):
        with pytest.raises(IndexRangeError):
            check_index_range([1, 2, 3], "arr", -1)

    def test_empty_array_has_no_valid_index(self):
        with pytest.raises(IndexRangeError):
            check_index_range([], "arr", 0)

    @pytest.mark.parametrize("index", ["1", 1.0, True])
    def test_non_integer_index_rejected(self, index):
        with pytest.raises(TypeMismatchError):
            check_index_range([1, 2, 3], "arr", index)


class TestCheckArrayElements:
    @staticmethod
    def _school_age(age):
        return 5 <= age <= 18

    CONDITION = "Age must be between 5 - 18"

    def test_all_elements_fulfil_condition(self):
        check_array_elements([5, 12, 18], "ages", self._school_age, self.CONDITION)

    def test_empty_array_accepted(self):
        check_array_elements([], "ages", self._school_age, self.CONDITION)

    def test_first_failing_element_reported(self):
        with pytest.raises(ConditionError) as exc:
            check_array_elements([7, 4, 30], "ages", self._school_age, self.CONDITION)
        assert exc.value.index == 1
        assert exc.value.element == 4
        assert str(exc.value) == (
            "Element at index 1 of array argument 'ages' doesn't fulfill "
            "condition: Age must be between 5 - 18"
        )

    def test_predicate_stops_at_first_failure(self):
        seen = []

        def predicate(element):
            seen.append(element)
            return element != "bad"

        with pytest.raises(ConditionError):
            check_array_elements(["a", "bad", "c"], "items", predicate, "not bad")
        assert seen == ["a", "bad"]


class TestGuardErrorHierarchy:
    @pytest.mark.parametrize(
        "call",
        [
            lambda: check_undefined(UNDEFINED, "x"),
            lambda: check_data_type(1, "x", "string"),
            lambda: check_is_array(1, "x"),
            lambda: check_array_length([], "x", 1),
            lambda: check_index_range([], "x", 0),
            lambda: check_array_elements([0], "x", bool, "truthy"),
        ],
    )
    def test_every_failure_is_a_guard_error(self, call):
        with pytest.raises(GuardError):
            call()

    def test_idempotent(self):
        """Same inputs, same outcome."""
        for _ in range(2):
            check_data_type("a", "x", "string")
            with pytest.raises(TypeMismatchError):
                check_data_type(1, "x", "string")
