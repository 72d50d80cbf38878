import copy
import math
import pickle

import pytest
from urlquery import UNDEFINED, ValueKind, coerce, is_nullish, kind_of, to_number, to_string


def test_undefined_marker():
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
    assert type(UNDEFINED)() is UNDEFINED
    assert copy.copy(UNDEFINED) is UNDEFINED
    assert copy.deepcopy({"a": UNDEFINED})["a"] is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        (UNDEFINED, ValueKind.UNDEFINED),
        ("", ValueKind.STRING),
        (True, ValueKind.BOOLEAN),
        (1, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        ([], ValueKind.SEQUENCE),
        ((), ValueKind.SEQUENCE),
        ({}, ValueKind.OTHER),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


@pytest.mark.parametrize(
    "text, number",
    [
        ("", 0),
        ("  ", 0),
        ("42", 42),
        (" 42\n", 42),
        ("-7", -7),
        ("+7", 7),
        ("1.5", 1.5),
        (".5", 0.5),
        ("5.", 5),
        ("1e3", 1000),
        ("1E-2", 0.01),
        ("0x1f", 31),
        ("0o17", 15),
        ("0b101", 5),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_to_number(text, number):
    assert to_number(text) == number


def test_to_number_integral_is_int():
    assert isinstance(to_number("42"), int)
    assert isinstance(to_number("4.0"), int)
    assert isinstance(to_number("4.5"), float)


@pytest.mark.parametrize("text", ["abc", "NaN", "1,5", "-0x1", "0x", "inf", "1e", "１２"])
def test_to_number_nan(text):
    assert math.isnan(to_number(text))


def test_coerce_leaves_non_strings():
    assert coerce(5) == 5
    assert coerce(True) is True
    assert coerce(["1"]) == ["1"]
    assert coerce(None) is None


@pytest.mark.parametrize(
    "value, text",
    [
        (None, "null"),
        (UNDEFINED, "undefined"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (2.0, "2"),
        (1.5, "1.5"),
        (1e-7, "1e-7"),
        (-2.5e-8, "-2.5e-8"),
        (1e-6, "0.000001"),
        (1.5e-5, "0.000015"),
        (0.0001, "0.0001"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
        (["a", 1, None, True], "a,1,,true"),
        ((1, 2), "1,2"),
        ("x", "x"),
    ],
)
def test_to_string(value, text):
    assert to_string(value) == text


@pytest.mark.parametrize(
    "value, nullish",
    [
        (None, True),
        (UNDEFINED, True),
        ("", True),
        (" \t", True),
        ([], True),
        ([None], True),
        (0, False),
        (False, False),
        ("null", False),
        ("x", False),
    ],
)
def test_is_nullish(value, nullish):
    assert is_nullish(value) is nullish
