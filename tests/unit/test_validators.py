from __future__ import annotations

import re

import pytest

from argdiag.catalog import NotFun, ReasonTag
from argdiag.terms import BitString, ImproperList, MapIterator
from argdiag.validators import (
    is_element_spec,
    is_empty_binary,
    is_match_spec,
    is_update_op,
    must_be_binary,
    must_be_char_data,
    must_be_compiled_regexp,
    must_be_encoding,
    must_be_endianness,
    must_be_fun,
    must_be_integer_in_range,
    must_be_iodata,
    must_be_list,
    must_be_map,
    must_be_map_or_iter,
    must_be_number,
    must_be_objects,
    must_be_pattern,
    must_be_position,
    must_be_positive_integer,
    must_be_regexp,
    must_be_tuple,
)

pytestmark = pytest.mark.unit


def test_binary_distinguishes_bitstrings() -> None:
    assert must_be_binary(b"abc") is None
    assert must_be_binary(BitString(data=b"\xff", bit_size=8)) is None
    assert must_be_binary(BitString(data=b"\xff", bit_size=3)) is ReasonTag.BITSTRING
    assert must_be_binary("abc") is ReasonTag.NOT_BINARY
    assert must_be_binary(b"", default=ReasonTag.RANGE) is ReasonTag.RANGE


def test_integer_ranges() -> None:
    assert must_be_integer_in_range(5, 1, 10) is None
    assert must_be_integer_in_range(11, 1, 10) is ReasonTag.RANGE
    assert must_be_integer_in_range(1.5, 1, 10) is ReasonTag.NOT_INTEGER
    assert must_be_integer_in_range(True, 0) is ReasonTag.NOT_INTEGER
    assert must_be_position(0) is None
    assert must_be_position(-1) is ReasonTag.RANGE
    assert must_be_positive_integer(0) is ReasonTag.RANGE
    assert must_be_positive_integer("1") is ReasonTag.NOT_INTEGER


def test_endianness() -> None:
    assert must_be_endianness("big") is None
    assert must_be_endianness("little") is None
    assert must_be_endianness("middle") is ReasonTag.BAD_ENDIANNESS


def test_fun_arity() -> None:
    assert must_be_fun(lambda value: value, 1) is None
    assert must_be_fun(lambda *values: values, 3) is None
    assert must_be_fun(lambda left, right: left, 1) == NotFun(1)
    assert must_be_fun("not callable", 2) == NotFun(2)
    assert must_be_fun(int, 1) == NotFun(1)


def test_lists_and_maps() -> None:
    assert must_be_list([1, 2]) is None
    assert must_be_list(ImproperList([1], 2)) is ReasonTag.NOT_PROPER_LIST
    assert must_be_list((1, 2)) is ReasonTag.NOT_LIST
    assert must_be_map({}) is None
    assert must_be_map([]) is ReasonTag.NOT_MAP
    assert must_be_map_or_iter({"a": 1}) is None
    assert must_be_map_or_iter(MapIterator.over({"a": 1})) is None
    assert must_be_map_or_iter("none") is None
    assert must_be_map_or_iter(None) is ReasonTag.NOT_MAP_OR_ITERATOR
    assert must_be_map_or_iter([("a", 1)]) is ReasonTag.NOT_MAP_OR_ITERATOR


def test_numbers() -> None:
    assert must_be_number(1) is None
    assert must_be_number(-2.5) is None
    assert must_be_number(True) is ReasonTag.NOT_NUMBER
    assert must_be_number("1") is ReasonTag.NOT_NUMBER


def test_binary_patterns() -> None:
    assert must_be_pattern(b"x") is None
    assert must_be_pattern([b"x", b"yz"]) is None
    assert must_be_pattern(b"") is ReasonTag.BAD_BINARY_PATTERN
    assert must_be_pattern([]) is ReasonTag.BAD_BINARY_PATTERN
    assert must_be_pattern([b"x", b""]) is ReasonTag.BAD_BINARY_PATTERN
    assert must_be_pattern("x") is ReasonTag.BAD_BINARY_PATTERN


def test_iodata_and_regexps() -> None:
    assert must_be_iodata([b"ab", [99, "d"]]) is None
    assert must_be_iodata([256]) is ReasonTag.NOT_IODATA
    assert must_be_iodata(3) is ReasonTag.NOT_IODATA
    assert must_be_regexp("a+") is None
    assert must_be_regexp(re.compile("a+")) is None
    assert must_be_regexp("(") is ReasonTag.NOT_REGEXP
    assert must_be_regexp(42) is ReasonTag.NOT_REGEXP
    assert must_be_compiled_regexp(re.compile("a")) is None
    assert must_be_compiled_regexp("a") is ReasonTag.NOT_COMPILED_REGEXP


def test_char_data_and_encodings() -> None:
    assert must_be_char_data("text") is None
    assert must_be_char_data([104, "i", b"!"]) is None
    assert must_be_char_data(3.0) is ReasonTag.BAD_CHAR_DATA
    assert must_be_char_data([-1]) is ReasonTag.BAD_CHAR_DATA
    assert must_be_encoding("utf8") is None
    assert must_be_encoding(("utf16", "little")) is None
    assert must_be_encoding("klingon") is ReasonTag.BAD_ENCODING
    assert must_be_encoding(("utf8", "little")) is ReasonTag.BAD_ENCODING


def test_tuples_and_objects() -> None:
    assert must_be_tuple(("k", 1)) is None
    assert must_be_tuple(()) is ReasonTag.EMPTY_TUPLE
    assert must_be_tuple(["k"]) is ReasonTag.NOT_TUPLE
    assert must_be_objects([("a",), ("b", 2)]) is None
    assert must_be_objects([("a",), ()]) is ReasonTag.NOT_TUPLE_OR_LIST
    assert must_be_objects(ImproperList([("a",)], ("b",))) is ReasonTag.NOT_TUPLE_OR_LIST
    assert must_be_objects(()) is ReasonTag.EMPTY_TUPLE
    assert must_be_objects("a") is ReasonTag.NOT_TUPLE


def test_structural_predicates() -> None:
    assert is_update_op(1)
    assert is_update_op((2, 1))
    assert is_update_op([(2, 1), (3, 1, 10, 0)])
    assert not is_update_op((2, 1, 3))
    assert not is_update_op("x")
    assert is_element_spec((2, "v"))
    assert is_element_spec([(2, "v"), (3, "w")])
    assert not is_element_spec((0, "v"))
    assert is_match_spec([(("$1", "_"), [], ["$_"])])
    assert is_match_spec([("_", [], [True])])
    assert not is_match_spec([("_", [], [])])
    assert not is_match_spec("spec")
    assert is_empty_binary(b"")
    assert not is_empty_binary(b"a")
    assert not is_empty_binary("")


@pytest.mark.parametrize(
    "encoding",
    [
        "latin1",
        "unicode",
        "utf8",
        "utf16",
        "utf32",
        ("utf16", "big"),
        ("utf16", "little"),
        ("utf32", "big"),
        ("utf32", "little"),
        "utf-8",
        "utf-16",
        "utf-32",
    ],
)
def test_every_accepted_encoding_spelling_is_valid(encoding: object) -> None:
    assert must_be_encoding(encoding) is None
