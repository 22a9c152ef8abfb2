from __future__ import annotations

import re

import numpy as np
import pytest

from argdiag.analyzers.numeric import DOMAIN_FUNCTIONS
from argdiag.analyzers.unicode import NORMALIZATION_FUNCTIONS
from argdiag.describe import describe_failure

pytestmark = pytest.mark.unit


def _call(family: str, name: str, *args: object, cause: object = None) -> dict[int, str]:
    return describe_failure((family, name, len(args)), args, cause)


@pytest.mark.parametrize("name", DOMAIN_FUNCTIONS)
def test_domain_functions(name: str) -> None:
    assert _call("math", name, -4) == {1: "is outside the domain for this function"}
    assert _call("math", name, "four") == {1: "not a number"}


def test_fmod() -> None:
    assert _call("math", "fmod", 1.0, 0) == {2: "is outside the domain for this function"}
    assert _call("math", "fmod", "x", 0) == {1: "not a number"}
    assert _call("math", "fmod", 5, 2) == {}


def test_math_fallback() -> None:
    assert _call("math", "pow", "x", 2) == {1: "not a number"}
    assert _call("math", "sin", np.float64(1.0)) == {}
    assert _call("math", "sin", True) == {1: "not a number"}
    assert _call("math", "pi") == {}


def test_re_compile_and_inspect() -> None:
    assert _call("re", "compile", 42) == {1: "not an iodata term"}
    assert _call("re", "compile", "(", []) == {}
    assert _call("re", "compile", re.compile("a"), []) == {1: "not an iodata term"}
    assert _call("re", "compile", [b"a", 300], []) == {1: "not an iodata term"}
    assert _call("re", "compile", "a", ["bogus"], cause="badopt") == {2: "invalid options"}
    assert _call("re", "inspect", re.compile("a"), "namelist") == {2: "not a valid item"}
    assert _call("re", "inspect", "a", "namelist") == {1: "not a compiled regular expression"}
    assert _call("re", "inspect", "a", 5) == {
        1: "not a compiled regular expression",
        2: "not a valid item",
    }


def test_re_run_replace_split() -> None:
    assert _call("re", "run", 42, "a") == {1: "not an iodata term"}
    assert _call("re", "run", "abc", 42) == {
        2: "neither an iodata term nor a compiled regular expression"
    }
    assert _call("re", "run", "abc", "b", ["bogus"], cause="badopt") == {3: "invalid options"}
    assert _call("re", "split", "abc", "b", []) == {}
    assert _call("re", "replace", "abc", "b", 3) == {3: "not an iodata term"}
    assert _call("re", "replace", "abc", "b", "x", [1], cause="badopt") == {
        4: "invalid options"
    }


def test_unicode_conversions() -> None:
    assert _call("unicode", "characters_to_binary", 3.5) == {
        1: "not valid character data (an iodata term)"
    }
    assert _call("unicode", "characters_to_list", "abc", "klingon") == {
        2: "not a valid encoding"
    }
    assert _call("unicode", "characters_to_binary", [104, None], "latin1", ("utf16", "big")) == {
        1: "not valid character data (an iodata term)"
    }
    assert _call("unicode", "characters_to_binary", "abc", "utf8", "utf32") == {}


@pytest.mark.parametrize("name", NORMALIZATION_FUNCTIONS)
def test_normalization_functions(name: str) -> None:
    assert _call("unicode", name, 1.5) == {1: "not valid character data (an iodata term)"}


@pytest.mark.parametrize("encoding", ["utf16", "utf32", ("utf16", "little"), ("utf32", "big")])
def test_unicode_conversions_with_multibyte_encodings(encoding: object) -> None:
    assert _call("unicode", "characters_to_binary", "abc", encoding) == {}
    assert _call("unicode", "characters_to_list", "abc", "unicode", encoding) == {}
