from __future__ import annotations

import pytest

from argdiag.assembler import assemble
from argdiag.catalog import NotFun, ReasonTag

pytestmark = pytest.mark.unit


def test_assemble_skips_clear_positions() -> None:
    outcomes = [None, ReasonTag.NOT_MAP, None, NotFun(2)]

    assert assemble(outcomes, 4) == {2: "not a map", 4: "not a fun that takes two arguments"}


def test_assemble_empty_outcomes() -> None:
    assert assemble([], 3) == {}
    assert assemble([None, None], 2) == {}


def test_assemble_drops_positions_beyond_arity() -> None:
    assert assemble([None, ReasonTag.BAD_INFO_ITEM], 1) == {}


def test_assemble_keeps_raw_text() -> None:
    assert assemble(["custom reason"], 1) == {1: "custom reason"}
