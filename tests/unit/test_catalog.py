from __future__ import annotations

import pytest

from argdiag.catalog import (
    MESSAGE_CATALOG,
    NotFun,
    ReasonTag,
    _build_catalog,
    arity_phrase,
    expand_reason,
)

pytestmark = pytest.mark.unit


def test_every_reason_tag_has_catalog_text() -> None:
    assert set(MESSAGE_CATALOG) == set(ReasonTag)
    assert all(text for text in MESSAGE_CATALOG.values())


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        MESSAGE_CATALOG[ReasonTag.RANGE] = "changed"  # type: ignore[index]


def test_expand_reason_uses_catalog_text() -> None:
    assert expand_reason(ReasonTag.NOT_BINARY) == "not a binary"
    assert expand_reason(ReasonTag.RANGE) == "out of range"
    assert expand_reason("not_map") == "not a map"
    assert expand_reason(ReasonTag.DOMAIN_ERROR) == "is outside the domain for this function"


def test_expand_reason_for_fun_arity() -> None:
    assert expand_reason(NotFun(0)) == "not a fun that takes no arguments"
    assert expand_reason(NotFun(1)) == "not a fun that takes one argument"
    assert expand_reason(NotFun(3)) == "not a fun that takes three arguments"
    assert expand_reason(NotFun(12)) == "not a fun that takes 12 arguments"


def test_expand_reason_passes_unknown_text_through() -> None:
    assert expand_reason("the key is frozen") == "the key is frozen"


def test_arity_phrase_boundaries() -> None:
    assert arity_phrase(10) == "ten arguments"
    assert arity_phrase(11) == "11 arguments"


def test_not_fun_rejects_negative_arity() -> None:
    with pytest.raises(ValueError):
        NotFun(-1)


def test_build_catalog_rejects_duplicates_and_empty_text() -> None:
    with pytest.raises(ValueError, match="duplicate"):
        _build_catalog(((ReasonTag.RANGE, "a"), (ReasonTag.RANGE, "b")))
    with pytest.raises(ValueError, match="non-empty"):
        _build_catalog(((ReasonTag.RANGE, ""),))
