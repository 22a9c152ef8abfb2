from __future__ import annotations

from collections.abc import Sequence

from argdiag.catalog import Outcome, ReasonTag
from argdiag.cause import Cause
from argdiag.validators import must_be_fun, must_be_list, must_be_map, must_be_map_or_iter

from .base import ANY_ARITY, Analyzer, AnalyzerTable, build_table


def _blame(position: int, reason: ReasonTag) -> Analyzer:
    def analyze(args: Sequence[object], cause: Cause) -> list[Outcome]:
        return [*([None] * (position - 1)), reason]

    return analyze


def _map_with_fun(args: Sequence[object], cause: Cause) -> list[Outcome]:
    function, mapping = args
    return [must_be_fun(function, 2), must_be_map_or_iter(mapping)]


def _fold(args: Sequence[object], cause: Cause) -> list[Outcome]:
    function, _, mapping = args
    return [must_be_fun(function, 3), None, must_be_map_or_iter(mapping)]


def _list_first(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [must_be_list(args[0])]


def _two_maps(args: Sequence[object], cause: Cause) -> list[Outcome]:
    first, second = args
    return [must_be_map(first), must_be_map(second)]


def _combine_maps(args: Sequence[object], cause: Cause) -> list[Outcome]:
    combiner, first, second = args
    return [must_be_fun(combiner, 3), must_be_map(first), must_be_map(second)]


def _update_with(args: Sequence[object], cause: Cause) -> list[Outcome]:
    _, function, mapping = args
    return [None, must_be_fun(function, 1), must_be_map(mapping)]


def _update_with_init(args: Sequence[object], cause: Cause) -> list[Outcome]:
    _, function, _, mapping = args
    return [None, must_be_fun(function, 1), None, must_be_map(mapping)]


def _keys_and_map(args: Sequence[object], cause: Cause) -> list[Outcome]:
    keys, mapping = args
    return [must_be_list(keys), must_be_map(mapping)]


MAPS_ANALYZERS: AnalyzerTable = build_table(
    "maps",
    (
        ("filter", 2, _map_with_fun),
        ("filtermap", 2, _map_with_fun),
        ("find", ANY_ARITY, _blame(2, ReasonTag.NOT_MAP)),
        ("fold", 3, _fold),
        ("from_keys", 2, _list_first),
        ("from_list", 1, _list_first),
        ("get", ANY_ARITY, _blame(2, ReasonTag.NOT_MAP)),
        ("intersect", 2, _two_maps),
        ("intersect_with", 3, _combine_maps),
        ("is_key", ANY_ARITY, _blame(2, ReasonTag.NOT_MAP)),
        ("iterator", ANY_ARITY, _blame(1, ReasonTag.NOT_MAP)),
        ("keys", ANY_ARITY, _blame(1, ReasonTag.NOT_MAP)),
        ("map", 2, _map_with_fun),
        ("merge", 2, _two_maps),
        ("merge_with", 3, _combine_maps),
        ("put", ANY_ARITY, _blame(3, ReasonTag.NOT_MAP)),
        ("next", ANY_ARITY, _blame(1, ReasonTag.BAD_ITERATOR)),
        ("remove", ANY_ARITY, _blame(2, ReasonTag.NOT_MAP)),
        ("size", ANY_ARITY, _blame(1, ReasonTag.NOT_MAP)),
        ("take", ANY_ARITY, _blame(2, ReasonTag.NOT_MAP)),
        ("to_list", ANY_ARITY, _blame(1, ReasonTag.NOT_MAP)),
        ("update", ANY_ARITY, _blame(3, ReasonTag.NOT_MAP)),
        ("update_with", 3, _update_with),
        ("update_with", 4, _update_with_init),
        ("values", ANY_ARITY, _blame(1, ReasonTag.NOT_MAP)),
        ("with", 2, _keys_and_map),
        ("without", 2, _keys_and_map),
    ),
)
