from __future__ import annotations

from collections.abc import Sequence

from argdiag.catalog import Outcome
from argdiag.cause import Cause
from argdiag.validators import must_be_list, must_be_positive_integer

from .base import AnalyzerTable, build_table


def _key_search(args: Sequence[object], cause: Cause) -> list[Outcome]:
    _, position, items = args
    return [None, must_be_positive_integer(position), must_be_list(items)]


def _member(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [None, must_be_list(args[1])]


def _reverse(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [must_be_list(args[0])]


LISTS_ANALYZERS: AnalyzerTable = build_table(
    "lists",
    (
        ("keyfind", 3, _key_search),
        ("keymember", 3, _key_search),
        ("keysearch", 3, _key_search),
        ("member", 2, _member),
        ("reverse", 2, _reverse),
    ),
)
