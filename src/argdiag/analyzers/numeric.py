from __future__ import annotations

from collections.abc import Sequence

from argdiag.catalog import Outcome, ReasonTag
from argdiag.cause import Cause
from argdiag.validators import must_be_number

from .base import AnalyzerTable, build_table

# Functions whose only failure for a numeric argument is a domain violation.
DOMAIN_FUNCTIONS: tuple[str, ...] = (
    "acos",
    "acosh",
    "asin",
    "atanh",
    "log",
    "log2",
    "log10",
    "sqrt",
)


def _domain(args: Sequence[object], cause: Cause) -> list[Outcome]:
    number_error = must_be_number(args[0])
    if number_error is None:
        return [ReasonTag.DOMAIN_ERROR]
    return [number_error]


def _fmod(args: Sequence[object], cause: Cause) -> list[Outcome]:
    dividend, divisor = args
    errors = [must_be_number(dividend), must_be_number(divisor)]
    if errors != [None, None]:
        return errors
    if divisor == 0:
        return [None, ReasonTag.DOMAIN_ERROR]
    return []


def _numbers(args: Sequence[object], cause: Cause) -> list[Outcome]:
    if len(args) > 2:
        return []
    return [must_be_number(arg) for arg in args]


MATH_ANALYZERS: AnalyzerTable = build_table(
    "math",
    (
        *((name, 1, _domain) for name in DOMAIN_FUNCTIONS),
        ("fmod", 2, _fmod),
    ),
    fallback=_numbers,
)
