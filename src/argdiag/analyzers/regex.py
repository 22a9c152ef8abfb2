from __future__ import annotations

from collections.abc import Sequence

from argdiag.catalog import Outcome, ReasonTag
from argdiag.cause import Cause, CauseHint
from argdiag.validators import must_be_compiled_regexp, must_be_iodata, must_be_regexp

from .base import AnalyzerTable, build_table


def _with_bad_options(errors: list[Outcome], cause: Cause) -> list[Outcome]:
    if cause == CauseHint.BADOPT:
        return [*errors, ReasonTag.BAD_OPTIONS]
    return errors


def _compile(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [ReasonTag.NOT_IODATA]


def _compile_with_options(args: Sequence[object], cause: Cause) -> list[Outcome]:
    pattern_error = must_be_iodata(args[0])
    return _with_bad_options([pattern_error], cause)


def _inspect(args: Sequence[object], cause: Cause) -> list[Outcome]:
    compiled, item = args
    compiled_error = must_be_compiled_regexp(compiled)
    if compiled_error is None or not isinstance(item, str):
        return [compiled_error, ReasonTag.BAD_REGEXP_ITEM]
    return [compiled_error]


def _subject_and_regexp(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, regexp = args[:2]
    return [must_be_iodata(subject), must_be_regexp(regexp)]


def _subject_and_regexp_with_options(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return _with_bad_options(_subject_and_regexp(args, cause), cause)


def _replace(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, regexp, replacement = args[:3]
    return [must_be_iodata(subject), must_be_regexp(regexp), must_be_iodata(replacement)]


def _replace_with_options(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return _with_bad_options(_replace(args, cause), cause)


RE_ANALYZERS: AnalyzerTable = build_table(
    "re",
    (
        ("compile", 1, _compile),
        ("compile", 2, _compile_with_options),
        ("inspect", 2, _inspect),
        ("replace", 3, _replace),
        ("replace", 4, _replace_with_options),
        ("run", 2, _subject_and_regexp),
        ("run", 3, _subject_and_regexp_with_options),
        ("split", 2, _subject_and_regexp),
        ("split", 3, _subject_and_regexp_with_options),
    ),
)
