from __future__ import annotations

from collections.abc import Sequence

from argdiag.catalog import Outcome, ReasonTag
from argdiag.cause import Cause, CauseHint
from argdiag.terms import byte_size, is_integer
from argdiag.validators import (
    is_empty_binary,
    must_be_binary,
    must_be_endianness,
    must_be_integer,
    must_be_non_neg_integer,
    must_be_pattern,
    must_be_position,
)

from .base import AnalyzerTable, all_clear, build_table


def _subject(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [must_be_binary(args[0])]


def _at(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, position = args
    subject_error = must_be_binary(subject)
    position_error = must_be_position(position)
    if (
        subject_error is None
        and position_error is None
        and int(position) >= byte_size(subject)  # type: ignore[call-overload]
    ):
        position_error = ReasonTag.RANGE
    return [subject_error, position_error]


def _bad_pattern(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [ReasonTag.BAD_BINARY_PATTERN]


def _copy(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, count = args
    return [must_be_binary(subject), must_be_non_neg_integer(count)]


def _decode_unsigned(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, endianness = args
    return [must_be_binary(subject), must_be_endianness(endianness)]


def _encode_unsigned(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [must_be_non_neg_integer(args[0])]


def _encode_unsigned_endian(args: Sequence[object], cause: Cause) -> list[Outcome]:
    value, endianness = args
    return [must_be_non_neg_integer(value), must_be_endianness(endianness)]


def _first_or_last(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject = args[0]
    if is_empty_binary(subject):
        return [ReasonTag.EMPTY_BINARY]
    return [must_be_binary(subject)]


def _not_iodata(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [ReasonTag.NOT_IODATA]


def _bad_binary_list(args: Sequence[object], cause: Cause) -> list[Outcome]:
    return [ReasonTag.BAD_BINARY_LIST]


def _subject_and_pattern(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, pattern = args[:2]
    return [must_be_binary(subject), must_be_pattern(pattern)]


def _is_integer_scope(options: object) -> bool:
    if not isinstance(options, list) or len(options) != 1:
        return False
    option = options[0]
    if not (isinstance(option, tuple) and len(option) == 2 and option[0] == "scope"):
        return False
    scope = option[1]
    return isinstance(scope, tuple) and len(scope) == 2 and all(is_integer(v) for v in scope)


def _match_with_options(args: Sequence[object], cause: Cause) -> list[Outcome]:
    errors = _subject_and_pattern(args, cause)
    if not all_clear(errors):
        return errors
    if _is_integer_scope(args[2]):
        return [None, None, ReasonTag.PART_NOT_IN_BINARY]
    return [None, None, ReasonTag.BAD_OPTIONS]


def _split_with_options(args: Sequence[object], cause: Cause) -> list[Outcome]:
    errors = _subject_and_pattern(args, cause)
    if not all_clear(errors):
        return errors
    return [None, None, ReasonTag.BAD_OPTIONS]


def _part(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, position, length = args
    errors = [must_be_binary(subject), must_be_position(position), must_be_integer(length)]
    if not all_clear(errors):
        return errors
    size = byte_size(subject)
    start = int(position)  # type: ignore[call-overload]
    stop = start + int(length)  # type: ignore[call-overload]
    if start > size:
        return [None, ReasonTag.RANGE]
    if not 0 <= stop <= size:
        return [None, None, ReasonTag.RANGE]
    return []


def _part_pair(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, pos_len = args
    if (
        isinstance(pos_len, tuple)
        and len(pos_len) == 2
        and all(is_integer(value) for value in pos_len)
    ):
        errors = _part([subject, *pos_len], cause)
        if all_clear(errors[1:]):
            return errors[:1]
        return [errors[0], ReasonTag.RANGE]
    return [must_be_binary(subject), ReasonTag.BAD_POS_LEN_TUPLE]


def _replace(args: Sequence[object], cause: Cause) -> list[Outcome]:
    subject, pattern, replacement = args[:3]
    return [must_be_binary(subject), must_be_pattern(pattern), must_be_binary(replacement)]


def _replace_with_options(args: Sequence[object], cause: Cause) -> list[Outcome]:
    errors = _replace(args, cause)
    if cause == CauseHint.BADOPT:
        return [*errors, ReasonTag.BAD_OPTIONS]
    if all_clear(errors):
        # positional arguments are fine; the options reference outside the subject
        return [None, None, None, ReasonTag.BAD_OPTIONS]
    return errors


BINARY_ANALYZERS: AnalyzerTable = build_table(
    "binary",
    (
        ("at", 2, _at),
        ("bin_to_list", 1, _subject),
        ("bin_to_list", 2, _part_pair),
        ("bin_to_list", 3, _part),
        ("compile_pattern", 1, _bad_pattern),
        ("copy", 1, _subject),
        ("copy", 2, _copy),
        ("decode_unsigned", 1, _subject),
        ("decode_unsigned", 2, _decode_unsigned),
        ("encode_unsigned", 1, _encode_unsigned),
        ("encode_unsigned", 2, _encode_unsigned_endian),
        ("first", 1, _first_or_last),
        ("last", 1, _first_or_last),
        ("list_to_bin", 1, _not_iodata),
        ("longest_common_prefix", 1, _bad_binary_list),
        ("longest_common_suffix", 1, _bad_binary_list),
        ("match", 2, _subject_and_pattern),
        ("match", 3, _match_with_options),
        ("matches", 2, _subject_and_pattern),
        ("matches", 3, _match_with_options),
        ("part", 2, _part_pair),
        ("part", 3, _part),
        ("referenced_byte_size", 1, _subject),
        ("split", 2, _subject_and_pattern),
        ("split", 3, _split_with_options),
        ("replace", 3, _replace),
        ("replace", 4, _replace_with_options),
    ),
)
