from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping

from .catalog import NotFun, Outcome, ReasonTag
from .probes import (
    accepts_arity,
    advance_map_iterator,
    binary_match_probe,
    characters_to_bytes,
    compile_match_spec,
    encoding_probe,
    inspect_regexp,
    iodata_size,
    regexp_probe,
)
from .terms import BitString, ImproperList, byte_size, is_binary, is_integer, is_number

logger = logging.getLogger(__name__)


def _probe_fails(probe: Callable[[], object], *, label: str) -> bool:
    try:
        probe()
    except Exception as exc:  # noqa: BLE001 - probe faults become reason tags
        logger.debug("%s probe rejected value: %s", label, exc)
        return True
    return False


def must_be_binary(value: object, default: Outcome = None) -> Outcome:
    if is_binary(value):
        return default
    if isinstance(value, BitString):
        return ReasonTag.BITSTRING
    return ReasonTag.NOT_BINARY


def must_be_integer(value: object) -> Outcome:
    if is_integer(value):
        return None
    return ReasonTag.NOT_INTEGER


def must_be_integer_in_range(
    value: object, minimum: int, maximum: float = math.inf, default: Outcome = None
) -> Outcome:
    if not is_integer(value):
        return ReasonTag.NOT_INTEGER
    if minimum <= int(value) <= maximum:  # type: ignore[call-overload]
        return default
    return ReasonTag.RANGE


def must_be_non_neg_integer(value: object) -> Outcome:
    return must_be_integer_in_range(value, 0)


def must_be_position(value: object) -> Outcome:
    return must_be_integer_in_range(value, 0)


def must_be_positive_integer(value: object) -> Outcome:
    return must_be_integer_in_range(value, 1)


def must_be_endianness(value: object) -> Outcome:
    if isinstance(value, str) and value in ("big", "little"):
        return None
    return ReasonTag.BAD_ENDIANNESS


def must_be_fun(value: object, arity: int) -> Outcome:
    if accepts_arity(value, arity):
        return None
    return NotFun(arity)


def must_be_list(value: object) -> Outcome:
    if not isinstance(value, list | ImproperList):
        return ReasonTag.NOT_LIST
    if _probe_fails(lambda: len(value), label="list length"):
        return ReasonTag.NOT_PROPER_LIST
    return None


def must_be_map(value: object) -> Outcome:
    if isinstance(value, Mapping):
        return None
    return ReasonTag.NOT_MAP


def must_be_map_or_iter(value: object) -> Outcome:
    if isinstance(value, Mapping):
        return None
    if _probe_fails(lambda: advance_map_iterator(value), label="map iterator"):
        return ReasonTag.NOT_MAP_OR_ITERATOR
    return None


def must_be_number(value: object) -> Outcome:
    if is_number(value):
        return None
    return ReasonTag.NOT_NUMBER


def must_be_pattern(value: object) -> Outcome:
    if _probe_fails(lambda: binary_match_probe(b"a", value), label="binary pattern"):
        return ReasonTag.BAD_BINARY_PATTERN
    return None


def must_be_iodata(value: object) -> Outcome:
    if _probe_fails(lambda: iodata_size(value), label="iodata"):
        return ReasonTag.NOT_IODATA
    return None


def must_be_regexp(value: object) -> Outcome:
    if _probe_fails(lambda: regexp_probe(value), label="regexp"):
        return ReasonTag.NOT_REGEXP
    return None


def must_be_compiled_regexp(value: object) -> Outcome:
    if _probe_fails(lambda: inspect_regexp(value), label="compiled regexp"):
        return ReasonTag.NOT_COMPILED_REGEXP
    return None


def must_be_char_data(value: object) -> Outcome:
    if _probe_fails(lambda: characters_to_bytes(value), label="character data"):
        return ReasonTag.BAD_CHAR_DATA
    return None


def must_be_encoding(value: object) -> Outcome:
    if _probe_fails(lambda: encoding_probe(value), label="encoding"):
        return ReasonTag.BAD_ENCODING
    return None


def must_be_tuple(value: object) -> Outcome:
    if isinstance(value, tuple):
        return ReasonTag.EMPTY_TUPLE if not value else None
    return ReasonTag.NOT_TUPLE


def must_be_objects(value: object) -> Outcome:
    if isinstance(value, tuple):
        return ReasonTag.EMPTY_TUPLE if not value else None
    if isinstance(value, list | ImproperList):
        objects: list[object] = []
        if _probe_fails(lambda: objects.extend(value), label="object list"):
            return ReasonTag.NOT_TUPLE_OR_LIST
        if all(isinstance(item, tuple) and item for item in objects):
            return None
        return ReasonTag.NOT_TUPLE_OR_LIST
    return ReasonTag.NOT_TUPLE


def is_match_spec(value: object) -> bool:
    return not _probe_fails(lambda: compile_match_spec(value), label="match specification")


def _is_single_update_op(op: object) -> bool:
    if isinstance(op, tuple) and len(op) in (2, 4):
        return all(is_integer(item) for item in op)
    return is_integer(op)


def is_update_op(value: object) -> bool:
    if isinstance(value, list):
        return all(_is_single_update_op(op) for op in value)
    return _is_single_update_op(value)


def _is_single_element_spec(spec: object) -> bool:
    if isinstance(spec, tuple) and len(spec) == 2:
        position = spec[0]
        return is_integer(position) and int(position) > 0  # type: ignore[call-overload]
    return False


def is_element_spec(value: object) -> bool:
    if isinstance(value, list):
        return all(_is_single_element_spec(spec) for spec in value)
    return _is_single_element_spec(value)


def is_empty_binary(value: object) -> bool:
    return is_binary(value) and byte_size(value) == 0
