from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class ReasonTag(StrEnum):
    ALREADY_OWNER = "already_owner"
    BAD_BOOLEAN = "bad_boolean"
    BAD_BINARY_LIST = "bad_binary_list"
    BAD_CHAR_DATA = "bad_char_data"
    BAD_BINARY_PATTERN = "bad_binary_pattern"
    BAD_CONTINUATION = "bad_continuation"
    BAD_ELEMENT_SPEC = "bad_element_spec"
    BAD_ENCODING = "bad_encoding"
    BAD_ENDIANNESS = "bad_endianness"
    BAD_INFO_ITEM = "bad_info_item"
    BAD_ITERATOR = "bad_iterator"
    BAD_KEY = "bad_key"
    BAD_MATCHSPEC = "bad_matchspec"
    BAD_OPTIONS = "bad_options"
    BAD_POS_LEN_TUPLE = "bad_pos_len_tuple"
    BAD_REGEXP_ITEM = "bad_regexp_item"
    BAD_TABLE_ID = "bad_table_id"
    BAD_TABLE_NAME = "bad_table_name"
    BAD_UPDATE_OP = "bad_update_op"
    BITSTRING = "bitstring"
    COUNTER_NOT_INTEGER = "counter_not_integer"
    DEAD_PROCESS = "dead_process"
    DOMAIN_ERROR = "domain_error"
    EMPTY_BINARY = "empty_binary"
    EMPTY_TUPLE = "empty_tuple"
    NAME_ALREADY_EXISTS = "name_already_exists"
    NOT_ATOM_OR_TABLE_ID = "not_atom_or_table_id"
    NOT_BINARY = "not_binary"
    NOT_COMPILED_REGEXP = "not_compiled_regexp"
    NOT_INTEGER = "not_integer"
    NOT_IODATA = "not_iodata"
    NOT_LIST = "not_list"
    NOT_MAP = "not_map"
    NOT_MAP_OR_ITERATOR = "not_map_or_iterator"
    NOT_NUMBER = "not_number"
    NOT_OWNER = "not_owner"
    NOT_PID = "not_pid"
    NOT_PROPER_LIST = "not_proper_list"
    NOT_REGEXP = "not_regexp"
    NOT_TUPLE = "not_tuple"
    NOT_TUPLE_OR_LIST = "not_tuple_or_list"
    PART_NOT_IN_BINARY = "part_not_in_binary"
    POSITION_PAST_OBJECT = "position_past_object"
    RANGE = "range"
    SAME_AS_KEYPOS = "same_as_keypos"
    TABLE_ACCESS = "table_access"
    TABLE_NOT_FOUND = "table_not_found"
    TABLE_TYPE = "table_type"
    UPDATE_OP_RANGE = "update_op_range"


@dataclass(frozen=True, slots=True)
class NotFun:
    arity: int

    def __post_init__(self) -> None:
        if isinstance(self.arity, bool) or self.arity < 0:
            raise ValueError("function arity must be a non-negative integer")


type Reason = ReasonTag | NotFun | str
type Outcome = Reason | None


def _build_catalog(entries: tuple[tuple[ReasonTag, str], ...]) -> Mapping[ReasonTag, str]:
    catalog: dict[ReasonTag, str] = {}
    for tag, text in entries:
        if tag in catalog:
            raise ValueError(f"duplicate message catalog tag: {tag}")
        if not text:
            raise ValueError(f"message catalog text for '{tag}' must be non-empty")
        catalog[tag] = text
    return MappingProxyType(catalog)


_CATALOG_ENTRIES: tuple[tuple[ReasonTag, str], ...] = (
    (ReasonTag.ALREADY_OWNER, "the process is already the owner of the table"),
    (ReasonTag.BAD_BOOLEAN, "not a boolean value"),
    (ReasonTag.BAD_BINARY_LIST, "not a flat list of binaries"),
    (ReasonTag.BAD_CHAR_DATA, "not valid character data (an iodata term)"),
    (ReasonTag.BAD_BINARY_PATTERN, "not a valid pattern"),
    (ReasonTag.BAD_CONTINUATION, "invalid continuation"),
    (ReasonTag.BAD_ELEMENT_SPEC, "is not a valid element specification"),
    (ReasonTag.BAD_ENCODING, "not a valid encoding"),
    (ReasonTag.BAD_ENDIANNESS, "must be 'big' or 'little'"),
    (ReasonTag.BAD_INFO_ITEM, "not a valid info item"),
    (ReasonTag.BAD_ITERATOR, "not a valid iterator"),
    (ReasonTag.BAD_KEY, "not a key that exists in the table"),
    (ReasonTag.BAD_MATCHSPEC, "not a valid match specification"),
    (ReasonTag.BAD_OPTIONS, "invalid options"),
    (ReasonTag.BAD_POS_LEN_TUPLE, "not a valid {Pos,Length} tuple"),
    (ReasonTag.BAD_REGEXP_ITEM, "not a valid item"),
    (ReasonTag.BAD_TABLE_ID, "not a valid table identifier"),
    (ReasonTag.BAD_TABLE_NAME, "invalid table name (must be an atom)"),
    (ReasonTag.BAD_UPDATE_OP, "not a valid update operation"),
    (ReasonTag.BITSTRING, "is a bitstring (expected a binary)"),
    (
        ReasonTag.COUNTER_NOT_INTEGER,
        "the value in the given position, in the object, is not an integer",
    ),
    (ReasonTag.DEAD_PROCESS, "the pid refers to a terminated process"),
    (ReasonTag.DOMAIN_ERROR, "is outside the domain for this function"),
    (ReasonTag.EMPTY_BINARY, "a zero-sized binary is not allowed"),
    (ReasonTag.EMPTY_TUPLE, "is an empty tuple"),
    (ReasonTag.NAME_ALREADY_EXISTS, "table name already exists"),
    (ReasonTag.NOT_ATOM_OR_TABLE_ID, "not an atom or a table identifier"),
    (ReasonTag.NOT_BINARY, "not a binary"),
    (ReasonTag.NOT_COMPILED_REGEXP, "not a compiled regular expression"),
    (ReasonTag.NOT_INTEGER, "not an integer"),
    (ReasonTag.NOT_IODATA, "not an iodata term"),
    (ReasonTag.NOT_LIST, "not a list"),
    (ReasonTag.NOT_MAP, "not a map"),
    (ReasonTag.NOT_MAP_OR_ITERATOR, "not a map or an iterator"),
    (ReasonTag.NOT_NUMBER, "not a number"),
    (ReasonTag.NOT_OWNER, "the current process is not the owner"),
    (ReasonTag.NOT_PID, "not a pid"),
    (ReasonTag.NOT_PROPER_LIST, "not a proper list"),
    (ReasonTag.NOT_REGEXP, "neither an iodata term nor a compiled regular expression"),
    (ReasonTag.NOT_TUPLE, "not a tuple"),
    (ReasonTag.NOT_TUPLE_OR_LIST, "not a non-empty tuple or a list of non-empty tuples"),
    (ReasonTag.PART_NOT_IN_BINARY, "specified part is not wholly inside binary"),
    (ReasonTag.POSITION_PAST_OBJECT, "position is greater than the size of the object"),
    (ReasonTag.RANGE, "out of range"),
    (ReasonTag.SAME_AS_KEYPOS, "the position is the same as the key position"),
    (
        ReasonTag.TABLE_ACCESS,
        "the table identifier refers to a table with insufficient access rights",
    ),
    (
        ReasonTag.TABLE_NOT_FOUND,
        "the table identifier does not refer to an existing table",
    ),
    (
        ReasonTag.TABLE_TYPE,
        "the table identifier refers to a table of a type not supported by this operation",
    ),
    (ReasonTag.UPDATE_OP_RANGE, "the position in the update operation is out of range"),
)

MESSAGE_CATALOG: Mapping[ReasonTag, str] = _build_catalog(_CATALOG_ENTRIES)
_TAG_VALUES: frozenset[str] = frozenset(tag.value for tag in ReasonTag)

_ARITY_WORDS: tuple[str, ...] = (
    "no arguments",
    "one argument",
    "two arguments",
    "three arguments",
    "four arguments",
    "five arguments",
    "six arguments",
    "seven arguments",
    "eight arguments",
    "nine arguments",
    "ten arguments",
)


def arity_phrase(arity: int) -> str:
    if arity < len(_ARITY_WORDS):
        return _ARITY_WORDS[arity]
    return f"{arity} arguments"


def expand_reason(reason: Reason) -> str:
    if isinstance(reason, NotFun):
        return f"not a fun that takes {arity_phrase(reason.arity)}"
    if isinstance(reason, ReasonTag):
        return MESSAGE_CATALOG[reason]
    if reason in _TAG_VALUES:
        return MESSAGE_CATALOG[ReasonTag(reason)]
    return str(reason)
