from __future__ import annotations

import codecs
import inspect
import re
from collections.abc import Mapping
from typing import Final

from .errors import ProbeError
from .terms import BitString, CompiledMatchSpec, CompiledPattern, MapIterator, is_binary

_SIMPLE_ENCODINGS: Final[Mapping[str, str]] = {
    "latin1": "latin-1",
    "unicode": "utf-8",
    "utf8": "utf-8",
    "utf16": "utf-16-be",
    "utf32": "utf-32-be",
}
_ENDIAN_ENCODINGS: Final[Mapping[tuple[str, str], str]] = {
    ("utf16", "big"): "utf-16-be",
    ("utf16", "little"): "utf-16-le",
    ("utf32", "big"): "utf-32-be",
    ("utf32", "little"): "utf-32-le",
}
_SUPPORTED_CODECS: Final[frozenset[str]] = frozenset(
    {*_SIMPLE_ENCODINGS.values(), *_ENDIAN_ENCODINGS.values(), "utf-16", "utf-32"}
)
_MATCH_VARIABLE = re.compile(r"^\$(?:\d+|_)$")


def _binary_bytes(value: object) -> bytes:
    if isinstance(value, BitString):
        if not value.is_byte_aligned:
            raise ProbeError("bitstring is not byte aligned")
        return value.data[: value.byte_size]
    if isinstance(value, bytes | bytearray):
        return bytes(value)
    raise ProbeError("not a binary")


def compile_binary_pattern(pattern: object) -> CompiledPattern:
    if isinstance(pattern, CompiledPattern):
        return pattern
    if is_binary(pattern):
        needle = _binary_bytes(pattern)
        if not needle:
            raise ProbeError("empty pattern")
        return CompiledPattern(needles=(needle,))
    if isinstance(pattern, list):
        if not pattern:
            raise ProbeError("empty pattern list")
        needles: list[bytes] = []
        for item in pattern:
            if not is_binary(item):
                raise ProbeError("pattern list element is not a binary")
            needle = _binary_bytes(item)
            if not needle:
                raise ProbeError("empty pattern in pattern list")
            needles.append(needle)
        return CompiledPattern(needles=tuple(needles))
    raise ProbeError("not a binary pattern")


def binary_match_probe(subject: object, pattern: object) -> tuple[int, int] | None:
    haystack = _binary_bytes(subject)
    compiled = compile_binary_pattern(pattern)
    best: tuple[int, int] | None = None
    for needle in compiled.needles:
        index = haystack.find(needle)
        if index < 0:
            continue
        if best is None or index < best[0] or (index == best[0] and len(needle) > best[1]):
            best = (index, len(needle))
    return best


def iodata_size(term: object) -> int:
    if isinstance(term, bytes | bytearray | memoryview):
        return len(term)
    if isinstance(term, BitString):
        return len(_binary_bytes(term))
    if isinstance(term, str):
        return len(term.encode("utf-8"))
    if not isinstance(term, list):
        raise TypeError("not iodata")
    size = 0
    for item in term:
        if isinstance(item, int) and not isinstance(item, bool):
            if not 0 <= item <= 255:
                raise ValueError("byte value out of range in iolist")
            size += 1
        else:
            size += iodata_size(item)
    return size


def regexp_probe(term: object) -> re.Pattern[str] | re.Pattern[bytes]:
    if isinstance(term, re.Pattern):
        return term
    if isinstance(term, str):
        return re.compile(term)
    iodata_size(term)
    return re.compile(_flatten_iodata(term))


def inspect_regexp(compiled: object) -> tuple[str, ...]:
    if not isinstance(compiled, re.Pattern):
        raise ProbeError("not a compiled regular expression")
    return tuple(sorted(compiled.groupindex))


def _flatten_iodata(term: object) -> bytes:
    if isinstance(term, bytes | bytearray | memoryview):
        return bytes(term)
    if isinstance(term, BitString):
        return _binary_bytes(term)
    if isinstance(term, str):
        return term.encode("utf-8")
    if isinstance(term, list):
        parts: list[bytes] = []
        for item in term:
            if isinstance(item, int) and not isinstance(item, bool):
                parts.append(bytes((item,)))
            else:
                parts.append(_flatten_iodata(item))
        return b"".join(parts)
    raise TypeError("not iodata")


def resolve_encoding(encoding: object) -> str:
    if isinstance(encoding, str):
        simple = _SIMPLE_ENCODINGS.get(encoding)
        if simple is not None:
            return simple
        try:
            codec_name = codecs.lookup(encoding).name
        except LookupError as exc:
            raise ProbeError(f"unknown encoding: {encoding}") from exc
        if codec_name in {"iso8859-1", "latin-1"}:
            return "latin-1"
        if codec_name in _SUPPORTED_CODECS:
            return codec_name
        raise ProbeError(f"unsupported encoding: {encoding}")
    if isinstance(encoding, tuple) and len(encoding) == 2:
        resolved = _ENDIAN_ENCODINGS.get((encoding[0], encoding[1]))
        if resolved is not None:
            return resolved
    raise ProbeError("not an encoding")


def encoding_probe(encoding: object) -> str:
    codec = resolve_encoding(encoding)
    "a".encode(codec).decode(codec)
    return codec


def _characters(chars: object, in_codec: str) -> str:
    if isinstance(chars, str):
        return chars
    if isinstance(chars, bytes | bytearray):
        return bytes(chars).decode(in_codec)
    if isinstance(chars, BitString):
        return _binary_bytes(chars).decode(in_codec)
    if isinstance(chars, list):
        parts: list[str] = []
        for item in chars:
            if isinstance(item, int) and not isinstance(item, bool):
                parts.append(chr(item))
            else:
                parts.append(_characters(item, in_codec))
        return "".join(parts)
    raise TypeError("not character data")


def characters_to_bytes(
    chars: object, in_encoding: object = "unicode", out_encoding: object = "unicode"
) -> bytes:
    in_codec = resolve_encoding(in_encoding)
    out_codec = resolve_encoding(out_encoding)
    text = _characters(chars, in_codec)
    return text.encode(out_codec)


def _is_match_head(head: object) -> bool:
    if isinstance(head, tuple):
        return True
    return isinstance(head, str) and (head == "_" or _MATCH_VARIABLE.match(head) is not None)


def compile_match_spec(term: object) -> CompiledMatchSpec:
    if isinstance(term, CompiledMatchSpec):
        return term
    if not isinstance(term, list):
        raise ProbeError("match specification must be a list")
    clauses: list[tuple[object, tuple[object, ...], tuple[object, ...]]] = []
    for clause in term:
        if not isinstance(clause, tuple) or len(clause) != 3:
            raise ProbeError("match specification clause must be a 3-tuple")
        head, guards, body = clause
        if not _is_match_head(head):
            raise ProbeError("match specification head must be a tuple or variable")
        if not isinstance(guards, list) or not isinstance(body, list):
            raise ProbeError("match specification guards and body must be lists")
        if not body:
            raise ProbeError("match specification body must be non-empty")
        clauses.append((head, tuple(guards), tuple(body)))
    return CompiledMatchSpec(clauses=tuple(clauses))


def advance_map_iterator(value: object) -> tuple[object, object, MapIterator] | None:
    if isinstance(value, str) and value == "none":
        return None
    if isinstance(value, MapIterator):
        return value.next()
    raise ProbeError("not a map iterator")


def accepts_arity(function: object, arity: int) -> bool:
    if not callable(function) or isinstance(function, type):
        return False
    try:
        signature = inspect.signature(function)
        signature.bind(*([None] * arity))
    except (TypeError, ValueError):
        return False
    return True
