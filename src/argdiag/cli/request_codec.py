from __future__ import annotations

import inspect
import re
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final, cast

import yaml  # type: ignore[import-untyped]

from argdiag.errors import ErrorCode, RequestDecodeError, build_request_error
from argdiag.models import DiagnosticRequest, OperationIdentity
from argdiag.terms import BitString, ImproperList, MapIterator, ProcessHandle, TableRef

_REQUIRED_KEYS: Final[tuple[str, ...]] = ("family", "name", "args")
_OPTIONAL_KEYS: Final[tuple[str, ...]] = ("cause",)


def load_request(path: Path) -> DiagnosticRequest:
    try:
        payload_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise build_request_error(
            ErrorCode.E_REQUEST_UNREADABLE,
            f"unable to read request file: {exc}",
            {"path": str(path)},
        ) from exc
    try:
        payload = yaml.safe_load(payload_text)
    except yaml.YAMLError as exc:
        raise build_request_error(
            ErrorCode.E_REQUEST_INVALID,
            f"request is not valid YAML or JSON: {exc}",
            {"path": str(path)},
        ) from exc
    if not isinstance(payload, Mapping):
        raise build_request_error(
            ErrorCode.E_REQUEST_INVALID,
            "request root must be a mapping",
            {"path": str(path)},
        )
    return request_from_mapping(cast(Mapping[str, object], payload))


def request_from_mapping(payload: Mapping[str, object]) -> DiagnosticRequest:
    missing = [key for key in _REQUIRED_KEYS if key not in payload]
    if missing:
        raise build_request_error(
            ErrorCode.E_REQUEST_INVALID,
            f"request is missing keys: {','.join(missing)}",
            {"missing": missing},
        )
    unknown = sorted(
        str(key) for key in payload if key not in _REQUIRED_KEYS and key not in _OPTIONAL_KEYS
    )
    if unknown:
        raise build_request_error(
            ErrorCode.E_REQUEST_INVALID,
            f"request has unknown keys: {','.join(unknown)}",
            {"unknown": unknown},
        )
    raw_args = payload["args"]
    if not isinstance(raw_args, list):
        raise build_request_error(ErrorCode.E_REQUEST_INVALID, "request args must be a list")
    args = tuple(decode_term(item) for item in raw_args)
    cause = payload.get("cause")
    try:
        operation = OperationIdentity(
            family=str(payload["family"]),
            name=str(payload["name"]),
            arity=len(args),
        )
        return DiagnosticRequest(
            operation=operation,
            args=args,
            cause=None if cause is None else str(cause),
        )
    except ValueError as exc:
        raise build_request_error(ErrorCode.E_REQUEST_INVALID, str(exc)) from exc


def _function_of_arity(arity: object) -> Callable[..., object]:
    if not isinstance(arity, int) or isinstance(arity, bool) or arity < 0:
        raise build_request_error(ErrorCode.E_REQUEST_TERM_INVALID, "fun arity must be >= 0")

    def function(*args: object) -> object:
        return None

    function.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        [
            inspect.Parameter(f"arg{index}", inspect.Parameter.POSITIONAL_ONLY)
            for index in range(arity)
        ]
    )
    return function


def _decode_bits(value: object) -> BitString:
    if not (isinstance(value, list) and len(value) == 2):
        raise build_request_error(
            ErrorCode.E_REQUEST_TERM_INVALID, "bits term must be [hex, bit_size]"
        )
    hex_text, bit_size = value
    return BitString(data=bytes.fromhex(str(hex_text)), bit_size=cast(int, bit_size))


def _decode_improper(value: object) -> ImproperList:
    if not (isinstance(value, list) and len(value) == 2 and isinstance(value[0], list)):
        raise build_request_error(
            ErrorCode.E_REQUEST_TERM_INVALID, "improper term must be [[items...], tail]"
        )
    items, tail = value
    return ImproperList([decode_term(item) for item in items], decode_term(tail))


def _decode_map(value: object) -> dict[object, object]:
    if not isinstance(value, Mapping):
        raise build_request_error(ErrorCode.E_REQUEST_TERM_INVALID, "map term must be a mapping")
    return {key: decode_term(item) for key, item in value.items()}


def _decode_tuple(value: object) -> tuple[object, ...]:
    if not isinstance(value, list):
        raise build_request_error(ErrorCode.E_REQUEST_TERM_INVALID, "tuple term must be a list")
    return tuple(decode_term(item) for item in value)


_TERM_DECODERS: Final[Mapping[str, Callable[[object], object]]] = {
    "bytes": lambda value: bytes.fromhex(str(value)),
    "bits": _decode_bits,
    "table": lambda value: TableRef(id=cast(int, value)),
    "pid": lambda value: ProcessHandle(id=cast(int, value)),
    "tuple": _decode_tuple,
    "improper": _decode_improper,
    "regex": lambda value: re.compile(str(value)),
    "map": _decode_map,
    "iterator": lambda value: MapIterator.over(_decode_map(value)),
    "fun": _function_of_arity,
}


def decode_term(raw: object) -> object:
    if isinstance(raw, list):
        return [decode_term(item) for item in raw]
    if not isinstance(raw, Mapping):
        return raw
    if len(raw) != 1:
        raise build_request_error(
            ErrorCode.E_REQUEST_TERM_INVALID,
            "tagged term must have exactly one key",
            {"keys": sorted(str(key) for key in raw)},
        )
    ((tag, value),) = raw.items()
    decoder = _TERM_DECODERS.get(str(tag))
    if decoder is None:
        raise build_request_error(
            ErrorCode.E_REQUEST_TERM_INVALID,
            f"unknown term tag: {tag}",
            {"tags": sorted(_TERM_DECODERS)},
        )
    try:
        return decoder(value)
    except RequestDecodeError:
        raise
    except (TypeError, ValueError, re.error) as exc:
        raise build_request_error(
            ErrorCode.E_REQUEST_TERM_INVALID,
            f"invalid {tag} term: {exc}",
        ) from exc
