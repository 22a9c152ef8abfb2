from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class ErrorCode(StrEnum):
    E_CONFIG_UNREADABLE = "E_CONFIG_UNREADABLE"
    E_CONFIG_INVALID = "E_CONFIG_INVALID"
    E_REQUEST_UNREADABLE = "E_REQUEST_UNREADABLE"
    E_REQUEST_INVALID = "E_REQUEST_INVALID"
    E_REQUEST_TERM_INVALID = "E_REQUEST_TERM_INVALID"
    E_PROBE_REJECTED = "E_PROBE_REJECTED"


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    code: str
    message: str
    witness: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("error code must be non-empty")
        if not self.message:
            raise ValueError("error message must be non-empty")
        canonical_witness = {key: self.witness[key] for key in sorted(self.witness)}
        object.__setattr__(self, "witness", MappingProxyType(canonical_witness))


class ConfigError(ValueError):
    def __init__(self, detail: ErrorDetail) -> None:
        super().__init__(f"{detail.code}: {detail.message}")
        self.detail = detail


class RequestDecodeError(ValueError):
    def __init__(self, detail: ErrorDetail) -> None:
        super().__init__(f"{detail.code}: {detail.message}")
        self.detail = detail


class ProbeError(ValueError):
    def __init__(self, message: str) -> None:
        super().__init__(f"{ErrorCode.E_PROBE_REJECTED.value}: {message}")
        self.code = ErrorCode.E_PROBE_REJECTED.value
        self.message = message


def build_config_error(
    code: ErrorCode, message: str, witness: Mapping[str, object] | None = None
) -> ConfigError:
    return ConfigError(ErrorDetail(code=code.value, message=message, witness=witness or {}))


def build_request_error(
    code: ErrorCode, message: str, witness: Mapping[str, object] | None = None
) -> RequestDecodeError:
    return RequestDecodeError(ErrorDetail(code=code.value, message=message, witness=witness or {}))
