from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

import yaml  # type: ignore[import-untyped]

from .errors import ErrorCode, build_config_error

CONFIG_ENV_VAR: Final[str] = "ARGDIAG_CONFIG"
_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_KNOWN_KEYS: Final[frozenset[str]] = frozenset({"log_level", "log_format"})
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s:%(name)s:%(message)s"


@dataclass(frozen=True, slots=True)
class DiagnosticsSettings:
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise build_config_error(
                ErrorCode.E_CONFIG_INVALID,
                f"log_level must be one of: {','.join(_LOG_LEVELS)}",
                {"log_level": self.log_level},
            )
        if not self.log_format:
            raise build_config_error(ErrorCode.E_CONFIG_INVALID, "log_format must be non-empty")
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_number(self) -> int:
        return cast(int, logging.getLevelName(self.log_level))


DEFAULT_SETTINGS: Final[DiagnosticsSettings] = DiagnosticsSettings()


def load_settings(path: str | Path | None = None) -> DiagnosticsSettings:
    resolved = path if path is not None else os.environ.get(CONFIG_ENV_VAR)
    if not resolved:
        return DEFAULT_SETTINGS
    config_path = Path(resolved)
    try:
        payload_text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise build_config_error(
            ErrorCode.E_CONFIG_UNREADABLE,
            f"unable to read config file: {exc}",
            {"path": str(config_path)},
        ) from exc
    return settings_from_text(payload_text, source=str(config_path))


def settings_from_text(payload_text: str, *, source: str = "<string>") -> DiagnosticsSettings:
    try:
        payload = yaml.safe_load(payload_text)
    except yaml.YAMLError as exc:
        raise build_config_error(
            ErrorCode.E_CONFIG_INVALID,
            f"config is not valid YAML: {exc}",
            {"path": source},
        ) from exc
    if payload is None:
        return DEFAULT_SETTINGS
    if not isinstance(payload, Mapping):
        raise build_config_error(
            ErrorCode.E_CONFIG_INVALID,
            "config root must be a mapping",
            {"path": source},
        )
    return settings_from_mapping(cast(Mapping[str, object], payload), source=source)


def settings_from_mapping(
    payload: Mapping[str, object], *, source: str = "<mapping>"
) -> DiagnosticsSettings:
    unknown = sorted(str(key) for key in payload if key not in _KNOWN_KEYS)
    if unknown:
        raise build_config_error(
            ErrorCode.E_CONFIG_INVALID,
            f"unknown config keys: {','.join(unknown)}",
            {"path": source, "keys": unknown},
        )
    log_level = payload.get("log_level", DEFAULT_SETTINGS.log_level)
    if not isinstance(log_level, str):
        raise build_config_error(
            ErrorCode.E_CONFIG_INVALID,
            "log_level must be a string",
            {"path": source},
        )
    log_format = payload.get("log_format", DEFAULT_SETTINGS.log_format)
    if not isinstance(log_format, str):
        raise build_config_error(
            ErrorCode.E_CONFIG_INVALID,
            "log_format must be a string",
            {"path": source},
        )
    return DiagnosticsSettings(log_level=log_level, log_format=log_format)
