from .analyzers import FAMILY_ANALYZERS, Family
from .assembler import assemble
from .catalog import MESSAGE_CATALOG, NotFun, Outcome, Reason, ReasonTag, expand_reason
from .cause import CauseHint, normalize_cause, table_cause
from .config import DiagnosticsSettings, load_settings
from .describe import StackFrame, describe_failure, describe_request, format_error
from .errors import ConfigError, ErrorCode, ProbeError, RequestDecodeError
from .models import DiagnosticReport, DiagnosticRequest, OperationIdentity
from .terms import (
    BitString,
    CompiledMatchSpec,
    CompiledPattern,
    ImproperList,
    MapIterator,
    ProcessHandle,
    TableRef,
)

__all__ = [
    "BitString",
    "CauseHint",
    "CompiledMatchSpec",
    "CompiledPattern",
    "ConfigError",
    "DiagnosticReport",
    "DiagnosticRequest",
    "DiagnosticsSettings",
    "ErrorCode",
    "FAMILY_ANALYZERS",
    "Family",
    "ImproperList",
    "MESSAGE_CATALOG",
    "MapIterator",
    "NotFun",
    "OperationIdentity",
    "Outcome",
    "ProbeError",
    "ProcessHandle",
    "Reason",
    "ReasonTag",
    "RequestDecodeError",
    "StackFrame",
    "TableRef",
    "assemble",
    "describe_failure",
    "describe_request",
    "expand_reason",
    "format_error",
    "load_settings",
    "normalize_cause",
    "table_cause",
]
