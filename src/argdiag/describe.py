"""Entry points turning a failed call into per-argument messages."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from .analyzers import FAMILY_ANALYZERS
from .assembler import assemble
from .cause import CauseHint, normalize_cause
from .models import DiagnosticReport, DiagnosticRequest, OperationIdentity

logger = logging.getLogger(__name__)

# Runtime module names that differ from the family they belong to.
MODULE_FAMILIES: Final[Mapping[str, str]] = MappingProxyType({"ets": "table"})

type OperationLike = OperationIdentity | tuple[str, str, int]


@dataclass(frozen=True, slots=True)
class StackFrame:
    module: str
    function: str
    args: Sequence[object] | int
    info: Mapping[str, object] = field(default_factory=dict)

    def cause(self) -> object:
        error_info = self.info.get("error_info")
        if isinstance(error_info, Mapping):
            return error_info.get("cause", CauseHint.NONE)
        return CauseHint.NONE


def _identity(operation: OperationLike) -> OperationIdentity | None:
    if isinstance(operation, OperationIdentity):
        return operation
    try:
        family, name, arity = operation
        return OperationIdentity(family=str(family), name=str(name), arity=arity)
    except (TypeError, ValueError) as exc:
        logger.warning("unusable operation identity %r: %s", operation, exc)
        return None


def describe_failure(
    operation: OperationLike,
    args: Sequence[object],
    cause: object = None,
) -> dict[int, str]:
    """Explain which arguments of a failed call were at fault.

    Returns a mapping from 1-based argument position to message text. The
    mapping is empty when the family or operation is unknown, or when no
    argument can be singled out.
    """
    identity = _identity(operation)
    if identity is None:
        return {}
    if identity.arity != len(args):
        logger.warning(
            "operation %s called with %d arguments; no diagnosis",
            identity.label(),
            len(args),
        )
        return {}
    analyzers = FAMILY_ANALYZERS.get(identity.family)
    if analyzers is None:
        logger.debug("unknown operation family %r", identity.family)
        return {}
    outcomes = analyzers.analyze(identity.name, args, normalize_cause(cause))
    logger.debug("%s outcomes: %r", identity.label(), outcomes)
    return assemble(outcomes, len(args))


def describe_request(request: DiagnosticRequest) -> DiagnosticReport:
    messages = describe_failure(request.operation, request.args, request.cause)
    return DiagnosticReport(operation=request.operation, cause=request.cause, messages=messages)


def format_error(reason: object, stacktrace: Sequence[StackFrame]) -> dict[int, str]:
    """Explain the top frame of a stack trace captured for ``reason``.

    The reason itself is not inspected; the argument positions come from the
    failing call recorded in the first frame.
    """
    del reason
    if not stacktrace:
        return {}
    frame = stacktrace[0]
    if isinstance(frame.args, int):
        return {}
    family = MODULE_FAMILIES.get(frame.module, frame.module)
    return describe_failure((family, frame.function, len(frame.args)), frame.args, frame.cause())
