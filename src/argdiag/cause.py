from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import StrEnum

from .catalog import Outcome, ReasonTag
from .terms import TableRef

logger = logging.getLogger(__name__)


class CauseHint(StrEnum):
    NONE = "none"
    TYPE = "type"
    ID = "id"
    ACCESS = "access"
    TABLE_TYPE = "table_type"
    BADKEY = "badkey"
    KEYPOS = "keypos"
    POSITION = "position"
    OWNER = "owner"
    NOT_OWNER = "not_owner"
    BADOPT = "badopt"


type Cause = CauseHint | str

_CAUSE_VALUES: frozenset[str] = frozenset(hint.value for hint in CauseHint)

# These causes implicate an argument other than the table reference.
_OTHER_ARGUMENT_CAUSES: frozenset[CauseHint] = frozenset(
    {
        CauseHint.BADKEY,
        CauseHint.KEYPOS,
        CauseHint.POSITION,
        CauseHint.OWNER,
        CauseHint.NOT_OWNER,
    }
)


def normalize_cause(cause: object) -> Cause:
    if cause is None:
        return CauseHint.NONE
    if isinstance(cause, CauseHint):
        return cause
    text = str(cause)
    if text in _CAUSE_VALUES:
        return CauseHint(text)
    return text


def table_cause(args: Sequence[object], cause: Cause) -> Outcome:
    if cause == CauseHint.NONE:
        return None
    if cause == CauseHint.TYPE:
        if args and isinstance(args[0], TableRef):
            return ReasonTag.BAD_TABLE_ID
        return ReasonTag.NOT_ATOM_OR_TABLE_ID
    if cause == CauseHint.ID:
        return ReasonTag.TABLE_NOT_FOUND
    if cause == CauseHint.ACCESS:
        return ReasonTag.TABLE_ACCESS
    if cause == CauseHint.TABLE_TYPE:
        return ReasonTag.TABLE_TYPE
    if cause in _OTHER_ARGUMENT_CAUSES:
        return None
    logger.debug("cause %r does not implicate the table argument", cause)
    return None
